"""
Core module of Classic Pong
"""

from classic_pong.core.controller import GameController
from classic_pong.core.controller import GameStatus
from classic_pong.core.entities import Ball
from classic_pong.core.entities import Controls
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Vector2D
from classic_pong.core.geometry import circle_intersects_rect
from classic_pong.core.geometry import clamp
from classic_pong.core.physics import MatchState

__all__ = [
    "Ball",
    "Paddle",
    "Controls",
    "Vector2D",
    "MatchState",
    "GameController",
    "GameStatus",
    "clamp",
    "circle_intersects_rect",
]
