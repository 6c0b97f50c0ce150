"""
Utility module of Classic Pong
"""

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config
from classic_pong.utils.logging_setup import setup_logging

__all__ = ["game_config", "GameConfig", "setup_logging"]
