"""
PyGame front end of Classic Pong
"""

from classic_pong.gui.game_app import PongApp
from classic_pong.gui.keyboard import KeyboardInput
from classic_pong.gui.pygame_renderer import PygameRenderer

__all__ = ["PongApp", "KeyboardInput", "PygameRenderer"]
