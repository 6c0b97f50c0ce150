"""
Keyboard input for Classic Pong
"""

from typing import Any

import pygame

from classic_pong.core.entities import Controls
from classic_pong.utils.config import GameConfig, game_config


class KeyboardInput:
    """Reads the paddle keys and the start / pause / quit commands"""

    def __init__(self, config: GameConfig | None = None):
        config = config or game_config
        self.up_key = config.key_code("up")
        self.down_key = config.key_code("down")
        self.toggle_key = config.key_code("toggle")
        self.quit_key = config.key_code("quit")

    def controls_from_keys(self, keys_pressed: Any) -> Controls:
        """Build controls from a key state table indexed by pygame key codes"""
        return Controls(up=bool(keys_pressed[self.up_key]), down=bool(keys_pressed[self.down_key]))

    def poll(self) -> Controls:
        """Read the directional keys currently held"""
        return self.controls_from_keys(pygame.key.get_pressed())

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            "toggle", "quit" or None
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            if event.key == self.toggle_key:
                return "toggle"
            elif event.key == self.quit_key:
                return "quit"

        return None
