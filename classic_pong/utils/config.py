"""
Classic Pong display and controls configuration with Pydantic validation

Arena geometry and ball/paddle physics are fixed, see classic_pong.core.constants.
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

# Key names accepted in the configuration
CONTROL_KEYS: dict[str, int] = {
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "w": pygame.K_w,
    "s": pygame.K_s,
    "z": pygame.K_z,
    "space": pygame.K_SPACE,
    "return": pygame.K_RETURN,
    "p": pygame.K_p,
    "escape": pygame.K_ESCAPE,
    "q": pygame.K_q,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_FPS = 240


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation, validated on assignment
    model_config = {"validate_assignment": True}

    # Display
    FPS: int = Field(default=60, gt=0, le=MAX_FPS, description="Frames per second")
    WINDOW_TITLE: str = Field(default="Pong", min_length=1, description="Window caption")
    FONT_NAME: str = Field(default="Helvetica", description="System font used for all text")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color of ball, paddles, walls and text"
    )
    SCORE_COLOR: tuple[int, int, int] = Field(default=(189, 189, 189), description="RGB color")

    # Controls
    UP_KEY: str = Field(default="up", description="Key moving the paddle up")
    DOWN_KEY: str = Field(default="down", description="Key moving the paddle down")
    TOGGLE_KEY: str = Field(default="space", description="Key starting / pausing the game")
    QUIT_KEY: str = Field(default="escape", description="Key closing the game")

    # Diagnostics
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    @field_validator("BACKGROUND_COLOR", "FOREGROUND_COLOR", "SCORE_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate that every channel is a byte"""
        if any(channel < 0 or channel > 255 for channel in v):
            raise ValueError(f"Color channels must be between 0 and 255, got {v}")
        return v

    @field_validator("UP_KEY", "DOWN_KEY", "TOGGLE_KEY", "QUIT_KEY")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate key name is known"""
        name = v.lower()
        if name not in CONTROL_KEYS:
            raise ValueError(f"Unknown key '{v}'. Available: {list(CONTROL_KEYS.keys())}")
        return name

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Available: {list(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_distinct_keys(self) -> "GameConfig":
        """Validate that no key is bound twice"""
        keys = [self.UP_KEY, self.DOWN_KEY, self.TOGGLE_KEY, self.QUIT_KEY]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Control keys must be distinct, got {keys}")
        return self

    def key_code(self, action: str) -> int:
        """Get the pygame key code bound to an action ("up", "down", "toggle", "quit")"""
        return CONTROL_KEYS[getattr(self, f"{action.upper()}_KEY")]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "classic_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def update_from(self, other: "GameConfig") -> None:
        """Copy every field of an already validated config in a single step"""
        self.__dict__.update({name: getattr(other, name) for name in type(self).model_fields})

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        self.update_from(GameConfig())


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "classic_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
        game_config.update_from(loaded_config)
    except FileNotFoundError:
        logger.warning("Configuration file %s not found, using defaults", filepath)
        return False
    except (OSError, ValueError) as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    return True


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (validated as a whole)"""
    old_config = game_config.model_copy()
    try:
        game_config.update_from(GameConfig(**{**game_config.to_dict(), **kwargs}))
        yield
    finally:
        game_config.update_from(old_config)
