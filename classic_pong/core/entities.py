"""
Classic Pong game entities: ball, paddles, controls
"""

from dataclasses import dataclass

import numpy as np

from classic_pong.core import constants


@dataclass
class Vector2D:
    """Simple 2D vector for positions and directions"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Controls:
    """Held directional keys for the human paddle during one frame"""

    up: bool = False
    down: bool = False


class Ball:
    """Game ball"""

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = Vector2D(0.0, 0.0)
        self.direction = Vector2D(0.0, 0.0)
        self.radius = constants.BALL_RADIUS
        self.speed = constants.BALL_INITIAL_SPEED
        self.reset_position()

    def move_ball(self) -> None:
        """Moves the ball by one frame along its direction"""
        self.position += self.direction * self.speed

    def reflect_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.direction.y = -self.direction.y

    def reflect_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.direction.x = -self.direction.x

    def reset_position(self) -> None:
        """Respawns the ball in the serving band with a random direction"""
        self.position = Vector2D(
            float(self.rng.uniform(*constants.BALL_SPAWN_X)),
            float(self.rng.uniform(*constants.BALL_SPAWN_Y)),
        )
        self.direction = Vector2D(
            float(self.rng.uniform(*constants.BALL_DIRECTION_X)),
            float(self.rng.uniform(*constants.BALL_DIRECTION_Y)),
        )

    def increase_speed(self) -> None:
        """Speeds the ball up after a point; there is no upper limit"""
        self.speed += constants.BALL_SPEED_INCREMENT

    def get_circle(self) -> tuple[float, float, float]:
        """Returns the collision circle properties (x, y, radius)"""
        assert self.radius > 0, "ball radius must be positive"
        return (self.position.x, self.position.y, self.radius)


class Paddle:
    """Player paddle moving vertically along its track"""

    def __init__(self, x: float, y: float, player_id: int):
        self.position = Vector2D(x, y)
        self.player_id = player_id
        self.width = constants.PADDLE_WIDTH
        self.height = constants.PADDLE_HEIGHT
        self.speed = constants.PADDLE_SPEED
        self.score = 0

        self.min_y = 0.0
        self.max_y = float(constants.PADDLE_USABLE_HEIGHT)

    def move_up(self) -> None:
        """Moves the paddle up, stopping at the top of the track"""
        self.position.y = max(self.min_y, self.position.y - self.speed)
        self._check_bounds()

    def move_down(self) -> None:
        """Moves the paddle down, stopping at the bottom of the track"""
        self.position.y = min(self.max_y, self.position.y + self.speed)
        self._check_bounds()

    def _check_bounds(self) -> None:
        assert self.min_y <= self.position.y <= self.max_y, (
            f"paddle {self.player_id} left its track: y={self.position.y}"
        )

    def increment_score(self) -> None:
        self.score += 1

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height) on screen"""
        return (
            self.position.x,
            self.position.y + constants.PADDLE_TRACK_TOP,
            self.width,
            self.height,
        )
