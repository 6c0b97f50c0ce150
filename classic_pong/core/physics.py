"""
Match simulation for Classic Pong
"""

import logging
from typing import Any

import numpy as np

from classic_pong.core import constants
from classic_pong.core.entities import Ball, Controls, Paddle
from classic_pong.core.geometry import circle_intersects_rect

logger = logging.getLogger(__name__)


class MatchState:
    """Owns the ball and both paddles and advances the match frame by frame"""

    def __init__(self, rng: np.random.Generator | None = None):
        self.field_width = constants.CANVAS_WIDTH
        self.field_height = constants.CANVAS_HEIGHT
        self.top_wall = constants.TOP_WALL_Y
        self.bottom_wall = constants.BOTTOM_WALL_Y

        self.ball = Ball(rng)
        # Only player 1 is driven by input, player 2 stays where it starts
        self.player1 = Paddle(constants.PLAYER1_X, 0.0, 1)
        self.player2 = Paddle(constants.PLAYER2_X, constants.PADDLE_USABLE_HEIGHT, 2)
        self.frame = 0

    @property
    def score(self) -> list[int]:
        return [self.player1.score, self.player2.score]

    def update(self, controls: Controls) -> dict[str, list]:
        """
        Advances the match by one frame

        Args:
            controls: Keys held for player 1 during this frame

        Returns:
            Dict of events that occurred:
            {
                "wall_bounces": ["top" | "bottom", ...],
                "paddle_hits": [{"player": n}, ...],
                "goals": [{"player": n, "score": [s1, s2]}],
            }
        """
        self.frame += 1

        if controls.up:
            self.player1.move_up()
        elif controls.down:
            self.player1.move_down()

        self.ball.move_ball()

        events = self._check_collisions()

        goal = self._check_out_of_bounds()
        if goal:
            self.ball.increase_speed()
            self.ball.reset_position()
            events["goals"].append(goal)
            logger.info(
                "Player %d scores (%d - %d), ball speed now %.3f",
                goal["player"],
                *goal["score"],
                self.ball.speed,
            )

        return events

    def _check_collisions(self) -> dict[str, list]:
        """Checks paddle and wall contacts; every check runs and reflections stack up"""
        events: dict[str, list] = {"wall_bounces": [], "paddle_hits": [], "goals": []}
        x, y, radius = self.ball.get_circle()

        for paddle in (self.player1, self.player2):
            if circle_intersects_rect(x, y, radius, paddle.get_rect()):
                self.ball.reflect_horizontal()
                events["paddle_hits"].append({"player": paddle.player_id})

        wall = self._check_walls(y, radius)
        if wall:
            self.ball.reflect_vertical()
            events["wall_bounces"].append(wall)

        if any(events.values()):
            logger.debug("Frame %d collisions: %s", self.frame, events)

        return events

    def _check_walls(self, y: float, radius: float) -> str | None:
        """Returns which wall the ball touches, if any"""
        if y - radius <= self.top_wall:
            return "top"
        if y + radius >= self.bottom_wall:
            return "bottom"
        return None

    def _check_out_of_bounds(self) -> dict[str, Any] | None:
        """Awards a point when the ball leaves the field on either side"""
        if self.ball.position.x + self.ball.radius < 0:
            scorer = self.player2
        elif self.ball.position.x - self.ball.radius > self.field_width:
            scorer = self.player1
        else:
            return None

        scorer.increment_score()
        return {"player": scorer.player_id, "score": self.score}

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the match"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_direction": self.ball.direction.to_tuple(),
            "ball_speed": self.ball.speed,
            "ball_radius": self.ball.radius,
            "player1_rect": self.player1.get_rect(),
            "player2_rect": self.player2.get_rect(),
            "score": self.score,
            "frame": self.frame,
            "field_bounds": (0, self.field_width, self.top_wall, self.bottom_wall),
        }
