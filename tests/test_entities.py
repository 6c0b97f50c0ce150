"""
Tests for Classic Pong game entities
"""

import numpy as np
import pytest

from classic_pong.core import constants
from classic_pong.core.entities import Ball, Controls, Paddle, Vector2D


class TestVector2D:
    """Tests for Vector2D class"""

    def test_in_place_addition(self) -> None:
        """Test in-place addition keeps the same object"""
        v = Vector2D(1.0, 2.0)
        same = v
        v += Vector2D(0.5, -1.0)
        assert same is v
        assert v.to_tuple() == (1.5, 1.0)

    def test_scalar_multiplication(self) -> None:
        """Test scalar multiplication"""
        assert (Vector2D(2.0, 3.0) * 2.5).to_tuple() == (5.0, 7.5)


class TestControls:
    """Tests for Controls snapshot"""

    def test_defaults(self) -> None:
        controls = Controls()
        assert controls.up is False
        assert controls.down is False


class TestBall:
    """Tests for Ball class"""

    def test_creation(self) -> None:
        """Test ball creation places it in the serving band"""
        ball = Ball(np.random.default_rng(0))
        assert ball.radius == 10.0
        assert ball.speed == 0.01
        assert 120 <= ball.position.x <= 235
        assert 350 <= ball.position.y <= 600

    def test_move_ball(self) -> None:
        """Test displacement is speed times direction"""
        ball = Ball(np.random.default_rng(0))
        ball.position = Vector2D(100.0, 200.0)
        ball.direction = Vector2D(300.0, -200.0)
        ball.move_ball()
        assert ball.position.x == pytest.approx(103.0)
        assert ball.position.y == pytest.approx(198.0)

    def test_reflect_vertical(self) -> None:
        """Test vertical bounce"""
        ball = Ball(np.random.default_rng(0))
        ball.direction = Vector2D(100.0, 50.0)
        ball.reflect_vertical()
        assert ball.direction.to_tuple() == (100.0, -50.0)

    def test_reflect_horizontal(self) -> None:
        """Test horizontal bounce"""
        ball = Ball(np.random.default_rng(0))
        ball.direction = Vector2D(100.0, 50.0)
        ball.reflect_horizontal()
        assert ball.direction.to_tuple() == (-100.0, 50.0)

    def test_increase_speed(self) -> None:
        """Test speed grows by a fixed step with no cap"""
        ball = Ball(np.random.default_rng(0))
        for i in range(1, 1001):
            previous = ball.speed
            ball.increase_speed()
            assert ball.speed > previous
            assert ball.speed == pytest.approx(0.01 + 0.001 * i)

    def test_reset_position_ranges(self) -> None:
        """Test respawn position and direction stay in their ranges over many samples"""
        ball = Ball(np.random.default_rng(42))
        xs, ys, dxs, dys = [], [], [], []
        for _ in range(5000):
            ball.reset_position()
            xs.append(ball.position.x)
            ys.append(ball.position.y)
            dxs.append(ball.direction.x)
            dys.append(ball.direction.y)

        assert 120 <= min(xs) and max(xs) <= 235
        assert 350 <= min(ys) and max(ys) <= 600
        assert 0 <= min(dxs) and max(dxs) <= 450
        assert -300 <= min(dys) and max(dys) <= 300
        # The samples should spread over the ranges, not sit in one spot
        assert max(xs) - min(xs) > 100
        assert min(dys) < 0 < max(dys)

    def test_reset_keeps_speed(self) -> None:
        """Test respawn does not touch the speed scalar"""
        ball = Ball(np.random.default_rng(0))
        ball.increase_speed()
        ball.reset_position()
        assert ball.speed == pytest.approx(0.011)

    def test_seeded_generators_agree(self) -> None:
        """Test the same seed gives the same respawns"""
        a = Ball(np.random.default_rng(7))
        b = Ball(np.random.default_rng(7))
        a.reset_position()
        b.reset_position()
        assert a.position == b.position
        assert a.direction == b.direction

    def test_get_circle(self) -> None:
        ball = Ball(np.random.default_rng(0))
        ball.position = Vector2D(10.0, 20.0)
        assert ball.get_circle() == (10.0, 20.0, 10.0)


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation(self) -> None:
        """Test creating a paddle"""
        paddle = Paddle(40.0, 0.0, 1)
        assert paddle.width == 25.0
        assert paddle.height == 105.0
        assert paddle.speed == 5.0
        assert paddle.score == 0
        assert paddle.max_y == 525.0

    def test_move_up_and_down(self) -> None:
        """Test paddle moves by its speed"""
        paddle = Paddle(40.0, 100.0, 1)
        paddle.move_up()
        assert paddle.position.y == 95.0
        paddle.move_down()
        paddle.move_down()
        assert paddle.position.y == 105.0

    def test_move_up_clamped_at_top(self) -> None:
        """Test the paddle stops at the top and stays there"""
        paddle = Paddle(40.0, 3.0, 1)
        paddle.move_up()
        assert paddle.position.y == 0.0
        paddle.move_up()
        assert paddle.position.y == 0.0

    def test_move_down_clamped_at_bottom(self) -> None:
        """Test the paddle stops at the bottom and stays there"""
        paddle = Paddle(40.0, 523.0, 1)
        paddle.move_down()
        assert paddle.position.y == constants.PADDLE_USABLE_HEIGHT
        paddle.move_down()
        assert paddle.position.y == constants.PADDLE_USABLE_HEIGHT

    def test_random_moves_stay_on_track(self) -> None:
        """Test any sequence of moves keeps y inside the track"""
        rng = np.random.default_rng(3)
        paddle = Paddle(40.0, 0.0, 1)
        for go_up in rng.integers(0, 2, size=3000):
            if go_up:
                paddle.move_up()
            else:
                paddle.move_down()
            assert 0.0 <= paddle.position.y <= constants.PADDLE_USABLE_HEIGHT

    def test_increment_score(self) -> None:
        paddle = Paddle(40.0, 0.0, 1)
        paddle.increment_score()
        paddle.increment_score()
        assert paddle.score == 2

    def test_get_rect(self) -> None:
        """Test the rectangle is offset onto the field below the top padding"""
        paddle = Paddle(40.0, 100.0, 1)
        assert paddle.get_rect() == (40.0, 170.0, 25.0, 105.0)
