"""
PyGame renderer for Classic Pong
"""

import pygame

from classic_pong.core import constants
from classic_pong.core.controller import GameController
from classic_pong.core.entities import Ball, Paddle
from classic_pong.core.physics import MatchState
from classic_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Classic Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or constants.CANVAS_WIDTH
        self.height = height or constants.CANVAS_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(game_config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.foreground_color: tuple[int, int, int] = game_config.FOREGROUND_COLOR
        self.score_color: tuple[int, int, int] = game_config.SCORE_COLOR

        # Fonts are created lazily, one per size
        self.fonts: dict[int, pygame.font.Font] = {}

    def get_font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.SysFont(game_config.FONT_NAME, size)
        return self.fonts[size]

    def draw_text(
        self, text: str, size: int, position: tuple[float, float], color: tuple[int, int, int]
    ) -> None:
        """Draw text with its left end on the baseline at position"""
        font = self.get_font(size)
        text_surface = font.render(text, True, color)
        x, baseline = position
        self.screen.blit(text_surface, (int(x), int(baseline - font.get_ascent())))

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_title(self) -> None:
        """Draw the game title above the field"""
        self.draw_text("PONG", 30, (self.width / 2 - 27, 38), self.foreground_color)

    def draw_walls(self) -> None:
        """Draw the dotted top and bottom walls"""
        top_y = constants.TOP_PADDING + constants.LATERAL_PADDING - 10
        bottom_y = constants.BOTTOM_WALL_Y
        size = constants.WALL_SIZE

        for x in range(0, self.width, constants.WALL_SPACING):
            for y in (top_y, bottom_y):
                pygame.draw.rect(
                    self.screen, self.foreground_color, pygame.Rect(x, y, size, size), border_radius=1
                )

    def draw_ball(self, ball: Ball) -> None:
        """Draw the game ball"""
        x, y, radius = ball.get_circle()
        pygame.draw.circle(self.screen, self.foreground_color, (int(x), int(y)), int(radius))

    def draw_paddle(self, paddle: Paddle) -> None:
        """Draw a player paddle"""
        x, y, width, height = paddle.get_rect()
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.screen, self.foreground_color, rect, border_radius=1)

    def draw_score(self, score: list[int]) -> None:
        """Draw each player's score above their side of the field"""
        margin = 4 * constants.LATERAL_PADDING
        self.draw_text(str(score[0]), 28, (margin, 40), self.score_color)
        self.draw_text(str(score[1]), 28, (self.width - margin - 10, 40), self.score_color)

    def draw_start_screen(self) -> None:
        """Draw the prompt shown before the first start"""
        self.draw_text("PRESS SPACE BAR TO START", 40, (270, 400), self.foreground_color)

    def draw_pause_screen(self) -> None:
        """Draw pause screen"""
        self.draw_text("PAUSED", 40, (475, 350), self.foreground_color)
        self.draw_text("PRESS SPACE BAR TO RESUME", 28, (345, 400), self.foreground_color)

    def render_frame(self, match: MatchState, controller: GameController) -> None:
        """Render the complete frame for the current controller state"""
        self.clear_screen()
        self.draw_title()
        self.draw_walls()

        if controller.is_running():
            self.draw_score(match.score)
            self.draw_ball(match.ball)
            self.draw_paddle(match.player1)
            self.draw_paddle(match.player2)
        elif not controller.started:
            self.draw_start_screen()
        else:
            self.draw_pause_screen()

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        fps = fps or game_config.FPS
        self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
