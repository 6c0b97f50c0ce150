"""
Main game application with PyGame GUI
"""

import argparse
import logging
from collections.abc import Iterable

import numpy as np
import pygame

from classic_pong.core.controller import GameController
from classic_pong.core.interfaces import InputSource, RendererProtocol
from classic_pong.core.physics import MatchState
from classic_pong.gui.keyboard import KeyboardInput
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import LOG_LEVELS, MAX_FPS, game_config, load_config_from_file
from classic_pong.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class PongApp:
    """Main application class: one simulation step per rendered frame"""

    def __init__(
        self,
        renderer: RendererProtocol | None = None,
        input_source: InputSource | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        """Initialize the application"""
        self.renderer = renderer if renderer is not None else PygameRenderer()
        self.input_source = input_source if input_source is not None else KeyboardInput()
        self.match = MatchState(rng)
        self.controller = GameController()
        self.running = True
        self.frames = 0

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Apply discrete commands (start / pause, quit)"""
        for event in events:
            command = self.input_source.handle_event(event)
            if command == "quit":
                self.running = False
            elif command == "toggle":
                self.controller.toggle()

    def run_frame(self) -> dict[str, list]:
        """Draw the current state, then advance the match by one step"""
        self.renderer.render_frame(self.match, self.controller)
        self.renderer.present()

        events = self.controller.tick(self.match, self.input_source.poll())
        self.frames += 1
        return events

    def run(self, max_frames: int | None = None) -> None:
        """Main application loop"""
        logger.info("Starting Pong at %d FPS", game_config.FPS)

        try:
            while self.running:
                self.handle_events(pygame.event.get())
                if not self.running:
                    break

                self.run_frame()
                self.renderer.update(game_config.FPS)

                if max_frames is not None and self.frames >= max_frames:
                    break
        finally:
            logger.info(
                "Stopping Pong after %d frames, final score %d - %d",
                self.frames,
                *self.match.score,
            )
            self.renderer.cleanup()


def fps_value(text: str) -> int:
    """Parse a frame rate within the bounds accepted by GameConfig"""
    fps = int(text)
    if not 0 < fps <= MAX_FPS:
        raise argparse.ArgumentTypeError(f"FPS must be between 1 and {MAX_FPS}, got {fps}")
    return fps


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic two-paddle Pong")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--fps", type=fps_value, default=None, help="Override frames per second")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Logging level"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball respawns")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point of the game"""
    args = parse_args(argv)
    setup_logging(game_config.LOG_LEVEL)

    if args.config:
        load_config_from_file(args.config)
    if args.fps is not None:
        game_config.FPS = args.fps
    if args.log_level is not None:
        game_config.LOG_LEVEL = args.log_level

    setup_logging(game_config.LOG_LEVEL)

    rng = np.random.default_rng(args.seed)
    app = PongApp(rng=rng)
    app.run()
    return 0
