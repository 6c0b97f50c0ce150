"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from classic_pong.core.controller import GameController
from classic_pong.core.physics import MatchState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only read the match through its accessors; they never mutate it.
    """

    def render_frame(self, match: MatchState, controller: GameController) -> None:
        """
        Render a single frame of the game.

        Args:
            match: Current match (ball, paddles, scores)
            controller: Start / pause state, selects the overlay text
        """
        ...

    def present(self) -> None:
        """Show the rendered frame"""
        ...

    def update(self, fps: int | None = None) -> None:
        """Wait for the next frame"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
