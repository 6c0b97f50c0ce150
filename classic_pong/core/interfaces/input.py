"""
Input protocol - defines what the frame loop needs from an input backend
"""

from typing import Any
from typing import Protocol

from classic_pong.core.entities import Controls


class InputSource(Protocol):
    """
    Protocol for input backends (keyboard, gamepad, scripted, etc.).

    The core never polls devices itself; it receives a Controls snapshot each
    frame and discrete commands for the start/pause toggle.
    """

    def poll(self) -> Controls:
        """
        Read the directional keys currently held.

        Returns:
            Controls snapshot for player 1
        """
        ...

    def handle_event(self, event: Any) -> str | None:
        """
        Translate a discrete input event.

        Returns:
            "toggle", "quit" or None
        """
        ...
