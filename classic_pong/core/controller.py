"""
Start / pause state machine gating the match simulation
"""

import logging
from enum import Enum

from classic_pong.core.entities import Controls
from classic_pong.core.physics import MatchState

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Controller states"""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"


class GameController:
    """Decides whether the match advances on a given frame"""

    def __init__(self) -> None:
        self.status = GameStatus.NOT_STARTED

    @property
    def started(self) -> bool:
        return self.status != GameStatus.NOT_STARTED

    @property
    def paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    def is_running(self) -> bool:
        """Checks if the match should advance this frame"""
        return self.status == GameStatus.RUNNING

    def toggle(self) -> GameStatus:
        """Starts the game the first time, then pauses / resumes it"""
        if self.status == GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        else:
            self.status = GameStatus.RUNNING

        logger.info("Game %s", self.status.value)
        return self.status

    def tick(self, match: MatchState, controls: Controls) -> dict[str, list]:
        """Runs one simulation step if the game is running"""
        if not self.is_running():
            return {}
        return match.update(controls)
