from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..move_command import MoveCommand
from .base import MoveStrategy

logger = logging.getLogger(__name__)


class MoveBySingleRequest(MoveStrategy):
    """Serves one request at a time, in arrival order, with no batching."""

    def __init__(self) -> None:
        super().__init__("single_request")

    def get_move_sequence(self, move_commands: Optional[Sequence[MoveCommand]]) -> List[int]:
        move_commands = self._check_commands(move_commands)
        stops: List[int] = []
        for command in move_commands:
            # The car is already waiting at the pickup floor.
            if not stops or stops[-1] != command.originating_floor:
                stops.append(command.originating_floor)
            stops.append(command.destination_floor)
        logger.debug("%s sequenced %d commands into %s", self.name, len(move_commands), stops)
        return stops
