from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

from ..move_command import MoveCommand, MoveDirection
from .base import MoveStrategy

logger = logging.getLogger(__name__)


def _ordered(floors: Set[int], direction: MoveDirection) -> List[int]:
    return sorted(floors, reverse=direction is MoveDirection.DOWN)


class MoveByRequestsInSameDirection(MoveStrategy):
    """Batches consecutive requests travelling the same way into one sweep.

    Each run of same-direction commands is visited in a single ascending (UP)
    or descending (DOWN) pass. A pickup at the floor where the previous run
    ended is not repeated, since the car is already standing there.
    """

    def __init__(self) -> None:
        super().__init__("same_direction")

    def get_move_sequence(self, move_commands: Optional[Sequence[MoveCommand]]) -> List[int]:
        move_commands = self._check_commands(move_commands)
        if not move_commands:
            return []

        previous_direction: Optional[MoveDirection] = None
        current_direction: Optional[MoveDirection] = None
        # Floors are positive, so 0 never matches a real pickup.
        pivot_floor = 0

        cumulative_move_sequence: List[int] = []
        current_run: Optional[Set[int]] = None

        for command in move_commands:
            previous_direction = current_direction
            current_direction = command.direction

            if current_direction is not previous_direction:
                if current_run is not None:
                    pending = _ordered(current_run, previous_direction)
                    pivot_floor = pending[-1]
                    cumulative_move_sequence.extend(pending)
                    logger.debug(
                        "closed %s run %s, pivot floor %d", previous_direction.value, pending, pivot_floor
                    )
                current_run = set()

            if command.originating_floor != pivot_floor:
                current_run.add(command.originating_floor)
            current_run.add(command.destination_floor)

        cumulative_move_sequence.extend(_ordered(current_run, current_direction))
        logger.debug(
            "%s sequenced %d commands into %s", self.name, len(move_commands), cumulative_move_sequence
        )
        return cumulative_move_sequence
