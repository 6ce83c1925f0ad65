from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..move_command import MoveCommand


class MoveStrategy(ABC):
    """Defines the interface shared by all move sequencing strategies."""

    name: str

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def get_move_sequence(self, move_commands: Optional[Sequence[MoveCommand]]) -> List[int]:
        """Converts ordered move commands into the floors the car stops at."""

    @staticmethod
    def _check_commands(move_commands: Optional[Sequence[MoveCommand]]) -> Sequence[MoveCommand]:
        if move_commands is None:
            raise ValueError("move_commands must not be None")
        return move_commands
