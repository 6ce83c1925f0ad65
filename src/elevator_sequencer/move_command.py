from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MoveDirection(str, Enum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def of(cls, origin: int, destination: int) -> "MoveDirection":
        return cls.UP if origin < destination else cls.DOWN


@dataclass(frozen=True)
class MoveCommand:
    """A single request to ride from one floor to another."""

    originating_floor: int
    destination_floor: int

    def __post_init__(self) -> None:
        for label, floor in (
            ("originating_floor", self.originating_floor),
            ("destination_floor", self.destination_floor),
        ):
            if isinstance(floor, bool) or not isinstance(floor, int):
                raise TypeError(f"{label} must be an int, got {floor!r}")
            if floor <= 0:
                raise ValueError(f"{label} must be positive, got {floor}")
        if self.originating_floor == self.destination_floor:
            raise ValueError("originating_floor and destination_floor must be different values")

    @property
    def direction(self) -> MoveDirection:
        return MoveDirection.of(self.originating_floor, self.destination_floor)
