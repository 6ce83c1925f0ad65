from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .move_command import MoveCommand


@dataclass(frozen=True)
class Scenario:
    """An ordered batch of move commands run through a single elevator."""

    move_commands: Tuple[MoveCommand, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "move_commands", tuple(self.move_commands))

    def __len__(self) -> int:
        return len(self.move_commands)


def _parse_floor(token: str) -> int:
    token = token.strip()
    if not token:
        raise ValueError("missing floor number")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid floor number {token!r}") from None


def _parse_pair(token: str) -> MoveCommand:
    origin, sep, destination = token.partition("-")
    if not sep:
        raise ValueError(f"expected <origin>-<destination>, got {token.strip()!r}")
    return MoveCommand(_parse_floor(origin), _parse_floor(destination))


def parse_scenario_line(line: str, name: str = "") -> Scenario:
    """Parses ``<start>:<origin>-<destination>,...`` into a :class:`Scenario`.

    The start prefix is optional. When present, travelling from the start floor
    to the first pickup becomes the leading command, unless the car is already
    waiting at that floor.
    """
    start_token, sep, pairs_token = line.partition(":")
    if not sep:
        start_token, pairs_token = "", start_token

    pairs = [token for token in pairs_token.split(",") if token.strip()]
    commands: List[MoveCommand] = [_parse_pair(token) for token in pairs]

    if start_token.strip():
        start = _parse_floor(start_token)
        if commands and commands[0].originating_floor != start:
            commands.insert(0, MoveCommand(start, commands[0].originating_floor))
        elif not commands and start <= 0:
            raise ValueError(f"start floor must be positive, got {start}")

    return Scenario(move_commands=commands, name=name)


def iter_scenarios(lines: Iterable[str]) -> Iterable[Scenario]:
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            yield parse_scenario_line(line, name=f"line {line_number}")
        except ValueError as exc:
            raise ValueError(f"Invalid scenario on line {line_number}: {exc}") from exc


def load_scenarios(path: Union[str, Path]) -> List[Scenario]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        return list(iter_scenarios(fh))
