from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Sequence, TextIO

from .errors import ScenarioExecutionError
from .scenario import Scenario
from .strategy.base import MoveStrategy

logger = logging.getLogger(__name__)


def floor_differential(stops: Sequence[int]) -> int:
    """Total number of floors travelled visiting ``stops`` in order."""
    return sum(abs(current - previous) for previous, current in zip(stops, stops[1:]))


def format_move_sequence(stops: Sequence[int]) -> str:
    floors = " ".join(str(floor) for floor in stops)
    return f"{floors} ({floor_differential(stops)})"


class Elevator(ABC):
    """Runs scenarios through a single car."""

    def run_scenarios(self, scenarios: Sequence[Scenario]) -> List[List[int]]:
        return [self.run_scenario(scenario) for scenario in scenarios]

    @abstractmethod
    def run_scenario(self, scenario: Scenario) -> List[int]:
        """Runs one scenario and returns the stops the car made."""


class StreamingOutputElevator(Elevator):
    """Writes one ``"<floor> ... <floor> (<distance>)"`` line per scenario."""

    def __init__(self, strategy: MoveStrategy, writer: TextIO, line_separator: str = os.linesep):
        self.strategy = strategy
        self.writer = writer
        self.line_separator = line_separator

    def run_scenarios(self, scenarios: Sequence[Scenario]) -> List[List[int]]:
        if not scenarios:
            return []
        last_index = len(scenarios) - 1
        return [
            self._run(scenario, self.line_separator if index < last_index else "")
            for index, scenario in enumerate(scenarios)
        ]

    def run_scenario(self, scenario: Scenario) -> List[int]:
        return self._run(scenario, "")

    def _run(self, scenario: Scenario, suffix: str) -> List[int]:
        stops = self.strategy.get_move_sequence(scenario.move_commands)
        if not stops:
            logger.debug("scenario %r produced no moves", scenario.name)
            return []
        line = format_move_sequence(stops)
        try:
            self.writer.write(line + suffix)
        except OSError as exc:
            raise ScenarioExecutionError(
                f"Failed to write result of scenario {scenario.name!r} [{self.strategy.name}]"
            ) from exc
        logger.debug("scenario %r: %s", scenario.name, line)
        return list(stops)
