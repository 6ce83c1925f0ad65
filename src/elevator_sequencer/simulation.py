from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, TextIO, Union

from .config import Mode, SimulationConfig
from .elevator import StreamingOutputElevator, floor_differential
from .errors import ScenarioExecutionError
from .scenario import Scenario, load_scenarios
from .strategy.base import MoveStrategy
from .strategy.same_direction import MoveByRequestsInSameDirection
from .strategy.single_request import MoveBySingleRequest

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    strategy_name: str
    scenario_name: str
    stops: List[int] = field(default_factory=list)
    distance: int = 0

    def to_dict(self) -> Dict:
        return {
            "strategy": self.strategy_name,
            "scenario": self.scenario_name,
            "stops": list(self.stops),
            "distance": self.distance,
        }


def build_strategy(mode: Union[Mode, str]) -> MoveStrategy:
    mode = Mode.parse(mode)
    if mode is Mode.SINGLE_REQUEST:
        return MoveBySingleRequest()
    if mode is Mode.SAME_DIRECTION:
        return MoveByRequestsInSameDirection()
    raise ValueError(f"Unknown mode: {mode}")


def run_simulation(config: SimulationConfig, writer: TextIO) -> List[ScenarioResult]:
    """Runs every scenario in the configured file, writing one line each.

    The writer is flushed on the way out whether or not the run succeeded.
    """
    config.validate()
    scenarios = load_scenarios(config.scenario_path)
    strategy = build_strategy(config.mode)
    logger.info("running %d scenarios from %s with %s", len(scenarios), config.scenario_path, strategy.name)

    elevator = StreamingOutputElevator(strategy, writer, line_separator=config.line_separator)
    try:
        sequences = elevator.run_scenarios(scenarios)
    finally:
        _flush(writer)
    return [_result(strategy, scenario, stops) for scenario, stops in zip(scenarios, sequences)]


def run_batch(scenarios: Sequence[Scenario], modes: Sequence[Union[Mode, str]]) -> List[ScenarioResult]:
    """Evaluates each mode over the same scenarios without writing output."""
    results: List[ScenarioResult] = []
    for mode in modes:
        strategy = build_strategy(mode)
        for scenario in scenarios:
            stops = strategy.get_move_sequence(scenario.move_commands)
            results.append(_result(strategy, scenario, stops))
    return results


def export_results(results: Sequence[ScenarioResult], path: str) -> None:
    serialised = [result.to_dict() for result in results]
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(serialised, fh, indent=2)


def _flush(writer: TextIO) -> None:
    try:
        writer.flush()
    except OSError as exc:
        raise ScenarioExecutionError("Failed to flush scenario output") from exc


def _result(strategy: MoveStrategy, scenario: Scenario, stops: Sequence[int]) -> ScenarioResult:
    return ScenarioResult(
        strategy_name=strategy.name,
        scenario_name=scenario.name,
        stops=list(stops),
        distance=floor_differential(stops),
    )
