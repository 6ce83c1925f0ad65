from .config import Mode, SimulationConfig
from .elevator import Elevator, StreamingOutputElevator, floor_differential, format_move_sequence
from .errors import ScenarioExecutionError
from .move_command import MoveCommand, MoveDirection
from .scenario import Scenario, load_scenarios, parse_scenario_line
from .simulation import ScenarioResult, build_strategy, export_results, run_batch, run_simulation
from .strategy.base import MoveStrategy
from .strategy.same_direction import MoveByRequestsInSameDirection
from .strategy.single_request import MoveBySingleRequest

__all__ = [
    "Elevator",
    "Mode",
    "MoveByRequestsInSameDirection",
    "MoveBySingleRequest",
    "MoveCommand",
    "MoveDirection",
    "MoveStrategy",
    "Scenario",
    "ScenarioExecutionError",
    "ScenarioResult",
    "SimulationConfig",
    "StreamingOutputElevator",
    "build_strategy",
    "export_results",
    "floor_differential",
    "format_move_sequence",
    "load_scenarios",
    "parse_scenario_line",
    "run_batch",
    "run_simulation",
]
