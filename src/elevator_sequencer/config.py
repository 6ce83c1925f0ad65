from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Union


class Mode(str, Enum):
    SINGLE_REQUEST = "A"
    SAME_DIRECTION = "B"

    @classmethod
    def parse(cls, value: Union[str, "Mode"]) -> "Mode":
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().upper()
        for mode in cls:
            if mode.value == normalised:
                return mode
        raise ValueError(f"Unknown mode: {value!r} (expected one of A, a, B, b)")


@dataclass
class SimulationConfig:
    mode: Mode
    scenario_path: Path
    line_separator: str = os.linesep

    def validate(self) -> None:
        if not isinstance(self.mode, Mode):
            raise ValueError(f"mode must be a Mode, got {self.mode!r}")
        if not str(self.scenario_path).strip() or Path(self.scenario_path) == Path("."):
            raise ValueError("Scenario path must not be empty")
        if not isinstance(self.line_separator, str):
            raise ValueError("Line separator must be a string")

    @classmethod
    def from_dict(cls, data: Dict) -> "SimulationConfig":
        cfg = cls(
            mode=Mode.parse(data["mode"]),
            scenario_path=Path(data["scenario_path"]),
            line_separator=data.get("line_separator", os.linesep),
        )
        cfg.validate()
        return cfg
