from __future__ import annotations


class ScenarioExecutionError(RuntimeError):
    """Raised when a scenario cannot be run to completion.

    The underlying failure is available as ``__cause__``.
    """
