from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import Mode, SimulationConfig
from .scenario import load_scenarios
from .simulation import export_results, run_batch, run_simulation

USAGE = (
    "Usage: <mode> <filename>\n"
    "Modes:    [A,a] indicate MoveBySingleRequest should be used.\n"
    "          [B,b] indicate MoveByRequestsInSameDirection should be used.\n"
    "Filename: The full path to a file containing the scenarios to run."
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elevator-sequencer",
        description="Run elevator move sequencing scenarios",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("mode", help="Strategy mode: A/a single request, B/b same direction")
    parser.add_argument("filename", type=Path, help="Path to a file containing the scenarios to run")
    parser.add_argument(
        "--export-json",
        type=Path,
        help="Optional path to export the results of every mode as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_cli(argv: Optional[Sequence[str]] = None, stdout: Optional[TextIO] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    stdout = stdout or sys.stdout

    if not argv or argv in (["--help"], ["-h"]):
        print(USAGE, file=stdout)
        return 0

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = SimulationConfig(mode=Mode.parse(args.mode), scenario_path=args.filename)
    run_simulation(config, stdout)

    if args.export_json:
        results = run_batch(load_scenarios(config.scenario_path), list(Mode))
        export_results(results, str(args.export_json))
        logger.info("wrote results for %d scenario runs to %s", len(results), args.export_json)
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
