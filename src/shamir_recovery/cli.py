"""
Recover Shamir secrets from share case files.

Usage:
    shamir-recover tests/fixtures/testcase1.json
    shamir-recover case.yaml --method gaussian --cross-check
    shamir-recover case.json --json --log-level DEBUG
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from shamir_recovery.config import SolverConfig, load_solver_config
from shamir_recovery.errors import RecoveryError
from shamir_recovery.interpolation import METHODS
from shamir_recovery.io import load_case
from shamir_recovery.solver import solve_case
from shamir_recovery.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-recover",
        description="Recover the constant term of a polynomial from base-encoded shares",
    )
    parser.add_argument("cases", nargs="+", type=Path, help="Share case files (JSON or YAML)")
    parser.add_argument(
        "--method",
        choices=sorted(METHODS),
        default=None,
        help="Interpolation strategy (default: lagrange, or the config file value)",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        default=None,
        help="Solve with every strategy and fail if they disagree",
    )
    parser.add_argument("--json", action="store_true", help="Print results with metadata as JSON lines")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO, or LOG_LEVEL)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--config", type=Path, default=None, help="Solver config file (JSON)")
    return parser


def _load_config(args: argparse.Namespace) -> SolverConfig:
    config, _ = load_solver_config(args.config)
    return config.with_overrides(
        method=args.method,
        cross_check=args.cross_check,
        log_level=args.log_level,
        json_logs=args.json_logs,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = _load_config(args)
    except ValueError as exc:
        configure_logging(args.log_level)
        logger.error("Configuration error: %s", exc)
        return 1
    configure_logging(config.log_level, json_output=config.json_logs, log_file=args.log_file)

    status = 0
    for path in args.cases:
        try:
            case = load_case(path)
            result = solve_case(case, method=config.method, cross_check=config.cross_check)
        except OSError as exc:
            logger.error("%s: cannot read case file: %s", path, exc)
            status = 1
            continue
        except RecoveryError as exc:
            logger.error("%s: %s", path, exc)
            status = 1
            continue
        if args.json:
            payload = {"case": str(path), **result.to_dict()}
            print(json.dumps(payload))
        else:
            print(result.secret)
    return status


if __name__ == "__main__":
    sys.exit(main())
