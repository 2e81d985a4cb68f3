#!/usr/bin/env python3
"""
Run HTTP step scenarios without pytest

Usage:
  testhttp run <scenario-file> [--base-url <url>] [--timeout-sec <sec>] [--log-level <level>] [--env-file <path>]
  testhttp steps

Examples:
  testhttp run features/users.feature --base-url http://localhost:8000
  testhttp run scenarios/smoke.yaml --log-level DEBUG
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from testhttp.application.step_table import STEP_PATTERNS
from testhttp.bootstrap import create_runner
from testhttp.domain.exceptions import ValidationError
from testhttp.infrastructure.logging.log_setup import setup_console_logging
from testhttp.infrastructure.scenario.base_loader import ScenarioLoadError
from testhttp.infrastructure.scenario.loader_registry import ScenarioLoaderRegistry
from testhttp.infrastructure.settings.env_settings import Settings

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="testhttp", description="HTTP step scenario runner")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run every scenario in a file")
    run_parser.add_argument("scenario_file", type=str)
    run_parser.add_argument("--base-url", type=str)
    run_parser.add_argument("--timeout-sec", type=float)
    run_parser.add_argument("--log-level", type=str)
    run_parser.add_argument("--env-file", type=str, default=".env")

    subparsers.add_parser("steps", help="List the step patterns")
    return parser


def _cmd_steps() -> int:
    for pattern in STEP_PATTERNS:
        print(pattern)
    return EXIT_OK


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        settings = Settings.from_env(args.env_file).override(
            base_url=args.base_url,
            timeout_sec=args.timeout_sec,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_console_logging(level=settings.log_level)

    try:
        feature = ScenarioLoaderRegistry().load(Path(args.scenario_file))
    except ScenarioLoadError as e:
        print(f"Unable to load scenarios: {e}", file=sys.stderr)
        return EXIT_USAGE

    runner = create_runner(settings)

    print(f"Feature: {feature.name}")
    passed = failed = 0
    for scenario in feature.scenarios:
        result = runner.run(scenario.steps)
        if result.ok:
            passed += 1
            print(f"  PASS {scenario.name}")
        else:
            failed += 1
            print(f"  FAIL {scenario.name}")
            print(f"       step: {result.failed_step}")
            print(f"       error: {result.error_message}")

    print(f"Scenarios: {passed} passed, {failed} failed")
    return EXIT_OK if failed == 0 else EXIT_FAILED


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        sys.exit(_cmd_run(args))
    if args.command == "steps":
        sys.exit(_cmd_steps())

    parser.print_help()
    sys.exit(EXIT_USAGE)


if __name__ == "__main__":
    main()
