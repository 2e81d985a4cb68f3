# bootstrap.py
"""Composition root shared by the command line and the pytest-bdd plugin."""
from __future__ import annotations

from typing import Optional

from testhttp.application.executor.scenario_runner import ScenarioRunner
from testhttp.application.executor.step_registry import StepRegistry
from testhttp.application.ports.logger import LoggerPort
from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.application.services.execution_deps import ExecutionDeps
from testhttp.application.step_table import register_steps
from testhttp.infrastructure.http.requests_round_trip import RequestsRoundTrip
from testhttp.infrastructure.logging.loguru_logger import LoguruLogger
from testhttp.infrastructure.settings.env_settings import Settings
from testhttp.infrastructure.url.base_url_resolver import BaseUrlResolver


def create_round_trip(settings: Settings) -> RequestsRoundTrip:
    return RequestsRoundTrip(
        timeout_sec=settings.timeout_sec,
        follow_redirects=settings.follow_redirects,
        verify_tls=settings.verify_tls,
    )


def create_deps(settings: Settings, logger: Optional[LoggerPort] = None) -> ExecutionDeps:
    return ExecutionDeps(
        url_resolver=BaseUrlResolver(settings.base_url),
        logger=logger or LoguruLogger(),
    )


def create_runner(
    settings: Settings,
    round_trip: Optional[RoundTripPort] = None,
    logger: Optional[LoggerPort] = None,
) -> ScenarioRunner:
    deps = create_deps(settings, logger)
    registry = StepRegistry()
    register_steps(registry, round_trip or create_round_trip(settings), deps)
    return ScenarioRunner(registry, deps.logger)
