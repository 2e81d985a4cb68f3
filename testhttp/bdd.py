"""
pytest-bdd bindings for the HTTP steps.

Pull them into a test suite from a conftest.py::

    from testhttp.bdd import *  # noqa: F401,F403

Override ``http_round_trip`` to send requests somewhere other than the
network (a test client, a stub). Every test gets its own ``http_scenario``,
so contexts never leak between scenarios.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator

import pytest
from pytest_bdd import given, parsers, then, when

from testhttp.application.outcome import StepOutcome
from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.application.step_table import (
    HAVE_REQUEST,
    HEADER_EQUALS,
    MAKE_REQUEST,
    MAKE_REQUEST_TO,
    REQUEST_HAS_BODY,
    RESPONSE_IS,
    SET_BODY,
    SET_HEADER,
    STATUS_CODE_EQUALS,
    VALID_JSON,
    StepDefinition,
    build_step_table,
)
from testhttp.bootstrap import create_deps, create_round_trip
from testhttp.domain.context import ScenarioContext
from testhttp.infrastructure.http.requests_round_trip import RequestsRoundTrip
from testhttp.infrastructure.settings.env_settings import Settings


class HttpScenario:
    """Holds the context between pytest-bdd steps of one scenario."""

    def __init__(self, table: Dict[str, StepDefinition]):
        self._table = table
        self.context = ScenarioContext()

    def apply(self, step_name: str, **args: Any) -> StepOutcome:
        outcome = self._table[step_name].handler(self.context, **args)
        self.context = outcome.context
        if not outcome.ok:
            raise outcome.error
        return outcome


@pytest.fixture(scope="session")
def http_settings() -> Settings:
    return Settings.from_env()


@pytest.fixture(scope="session")
def http_round_trip(http_settings: Settings) -> Iterator[RequestsRoundTrip]:
    round_trip = create_round_trip(http_settings)
    yield round_trip
    round_trip.close()


@pytest.fixture
def http_step_table(http_settings: Settings, http_round_trip: RoundTripPort) -> Dict[str, StepDefinition]:
    table = build_step_table(http_round_trip, create_deps(http_settings))
    return {d.name: d for d in table}


@pytest.fixture
def http_scenario(http_step_table: Dict[str, StepDefinition]) -> HttpScenario:
    return HttpScenario(http_step_table)


@given(parsers.re(MAKE_REQUEST_TO))
@when(parsers.re(MAKE_REQUEST_TO))
@then(parsers.re(MAKE_REQUEST_TO))
def make_request_to(http_scenario: HttpScenario, method: str, url: str) -> None:
    http_scenario.apply("make_request_to", method=method, url=url)


@given(parsers.re(STATUS_CODE_EQUALS), converters={"code": int})
@when(parsers.re(STATUS_CODE_EQUALS), converters={"code": int})
@then(parsers.re(STATUS_CODE_EQUALS), converters={"code": int})
def status_code_equals(http_scenario: HttpScenario, code: int) -> None:
    http_scenario.apply("status_code_equals", code=code)


@given(parsers.re(VALID_JSON))
@when(parsers.re(VALID_JSON))
@then(parsers.re(VALID_JSON))
def valid_json(http_scenario: HttpScenario) -> None:
    http_scenario.apply("valid_json")


@given(parsers.re(RESPONSE_IS))
@when(parsers.re(RESPONSE_IS))
@then(parsers.re(RESPONSE_IS))
def response_is(http_scenario: HttpScenario, text: str) -> None:
    http_scenario.apply("response_is", text=text)


@given(parsers.re(HEADER_EQUALS))
@when(parsers.re(HEADER_EQUALS))
@then(parsers.re(HEADER_EQUALS))
def header_equals(http_scenario: HttpScenario, name: str, value: str) -> None:
    http_scenario.apply("header_equals", name=name, value=value)


@given(parsers.re(HAVE_REQUEST))
@when(parsers.re(HAVE_REQUEST))
@then(parsers.re(HAVE_REQUEST))
def have_request(http_scenario: HttpScenario, method: str, url: str) -> None:
    http_scenario.apply("have_request", method=method, url=url)


@given(parsers.re(SET_HEADER))
@when(parsers.re(SET_HEADER))
@then(parsers.re(SET_HEADER))
def set_header(http_scenario: HttpScenario, name: str, value: str) -> None:
    http_scenario.apply("set_header", name=name, value=value)


@given(parsers.re(SET_BODY))
@when(parsers.re(SET_BODY))
@then(parsers.re(SET_BODY))
def set_body(http_scenario: HttpScenario, body: str) -> None:
    http_scenario.apply("set_body", body=body)


@given(parsers.re(REQUEST_HAS_BODY))
@when(parsers.re(REQUEST_HAS_BODY))
@then(parsers.re(REQUEST_HAS_BODY))
def request_has_body(http_scenario: HttpScenario, body: str) -> None:
    http_scenario.apply("request_has_body", body=body)


@given(parsers.re(MAKE_REQUEST))
@when(parsers.re(MAKE_REQUEST))
@then(parsers.re(MAKE_REQUEST))
def make_request(http_scenario: HttpScenario) -> None:
    http_scenario.apply("make_request")
