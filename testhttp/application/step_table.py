# application/step_table.py
"""
The HTTP step vocabulary.

``build_step_table`` wires every step pattern to its handler and returns
the definitions; ``register_steps`` feeds them to a registry. Nothing is
registered as an import side effect.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol

from testhttp.application.handlers.execution_handler import ExecutionStepHandler
from testhttp.application.handlers.request_handler import RequestStepHandler
from testhttp.application.handlers.response_handler import ResponseStepHandler
from testhttp.application.outcome import StepOutcome
from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.application.services.execution_deps import ExecutionDeps
from testhttp.application.services.request_builder import RequestBuilder

_METHODS = "GET|POST|PUT|DELETE|OPTIONS"

MAKE_REQUEST_TO = rf'^I make a (?P<method>{_METHODS}) request to "(?P<url>[^"]*)"$'
STATUS_CODE_EQUALS = r"^the response code equals (?P<code>\d+)$"
VALID_JSON = r"^the response contains a valid JSON$"
RESPONSE_IS = r'^the response is "(?P<text>.*)"$'
HEADER_EQUALS = r'^the response header "(?P<name>.*)" equals "(?P<value>.*)"$'
HAVE_REQUEST = rf'^I have a (?P<method>{_METHODS}) request "(?P<url>.*)"$'
SET_HEADER = r'^I set request header "(?P<name>.*)" to "(?P<value>.*)"$'
SET_BODY = r'^I set request body to "(?P<body>[^"]*)"$'
REQUEST_HAS_BODY = r'^the request has body "(?P<body>.*)"$'
MAKE_REQUEST = r"^I make the request$"

STEP_PATTERNS = [
    MAKE_REQUEST_TO,
    STATUS_CODE_EQUALS,
    VALID_JSON,
    RESPONSE_IS,
    HEADER_EQUALS,
    HAVE_REQUEST,
    SET_HEADER,
    SET_BODY,
    REQUEST_HAS_BODY,
    MAKE_REQUEST,
]

Converters = Dict[str, Callable[[str], Any]]
StepFunc = Callable[..., StepOutcome]


@dataclass(frozen=True)
class StepDefinition:
    name: str
    pattern: str
    handler: StepFunc
    converters: Converters = field(default_factory=dict)


class StepRegistryPort(Protocol):
    def register(self, pattern: str, handler: StepFunc, converters: Optional[Converters] = None) -> None:
        ...


def build_step_table(round_trip: RoundTripPort, deps: Optional[ExecutionDeps] = None) -> List[StepDefinition]:
    deps = deps or ExecutionDeps()
    builder = RequestBuilder(deps)
    requests_ = RequestStepHandler(builder, deps)
    execution = ExecutionStepHandler(round_trip, builder, deps)
    responses = ResponseStepHandler(deps)

    return [
        StepDefinition("make_request_to", MAKE_REQUEST_TO, execution.make_request_to),
        StepDefinition("status_code_equals", STATUS_CODE_EQUALS, responses.status_code_equals, {"code": int}),
        StepDefinition("valid_json", VALID_JSON, responses.valid_json),
        StepDefinition("response_is", RESPONSE_IS, responses.response_is),
        StepDefinition("header_equals", HEADER_EQUALS, responses.header_equals),
        StepDefinition("have_request", HAVE_REQUEST, requests_.have_request),
        StepDefinition("set_header", SET_HEADER, requests_.set_header),
        StepDefinition("set_body", SET_BODY, requests_.set_body),
        # second phrasing of set_body
        StepDefinition("request_has_body", REQUEST_HAS_BODY, requests_.set_body),
        StepDefinition("make_request", MAKE_REQUEST, execution.make_request),
    ]


def register_steps(
    registry: StepRegistryPort,
    round_trip: RoundTripPort,
    deps: Optional[ExecutionDeps] = None,
) -> List[StepDefinition]:
    table = build_step_table(round_trip, deps)
    for definition in table:
        registry.register(definition.pattern, definition.handler, definition.converters)
    return table
