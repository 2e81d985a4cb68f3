# application/handlers/response_handler.py
from __future__ import annotations

import json

from testhttp.application.handlers.base import StepHandlerBase
from testhttp.application.outcome import StepOutcome
from testhttp.domain.context import ScenarioContext
from testhttp.domain.exceptions import AssertionMismatchError


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def is_valid_json(body: bytes) -> bool:
    """
    Syntax check only. The body must be UTF-8 without a byte order mark,
    and NaN and Infinity are rejected as in RFC 8259.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return False
    if text.startswith("\ufeff"):
        return False
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        return False
    return True


class ResponseStepHandler(StepHandlerBase):
    """
    Assertions on the stored response.

    None of them change the context: the body is an immutable buffer, so
    any later step can read it again.
    """

    def status_code_equals(self, ctx: ScenarioContext, code: int) -> StepOutcome:
        def action() -> ScenarioContext:
            response = ctx.require_response()
            if response.status != code:
                raise AssertionMismatchError("status code", code, response.status)
            return ctx

        return self._run("status_code_equals", ctx, action, expected=code)

    def valid_json(self, ctx: ScenarioContext) -> StepOutcome:
        def action() -> ScenarioContext:
            response = ctx.require_response()
            if not is_valid_json(response.body):
                raise AssertionMismatchError("a valid JSON body", "valid JSON", response.text[:200])
            return ctx

        return self._run("valid_json", ctx, action)

    def response_is(self, ctx: ScenarioContext, text: str) -> StepOutcome:
        def action() -> ScenarioContext:
            response = ctx.require_response()
            if response.body != text.encode("utf-8"):
                raise AssertionMismatchError("response body", text, response.text)
            return ctx

        return self._run("response_is", ctx, action)

    def header_equals(self, ctx: ScenarioContext, name: str, value: str) -> StepOutcome:
        def action() -> ScenarioContext:
            response = ctx.require_response()
            # an absent header compares as ""
            actual = response.headers.get(name, "")
            if actual != value:
                raise AssertionMismatchError(f"header {name}", value, actual)
            return ctx

        return self._run("header_equals", ctx, action, header=name)
