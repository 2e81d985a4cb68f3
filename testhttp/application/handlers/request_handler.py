# application/handlers/request_handler.py
from __future__ import annotations

from testhttp.application.handlers.base import StepHandlerBase
from testhttp.application.outcome import StepOutcome
from testhttp.application.services.execution_deps import ExecutionDeps
from testhttp.application.services.request_builder import RequestBuilder
from testhttp.domain.context import ScenarioContext


class RequestStepHandler(StepHandlerBase):
    """Steps that build up the outgoing request before it is sent."""

    def __init__(self, builder: RequestBuilder, deps: ExecutionDeps):
        super().__init__(deps)
        self._builder = builder

    def have_request(self, ctx: ScenarioContext, method: str, url: str) -> StepOutcome:
        def action() -> ScenarioContext:
            request = self._builder.build(method, url)
            self._deps.logger.debug("request.created", method=request.method.value, url=request.url)
            return ctx.with_request(request)

        return self._run("have_request", ctx, action, method=method, url=url)

    def set_header(self, ctx: ScenarioContext, name: str, value: str) -> StepOutcome:
        def action() -> ScenarioContext:
            request = ctx.require_request().with_header(name, value)
            self._deps.logger.debug("request.header_added", name=name, count=len(request.headers.get_all(name)))
            return ctx.with_request(request)

        return self._run("set_header", ctx, action, header=name)

    def set_body(self, ctx: ScenarioContext, body: str) -> StepOutcome:
        def action() -> ScenarioContext:
            request = ctx.require_request().with_body(body)
            self._deps.logger.debug("request.body_set", body_len=len(request.body))
            return ctx.with_request(request)

        return self._run("set_body", ctx, action)
