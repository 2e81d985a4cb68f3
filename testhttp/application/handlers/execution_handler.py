# application/handlers/execution_handler.py
from __future__ import annotations

import time

from testhttp.application.handlers.base import StepHandlerBase
from testhttp.application.outcome import StepOutcome
from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.application.services.execution_deps import ExecutionDeps
from testhttp.application.services.request_builder import RequestBuilder
from testhttp.domain.context import ScenarioContext
from testhttp.domain.exceptions import StepError
from testhttp.domain.http import RequestDescriptor


class ExecutionStepHandler(StepHandlerBase):
    def __init__(self, round_trip: RoundTripPort, builder: RequestBuilder, deps: ExecutionDeps):
        super().__init__(deps)
        self._round_trip = round_trip
        self._builder = builder

    def make_request(self, ctx: ScenarioContext) -> StepOutcome:
        """Send the request assembled by earlier steps."""
        try:
            request = ctx.require_request()
        except StepError as e:
            return self._fail("make_request", ctx, e)
        return self._send("make_request", ctx, request)

    def make_request_to(self, ctx: ScenarioContext, method: str, url: str) -> StepOutcome:
        """
        Build and send a bare request in one go.

        The request slot is neither read nor replaced, so headers or a body
        staged there are not sent.
        """
        try:
            request = self._builder.build(method, url)
        except StepError as e:
            return self._fail("make_request_to", ctx, e, method=method, url=url)
        return self._send("make_request_to", ctx, request)

    def _send(self, step: str, ctx: ScenarioContext, request: RequestDescriptor) -> StepOutcome:
        logger = self._deps.logger
        logger.info(
            "http.request",
            step=step,
            scenario_id=ctx.scenario_id,
            method=request.method.value,
            url=request.url,
            header_count=len(request.headers),
            body_len=len(request.body),
        )
        t0 = time.perf_counter()
        try:
            response = self._round_trip.execute(request)
        except Exception as e:
            # transport errors go back to the driver as raised, never retried
            logger.error(
                "http.transport_failed",
                step=step,
                scenario_id=ctx.scenario_id,
                method=request.method.value,
                url=request.url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return StepOutcome.failure(ctx, e)

        logger.info(
            "http.response",
            step=step,
            scenario_id=ctx.scenario_id,
            status=response.status,
            final_url=response.url,
            body_len=len(response.body),
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
            text_head=response.text[:200],
        )
        return StepOutcome.success(ctx.with_response(response))
