# application/handlers/base.py
from __future__ import annotations

from typing import Any, Callable

from testhttp.application.outcome import StepOutcome
from testhttp.application.services.execution_deps import ExecutionDeps
from testhttp.domain.context import ScenarioContext
from testhttp.domain.exceptions import StepError


class StepHandlerBase:
    def __init__(self, deps: ExecutionDeps):
        self._deps = deps

    def _run(
        self,
        step: str,
        ctx: ScenarioContext,
        action: Callable[[], ScenarioContext],
        **fields: Any,
    ) -> StepOutcome:
        try:
            next_ctx = action()
        except StepError as e:
            return self._fail(step, ctx, e, **fields)
        return StepOutcome.success(next_ctx)

    def _fail(self, step: str, ctx: ScenarioContext, error: BaseException, **fields: Any) -> StepOutcome:
        # failed steps hand back the context they were given
        self._deps.logger.error(
            "step.failed",
            step=step,
            scenario_id=ctx.scenario_id,
            error_type=type(error).__name__,
            error=str(error),
            **fields,
        )
        return StepOutcome.failure(ctx, error)
