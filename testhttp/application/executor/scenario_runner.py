# application/executor/scenario_runner.py
from __future__ import annotations

import re
import time
import uuid
from dataclasses import dataclass
from typing import List, Optional

from testhttp.application.executor.step_registry import AmbiguousStepError, StepRegistry, UndefinedStepError
from testhttp.application.outcome import StepOutcome
from testhttp.application.ports.logger import LoggerPort
from testhttp.domain.context import ScenarioContext

_KEYWORD = re.compile(r"^(?:Given|When|Then|And|But|\*)\s+")


def strip_keyword(line: str) -> str:
    return _KEYWORD.sub("", line.strip(), count=1)


@dataclass(frozen=True)
class ExecutionResult:
    ok: bool
    context: ScenarioContext
    failed_step: Optional[str] = None
    error_message: Optional[str] = None
    error: Optional[BaseException] = None


class ScenarioRunner:
    def __init__(self, registry: StepRegistry, logger: LoggerPort):
        self._registry = registry
        self._logger = logger

    def run(self, steps: List[str], ctx: Optional[ScenarioContext] = None) -> ExecutionResult:
        """
        Run steps in order, feeding each one the context the previous step
        returned. Stops at the first failing or unmatched step.
        """
        ctx = ctx or ScenarioContext()
        if not ctx.scenario_id:
            ctx = ctx.with_scenario_id(uuid.uuid4().hex)

        logger = self._logger.bind(scenario_id=ctx.scenario_id)
        logger.info("scenario.start", step_count=len(steps))

        for index, line in enumerate(steps):
            text = strip_keyword(line)
            if not text:
                continue

            logger.info("step.start", index=index, step=text)
            t0 = time.perf_counter()

            outcome = self._run_step(text, ctx, logger)

            logger.info(
                "step.end",
                index=index,
                step=text,
                ok=outcome.ok,
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
            )

            ctx = outcome.context
            if not outcome.ok:
                logger.info("scenario.end", ok=False, failed_step=text)
                return ExecutionResult(
                    ok=False,
                    context=ctx,
                    failed_step=text,
                    error_message=outcome.error_message,
                    error=outcome.error,
                )

        logger.info("scenario.end", ok=True)
        return ExecutionResult(ok=True, context=ctx)

    def _run_step(self, text: str, ctx: ScenarioContext, logger: LoggerPort) -> StepOutcome:
        try:
            step, args = self._registry.match(text)
        except (UndefinedStepError, AmbiguousStepError) as e:
            logger.error("step.undefined", step=text, error=str(e))
            return StepOutcome.failure(ctx, e)

        outcome = step.handler(ctx, **args)
        if outcome is None:
            raise RuntimeError(f"Handler returned None for step: {text}")
        return outcome
