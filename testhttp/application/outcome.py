from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from testhttp.domain.context import ScenarioContext


@dataclass(frozen=True)
class StepOutcome:
    ok: bool
    context: ScenarioContext
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, context: ScenarioContext) -> "StepOutcome":
        return cls(ok=True, context=context)

    @classmethod
    def failure(cls, context: ScenarioContext, error: BaseException) -> "StepOutcome":
        return cls(ok=False, context=context, error=error)

    @property
    def error_message(self) -> Optional[str]:
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__
