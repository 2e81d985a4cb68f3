# application/executor/step_registry.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Pattern, Tuple

from testhttp.application.step_table import Converters, StepFunc


class StepRegistrationError(ValueError):
    pass


class UndefinedStepError(RuntimeError):
    pass


class AmbiguousStepError(RuntimeError):
    pass


@dataclass(frozen=True)
class RegisteredStep:
    pattern: Pattern[str]
    handler: StepFunc
    converters: Converters = field(default_factory=dict)

    def match(self, text: str) -> Optional[Dict[str, Any]]:
        m = self.pattern.fullmatch(text)
        if m is None:
            return None
        args: Dict[str, Any] = {}
        for key, raw in m.groupdict().items():
            convert = self.converters.get(key)
            args[key] = convert(raw) if convert else raw
        return args


class StepRegistry:
    """Matches step text against registered regular expressions."""

    def __init__(self) -> None:
        self._steps: List[RegisteredStep] = []

    def register(self, pattern: str, handler: StepFunc, converters: Optional[Converters] = None) -> None:
        if any(s.pattern.pattern == pattern for s in self._steps):
            raise StepRegistrationError(f"Step already registered: {pattern}")
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise StepRegistrationError(f"Invalid step pattern {pattern!r}: {e}") from e
        self._steps.append(RegisteredStep(compiled, handler, dict(converters or {})))

    def match(self, text: str) -> Tuple[RegisteredStep, Dict[str, Any]]:
        found = []
        for step in self._steps:
            args = step.match(text)
            if args is not None:
                found.append((step, args))
        if not found:
            raise UndefinedStepError(f"No step definition found for: {text}")
        if len(found) > 1:
            patterns = ", ".join(s.pattern.pattern for s, _ in found)
            raise AmbiguousStepError(f"Step {text!r} matches more than one definition: {patterns}")
        return found[0]

    def patterns(self) -> List[str]:
        return [s.pattern.pattern for s in self._steps]

    def __len__(self) -> int:
        return len(self._steps)
