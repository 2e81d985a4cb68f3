# tests/application/executor/test_step_registry.py
import pytest

from testhttp.application.executor.step_registry import (
    AmbiguousStepError,
    StepRegistrationError,
    StepRegistry,
    UndefinedStepError,
)
from testhttp.application.outcome import StepOutcome


def dummy_handler(ctx, **kwargs):
    return StepOutcome.success(ctx)


def other_handler(ctx, **kwargs):
    return StepOutcome.success(ctx)


class TestStepRegistry:
    def test_create_empty_registry(self):
        registry = StepRegistry()
        assert len(registry) == 0

    def test_match_returns_handler_and_arguments(self):
        registry = StepRegistry()
        registry.register(r'^I greet "(?P<name>.*)"$', dummy_handler)

        step, args = registry.match('I greet "ann"')

        assert step.handler is dummy_handler
        assert args == {"name": "ann"}

    def test_converters_are_applied(self):
        registry = StepRegistry()
        registry.register(r"^count is (?P<n>\d+)$", dummy_handler, {"n": int})

        _, args = registry.match("count is 42")

        assert args == {"n": 42}

    def test_match_requires_whole_text(self):
        registry = StepRegistry()
        registry.register(r"I make the request", dummy_handler)

        with pytest.raises(UndefinedStepError):
            registry.match("I make the request twice")

    def test_unknown_step_raises(self):
        registry = StepRegistry()
        registry.register(r"^known$", dummy_handler)

        with pytest.raises(UndefinedStepError, match="No step definition found"):
            registry.match("unknown")

    def test_empty_registry_raises(self):
        with pytest.raises(UndefinedStepError):
            StepRegistry().match("anything")

    def test_ambiguous_step_raises(self):
        registry = StepRegistry()
        registry.register(r"^the (?P<x>.*)$", dummy_handler)
        registry.register(r"^(?P<y>.*) response$", other_handler)

        with pytest.raises(AmbiguousStepError):
            registry.match("the response")

    def test_duplicate_pattern_is_rejected(self):
        registry = StepRegistry()
        registry.register(r"^step$", dummy_handler)

        with pytest.raises(StepRegistrationError, match="already registered"):
            registry.register(r"^step$", other_handler)

    def test_invalid_pattern_is_rejected(self):
        with pytest.raises(StepRegistrationError, match="Invalid step pattern"):
            StepRegistry().register(r"^(unclosed$", dummy_handler)

    def test_patterns_keep_registration_order(self):
        registry = StepRegistry()
        registry.register(r"^b$", dummy_handler)
        registry.register(r"^a$", other_handler)

        assert registry.patterns() == [r"^b$", r"^a$"]
