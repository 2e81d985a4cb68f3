# domain/context.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from testhttp.domain.exceptions import MissingPreconditionError
from testhttp.domain.http import RequestDescriptor, ResponseDescriptor


@dataclass(frozen=True)
class ScenarioContext:
    """
    Value threaded from one step to the next within a single scenario.

    Holds at most one outgoing request and one received response. Every
    update returns a new context; the previous one is left untouched.
    """
    scenario_id: str = ""
    request: Optional[RequestDescriptor] = None
    response: Optional[ResponseDescriptor] = None

    def with_request(self, request: RequestDescriptor) -> "ScenarioContext":
        return replace(self, request=request)

    def with_response(self, response: ResponseDescriptor) -> "ScenarioContext":
        return replace(self, response=response)

    def with_scenario_id(self, scenario_id: str) -> "ScenarioContext":
        return replace(self, scenario_id=scenario_id)

    def require_request(self) -> RequestDescriptor:
        if self.request is None:
            raise MissingPreconditionError("request")
        return self.request

    def require_response(self) -> ResponseDescriptor:
        if self.response is None:
            raise MissingPreconditionError("response")
        return self.response
