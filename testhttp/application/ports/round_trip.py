# application/ports/round_trip.py
from __future__ import annotations

from abc import ABC, abstractmethod

from testhttp.domain.http import RequestDescriptor, ResponseDescriptor


class RoundTripPort(ABC):
    """
    Sends one request and returns the fully buffered response.

    Transport failures are raised as-is; the steps report them unchanged.
    """

    @abstractmethod
    def execute(self, request: RequestDescriptor) -> ResponseDescriptor:
        ...
