# tests/fake_round_trip.py
"""
Round trip that never touches the network.
Responses are looked up by (method, url); unknown routes answer 404.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.domain.http import Headers, RequestDescriptor, ResponseDescriptor


class FakeRoundTrip(RoundTripPort):
    def __init__(self, error: Optional[Exception] = None):
        self._routes: Dict[Tuple[str, str], ResponseDescriptor] = {}
        self._error = error
        self.sent: List[RequestDescriptor] = []

    def route(
        self,
        method: str,
        url: str,
        status: int = 200,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
    ) -> "FakeRoundTrip":
        self._routes[(method, url)] = ResponseDescriptor(
            status=status,
            headers=Headers.from_mapping(headers),
            body=body,
            url=url,
        )
        return self

    def execute(self, request: RequestDescriptor) -> ResponseDescriptor:
        self.sent.append(request)
        if self._error is not None:
            raise self._error
        response = self._routes.get((request.method.value, request.url))
        if response is None:
            return ResponseDescriptor(status=404, body=b"Not Found", url=request.url)
        return response
