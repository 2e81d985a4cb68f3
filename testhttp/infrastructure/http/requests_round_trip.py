# infrastructure/http/requests_round_trip.py
from __future__ import annotations

from typing import Dict, Optional

import requests

from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.domain.http import Headers, RequestDescriptor, ResponseDescriptor


def _join_headers(headers: Headers) -> Dict[str, str]:
    # requests takes one value per name; repeated names are folded with ", "
    merged: Dict[str, str] = {}
    lowered: Dict[str, str] = {}
    for name, value in headers:
        key = lowered.setdefault(name.lower(), name)
        merged[key] = f"{merged[key]}, {value}" if key in merged else value
    return merged


def _response_headers(resp: requests.Response) -> Headers:
    # requests folds repeated names into one value; urllib3 keeps each line
    raw_headers = getattr(getattr(resp, "raw", None), "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return Headers.from_pairs(raw_headers.items())
    return Headers.from_pairs(resp.headers.items())


class RequestsRoundTrip(RoundTripPort):
    def __init__(
        self,
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: float = 20,
        follow_redirects: bool = True,
        verify_tls: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self._session = session or requests.Session()
        self._base_headers = base_headers or {}
        self._timeout = timeout_sec
        self._follow = follow_redirects
        self._verify = verify_tls

    def execute(self, request: RequestDescriptor) -> ResponseDescriptor:
        merged = dict(self._base_headers)
        merged.update(_join_headers(request.headers))

        resp = self._session.request(
            method=request.method.value,
            url=request.url,
            headers=merged,
            data=request.body or None,
            timeout=self._timeout,
            allow_redirects=self._follow,
            verify=self._verify,
        )

        return ResponseDescriptor(
            status=resp.status_code,
            headers=_response_headers(resp),
            body=resp.content or b"",
            url=str(resp.url),
        )

    def close(self) -> None:
        self._session.close()
