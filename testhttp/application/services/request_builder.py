# application/services/request_builder.py
from __future__ import annotations

from requests.exceptions import RequestException
from requests.models import PreparedRequest

from testhttp.application.services.execution_deps import ExecutionDeps
from testhttp.domain.exceptions import RequestConstructionError
from testhttp.domain.http import HttpMethod, RequestDescriptor


class RequestBuilder:
    def __init__(self, deps: ExecutionDeps):
        self._deps = deps

    def build(self, method: str, url: str) -> RequestDescriptor:
        """
        New request with no headers and an empty body.

        Relative URLs are resolved against the configured base URL first.
        The URL is checked the way requests would prepare it, but stored
        exactly as resolved.
        """
        http_method = HttpMethod.parse(method)
        resolved = self._deps.resolve_url(url)
        try:
            PreparedRequest().prepare_url(resolved, None)
        except (RequestException, ValueError) as exc:
            raise RequestConstructionError(f"invalid URL {resolved!r}: {exc}") from exc
        return RequestDescriptor(method=http_method, url=resolved)
