# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from testhttp.application.ports.logger import LoggerPort


class UrlResolverPort(Protocol):
    def resolve_url(self, url: str) -> str:
        ...


@dataclass(frozen=True)
class PassthroughUrlResolver:
    def resolve_url(self, url: str) -> str:
        return url


def _default_logger() -> LoggerPort:
    from testhttp.infrastructure.logging.loguru_logger import LoguruLogger

    return LoguruLogger()


@dataclass(frozen=True)
class ExecutionDeps:
    url_resolver: UrlResolverPort = field(default_factory=PassthroughUrlResolver)
    logger: LoggerPort = field(default_factory=_default_logger)

    def resolve_url(self, url: str) -> str:
        return self.url_resolver.resolve_url(url)
