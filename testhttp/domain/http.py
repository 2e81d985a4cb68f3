# domain/http.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple

from testhttp.domain.exceptions import RequestConstructionError


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, raw: str) -> "HttpMethod":
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise RequestConstructionError(
                f"unsupported method {raw!r} (expected one of {allowed})"
            ) from None


@dataclass(frozen=True)
class Headers:
    """
    Ordered header multimap. Names keep their original spelling but are
    matched case-insensitively.
    """
    items: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "Headers":
        return cls(tuple((str(k), str(v)) for k, v in pairs))

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, str]]) -> "Headers":
        return cls.from_pairs((mapping or {}).items())

    def add(self, name: str, value: str) -> "Headers":
        return Headers(self.items + ((name, value),))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        key = name.casefold()
        for k, v in self.items:
            if k.casefold() == key:
                return v
        return default

    def get_all(self, name: str) -> List[str]:
        key = name.casefold()
        return [v for k, v in self.items if k.casefold() == key]

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class RequestDescriptor:
    method: HttpMethod
    url: str
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    def with_header(self, name: str, value: str) -> "RequestDescriptor":
        return replace(self, headers=self.headers.add(name, value))

    def with_body(self, text: str) -> "RequestDescriptor":
        return replace(self, body=text.encode("utf-8"))


@dataclass(frozen=True)
class ResponseDescriptor:
    status: int
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    url: str = ""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
