# infrastructure/settings/env_settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from testhttp.domain.exceptions import ValidationError

PREFIX = "TESTHTTP_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValidationError(f"{key} must be a boolean, got {raw!r}")


def _parse_timeout(key: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"{key} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValidationError(f"{key} must be positive, got {raw!r}")
    return value


def _parse_level(key: str, raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LEVELS:
        raise ValidationError(f"{key} must be one of {sorted(_LEVELS)}, got {raw!r}")
    return level


_FIELDS = {
    "base_url": lambda _key, raw: raw.strip(),
    "timeout_sec": _parse_timeout,
    "follow_redirects": _parse_bool,
    "verify_tls": _parse_bool,
    "log_level": _parse_level,
}


@dataclass(frozen=True)
class Settings:
    base_url: str = ""
    timeout_sec: float = 20
    follow_redirects: bool = True
    verify_tls: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> "Settings":
        kwargs: Dict[str, Any] = {}
        for field_name, parse in _FIELDS.items():
            key = PREFIX + field_name.upper()
            raw = values.get(key)
            if raw is None or raw == "":
                continue
            kwargs[field_name] = parse(key, raw)
        return cls(**kwargs)

    @classmethod
    def from_env(cls, env_file: Union[str, Path, None] = ".env") -> "Settings":
        """
        Read settings from the .env file (when present) and the process
        environment. Values in the file win over the environment.
        """
        values: Dict[str, Optional[str]] = {}
        if env_file is not None and Path(env_file).exists():
            values.update(dotenv_values(env_file))

        for key, value in os.environ.items():
            if key.startswith(PREFIX) and key not in values:
                values[key] = value

        return cls.from_mapping(values)

    def override(self, **changes: Any) -> "Settings":
        """Copy with every non-None keyword applied."""
        applied = {k: v for k, v in changes.items() if v is not None}
        if "timeout_sec" in applied:
            applied["timeout_sec"] = _parse_timeout("timeout_sec", str(applied["timeout_sec"]))
        if "log_level" in applied:
            applied["log_level"] = _parse_level("log_level", applied["log_level"])
        return replace(self, **applied)
