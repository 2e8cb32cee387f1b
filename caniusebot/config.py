"""Runtime settings read from environment variables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

from .constants import (
    DEFAULT_DATA_URL,
    DEFAULT_INLINE_RESULT_LIMIT,
    DEFAULT_MIN_QUERY_LENGTH,
    DEFAULT_TIMEOUT_SECONDS,
    DEVELOPMENT_CACHE_SECONDS,
    PRODUCTION_CACHE_SECONDS,
)
from .exceptions import ConfigError


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(name, raw) from exc
    if value <= 0:
        raise ConfigError(name, raw)
    return value


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(name, raw) from exc
    if value <= 0:
        raise ConfigError(name, raw)
    return value


@dataclass(frozen=True)
class Settings:
    data_path: Path | None = None
    data_url: str = DEFAULT_DATA_URL
    production: bool = False
    min_query_length: int = DEFAULT_MIN_QUERY_LENGTH
    inline_result_limit: int = DEFAULT_INLINE_RESULT_LIMIT
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def inline_cache_time(self) -> int:
        """Seconds chat clients may cache inline answers."""
        return PRODUCTION_CACHE_SECONDS if self.production else DEVELOPMENT_CACHE_SECONDS

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Create settings from environment variables."""
        env = os.environ if env is None else env
        data_path = env.get("CANIUSEBOT_DATA", "").strip()
        return cls(
            data_path=Path(data_path) if data_path else None,
            data_url=env.get("CANIUSEBOT_DATA_URL", "").strip() or DEFAULT_DATA_URL,
            production=env.get("CANIUSEBOT_ENV", "").strip().lower() == "production",
            min_query_length=_positive_int(
                env, "CANIUSEBOT_MIN_QUERY_LENGTH", DEFAULT_MIN_QUERY_LENGTH
            ),
            inline_result_limit=_positive_int(
                env, "CANIUSEBOT_RESULT_LIMIT", DEFAULT_INLINE_RESULT_LIMIT
            ),
            timeout=_positive_float(env, "CANIUSEBOT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        )
