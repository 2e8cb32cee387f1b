"""Exception types for caniusebot."""

from __future__ import annotations


class CaniuseBotError(Exception):
    """Base exception for expected application errors."""


class NetworkError(CaniuseBotError):
    """Raised when a network operation fails."""

    def __init__(self, url: str, *, cause: str | None = None) -> None:
        detail = f"Unable to download the caniuse dataset from {url}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class RequestTimeoutError(CaniuseBotError):
    """Raised when a request times out."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Request timed out for {url}")


class HttpStatusError(CaniuseBotError):
    """Raised when a non-200 HTTP response is returned."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request failed with HTTP {status_code} for {url}")


class ContentError(CaniuseBotError):
    """Raised when a response body is empty or not valid JSON."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Received empty or invalid JSON content from {url}")


class DatasetError(CaniuseBotError):
    """Raised when the compatibility dataset cannot be read or has the wrong shape."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Invalid caniuse dataset at {source}: {reason}")


class ConfigError(CaniuseBotError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        super().__init__(f"Invalid value {value!r} for {name}")
