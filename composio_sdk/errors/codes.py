"""Error codes raised by the SDK.

Values are namespaced as ``<NAMESPACE>::<NAME>`` and are a stable public
contract: callers may compare against them and log them.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Every code a :class:`~composio_sdk.exceptions.ComposioError` can carry."""

    # Outcomes reported by the backend
    BACKEND_BAD_REQUEST = "BACKEND::BAD_REQUEST"
    BACKEND_NOT_FOUND = "BACKEND::NOT_FOUND"
    BACKEND_SERVER_ERROR = "BACKEND::SERVER_ERROR"
    BACKEND_SERVER_UNAVAILABLE = "BACKEND::SERVER_UNAVAILABLE"
    BACKEND_UNKNOWN = "BACKEND::UNKNOWN"

    # Client-side outcomes
    COMMON_REQUEST_TIMEOUT = "COMMON::REQUEST_TIMEOUT"
    COMMON_API_KEY_UNAVAILABLE = "COMMON::API_KEY_UNAVAILABLE"
    COMMON_UNKNOWN = "COMMON::UNKNOWN"

    @property
    def namespace(self) -> str:
        return self.value.split("::", 1)[0]

    def __str__(self) -> str:
        return self.value


class _BackendCodes:
    BAD_REQUEST = ErrorCode.BACKEND_BAD_REQUEST
    NOT_FOUND = ErrorCode.BACKEND_NOT_FOUND
    SERVER_ERROR = ErrorCode.BACKEND_SERVER_ERROR
    SERVER_UNAVAILABLE = ErrorCode.BACKEND_SERVER_UNAVAILABLE
    UNKNOWN = ErrorCode.BACKEND_UNKNOWN


class _CommonCodes:
    REQUEST_TIMEOUT = ErrorCode.COMMON_REQUEST_TIMEOUT
    API_KEY_UNAVAILABLE = ErrorCode.COMMON_API_KEY_UNAVAILABLE
    UNKNOWN = ErrorCode.COMMON_UNKNOWN


class SDK_ERROR_CODES:  # noqa: N801
    """Namespace view over :class:`ErrorCode`, e.g. ``SDK_ERROR_CODES.BACKEND.NOT_FOUND``."""

    BACKEND = _BackendCodes
    COMMON = _CommonCodes


__all__ = ["ErrorCode", "SDK_ERROR_CODES"]
