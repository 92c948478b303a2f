"""SDK exception hierarchy."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from composio_sdk.errors.catalog import get_error_info
from composio_sdk.errors.codes import ErrorCode


class ComposioError(Exception):
    """Base exception for all SDK errors.

    Every instance carries a catalog error code, the human-readable text for
    it, and a fresh ``error_id`` that identifies this occurrence in logs and
    support requests.
    """

    name = "ComposioError"

    def __init__(
        self,
        err_code: ErrorCode,
        message: str,
        description: Optional[str] = None,
        possible_fix: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        response_body: Any = None,
        original_error: Optional[BaseException] = None,
    ):
        info = get_error_info(err_code)
        self.err_code = info.code
        self.message = message
        self.description = info.description if description is None else description
        self.possible_fix = info.possible_fix if possible_fix is None else possible_fix
        self.error_id = uuid.uuid4().hex
        self.status_code = status_code
        self.url = url
        self.response_body = response_body
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} [{self.err_code.value}]"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(err_code={self.err_code.value!r}, "
            f"message={self.message!r}, error_id={self.error_id!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Public error surface, keyed by the backend's field names."""
        return {
            "errCode": self.err_code.value,
            "message": self.message,
            "description": self.description,
            "possibleFix": self.possible_fix,
            "errorId": self.error_id,
            "name": self.name,
        }


class ComposioAPIError(ComposioError):
    """Raised when the API returns a non-2xx response or an unreadable payload."""


class ComposioConnectionError(ComposioError):
    """Raised when the client cannot connect to the server."""


class ComposioTimeoutError(ComposioError):
    """Raised when a request times out, client-side or with HTTP 408."""


class ComposioConfigError(ComposioError):
    """Raised when the client cannot be configured, e.g. no API key."""
