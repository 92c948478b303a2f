"""Turn failed HTTP outcomes into :class:`~composio_sdk.exceptions.ComposioError`.

Two entry points, one per kind of failure:

* :func:`error_from_response` for a response that arrived with an error
  status code;
* :func:`error_from_exception` for a request that never produced a usable
  response (timeout, connection failure, unexpected exception).

:func:`error_from_payload` covers the remaining case of a successful status
whose body cannot be decoded. Each call builds exactly one error and logs it
once; nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import httpx

from composio_sdk.errors.catalog import get_error_info
from composio_sdk.errors.codes import ErrorCode
from composio_sdk.exceptions import (
    ComposioAPIError,
    ComposioConnectionError,
    ComposioError,
    ComposioTimeoutError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error body shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetailBody:
    """``{"detail": "..."}``"""

    detail: str


@dataclass(frozen=True)
class ErrorsBody:
    """``{"errors": [...]}``, or a list-valued ``detail`` of validation items."""

    errors: Tuple[str, ...]


@dataclass(frozen=True)
class MessageBody:
    """``{"message": "..."}``"""

    message: str


@dataclass(frozen=True)
class UnknownBody:
    """Anything else: empty objects, bare lists, plain text, ``None``."""

    raw: Any = None


ErrorBody = Union[DetailBody, ErrorsBody, MessageBody, UnknownBody]


def _error_item_text(item: Any) -> str:
    if isinstance(item, dict):
        msg = item.get("msg") or item.get("message")
        loc = item.get("loc")
        if msg and loc:
            return f"{'.'.join(str(part) for part in loc)}: {msg}"
        if msg:
            return str(msg)
    return str(item)


def parse_error_body(body: Any) -> ErrorBody:
    """Classify a decoded error body into one of the known shapes."""
    if not isinstance(body, dict):
        return UnknownBody(body)

    errors = body.get("errors")
    if isinstance(errors, list) and errors:
        return ErrorsBody(tuple(_error_item_text(e) for e in errors))

    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return DetailBody(detail)
    if isinstance(detail, list) and detail:
        return ErrorsBody(tuple(_error_item_text(e) for e in detail))

    message = body.get("message")
    if isinstance(message, str) and message:
        return MessageBody(message)

    return UnknownBody(body)


def body_detail(body: ErrorBody) -> Optional[str]:
    """Human-readable detail carried by *body*, or ``None``."""
    if isinstance(body, ErrorsBody):
        return "; ".join(body.errors)
    if isinstance(body, DetailBody):
        return body.detail
    if isinstance(body, MessageBody):
        return body.message
    if isinstance(body, UnknownBody):
        return None
    raise TypeError(f"Unhandled error body shape: {type(body).__name__}")


# ---------------------------------------------------------------------------
# Normalizers
# ---------------------------------------------------------------------------


def _emit(error: ComposioError) -> ComposioError:
    logger.warning(
        "%s (code=%s, status=%s, url=%s, error_id=%s)",
        error.message,
        error.err_code.value,
        error.status_code,
        error.url,
        error.error_id,
    )
    return error


def error_from_response(status_code: int, body: Any, url: str) -> ComposioError:
    """Build the error for a response with a non-2xx *status_code*."""
    parsed = parse_error_body(body)
    detail = body_detail(parsed)
    context: Dict[str, Any] = {"status_code": status_code, "url": url, "response_body": body}

    if status_code == 400:
        info = get_error_info(ErrorCode.BACKEND_BAD_REQUEST)
        return _emit(ComposioAPIError(
            info.code,
            f"{info.message}. Validation Errors while making request to {url}",
            description=detail or info.description,
            **context,
        ))

    if status_code == 404:
        info = get_error_info(ErrorCode.BACKEND_NOT_FOUND)
        return _emit(ComposioAPIError(info.code, info.message, **context))

    if status_code == 408:
        info = get_error_info(ErrorCode.COMMON_REQUEST_TIMEOUT)
        return _emit(ComposioTimeoutError(info.code, info.message, **context))

    if status_code in (500, 502):
        code = ErrorCode.BACKEND_SERVER_ERROR if status_code == 500 else ErrorCode.BACKEND_SERVER_UNAVAILABLE
        info = get_error_info(code)
        description = info.description
        if detail:
            description = f"{description} Upstream detail: {detail}"
        return _emit(ComposioAPIError(info.code, info.message, description=description, **context))

    info = get_error_info(ErrorCode.BACKEND_UNKNOWN)
    return _emit(ComposioAPIError(
        info.code,
        f"{info.message} (HTTP {status_code} from {url})",
        description=detail or info.description,
        **context,
    ))


def error_from_exception(exc: BaseException, url: Optional[str] = None) -> ComposioError:
    """Build the error for a request that failed without a usable response."""
    if isinstance(exc, httpx.TimeoutException):
        info = get_error_info(ErrorCode.COMMON_REQUEST_TIMEOUT)
        return _emit(ComposioTimeoutError(info.code, info.message, url=url, original_error=exc))

    if isinstance(exc, httpx.TransportError):
        info = get_error_info(ErrorCode.BACKEND_SERVER_UNAVAILABLE)
        return _emit(ComposioConnectionError(
            info.code,
            f"{info.message}. Could not reach {url}",
            description=f"{info.description} {type(exc).__name__}: {exc}",
            url=url,
            original_error=exc,
        ))

    info = get_error_info(ErrorCode.COMMON_UNKNOWN)
    return _emit(ComposioError(
        info.code,
        info.message,
        description=f"{info.description} {type(exc).__name__}: {exc}",
        url=url,
        original_error=exc,
    ))


def error_from_payload(exc: BaseException, url: str, status_code: Optional[int] = None) -> ComposioError:
    """Build the error for a successful response whose body cannot be decoded."""
    info = get_error_info(ErrorCode.BACKEND_UNKNOWN)
    return _emit(ComposioAPIError(
        info.code,
        f"{info.message}. Malformed response payload from {url}",
        description=f"Could not decode response payload: {exc}",
        status_code=status_code,
        url=url,
        original_error=exc,
    ))


__all__ = [
    "DetailBody",
    "ErrorsBody",
    "MessageBody",
    "UnknownBody",
    "ErrorBody",
    "parse_error_body",
    "body_detail",
    "error_from_response",
    "error_from_exception",
    "error_from_payload",
]
