"""Static catalog of human-readable text for each :class:`ErrorCode`."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from composio_sdk.errors.codes import ErrorCode


@dataclass(frozen=True)
class CatalogEntry:
    """Base text for one error code."""

    code: ErrorCode
    message: str
    description: str
    possible_fix: str


_ENTRIES = (
    CatalogEntry(
        code=ErrorCode.BACKEND_BAD_REQUEST,
        message="🚫 Bad Request. The request was malformed or incorrect",
        description="The backend rejected the request parameters.",
        possible_fix="Please check your request format and parameters.",
    ),
    CatalogEntry(
        code=ErrorCode.BACKEND_NOT_FOUND,
        message="🔍 API not found",
        description="The requested resource is missing",
        possible_fix="Verify the URL or resource identifier.",
    ),
    CatalogEntry(
        code=ErrorCode.BACKEND_SERVER_ERROR,
        message="💥 Internal Server Error",
        description="A server error occurred while processing your request.",
        possible_fix="Try again later. Contact support if the problem persists.",
    ),
    CatalogEntry(
        code=ErrorCode.BACKEND_SERVER_UNAVAILABLE,
        message="🚧 Service Temporarily Unavailable",
        description="The server is currently unable to handle the request.",
        possible_fix="Please retry after a short wait and check the base URL.",
    ),
    CatalogEntry(
        code=ErrorCode.BACKEND_UNKNOWN,
        message="❓ Unknown Error",
        description="The backend returned a response the SDK could not interpret.",
        possible_fix="Contact support with the error id if the issue persists.",
    ),
    CatalogEntry(
        code=ErrorCode.COMMON_REQUEST_TIMEOUT,
        message="🕒 Request Timeout",
        description="The request timed out while waiting for a response.",
        possible_fix="Please try again later. Raise the client timeout for slow operations.",
    ),
    CatalogEntry(
        code=ErrorCode.COMMON_API_KEY_UNAVAILABLE,
        message="🔑 API Key is not provided",
        description="No API key was passed to the client and none was found in the environment.",
        possible_fix="Pass api_key=... or set the COMPOSIO_API_KEY environment variable.",
    ),
    CatalogEntry(
        code=ErrorCode.COMMON_UNKNOWN,
        message="❓ Unknown Error",
        description="An unexpected error occurred inside the SDK.",
        possible_fix="Contact support with the error id if the issue persists.",
    ),
)

ERROR_CATALOG: Mapping[ErrorCode, CatalogEntry] = MappingProxyType(
    {entry.code: entry for entry in _ENTRIES}
)


def get_error_info(code: ErrorCode) -> CatalogEntry:
    """Return the catalog entry for *code*."""
    return ERROR_CATALOG[ErrorCode(code)]


__all__ = ["CatalogEntry", "ERROR_CATALOG", "get_error_info"]
