"""Error codes and their catalog text."""

from composio_sdk.errors.catalog import ERROR_CATALOG, CatalogEntry, get_error_info
from composio_sdk.errors.codes import SDK_ERROR_CODES, ErrorCode

__all__ = [
    "ERROR_CATALOG",
    "CatalogEntry",
    "ErrorCode",
    "SDK_ERROR_CODES",
    "get_error_info",
]
