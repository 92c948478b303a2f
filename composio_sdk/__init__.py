"""Composio SDK — Python client for the Composio backend API."""

from composio_sdk.client import Composio
from composio_sdk.async_client import AsyncComposio
from composio_sdk.entity import AsyncEntity, Entity
from composio_sdk.errors import ERROR_CATALOG, SDK_ERROR_CODES, ErrorCode, get_error_info
from composio_sdk.exceptions import (
    ComposioError,
    ComposioAPIError,
    ComposioConfigError,
    ComposioConnectionError,
    ComposioTimeoutError,
)
from composio_sdk.models import AppInfo, ConnectedAccount, ConnectionListResponse

__all__ = [
    "Composio",
    "AsyncComposio",
    "Entity",
    "AsyncEntity",
    "AppInfo",
    "ConnectedAccount",
    "ConnectionListResponse",
    "ErrorCode",
    "SDK_ERROR_CODES",
    "ERROR_CATALOG",
    "get_error_info",
    "ComposioError",
    "ComposioAPIError",
    "ComposioConfigError",
    "ComposioConnectionError",
    "ComposioTimeoutError",
]

__version__ = "0.1.0"
