"""Shared constants and helpers used by both sync and async clients."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from composio_sdk.errors.catalog import get_error_info
from composio_sdk.errors.codes import ErrorCode
from composio_sdk.exceptions import ComposioConfigError

DEFAULT_BASE_URL = "https://backend.composio.dev"
DEFAULT_TIMEOUT = 60.0
DEFAULT_ENTITY_ID = "default"

API_PREFIX = "/api/v1"
APPS_PATH = f"{API_PREFIX}/apps"
CONNECTED_ACCOUNTS_PATH = f"{API_PREFIX}/connectedAccounts"


def _build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "x-api-key": api_key,
    }


def _require_api_key(api_key: Optional[str]) -> str:
    if not api_key:
        info = get_error_info(ErrorCode.COMMON_API_KEY_UNAVAILABLE)
        raise ComposioConfigError(info.code, info.message)
    return api_key


def _connected_accounts_params(
    entity_id: Optional[str] = None,
    app_names: Optional[List[str]] = None,
    show_active_only: Optional[bool] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if entity_id is not None:
        params["user_uuid"] = entity_id
    if app_names:
        params["appNames"] = ",".join(app_names)
    if show_active_only is not None:
        params["showActiveOnly"] = "true" if show_active_only else "false"
    if page is not None:
        params["page"] = page
    if page_size is not None:
        params["pageSize"] = page_size
    return params


def _resource_path(collection: str, resource_id: str) -> str:
    """``<collection>/<resource_id>`` with the id escaped as one path segment."""
    segment = quote(str(resource_id), safe="")
    # quote() leaves dots alone; "." and ".." would be resolved away by httpx
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return f"{collection}/{segment}"
