"""Asynchronous Composio client (uses httpx.AsyncClient)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Union

import httpx

from composio_sdk._base import (
    APPS_PATH,
    CONNECTED_ACCOUNTS_PATH,
    DEFAULT_ENTITY_ID,
    DEFAULT_TIMEOUT,
    _connected_accounts_params,
    _require_api_key,
    _resource_path,
)
from composio_sdk._http import AsyncApiClient, validate_payload
from composio_sdk.config import resolve_settings
from composio_sdk.entity import AsyncEntity
from composio_sdk.models import AppInfo, AppListResponse, ConnectedAccount, ConnectionListResponse


class AsyncApps:
    """``client.apps`` — the app catalog."""

    def __init__(self, api: AsyncApiClient):
        self._api = api

    async def list(self, category: Optional[str] = None) -> List[AppInfo]:
        """GET /api/v1/apps — list available apps."""
        params = {"category": category} if category else None
        data = await self._api.request("GET", APPS_PATH, params=params)
        if isinstance(data, list):
            data = {"items": data}
        return validate_payload(AppListResponse, data, f"{self._api.base_url}{APPS_PATH}").items

    async def get(self, app_key: str) -> AppInfo:
        """GET /api/v1/apps/{key} — fetch one app."""
        return await self._api.request_model(AppInfo, "GET", _resource_path(APPS_PATH, app_key))


class AsyncConnectedAccounts:
    """``client.connected_accounts`` — connections between entities and apps."""

    def __init__(self, api: AsyncApiClient):
        self._api = api

    async def list(
        self,
        entity_id: Optional[str] = None,
        app_names: Optional[List[str]] = None,
        show_active_only: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ConnectionListResponse:
        """GET /api/v1/connectedAccounts — list connected accounts."""
        params = _connected_accounts_params(entity_id, app_names, show_active_only, page, page_size)
        return await self._api.request_model(
            ConnectionListResponse, "GET", CONNECTED_ACCOUNTS_PATH, params=params
        )

    async def get(self, connected_account_id: str) -> ConnectedAccount:
        """GET /api/v1/connectedAccounts/{id} — fetch one connected account."""
        return await self._api.request_model(
            ConnectedAccount, "GET", _resource_path(CONNECTED_ACCOUNTS_PATH, connected_account_id)
        )


class AsyncComposio:
    """Async Python client for the Composio API.

    Usage::

        async with AsyncComposio(api_key="...") as client:
            apps = await client.apps.list()
            entity = client.get_entity("default")
            connection = await entity.get_connection(app="github")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        dotenv_path: Optional[Union[str, Path]] = None,
    ):
        settings = resolve_settings(api_key=api_key, base_url=base_url, dotenv_path=dotenv_path)
        self.api_key = _require_api_key(settings.api_key)
        self.base_url = settings.base_url
        self._api = AsyncApiClient(self.base_url, self.api_key, timeout=timeout, transport=transport)
        self.apps = AsyncApps(self._api)
        self.connected_accounts = AsyncConnectedAccounts(self._api)

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "AsyncComposio":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._api.aclose()

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    def get_entity(self, entity_id: str = DEFAULT_ENTITY_ID) -> AsyncEntity:
        """Return a handle on *entity_id*; no request is made."""
        return AsyncEntity(self.connected_accounts, entity_id)
