"""Entities: the end users of your product who own connected accounts."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, List, Optional

from composio_sdk.models import ConnectedAccount

if TYPE_CHECKING:
    from composio_sdk.async_client import AsyncConnectedAccounts
    from composio_sdk.client import ConnectedAccounts

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _created_key(account: ConnectedAccount) -> datetime:
    created = account.created_at
    if created is None:
        return _EPOCH
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created


def latest_connection_for_app(accounts: Iterable[ConnectedAccount], app: str) -> Optional[ConnectedAccount]:
    """Most recently created account for *app* (case-insensitive), or ``None``."""
    wanted = app.lower()
    matches = [a for a in accounts if a.app_unique_id.lower() == wanted]
    if not matches:
        return None
    return max(matches, key=_created_key)


class Entity:
    """A single entity, bound to a sync client.

    Usage::

        entity = client.get_entity("default")
        connection = entity.get_connection(app="github")
    """

    def __init__(self, connected_accounts: "ConnectedAccounts", entity_id: str):
        self.id = entity_id
        self._connected_accounts = connected_accounts

    def __repr__(self) -> str:
        return f"Entity(id={self.id!r})"

    def get_connections(self) -> List[ConnectedAccount]:
        """Active connected accounts owned by this entity, across all pages."""
        accounts: List[ConnectedAccount] = []
        page_number = 1
        while True:
            page = self._connected_accounts.list(
                entity_id=self.id, show_active_only=True, page=page_number
            )
            accounts.extend(a for a in page.items if a.is_active)
            if page_number >= page.total_pages or not page.items:
                return accounts
            page_number += 1

    def get_connection(
        self,
        app: Optional[str] = None,
        connected_account_id: Optional[str] = None,
    ) -> Optional[ConnectedAccount]:
        """Fetch one connection, by id or by app.

        With ``connected_account_id`` the account is fetched directly. With
        ``app`` the latest active account for that app is returned, or
        ``None`` if the entity has not connected it.
        """
        if connected_account_id:
            return self._connected_accounts.get(connected_account_id)
        if not app:
            raise ValueError("Either app or connected_account_id is required")
        return latest_connection_for_app(self.get_connections(), app)


class AsyncEntity:
    """A single entity, bound to an async client."""

    def __init__(self, connected_accounts: "AsyncConnectedAccounts", entity_id: str):
        self.id = entity_id
        self._connected_accounts = connected_accounts

    def __repr__(self) -> str:
        return f"AsyncEntity(id={self.id!r})"

    async def get_connections(self) -> List[ConnectedAccount]:
        """Active connected accounts owned by this entity, across all pages."""
        accounts: List[ConnectedAccount] = []
        page_number = 1
        while True:
            page = await self._connected_accounts.list(
                entity_id=self.id, show_active_only=True, page=page_number
            )
            accounts.extend(a for a in page.items if a.is_active)
            if page_number >= page.total_pages or not page.items:
                return accounts
            page_number += 1

    async def get_connection(
        self,
        app: Optional[str] = None,
        connected_account_id: Optional[str] = None,
    ) -> Optional[ConnectedAccount]:
        """Async version of :meth:`Entity.get_connection`."""
        if connected_account_id:
            return await self._connected_accounts.get(connected_account_id)
        if not app:
            raise ValueError("Either app or connected_account_id is required")
        return latest_connection_for_app(await self.get_connections(), app)
