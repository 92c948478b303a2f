"""Tests for entities and connected account lookup."""

from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest

from composio_sdk import AsyncComposio, Composio
from composio_sdk.entity import latest_connection_for_app
from composio_sdk.errors import SDK_ERROR_CODES
from composio_sdk.exceptions import ComposioAPIError
from composio_sdk.models import ConnectedAccount


def _account(account_id: str, app: str, created_at: str, status: str = "ACTIVE") -> Dict[str, Any]:
    return {
        "id": account_id,
        "status": status,
        "appUniqueId": app,
        "appName": app,
        "integrationId": "int-1",
        "clientUniqueUserId": "default",
        "createdAt": created_at,
        "updatedAt": created_at,
    }


ACCOUNTS = [
    _account("ca-1", "github", "2024-05-01T10:00:00Z"),
    _account("ca-2", "github", "2024-06-01T10:00:00Z"),
    _account("ca-3", "slack", "2024-07-01T10:00:00Z"),
]


class _Backend:
    """Records requests and serves a fixed set of connected accounts.

    The list endpoint returns ``per_page`` accounts per page.
    """

    def __init__(self, accounts: List[Dict[str, Any]], per_page: int = 50):
        self.accounts = accounts
        self.per_page = per_page
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/api/v1/connectedAccounts":
            page = int(request.url.params.get("page", "1"))
            start = (page - 1) * self.per_page
            total_pages = max(1, -(-len(self.accounts) // self.per_page))
            body = {
                "items": self.accounts[start:start + self.per_page],
                "totalPages": total_pages,
                "page": page,
            }
            return httpx.Response(200, json=body, request=request)
        prefix = "/api/v1/connectedAccounts/"
        if path.startswith(prefix):
            account_id = path[len(prefix):]
            for account in self.accounts:
                if account["id"] == account_id:
                    return httpx.Response(200, json=account, request=request)
        return httpx.Response(404, json={"detail": "Not found"}, request=request)


@pytest.fixture()
def backend() -> _Backend:
    return _Backend(ACCOUNTS)


@pytest.fixture()
def client(backend: _Backend):
    c = Composio(api_key="test-key", transport=httpx.MockTransport(backend))
    yield c
    c.close()


# ---------------------------------------------------------------------------
# Sync entity
# ---------------------------------------------------------------------------

class TestEntity:

    def test_default_entity_id(self, client: Composio):
        assert client.get_entity().id == "default"
        assert client.get_entity("user-42").id == "user-42"

    def test_get_entity_makes_no_request(self, client: Composio, backend: _Backend):
        client.get_entity("default")
        assert backend.requests == []

    def test_get_connections_queries_active_accounts(self, client: Composio, backend: _Backend):
        connections = client.get_entity("default").get_connections()
        assert [c.id for c in connections] == ["ca-1", "ca-2", "ca-3"]
        params = backend.requests[0].url.params
        assert params["user_uuid"] == "default"
        assert params["showActiveOnly"] == "true"

    def test_get_connection_by_app_returns_latest(self, client: Composio):
        connection = client.get_entity("default").get_connection(app="github")
        assert connection is not None
        assert connection.app_unique_id == "github"
        assert connection.id == "ca-2"

    def test_get_connection_app_is_case_insensitive(self, client: Composio):
        connection = client.get_entity("default").get_connection(app="GitHub")
        assert connection is not None
        assert connection.id == "ca-2"

    def test_get_connection_unknown_app(self, client: Composio):
        assert client.get_entity("default").get_connection(app="notion") is None

    def test_get_connection_by_id(self, client: Composio, backend: _Backend):
        connection = client.get_entity("default").get_connection(connected_account_id="ca-3")
        assert connection.app_unique_id == "slack"
        assert backend.requests[0].url.path == "/api/v1/connectedAccounts/ca-3"

    def test_get_connection_missing_id_raises(self, client: Composio):
        with pytest.raises(ComposioAPIError) as exc_info:
            client.get_entity("default").get_connection(connected_account_id="nope")
        assert exc_info.value.err_code is SDK_ERROR_CODES.BACKEND.NOT_FOUND

    def test_get_connection_requires_argument(self, client: Composio):
        with pytest.raises(ValueError):
            client.get_entity("default").get_connection()


    def test_get_connections_reads_every_page(self):
        accounts = [_account(f"ca-{i}", "github", f"2024-01-{i:02d}T00:00:00Z") for i in range(1, 6)]
        backend = _Backend(accounts, per_page=2)
        with Composio(api_key="test-key", transport=httpx.MockTransport(backend)) as client:
            connections = client.get_entity("default").get_connections()
            latest = client.get_entity("default").get_connection(app="github")
        assert [c.id for c in connections] == ["ca-1", "ca-2", "ca-3", "ca-4", "ca-5"]
        assert [r.url.params["page"] for r in backend.requests[:3]] == ["1", "2", "3"]
        assert latest.id == "ca-5"

    def test_get_connection_skips_inactive_accounts(self):
        accounts = [
            _account("ca-old", "github", "2024-01-01T00:00:00Z"),
            _account("ca-new", "github", "2024-02-01T00:00:00Z", status="EXPIRED"),
        ]
        backend = _Backend(accounts)
        with Composio(api_key="test-key", transport=httpx.MockTransport(backend)) as client:
            connection = client.get_entity("default").get_connection(app="github")
        assert connection.id == "ca-old"


class TestConnectedAccounts:

    def test_account_id_is_escaped_as_one_segment(self, client: Composio, backend: _Backend):
        with pytest.raises(ComposioAPIError):
            client.connected_accounts.get("../../apps")
        request = backend.requests[0]
        assert request.url.raw_path == b"/api/v1/connectedAccounts/..%2F..%2Fapps"

    def test_dot_segment_id_is_not_resolved(self, client: Composio, backend: _Backend):
        with pytest.raises(ComposioAPIError):
            client.connected_accounts.get("..")
        assert backend.requests[0].url.raw_path == b"/api/v1/connectedAccounts/%2E%2E"

    def test_non_printable_id_reaches_backend_escaped(self, client: Composio, backend: _Backend):
        with pytest.raises(ComposioAPIError) as exc_info:
            client.connected_accounts.get("a\nb")
        assert exc_info.value.err_code is SDK_ERROR_CODES.BACKEND.NOT_FOUND
        assert backend.requests[0].url.raw_path == b"/api/v1/connectedAccounts/a%0Ab"

    def test_list_params(self, client: Composio, backend: _Backend):
        page = client.connected_accounts.list(
            entity_id="user-1", app_names=["github", "slack"], page=2, page_size=10
        )
        assert page.total_pages == 1
        params = backend.requests[0].url.params
        assert params["user_uuid"] == "user-1"
        assert params["appNames"] == "github,slack"
        assert params["page"] == "2"
        assert params["pageSize"] == "10"
        assert "showActiveOnly" not in params

    def test_account_fields(self, client: Composio):
        account = client.connected_accounts.get("ca-1")
        assert account.is_active
        assert account.integration_id == "int-1"
        assert account.created_at.year == 2024


# ---------------------------------------------------------------------------
# Async entity
# ---------------------------------------------------------------------------

class TestAsyncEntity:

    @pytest.mark.asyncio
    async def test_get_connection_by_app(self, backend: _Backend):
        async with AsyncComposio(api_key="test-key", transport=httpx.MockTransport(backend)) as client:
            entity = client.get_entity("default")
            connection = await entity.get_connection(app="github")
        assert connection is not None
        assert connection.id == "ca-2"

    @pytest.mark.asyncio
    async def test_get_connection_by_id(self, backend: _Backend):
        async with AsyncComposio(api_key="test-key", transport=httpx.MockTransport(backend)) as client:
            connection = await client.get_entity().get_connection(connected_account_id="ca-1")
        assert connection.id == "ca-1"

    @pytest.mark.asyncio
    async def test_get_connections_reads_every_page(self):
        backend = _Backend(ACCOUNTS, per_page=1)
        async with AsyncComposio(api_key="test-key", transport=httpx.MockTransport(backend)) as client:
            connections = await client.get_entity("default").get_connections()
        assert [c.id for c in connections] == ["ca-1", "ca-2", "ca-3"]
        assert len(backend.requests) == 3


# ---------------------------------------------------------------------------
# Selection helper
# ---------------------------------------------------------------------------

class TestLatestConnectionForApp:

    def test_missing_created_at_sorts_first(self):
        accounts = [
            ConnectedAccount.model_validate({"id": "a", "status": "ACTIVE", "appUniqueId": "github"}),
            ConnectedAccount.model_validate(_account("b", "github", "2023-01-01T00:00:00Z")),
        ]
        assert latest_connection_for_app(accounts, "github").id == "b"

    def test_empty(self):
        assert latest_connection_for_app([], "github") is None
