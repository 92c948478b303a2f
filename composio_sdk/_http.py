"""Thin API clients over httpx that funnel every failure into ComposioError."""

from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from composio_sdk._base import DEFAULT_TIMEOUT, _build_headers
from composio_sdk.errors.normalize import error_from_exception, error_from_payload, error_from_response

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _error_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return {"detail": resp.text} if resp.text else {}


def _success_body(resp: httpx.Response, url: str) -> Any:
    if resp.status_code == 204 or not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as exc:
        raise error_from_payload(exc, url, resp.status_code) from exc


def validate_payload(model: Type[ModelT], data: Any, url: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise error_from_payload(exc, url) from exc


class ApiClient:
    """Owns one :class:`httpx.Client` bound to the backend base URL.

    Pass ``transport`` to route requests somewhere other than the network,
    e.g. an :class:`httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._headers = _build_headers(api_key)
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=self._headers,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, path, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise error_from_exception(exc, url) from exc

        if resp.status_code >= 400:
            raise error_from_response(resp.status_code, _error_body(resp), url)
        return _success_body(resp, url)

    def request_model(self, model: Type[ModelT], method: str, path: str, **kwargs: Any) -> ModelT:
        data = self.request(method, path, **kwargs)
        return validate_payload(model, data, f"{self.base_url}{path}")


class AsyncApiClient:
    """Async counterpart of :class:`ApiClient` (uses :class:`httpx.AsyncClient`)."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._headers = _build_headers(api_key)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers,
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = await self._client.request(method, path, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise error_from_exception(exc, url) from exc

        if resp.status_code >= 400:
            raise error_from_response(resp.status_code, _error_body(resp), url)
        return _success_body(resp, url)

    async def request_model(self, model: Type[ModelT], method: str, path: str, **kwargs: Any) -> ModelT:
        data = await self.request(method, path, **kwargs)
        return validate_payload(model, data, f"{self.base_url}{path}")
