"""Plumbing shared by every resource-manager client."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Generic, TypeVar
from urllib.parse import quote

import httpx

from .. import __version__
from ..errors import DeserializationError, HttpError, ValidationError
from ..http_client import HttpClient
from ..models._base import ResourceModel
from ..utils.poller import poll_until

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://management.azure.com"

ModelType = TypeVar("ModelType", bound=ResourceModel)
OutputType = TypeVar("OutputType")
ClientType = TypeVar("ClientType", bound="ManagementClient")

_TERMINAL_STATES = frozenset({"succeeded", "failed", "canceled", "cancelled"})


@dataclass(frozen=True)
class RawResponse(Generic[OutputType]):
    """Operation result paired with the HTTP response that produced it."""

    output: OutputType
    response: httpx.Response

    @property
    def status_code(self) -> int:
        return self.response.status_code


def require(name: str, value: Any) -> None:
    """Raise :class:`ValidationError` when a required argument is missing."""

    if value is None or (isinstance(value, str) and not value):
        raise ValidationError(name)


class ManagementClient:
    """Base for clients that talk to ``management.azure.com`` style endpoints."""

    default_api_version = ""

    def __init__(
        self,
        token_getter: Callable[[], str] | None = None,
        subscription_id: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str | None = None,
        transport: httpx.BaseTransport | None = None,
        timeout: float = 60.0,
        poll_interval: float = 5.0,
        poll_timeout: float = 1800.0,
    ) -> None:
        self.subscription_id = subscription_id
        self.api_version = api_version or self.default_api_version
        self.http = HttpClient(
            base_url,
            token_getter=token_getter,
            default_headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        self._poll_interval = poll_interval
        self._poll_timeout = poll_timeout

    @property
    def user_agent(self) -> str:
        return f"azmgmt/{__version__} {type(self).__name__}/{self.api_version}"

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self.http.close()

    def __enter__(self: ClientType) -> ClientType:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _with_api_version(self, extra: dict[str, Any] | None = None) -> dict[str, Any]:
        params: dict[str, Any] = {"api-version": self.api_version}
        if extra:
            params.update(extra)
        return params

    def _subscription_path(self, *segments: str) -> str:
        require("subscription_id", self.subscription_id)
        parts = ["subscriptions", str(self.subscription_id), *segments]
        return "/".join(quote(part, safe="") for part in parts)

    def _provider_path(self, resource_group_name: str, provider: str, *segments: str) -> str:
        return self._subscription_path(
            "resourceGroups", resource_group_name, "providers", *provider.split("/"), *segments
        )

    def _send(
        self,
        method: str,
        path: str,
        *,
        expected: Iterable[int],
        body: Any | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        expected_codes = set(expected)
        resp = self.http.request(
            method,
            path,
            params=params or self._with_api_version(),
            json=body,
            headers=headers,
            allowed_statuses=[code for code in expected_codes if code >= 400],
        )
        if resp.status_code not in expected_codes:
            raise HttpError(
                resp.status_code,
                f"Unexpected status for {method} {path}",
                details=resp.text or None,
            )
        return resp

    @staticmethod
    def _parse_response_dict(resp: httpx.Response) -> dict[str, Any]:
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError as exc:
            raise DeserializationError("response", f"body is not valid JSON: {exc}") from exc
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _deserialize(model_cls: type[ModelType], resp: httpx.Response) -> ModelType:
        try:
            data = resp.json()
        except ValueError as exc:
            raise DeserializationError(model_cls.__name__, f"body is not valid JSON: {exc}") from exc
        return model_cls.from_wire(data)

    @staticmethod
    def _result(output: OutputType, resp: httpx.Response, raw: bool) -> Any:
        if raw:
            return RawResponse(output, resp)
        return output

    def _wait_for_completion(self, resp: httpx.Response) -> httpx.Response:
        """Poll a long-running operation started by ``resp`` until it finishes."""

        async_url = resp.headers.get("Azure-AsyncOperation")
        location = resp.headers.get("Location")
        status_url = async_url or location
        if not status_url:
            return resp

        def get_status() -> httpx.Response:
            return self.http.get(status_url)

        def is_done(status: httpx.Response) -> bool:
            if async_url:
                state = str(self._parse_response_dict(status).get("status") or "")
                return state.lower() in _TERMINAL_STATES
            return status.status_code != 202

        def log_status(status: httpx.Response) -> None:
            logger.debug("Polled %s -> %s", status_url, status.status_code)

        final = poll_until(
            get_status,
            is_done,
            interval=self._poll_interval,
            timeout=self._poll_timeout,
            on_update=log_status,
        )
        if async_url:
            payload = self._parse_response_dict(final)
            state = str(payload.get("status") or "")
            if state.lower() != "succeeded":
                raise HttpError(
                    final.status_code,
                    f"Long-running operation finished with status {state}",
                    details=payload.get("error"),
                )
        return final

    def _create_or_update(
        self,
        path: str,
        body: dict[str, Any],
        model_cls: type[ModelType],
        *,
        headers: dict[str, str] | None = None,
        expected: Iterable[int] = (200, 201, 202),
    ) -> tuple[ModelType, httpx.Response]:
        resp = self._send("PUT", path, expected=expected, body=body, headers=headers)
        if resp.status_code == 202 or "Azure-AsyncOperation" in resp.headers:
            self._wait_for_completion(resp)
            resp = self._send("GET", path, expected=(200,))
        return self._deserialize(model_cls, resp), resp

    def _delete(self, path: str, *, headers: dict[str, str] | None = None) -> httpx.Response:
        resp = self._send("DELETE", path, expected=(200, 202, 204), headers=headers)
        if resp.status_code == 202:
            return self._wait_for_completion(resp)
        return resp

    def _iter_pages(
        self,
        path: str,
        list_cls: type[ResourceModel],
        *,
        params: dict[str, Any] | None = None,
    ) -> Iterator[Any]:
        resp = self._send("GET", path, expected=(200,), params=params)
        while True:
            page = self._deserialize(list_cls, resp)
            yield from getattr(page, "value", None) or []
            next_link = getattr(page, "next_link", None)
            if not next_link:
                return
            resp = self.http.get(next_link)


class OperationGroup:
    """Operations sharing the transport and settings of one client."""

    def __init__(self, client: ManagementClient) -> None:
        self._client = client


__all__ = [
    "DEFAULT_BASE_URL",
    "ManagementClient",
    "OperationGroup",
    "RawResponse",
    "require",
]
