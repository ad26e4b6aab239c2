from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from types import TracebackType
from typing import Any

import httpx

from .errors import HttpError

logger = logging.getLogger(__name__)


class HttpClient:
    """Thin httpx wrapper that injects identification/auth headers and maps errors."""

    def __init__(
        self,
        base_url: str,
        token_getter: Callable[[], str] | None = None,
        default_headers: dict[str, str] | None = None,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token_getter = token_getter
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._default_headers = default_headers or {}

    def _auth_header(self) -> dict[str, str]:
        if not self._token_getter:
            return {}
        token = self._token_getter()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        allowed_statuses: Iterable[int] = (),
    ) -> httpx.Response:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}/{path.lstrip('/')}"
        merged_headers = {
            "x-ms-client-request-id": str(uuid.uuid4()),
            **self._default_headers,
            **(headers or {}),
            **self._auth_header(),
        }
        request_kwargs: dict[str, Any] = {"params": params, "headers": merged_headers}
        if json is not None:
            request_kwargs["json"] = json
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            raise HttpError(0, f"Transport error: {e}") from e

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        if resp.status_code >= 400 and resp.status_code not in allowed_statuses:
            try:
                detail = resp.json()
            except ValueError:
                detail = resp.text
            raise HttpError(resp.status_code, resp.reason_phrase, details=detail)
        return resp

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def head(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("HEAD", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client`."""

        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
