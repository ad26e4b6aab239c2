from __future__ import annotations

import logging
from collections.abc import Iterable
from importlib import import_module
from typing import Any, Protocol, cast

from ..config import MANAGEMENT_SCOPE
from ..errors import AuthError
from .base import TokenProvider

logger = logging.getLogger(__name__)


class _ConfidentialClient(Protocol):
    def acquire_token_for_client(self, *, scopes: Iterable[str]) -> dict[str, Any]: ...


class _PublicClient(Protocol):
    def get_accounts(self) -> list[dict[str, Any]]: ...

    def acquire_token_silent(
        self, scopes: Iterable[str], *, account: dict[str, Any]
    ) -> dict[str, Any] | None: ...

    def initiate_device_flow(self, scopes: Iterable[str]) -> dict[str, Any]: ...

    def acquire_token_by_device_flow(self, flow: dict[str, Any]) -> dict[str, Any]: ...


class _MsalModule(Protocol):
    ConfidentialClientApplication: Any
    PublicClientApplication: Any


def _load_msal() -> _MsalModule | None:
    try:
        module = import_module("msal")
    except ImportError:  # pragma: no cover - optional dependency not installed
        return None
    return cast(_MsalModule, module)


msal = _load_msal()


class AzureADTokenProvider(TokenProvider):
    """MSAL-based provider for client-credential or device-code sign-in to ARM."""

    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        scopes: Iterable[str] = (MANAGEMENT_SCOPE,),
        client_secret: str | None = None,
        authority_host: str = "https://login.microsoftonline.com",
    ) -> None:
        if msal is None:
            raise AuthError("msal is not installed. Install azmgmt[auth] to enable Azure AD auth.")
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.scopes = list(scopes)
        self.client_secret = client_secret
        self.authority = f"{authority_host.rstrip('/')}/{tenant_id}"
        self._public_app: _PublicClient | None = None

    def get_token(self) -> str:
        msal_module = cast(_MsalModule, msal)
        token_result: dict[str, Any] | None
        if self.client_secret:
            app: _ConfidentialClient = msal_module.ConfidentialClientApplication(
                client_id=self.client_id,
                client_credential=self.client_secret,
                authority=self.authority,
            )
            token_result = app.acquire_token_for_client(scopes=self.scopes)
        else:
            if self._public_app is None:
                self._public_app = msal_module.PublicClientApplication(
                    self.client_id, authority=self.authority
                )
            token_result = self._acquire_user_token(self._public_app)
        if not token_result or "access_token" not in token_result:
            error = (token_result or {}).get("error_description") or token_result
            raise AuthError(f"Failed to acquire token: {error}")
        return str(token_result["access_token"])

    def _acquire_user_token(self, app: _PublicClient) -> dict[str, Any] | None:
        accounts = app.get_accounts()
        if accounts:
            silent_result = app.acquire_token_silent(self.scopes, account=accounts[0])
            if silent_result and "access_token" in silent_result:
                logger.debug("Acquired token silently via cached account")
                return silent_result

        logger.info("Falling back to device code flow for Azure AD token acquisition")
        flow = app.initiate_device_flow(scopes=self.scopes)
        if "user_code" not in flow:
            raise AuthError(f"Failed to start device code flow: {flow}")
        print(flow["message"])
        return app.acquire_token_by_device_flow(flow)
