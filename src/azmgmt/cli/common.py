from __future__ import annotations

import json
import os
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import typer
from rich.console import Console

from ..clients._base import ManagementClient
from ..config import ACCESS_TOKEN_ENV, ConfigData, ConfigStore, EncryptedConfigError, resolve_subscription_id
from ..errors import AuthError, AzmgmtError, HttpError, ValidationError

console = Console()

ClientType = TypeVar("ClientType", bound=ManagementClient)


def _render_http_error(exc: HttpError) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    details = getattr(exc, "details", None)
    if details:
        snippet = details
        if isinstance(details, dict):
            snippet = json.dumps(details, indent=2)
        console.print(str(snippet))


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except (typer.BadParameter, typer.Exit, typer.Abort):
            raise
        except HttpError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except ValidationError as exc:
            console.print(f"[red]Error:[/red] Invalid argument: {exc}")
            raise typer.Exit(1) from None
        except EncryptedConfigError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            console.print("Export AZMGMT_CONFIG_ENCRYPTION_KEY with the original key before rerunning.")
            raise typer.Exit(1) from None
        except AuthError as exc:
            console.print(f"[red]Error:[/red] Authentication failed: {exc}")
            raise typer.Exit(1) from None
        except AzmgmtError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv("AZMGMT_DEBUG"):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            console.print("Set AZMGMT_DEBUG=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


TokenGetter = Callable[[], str]


def resolve_token_getter(config: ConfigData | None = None) -> TokenGetter:
    """Resolve a callable that returns an ARM access token.

    Resolution order is:

    1. ``AZMGMT_ACCESS_TOKEN`` in the environment.
    2. The cached token of the default profile.
    3. :class:`AzureADTokenProvider` built from the default profile.
    """

    token = os.getenv(ACCESS_TOKEN_ENV)
    if token:
        return lambda: os.getenv(ACCESS_TOKEN_ENV) or token

    cfg = config or ConfigStore().load()
    profile = cfg.active_profile
    if profile is None:
        raise typer.BadParameter(f"No {ACCESS_TOKEN_ENV} and no default profile configured.")
    if profile.access_token:
        cached = profile.access_token
        return lambda: cached
    if not profile.tenant_id or not profile.client_id:
        raise typer.BadParameter(
            "Profile is missing tenant_id or client_id; run `azmgmt profile add` to fix."
        )

    from ..auth.azure_ad import AzureADTokenProvider

    client_secret = os.getenv(profile.client_secret_env) if profile.client_secret_env else None
    return AzureADTokenProvider(
        tenant_id=profile.tenant_id,
        client_id=profile.client_id,
        scopes=profile.effective_scopes,
        client_secret=client_secret,
    )


def _context_data(ctx: typer.Context) -> dict[str, Any]:
    return cast(dict[str, Any], ctx.ensure_object(dict))


def get_token_getter(ctx: typer.Context) -> TokenGetter:
    data = _context_data(ctx)
    token_getter = data.get("token_getter")
    if not callable(token_getter):
        token_getter = resolve_token_getter()
        data["token_getter"] = token_getter
    return cast(TokenGetter, token_getter)


def get_subscription_id(ctx: typer.Context) -> str:
    data = _context_data(ctx)
    subscription_id = resolve_subscription_id(data.get("subscription_id"))
    if not subscription_id:
        raise typer.BadParameter(
            "Subscription is not configured. Pass --subscription-id or export AZURE_SUBSCRIPTION_ID."
        )
    return subscription_id


def build_client(ctx: typer.Context, client_cls: type[ClientType], **kwargs: Any) -> ClientType:
    """Instantiate ``client_cls`` with the token, subscription and transport from ``ctx``."""

    data = _context_data(ctx)
    return client_cls(
        get_token_getter(ctx),
        get_subscription_id(ctx),
        transport=data.get("transport"),
        **kwargs,
    )


__all__ = [
    "TokenGetter",
    "build_client",
    "console",
    "get_subscription_id",
    "get_token_getter",
    "handle_cli_errors",
    "resolve_token_getter",
]
