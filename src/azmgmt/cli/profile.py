"""Commands for inspecting and mutating stored azmgmt profiles."""

from __future__ import annotations

from typing import Any

import typer
from rich import print

from ..config import ConfigStore, Profile
from .common import handle_cli_errors

app = typer.Typer(help="Profiles & configuration")


MASK_PLACEHOLDER = "<hidden>"
SENSITIVE_KEYS = frozenset({"access_token"})


@app.command("add")
@handle_cli_errors
def profile_add(
    name: str = typer.Argument(..., help="Profile name"),
    tenant_id: str | None = typer.Option(None, help="Azure AD tenant ID"),
    client_id: str | None = typer.Option(None, help="App registration client ID"),
    subscription_id: str | None = typer.Option(None, help="Default subscription ID"),
    client_secret_env: str | None = typer.Option(
        None, help="Environment variable holding the client secret"
    ),
    default_location: str | None = typer.Option(None, help="Default Azure region"),
    set_default: bool = typer.Option(False, "--set-default", help="Make this the default profile"),
) -> None:
    """Create or replace a profile."""

    store = ConfigStore()
    cfg = store.add_or_update_profile(
        Profile(
            name=name,
            tenant_id=tenant_id,
            client_id=client_id,
            subscription_id=subscription_id,
            client_secret_env=client_secret_env,
            default_location=default_location,
        ),
        set_default=set_default,
    )
    suffix = " (default)" if cfg.default_profile == name else ""
    print(f"Saved profile {name}{suffix}")


@app.command("list")
@handle_cli_errors
def profile_list() -> None:
    """Show all saved profiles, highlighting the default profile."""

    cfg = ConfigStore().load()
    for name in sorted(cfg.profiles):
        star = "*" if cfg.default_profile == name else " "
        print(f"{star} {name}")


@app.command("show")
@handle_cli_errors
def profile_show(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Display the stored configuration for a profile."""

    cfg = ConfigStore().load()
    profile = cfg.profiles.get(name)
    if not profile:
        raise typer.BadParameter(f"Profile '{name}' not found")
    print(_mask_sensitive_fields(dict(vars(profile))))


@app.command("use")
@handle_cli_errors
def profile_use(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Set the default profile."""

    try:
        ConfigStore().set_default_profile(name)
    except KeyError:
        raise typer.BadParameter(f"Profile '{name}' not found") from None
    print(f"Default profile set to {name}")


@app.command("delete")
@handle_cli_errors
def profile_delete(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Remove a profile."""

    ConfigStore().delete_profile(name)
    print(f"Deleted profile {name}")


def _mask_sensitive_fields(data: dict[str, Any]) -> dict[str, Any]:
    masked = dict(data)
    for key in masked:
        if key in SENSITIVE_KEYS and masked[key] not in (None, ""):
            masked[key] = MASK_PLACEHOLDER
    return masked


__all__ = [
    "app",
    "profile_add",
    "profile_delete",
    "profile_list",
    "profile_show",
    "profile_use",
]
