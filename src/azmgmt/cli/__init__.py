from __future__ import annotations

import logging

import typer

from . import batch, groups, profile

app = typer.Typer(help="Azure resource-manager CLI")


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("batch", batch.app)
_register_sub_app("group", groups.app)
_register_sub_app("profile", profile.app)


@app.callback()
def common(
    ctx: typer.Context,
    subscription_id: str | None = typer.Option(
        None, "--subscription-id", "-s", help="Subscription to operate on."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP traffic to stderr."),
) -> None:
    """Initialize shared Typer context state."""

    ctx.ensure_object(dict)
    ctx.obj.setdefault("token_getter", None)
    if subscription_id:
        ctx.obj["subscription_id"] = subscription_id
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


__all__ = ["app", "batch", "groups", "profile"]
