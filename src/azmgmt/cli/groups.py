from __future__ import annotations

import typer
from rich import print

from ..clients.resources import ResourceManagementClient
from ..models.resources import ResourceGroup
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Manage resource groups.")


@app.command("list")
@handle_cli_errors
def list_groups(
    ctx: typer.Context,
    top: int | None = typer.Option(None, help="Maximum number of groups to return."),
) -> None:
    """List resource groups in the subscription."""

    with build_client(ctx, ResourceManagementClient) as client:
        groups = client.resource_groups.list(top=top)
    for group in groups:
        state = group.provisioning_state or "-"
        print(f"[bold]{group.name}[/bold]  {group.location}  {state}")


@app.command("create")
@handle_cli_errors
def create_group(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Resource group name."),
    location: str = typer.Option(..., "--location", "-l", help="Azure region."),
    tag: list[str] = typer.Option([], "--tag", help="Tag as key=value; may be repeated."),
) -> None:
    """Create or update a resource group."""

    tags: dict[str, str] = {}
    for item in tag:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Tag '{item}' must look like key=value")
        tags[key] = value
    group = ResourceGroup(location=location)
    if tags:
        group.tags = tags
    with build_client(ctx, ResourceManagementClient) as client:
        created = client.resource_groups.create_or_update(name, group)
    print(f"[green]Resource group ready[/green] {created.name} ({created.provisioning_state})")


@app.command("delete")
@handle_cli_errors
def delete_group(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Resource group name."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a resource group and everything it contains."""

    if not yes:
        typer.confirm(f"Delete resource group '{name}' and all of its resources?", abort=True)
    with build_client(ctx, ResourceManagementClient) as client:
        client.resource_groups.delete(name)
    print(f"[green]Deleted resource group[/green] {name}")
