from __future__ import annotations

from typing import cast

import typer
from rich import print

from ..clients.batch import DEFAULT_API_VERSION, BatchManagementClient
from ..models.batch import (
    ActivateApplicationPackageParameters,
    AddApplicationParameters,
    Application,
    ApplicationPackage,
    UpdateApplicationParameters,
)
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Manage Batch account applications.")
apps_app = typer.Typer(help="Manage applications.")
app.add_typer(apps_app, name="app")
packages_app = typer.Typer(help="Manage application packages.")
app.add_typer(packages_app, name="pkg")

RESOURCE_GROUP_OPTION = typer.Option(..., "--resource-group", "-g", help="Resource group name.")
ACCOUNT_OPTION = typer.Option(..., "--account", "-a", help="Batch account name.")


@app.callback()
def set_api_version(
    ctx: typer.Context,
    api_version: str = typer.Option(DEFAULT_API_VERSION, help="Batch management API version."),
) -> None:
    ctx.ensure_object(dict)["batch_api_version"] = api_version


def _client(ctx: typer.Context) -> BatchManagementClient:
    api_version = cast(str, ctx.ensure_object(dict).get("batch_api_version", DEFAULT_API_VERSION))
    return build_client(ctx, BatchManagementClient, api_version=api_version)


def _render_package_line(package: ApplicationPackage) -> str:
    parts = [f"[bold]{package.version or '<unknown>'}[/bold]"]
    if package.state is not None:
        parts.append(f"state={getattr(package.state, 'value', package.state)}")
    if package.format:
        parts.append(f"format={package.format}")
    if package.last_activation_time:
        parts.append(f"activated={package.last_activation_time.isoformat()}")
    return "  ".join(parts)


def _render_application(application: Application) -> None:
    name = application.display_name or application.id or "<unknown>"
    parts = [f"[bold]{name}[/bold]", f"id={application.id}"]
    if application.default_version:
        parts.append(f"default={application.default_version}")
    if application.allow_updates is not None:
        parts.append(f"allowUpdates={str(application.allow_updates).lower()}")
    print("  ".join(parts))
    for package in application.packages or []:
        print(f"  {_render_package_line(package)}")


@apps_app.command("list")
@handle_cli_errors
def list_applications(
    ctx: typer.Context,
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
    maxresults: int | None = typer.Option(None, help="Maximum number of applications per page."),
) -> None:
    """List applications and their packages."""

    with _client(ctx) as client:
        applications = client.application.list(resource_group, account, maxresults=maxresults)
    if not applications:
        print("No applications found.")
    for application in applications:
        _render_application(application)


@apps_app.command("show")
@handle_cli_errors
def show_application(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
) -> None:
    """Show one application."""

    with _client(ctx) as client:
        application = client.application.get_application(resource_group, account, application_id)
    _render_application(application)


@apps_app.command("create")
@handle_cli_errors
def create_application(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
    display_name: str | None = typer.Option(None, help="Display name."),
    allow_updates: bool | None = typer.Option(
        None, "--allow-updates/--no-allow-updates", help="Allow packages to be overwritten."
    ),
) -> None:
    """Register a new application."""

    values: dict[str, object] = {}
    if display_name is not None:
        values["display_name"] = display_name
    if allow_updates is not None:
        values["allow_updates"] = allow_updates
    with _client(ctx) as client:
        client.application.add_application(
            resource_group, account, application_id, AddApplicationParameters(**values)
        )
    print(f"[green]Created application[/green] {application_id}")


@apps_app.command("update")
@handle_cli_errors
def update_application(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
    display_name: str | None = typer.Option(None, help="New display name."),
    default_version: str | None = typer.Option(None, help="Package version used by default."),
    allow_updates: bool | None = typer.Option(
        None, "--allow-updates/--no-allow-updates", help="Allow packages to be overwritten."
    ),
) -> None:
    """Update application settings; only the given options are sent."""

    values: dict[str, object] = {}
    if display_name is not None:
        values["display_name"] = display_name
    if default_version is not None:
        values["default_version"] = default_version
    if allow_updates is not None:
        values["allow_updates"] = allow_updates
    if not values:
        raise typer.BadParameter("Provide at least one setting to update.")
    with _client(ctx) as client:
        client.application.update_application(
            resource_group, account, application_id, UpdateApplicationParameters(**values)
        )
    print(f"[green]Updated application[/green] {application_id}")


@apps_app.command("delete")
@handle_cli_errors
def delete_application(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
) -> None:
    """Delete an application."""

    with _client(ctx) as client:
        client.application.delete_application(resource_group, account, application_id)
    print(f"[green]Deleted application[/green] {application_id}")


@packages_app.command("add")
@handle_cli_errors
def add_package(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    version: str = typer.Argument(..., help="Package version."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
) -> None:
    """Create a package version and print its upload URL."""

    with _client(ctx) as client:
        package = client.application.add_application_package(
            resource_group, account, application_id, version
        )
    print(f"[green]Created package[/green] {application_id}/{package.version or version}")
    if package.storage_url:
        print(f"storageUrl={package.storage_url}")
    if package.storage_url_expiry:
        print(f"expires={package.storage_url_expiry.isoformat()}")


@packages_app.command("show")
@handle_cli_errors
def show_package(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    version: str = typer.Argument(..., help="Package version."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
) -> None:
    """Show one package version."""

    with _client(ctx) as client:
        package = client.application.get_application_package(
            resource_group, account, application_id, version
        )
    print(_render_package_line(package))


@packages_app.command("activate")
@handle_cli_errors
def activate_package(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    version: str = typer.Argument(..., help="Package version."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
    package_format: str = typer.Option("zip", "--format", help="Format of the uploaded package."),
) -> None:
    """Activate an uploaded package."""

    with _client(ctx) as client:
        client.application.activate_application_package(
            resource_group,
            account,
            application_id,
            version,
            ActivateApplicationPackageParameters(format=package_format),
        )
    print(f"[green]Activated package[/green] {application_id}/{version}")


@packages_app.command("delete")
@handle_cli_errors
def delete_package(
    ctx: typer.Context,
    application_id: str = typer.Argument(..., help="Application identifier."),
    version: str = typer.Argument(..., help="Package version."),
    resource_group: str = RESOURCE_GROUP_OPTION,
    account: str = ACCOUNT_OPTION,
) -> None:
    """Delete a package version."""

    with _client(ctx) as client:
        client.application.delete_application_package(
            resource_group, account, application_id, version
        )
    print(f"[green]Deleted package[/green] {application_id}/{version}")
