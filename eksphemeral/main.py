"""Command-line entry point using Typer.

Without a subcommand the terminal UI starts; the subcommands talk to the
control plane directly and print with rich.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from eksphemeral import __version__
from eksphemeral.constants.values import PROVISIONING_MESSAGE
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.controllers.control_plane.exceptions import ControlPlaneError
from eksphemeral.models.core.cluster_info import ClusterDetail, ClusterSpec
from eksphemeral.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)
from eksphemeral.screens.cluster.presenter import ClusterPresenter
from eksphemeral.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(
    name="eksphemeral-ui",
    help="Manage ephemeral EKS clusters through the EKSphemeral control plane.",
    add_completion=False,
    no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


class CliState:
    """Options shared by all subcommands."""

    def __init__(self) -> None:
        self.settings = AppSettings()
        self.settings_path: Path | None = None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"eksphemeral-ui version {__version__}")
        raise typer.Exit()


def _load_settings(config: Path | None, url: str | None) -> AppSettings:
    try:
        settings = ConfigManager.load(config)
    except ConfigLoadError as e:
        err_console.print(f"[yellow]{e}[/yellow]")
        settings = AppSettings()
    if url:
        settings = settings.model_copy(update={"control_plane_url": url.rstrip("/")})
    return settings


def _build_client(settings: AppSettings) -> ControlPlaneClient:
    return ControlPlaneClient(
        settings.control_plane_url,
        timeout=settings.request_timeout_seconds,
    )


def _run(ctx: typer.Context, call: Callable[[ControlPlaneClient], Awaitable[T]]) -> T:
    """Run one control plane call, mapping failures to exit code 1."""
    state: CliState = ctx.obj

    async def _main() -> T:
        async with _build_client(state.settings) as client:
            return await call(client)

    try:
        return asyncio.run(_main())
    except ControlPlaneError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        envvar="EKSPHEMERAL_URL",
        help="Control plane base URL.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file (YAML).",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Write logs to this file.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """EKSphemeral - ephemeral EKS clusters from the terminal."""
    configure_logging(
        log_file=log_file,
        verbose=verbose,
        interactive=ctx.invoked_subcommand is None,
    )
    state = CliState()
    state.settings_path = config
    state.settings = _load_settings(config, url)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        from eksphemeral.app import EphemeralClustersApp

        logger.info(f"Starting TUI against {state.settings.control_plane_url}")
        EphemeralClustersApp(settings=state.settings, settings_path=config).run()


@app.command("list")
def list_clusters(ctx: typer.Context) -> None:
    """List all active clusters."""

    async def _collect(client: ControlPlaneClient) -> list[ClusterDetail]:
        ids = await client.list_clusters()
        details: list[ClusterDetail] = []
        for cluster_id in ids:
            try:
                details.append(await client.get_detail(cluster_id))
            except ControlPlaneError as e:
                logger.warning(f"Skipping {cluster_id}: {e}")
        return details

    details = _run(ctx, _collect)
    if not details:
        console.print("No clusters found")
        return

    table = Table(show_header=True, header_style="bold")
    for column in ("NAME", "ID", "KUBERNETES", "NUM WORKERS", "TIMEOUT", "TTL", "OWNER"):
        table.add_column(column)
    for detail in details:
        table.add_row(
            detail.name,
            detail.id,
            f"v{detail.kube_version}",
            str(detail.num_workers),
            f"{detail.timeout_minutes} min",
            f"{detail.ttl_minutes_remaining} min",
            detail.owner,
        )
    console.print(table)


@app.command("show")
def show_cluster(
    ctx: typer.Context,
    cluster_id: str = typer.Argument(..., metavar="ID", help="Cluster ID."),
) -> None:
    """Show the details of one cluster."""
    detail = _run(ctx, lambda client: client.get_detail(cluster_id))
    state: CliState = ctx.obj
    presenter = ClusterPresenter(console_link_template=state.settings.console_link_template)
    console.print(f"ID: {detail.id or cluster_id}")
    console.print(presenter.format_detail(detail))


@app.command("create")
def create_cluster(
    ctx: typer.Context,
    spec_file: Path = typer.Argument(..., metavar="SPEC_FILE", help="JSON cluster spec."),
) -> None:
    """Create a cluster from a JSON cluster-spec file."""
    try:
        raw = json.loads(spec_file.read_text(encoding="utf-8"))
        spec = ClusterSpec.from_form(raw) if isinstance(raw, dict) else None
    except (OSError, ValueError, ValidationError) as e:
        err_console.print(f"[red]Cannot use cluster spec {spec_file}: {e}[/red]")
        raise typer.Exit(code=2) from e
    if spec is None:
        err_console.print(f"[red]Cluster spec {spec_file} must be a JSON object[/red]")
        raise typer.Exit(code=2)

    cluster_id = _run(ctx, lambda client: client.create_cluster(spec))
    console.print(PROVISIONING_MESSAGE.format(cluster_id=cluster_id))


@app.command("prolong")
def prolong_cluster(
    ctx: typer.Context,
    cluster_id: str = typer.Argument(..., metavar="ID", help="Cluster ID."),
    minutes: int = typer.Argument(..., metavar="MINUTES", min=1, help="Minutes to add."),
) -> None:
    """Extend a cluster's lifetime."""
    ack = _run(ctx, lambda client: client.prolong_cluster(cluster_id, minutes))
    console.print(ack, markup=False)


@app.command("config")
def config_command(
    ctx: typer.Context,
    cluster_id: str = typer.Argument(..., metavar="ID", help="Cluster ID."),
) -> None:
    """Print the command that points kubectl at a cluster."""
    command = _run(ctx, lambda client: client.get_config_command(cluster_id))
    console.print(command, soft_wrap=True, markup=False)


@app.command("init-config")
def init_config(
    ctx: typer.Context,
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing settings file.",
    ),
) -> None:
    """Write the effective settings to the settings file."""
    state: CliState = ctx.obj
    target = state.settings_path or ConfigManager.default_path()
    if target.exists() and not force:
        err_console.print(
            f"[red]Settings file {target} already exists (use --force to overwrite)[/red]"
        )
        raise typer.Exit(code=1)
    try:
        written = ConfigManager.save(state.settings, target)
    except ConfigSaveError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    logger.info(f"Wrote settings to {written}")
    console.print(f"Settings written to {written}")


if __name__ == "__main__":
    app()
