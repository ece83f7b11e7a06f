"""Command line entry point for node-maintain."""

from __future__ import annotations

import logging

import click
from rich.console import Console

from nodemaint import __version__
from nodemaint.app import NodeMaintainApp
from nodemaint.controllers.cluster import ClusterController, SetupError
from nodemaint.controllers.maintenance import MaintenanceExecutor
from nodemaint.models.state.app_settings import AppSettings
from nodemaint.models.state.config_manager import ConfigLoadError, ConfigManager

console = Console(highlight=False)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(log_file: str | None, level: str) -> None:
    """Send package logs to ``log_file``; the terminal belongs to the UI."""
    if not log_file:
        logging.getLogger("nodemaint").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_settings(
    config_path: str | None,
    *,
    kubeconfig: str | None = None,
    context: str | None = None,
    request_timeout: int | None = None,
    drain_timeout: int | None = None,
) -> AppSettings:
    """Load the settings file and apply command line overrides.

    Raises:
        click.ClickException: the settings file is unreadable or invalid.
    """
    try:
        settings = ConfigManager.load(config_path)
    except ConfigLoadError as e:
        raise click.ClickException(str(e)) from e

    overrides: dict[str, object] = {}
    if kubeconfig:
        overrides["kubeconfig"] = kubeconfig
    if context:
        overrides["context"] = context
    if request_timeout is not None:
        overrides["request_timeout_seconds"] = request_timeout
    if drain_timeout is not None:
        overrides["drain_timeout_seconds"] = drain_timeout
    if not overrides:
        return settings
    return AppSettings.model_validate({**settings.model_dump(), **overrides})


@click.command(name="node-maintain")
@click.version_option(version=__version__)
@click.option("--kubeconfig", default=None, help="Path to the kubeconfig file")
@click.option("--context", default=None, help="Kubernetes context to use")
@click.option(
    "--config",
    "config_path",
    default=None,
    help="Settings file (default: $NODE_MAINTAIN_CONFIG or ~/.config/node-maintain/settings.yaml)",
)
@click.option(
    "--request-timeout",
    type=click.IntRange(min=1),
    default=None,
    help="Timeout in seconds for each cluster request",
)
@click.option(
    "--drain-timeout",
    type=click.IntRange(min=1),
    default=None,
    help="Timeout in seconds for a node drain",
)
@click.option("--log-file", default=None, help="Write logs to this file")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Log level for --log-file",
)
@click.pass_context
def main(
    ctx: click.Context,
    kubeconfig: str | None,
    context: str | None,
    config_path: str | None,
    request_timeout: int | None,
    drain_timeout: int | None,
    log_file: str | None,
    log_level: str,
) -> None:
    """Cordon, drain and clean up a Kubernetes node interactively."""
    configure_logging(log_file, log_level)
    settings = load_settings(
        config_path,
        kubeconfig=kubeconfig,
        context=context,
        request_timeout=request_timeout,
        drain_timeout=drain_timeout,
    )

    controller = ClusterController(
        context=settings.context or None,
        kubeconfig=settings.kubeconfig or None,
        request_timeout_seconds=settings.request_timeout_seconds,
    )
    try:
        active_context = controller.verify_setup()
    except SetupError as e:
        raise click.ClickException(str(e)) from e

    executor = MaintenanceExecutor(controller.run_kubectl, controller, settings)
    app = NodeMaintainApp(controller, executor, settings=settings, context=active_context)
    output = app.run(mouse=True)

    for line in output or []:
        console.print(line, markup=False)
    if app.session_error:
        ctx.exit(1)
