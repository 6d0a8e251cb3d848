"""Command-line entry point for ktx."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from textual.logging import TextualHandler

from ktx import __version__
from ktx.app import KtxApp
from ktx.controllers.kubeconfig.store import KubeconfigStore
from ktx.errors import ConfigLoadError
from ktx.models.state.config_manager import (
    AppSettings,
    ConfigManager,
    SettingsLoadError,
)
from ktx.runtime.core import KtxCore

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    help="Browse, switch, test and import kubeconfig contexts.",
    add_completion=False,
)


def configure_logging(settings: AppSettings) -> None:
    """Send log records to the settings' log file, or to the Textual devtools console."""
    handler: logging.Handler
    if settings.log_file:
        handler = logging.FileHandler(Path(settings.log_file).expanduser(), encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = TextualHandler()
    root = logging.getLogger("ktx")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())


def load_settings() -> AppSettings:
    """Load settings, falling back to defaults when the file is invalid."""
    try:
        return ConfigManager.load()
    except SettingsLoadError as e:
        typer.echo(f"Warning: {e}; using default settings", err=True)
        return AppSettings()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ktx {__version__}")
        raise typer.Exit()


@app.command()
def main(
    kubeconfig: Optional[Path] = typer.Option(
        None,
        "--kubeconfig",
        "-c",
        help="Kubeconfig file to edit (default: ~/.kube/config).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Interactive kubeconfig context dashboard."""
    settings = load_settings()
    configure_logging(settings)

    store = KubeconfigStore(kubeconfig or settings.kubeconfig_path)
    try:
        configuration = store.load_sync()
    except ConfigLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    core = KtxCore.build(store, configuration, settings)
    KtxApp(core, settings).run()


def run() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    run()
