"""Serve command: run the HTTP API."""

from pathlib import Path
from typing import Optional

import typer

from papertime.observability.logging import configure_logging
from papertime.services.config_manager import ConfigManager, DEFAULT_CONFIG_PATH
from papertime.cli.utils import handle_errors, display_error, display_info


@handle_errors
def serve_command(
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_PATH), "--config", "-c", help="Config file"
    ),
    papers_path: Optional[Path] = typer.Option(
        None, "--papers", help="Papers JSON (overrides settings.papers_path)"
    ),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Bind host"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
):
    """Start the recommendation API server."""
    from papertime.api.server import run_server

    config = ConfigManager(config_path=str(config_path)).load_or_default()

    overrides = {}
    if papers_path is not None:
        overrides["papers_path"] = str(papers_path)
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if overrides:
        config = config.model_copy(
            update={"settings": config.settings.model_copy(update=overrides)}
        )

    if not config.settings.papers_path:
        display_error("No papers file: pass --papers or set settings.papers_path")
        raise typer.Exit(code=1)

    configure_logging(level=config.settings.log_level, json_output=config.settings.json_logs)
    display_info(
        f"Starting PaperTime API at http://{config.settings.host}:{config.settings.port}"
    )
    run_server(config)
