#!/usr/bin/env python3
"""
errandctl - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules
3. Runs the errand and maps its outcome to the process exit code

All decision logic is in the modules, following black box principles.
"""

import logging
import os
import sys
from typing import Any, Dict, Optional

import click

from errandctl import __version__
from errandctl.config.provider import ConfigProvider, EnvConfigProvider, YamlConfigProvider
from errandctl.logging_config import configure_logging

# Import modules through their black box interfaces
from errandctl.modules.api import ErrandInvocation
from errandctl.modules.director import DirectorDeployment, DirectorError, create_http_client
from errandctl.modules.downloader import BlobDownloader, DownloadError
from errandctl.modules.errand import ErrandError, ErrandRunner
from errandctl.modules.ui import ConsoleUI

logger = logging.getLogger("errandctl")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def get_config_provider(
    config_path: Optional[str], overrides: Dict[str, Any]
) -> ConfigProvider:
    """Pick the configuration provider for the given options."""
    if config_path:
        return YamlConfigProvider(config_path, overrides=overrides)
    return EnvConfigProvider(overrides=overrides)


@click.group()
@click.version_option(__version__, prog_name="errandctl")
@click.option("--director", "director_url", default=None, help="Director URL")
@click.option("--deployment", "-d", "deployment", default=None, help="Deployment name")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML config file",
)
@click.option(
    "--log-level",
    "log_level",
    default="WARNING",
    envvar="LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
@click.pass_context
def cli(
    ctx: click.Context,
    director_url: Optional[str],
    deployment: Optional[str],
    config_path: Optional[str],
    log_level: str,
):
    """Run errands on a director deployment."""
    configure_logging(log_level)
    ctx.obj = get_config_provider(
        config_path, {"director_url": director_url, "deployment": deployment}
    )


@cli.command("run-errand")
@click.argument("name")
@click.option("--keep-alive", is_flag=True, help="Keep errand instances running afterwards")
@click.option("--download-logs", is_flag=True, help="Download logs after a successful run")
@click.option(
    "--logs-dir",
    "logs_dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Destination directory for logs (default: current directory)",
)
@click.pass_obj
def run_errand(
    config_provider: ConfigProvider,
    name: str,
    keep_alive: bool,
    download_logs: bool,
    logs_dir: Optional[str],
):
    """Run errand NAME and show its output."""
    ui = ConsoleUI()

    try:
        config = config_provider.get_director_config()
        invocation = ErrandInvocation(
            name=name,
            keep_alive=keep_alive,
            download_logs=download_logs,
            logs_directory=logs_dir or os.getcwd(),
        )

        with create_http_client(config) as http_client:
            runner = ErrandRunner(
                DirectorDeployment(config, http_client=http_client),
                BlobDownloader(config, ui, http_client=http_client),
                ui,
            )
            runner.run(invocation)

    except (ErrandError, DirectorError, DownloadError, ValueError) as e:
        logger.debug(f"Errand run ended with {type(e).__name__}")
        ui.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        ui.error(f"Unexpected error: {e}")
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
