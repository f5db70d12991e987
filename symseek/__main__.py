# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import importlib.metadata
import sys

import click
from loguru import logger

from symseek.cmd.config import config
from symseek.cmd.plugin import plugin_disable_cmd, plugin_enable_cmd, plugin_list_cmd
from symseek.cmd.trace import trace
from symseek.configmanager import ConfigManager


def _default_log_level() -> str:
    return str(ConfigManager().get_setting("core", "log_level")).upper()


@click.group()
@click.version_option(
    importlib.metadata.version("symseek"),
    "--version",
    "-v",
    message="%(version)s",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        case_sensitive=False,
    ),
    default=_default_log_level,
    help="Logging level for messages written to stderr. (Default: core.log_level setting)",
)
def main(log_level="WARNING"):
    # Can't change the logging level; need to remove and add a new logger with the desired log level
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper())


@click.command("version")
def version():
    """Print version information."""
    click.echo(importlib.metadata.version("symseek"))
    sys.exit(0)


@main.group("plugin")
def plugin():
    """Manage plugins."""


# Main Commands
main.add_command(trace)
main.add_command(version)
main.add_command(config)
main.add_command(plugin)

# Plugin Subcommands
plugin.add_command(plugin_list_cmd)
plugin.add_command(plugin_enable_cmd)
plugin.add_command(plugin_disable_cmd)


if __name__ == "__main__":
    main()
