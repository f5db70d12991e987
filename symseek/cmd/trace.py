# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import sys
from typing import Optional

import click
from loguru import logger

from symseek.chaintypes import SymlinkChain
from symseek.configmanager import ConfigManager
from symseek.errors import InvalidInputError, NotFoundError
from symseek.output import tree_writer
from symseek.plugin.manager import get_plugin_manager, output_format_names
from symseek.resolver import resolve_many
from symseek.search import PathEnvironment, find_file, first_match


@click.command("trace")
@click.argument("name", required=True)
@click.option(
    "--format",
    "output_format",
    default=None,
    help="Output format, e.g. 'tree' or 'json'. (Default: trace.output_format setting)",
)
@click.option(
    "--all/--first",
    "all_matches",
    default=None,
    help="Trace every match found in PATH, or only the one a shell would run.",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.option(
    "--output",
    "outfile",
    type=click.File("w"),
    default="-",
    help="File to write the trace to. (Default: stdout)",
)
def trace(
    name: str, output_format: Optional[str], all_matches: Optional[bool], verbose: bool, outfile
):
    """Trace NAME through every symlink and wrapper to the file that finally runs.

    NAME may be a path, or a program name to look up in PATH.
    """
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")

    config_manager = ConfigManager()
    if output_format is None:
        output_format = config_manager.get_setting("trace", "output_format")
    if all_matches is None:
        all_matches = bool(config_manager.get_setting("trace", "all_matches"))

    pm = get_plugin_manager()
    available_formats = output_format_names(pm)
    if output_format not in available_formats:
        raise click.UsageError(
            f"Unknown output format '{output_format}'. Choose from: {', '.join(available_formats)}"
        )

    try:
        location = find_file(name)
    except (NotFoundError, InvalidInputError) as e:
        logger.debug(f"[trace] search failed: {e}")
        pm.hook.write_chains(chains=[e], outfile=outfile, output_format=output_format)
        sys.exit(1)

    paths = location.paths if all_matches else [first_match(location)]
    results = resolve_many(paths, pm)

    if output_format == "tree" and isinstance(location, PathEnvironment) and len(paths) > 1:
        tree_writer.write_header(len(paths), outfile)
    entries = [result for _, result in results]
    pm.hook.write_chains(chains=entries, outfile=outfile, output_format=output_format)

    if not all(isinstance(entry, SymlinkChain) for entry in entries):
        sys.exit(1)
