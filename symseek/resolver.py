# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import posixpath
import stat
from typing import Iterable, List, Optional, Set, Tuple, Union

import pluggy
from loguru import logger

from symseek.chaintypes import FileType, LinkType, SymlinkChain, SymlinkNode
from symseek.errors import CycleDetectedError, DetectionError, InvalidInputError, SymseekError
from symseek.filetypeid.id_magic import detect_file_type
from symseek.plugin.manager import get_plugin_manager
from symseek.utils.paths import posix_normpath
from symseek.wrappers import detect_wrapper


def resolve_target(link_path: str, link_target: str) -> str:
    """Turn the raw contents of a symlink into a normalized absolute path. Relative targets are
    resolved against the directory containing the link.

    Example:
        resolve_target("/usr/bin/link", "../lib/target") == "/usr/lib/target"
    """
    if not posixpath.isabs(link_target):
        link_target = posixpath.join(posixpath.dirname(link_path), link_target)
    return posix_normpath(link_target)


def _stop_node(
    nodes: List[SymlinkNode], path: str, reached_by: LinkType, err: Union[OSError, DetectionError]
) -> SymlinkNode:
    """Terminal node for a path that could not be inspected. The starting path is the caller's
    input, so failing to inspect it is an error rather than a result."""
    missing = isinstance(err, FileNotFoundError) or getattr(err, "missing", False)
    if not nodes:
        reason = "does not exist" if missing else str(err)
        raise InvalidInputError(path, reason) from err
    logger.debug(f"[resolve] stopping at {path}: {err}")
    return SymlinkNode(
        path=path,
        link_type=reached_by,
        file_type=FileType.missing() if missing else FileType.unknown(),
    )


def _identify(pm: pluggy.PluginManager, path: str) -> FileType:
    file_type = pm.hook.identify_file_type(filepath=path)
    if file_type is None:
        # every identify_file_type plugin deferred (or the built-in one is disabled)
        file_type = detect_file_type(path)
    return file_type


def resolve(
    path: Union[str, os.PathLike], pm: Optional[pluggy.PluginManager] = None
) -> SymlinkChain:
    """
    Follow a path through every symlink and wrapper until a file that points nowhere else.

    Args:
        path (Union[str, os.PathLike]): Absolute path to start from. Finding a bare program
            name on PATH is the job of `symseek.search`.
        pm (Optional[pluggy.PluginManager]): Plugin manager supplying file type and wrapper
            detection hooks. A new one is created if not given.

    Returns:
        SymlinkChain: One node per hop. The first node is the origin, and the last node is the
        terminal artifact; a broken link ends in a node with a `missing` file type.

    Raises:
        InvalidInputError: The path is relative, or the starting path cannot be inspected.
        CycleDetectedError: A path was reached twice. The hops made so far are attached.
    """
    start = os.fspath(path)
    if not posixpath.isabs(start):
        raise InvalidInputError(start, "path must be absolute")
    current = posix_normpath(start)
    if pm is None:
        pm = get_plugin_manager()

    nodes: List[SymlinkNode] = []
    visited: Set[str] = set()
    reached_by = LinkType.ORIGIN
    logger.debug(f"[resolve] starting at {current}")

    while True:
        if current in visited:
            logger.debug(f"[resolve] cycle detected at {current}")
            raise CycleDetectedError(current, SymlinkChain.partial(nodes))
        visited.add(current)
        logger.trace(f"[resolve] hop {len(nodes)}: {current}")

        try:
            st = os.lstat(current)
            link_target = os.readlink(current) if stat.S_ISLNK(st.st_mode) else None
        except OSError as e:
            nodes.append(_stop_node(nodes, current, reached_by, e))
            break

        if link_target is not None:
            next_path = resolve_target(current, link_target)
            logger.debug(f"[resolve] symlink {current} → {next_path}")
            nodes.append(SymlinkNode(current, reached_by, FileType.symlink(), next_path))
            current, reached_by = next_path, LinkType.SYMLINK
            continue

        try:
            file_type = _identify(pm, current)
        except DetectionError as e:
            nodes.append(_stop_node(nodes, current, reached_by, e))
            break

        match = detect_wrapper(current, file_type, pm)
        if match is not None:
            nodes.append(SymlinkNode(current, reached_by, file_type, match.target))
            current, reached_by = match.target, LinkType.WRAPPER
            continue

        logger.trace(f"[resolve] terminal node {current}: {file_type.describe()}")
        nodes.append(SymlinkNode(current, reached_by, file_type))
        break

    logger.debug(f"[resolve] resolution complete: {len(nodes)} node(s) in chain")
    return SymlinkChain(tuple(nodes))


def resolve_many(
    paths: Iterable[Union[str, os.PathLike]], pm: Optional[pluggy.PluginManager] = None
) -> List[Tuple[str, Union[SymlinkChain, SymseekError]]]:
    """Resolve several starting paths independently. A path that cannot be resolved does not
    stop the others; its error is returned in place of a chain."""
    if pm is None:
        pm = get_plugin_manager()
    results: List[Tuple[str, Union[SymlinkChain, SymseekError]]] = []
    for path in paths:
        try:
            results.append((os.fspath(path), resolve(path, pm)))
        except (InvalidInputError, CycleDetectedError) as e:
            logger.info(f"[resolve] {path}: {e}")
            results.append((os.fspath(path), e))
    return results
