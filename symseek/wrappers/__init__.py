# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
"""Detection of generated launchers that name their real program inside their own content.

Package managers such as Nix install wrapper scripts (and small compiled launchers) that set
up an environment and then exec the real program from the package store. No filesystem link
connects the two, so the wrapped program is recovered by scanning the wrapper's bytes.

The gates and the bounded read live here; the scanning itself is done by `detect_wrapper`
hook implementations (see `make_c_wrapper` and `store_path`).
"""
import os
from dataclasses import dataclass
from typing import Optional

import pluggy
from loguru import logger

from symseek.chaintypes import FileKind, FileType
from symseek.utils.paths import (
    basename_posix,
    normalize_program_name,
    posix_normpath,
    programs_match,
)
from symseek.utils.strings import searchable_text

STORE_ROOT = "/nix/store/"
MAX_WRAPPER_SIZE = 1024 * 1024


@dataclass(frozen=True)
class WrapperMatch:
    """The program a wrapper launches.

    Attributes:
        target (str): Normalized absolute path of the wrapped program.
        program_name (str): Normalized program name of the target.
        names_match (bool): Whether the wrapper and its target share a normalized program name.
    """

    target: str
    program_name: str
    names_match: bool


def is_store_path(filepath: str) -> bool:
    """Only files somewhere under a package store root can be wrappers found by path scanning."""
    return STORE_ROOT in str(filepath)


def is_wrapper_candidate(filepath: str, file_type: FileType) -> bool:
    """Scripts and ELF launchers can be wrappers anywhere; other files only inside a store."""
    if not file_type.has_content:
        return False
    if file_type.is_script or file_type.kind is FileKind.ELF:
        return True
    return is_store_path(filepath)


def read_searchable_text(filepath: str) -> Optional[str]:
    """Read a wrapper candidate and return text that can be scanned for paths.

    Files of MAX_WRAPPER_SIZE bytes or more are not read at all. Returns None if the file is
    too large or cannot be read; wrapper detection never fails a trace.
    """
    try:
        with open(filepath, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            if size >= MAX_WRAPPER_SIZE:
                logger.debug(f"[wrapper] {filepath} is {size} bytes; too large to be a wrapper")
                return None
            data = f.read(MAX_WRAPPER_SIZE)
    except OSError as e:
        logger.debug(f"[wrapper] could not read {filepath}: {e}")
        return None
    return searchable_text(data)


def detect_wrapper(
    filepath: str, file_type: FileType, pm: Optional[pluggy.PluginManager] = None
) -> Optional[WrapperMatch]:
    """Decide whether filepath is a wrapper and, if so, which program it wraps.

    Args:
        filepath (str): Normalized absolute path of the candidate.
        file_type (FileType): Classification of the candidate's content.
        pm (Optional[pluggy.PluginManager]): Plugin manager providing `detect_wrapper` hooks.

    Returns:
        Optional[WrapperMatch]: The wrapped program, or None if this is not a wrapper.
    """
    filepath = posix_normpath(filepath)
    if not is_wrapper_candidate(filepath, file_type):
        return None
    if pm is None:
        # pylint: disable-next=import-outside-toplevel
        from symseek.plugin.manager import get_plugin_manager

        pm = get_plugin_manager()

    content = read_searchable_text(filepath)
    if content is None:
        return None

    try:
        target = pm.hook.detect_wrapper(filepath=filepath, content=content, file_type=file_type)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning(f"[wrapper] detector failed on {filepath}: {e}")
        return None
    if not target:
        return None

    if not os.path.isabs(target):
        logger.debug(f"[wrapper] ignoring relative target {target} in {filepath}")
        return None
    target = posix_normpath(target)
    if target == filepath:
        return None
    logger.debug(f"[wrapper] {filepath} wraps {target}")
    return WrapperMatch(
        target=target,
        program_name=normalize_program_name(basename_posix(target)),
        names_match=programs_match(filepath, target),
    )
