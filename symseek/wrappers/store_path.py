# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import re
from typing import Iterator, List, Optional, Tuple

from loguru import logger

import symseek.plugin
from symseek.chaintypes import FileType
from symseek.utils.paths import programs_match
from symseek.wrappers import STORE_ROOT, is_store_path

# A store root, then a "<hash>-<name>" entry, then any further path components. NUL ends a
# path like whitespace does, since binary launchers embed paths as C strings.
_SEGMENT = r"[^/\s\x00]+"
STORE_PATH_REGEX = re.compile(re.escape(STORE_ROOT) + f"[a-z0-9]+-{_SEGMENT}(?:/{_SEGMENT})*")

# quoting and shell syntax that the path pattern can swallow at the end of a match
_TRAILING_CHARS = "\"'$;)"
# characters that end the directory written in front of a store root
_PREFIX_DELIMITERS = "\"'`:;=,()"


def _store_relative(path: str) -> str:
    """The part of path from the store root on, e.g. /nix/store/abc-foo/bin/foo."""
    idx = path.find(STORE_ROOT)
    return path[idx:] if idx >= 0 else path


def _directory_prefix(content: str, start: int) -> str:
    """Absolute directory written directly in front of the store root at content[start], or ''.

    Stores relocated under another root (e.g. /home/user/.local/share/nix/root/nix/store/...)
    are referenced with that root in front of the store path.
    """
    idx = start
    while idx > 0:
        char = content[idx - 1]
        if char.isspace() or not char.isprintable() or char in _PREFIX_DELIMITERS:
            break
        idx -= 1
    prefix = content[idx:start]
    slash = prefix.find("/")
    return prefix[slash:] if slash >= 0 else ""


def _store_matches(content: str) -> Iterator[Tuple[str, str]]:
    for match in STORE_PATH_REGEX.finditer(content):
        yield match.group(0).rstrip(_TRAILING_CHARS), _directory_prefix(content, match.start())


def find_store_paths(content: str, own_path: Optional[str] = None) -> List[str]:
    """Every store path referenced in content, in order of first appearance.

    References to own_path are left out; a wrapper never wraps itself.
    """
    own = _store_relative(own_path) if own_path else None
    found = []
    for path, _prefix in _store_matches(content):
        if path == own or path in found:
            continue
        found.append(path)
    return found


def store_path_candidates(content: str, own_path: Optional[str] = None) -> List[str]:
    """Filesystem paths to check for each store path in content, in order of first appearance.

    A store path written under another directory is tried with that directory first, then as
    a plain store path.
    """
    own = _store_relative(own_path) if own_path else None
    candidates = []
    for path, prefix in _store_matches(content):
        if path == own:
            continue
        for candidate in (prefix + path, path) if prefix else (path,):
            if candidate != own_path and candidate not in candidates:
                candidates.append(candidate)
    return candidates


@symseek.plugin.hookimpl
def detect_wrapper(filepath: str, content: str, file_type: FileType) -> Optional[str]:
    """The wrapped program is the first store path in the content that exists and has the
    same program name as the wrapper, e.g. /nix/store/...-foo/bin/foo wrapping
    /nix/store/...-foo-unwrapped/bin/.foo-wrapped."""
    if not is_store_path(filepath):
        return None
    for candidate in store_path_candidates(content, own_path=filepath):
        names_match = programs_match(filepath, candidate)
        logger.trace(f"[wrapper][store] {filepath}: {candidate} names_match={names_match}")
        if names_match and os.path.exists(candidate):
            logger.debug(f"[wrapper][store] {filepath} → {candidate} ({file_type.describe()})")
            return candidate
    return None
