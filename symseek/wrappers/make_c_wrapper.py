# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import re
from typing import Optional

from loguru import logger

import symseek.plugin
from symseek.chaintypes import FileKind, FileType
from symseek.wrappers import STORE_ROOT

# nixpkgs' makeBinaryWrapper records the command that generated the launcher, e.g.
#   makeCWrapper '/nix/store/...-quickshell-0.2.1/bin/qs' \
#     --prefix PATH : ...
MAKE_C_WRAPPER_REGEX = re.compile(r"makeCWrapper\s+'([^']+)'")


@symseek.plugin.hookimpl(tryfirst=True)
def detect_wrapper(filepath: str, content: str, file_type: FileType) -> Optional[str]:
    if file_type.kind not in (FileKind.SCRIPT, FileKind.ELF):
        return None
    if "makeCWrapper" not in content:
        return None

    # join backslash-newline continuations before matching
    normalized = content.replace("\\\n", "")
    match = MAKE_C_WRAPPER_REGEX.search(normalized)
    if match is None:
        logger.debug(f"[wrapper][makeCWrapper] {filepath} mentions makeCWrapper but has no target")
        return None

    candidate = match.group(1)
    # only store paths are accepted as targets
    if STORE_ROOT not in candidate:
        logger.debug(f"[wrapper][makeCWrapper] {filepath}: {candidate} is not a store path")
        return None
    if candidate == filepath:
        return None
    logger.debug(f"[wrapper][makeCWrapper] {filepath} → {candidate}")
    return candidate
