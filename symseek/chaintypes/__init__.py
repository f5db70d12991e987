# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from ._chain import SymlinkChain, SymlinkNode
from ._filetype import FileKind, FileType, LinkType

__all__ = [
    "FileKind",
    "FileType",
    "LinkType",
    "SymlinkChain",
    "SymlinkNode",
]
