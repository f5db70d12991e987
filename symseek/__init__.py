# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import importlib.metadata

from .chaintypes import FileKind, FileType, LinkType, SymlinkChain, SymlinkNode
from .errors import (
    CycleDetectedError,
    DetectionError,
    InvalidInputError,
    NotFoundError,
    SymseekError,
)

try:
    __version__ = importlib.metadata.version("symseek")
except importlib.metadata.PackageNotFoundError:
    __version__ = ""

__all__ = [
    "FileKind",
    "FileType",
    "LinkType",
    "SymlinkChain",
    "SymlinkNode",
    "SymseekError",
    "InvalidInputError",
    "CycleDetectedError",
    "DetectionError",
    "NotFoundError",
]
