# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dataclasses_json import dataclass_json


class LinkType(Enum):
    """How a node was reached from the node before it."""

    ORIGIN = "origin"
    SYMLINK = "symlink"
    WRAPPER = "wrapper"


class FileKind(Enum):
    SYMLINK = "symlink"
    ELF = "elf"
    SCRIPT = "script"
    TEXT = "text"
    BINARY = "binary"
    MISSING = "missing"
    UNKNOWN = "unknown"


@dataclass_json
@dataclass(frozen=True)
class FileType:
    """Classification of the content found at a path.

    ``interpreter`` and ``script_kind`` are only set for ``FileKind.SCRIPT``. The interpreter is
    the first token of the shebang line, and ``script_kind`` is the interpreter family
    ("shell", "python", "perl", or "other").
    """

    kind: FileKind
    interpreter: Optional[str] = None
    script_kind: Optional[str] = None

    @classmethod
    def symlink(cls) -> "FileType":
        return cls(FileKind.SYMLINK)

    @classmethod
    def elf(cls) -> "FileType":
        return cls(FileKind.ELF)

    @classmethod
    def script(cls, interpreter: str, script_kind: str = "other") -> "FileType":
        return cls(FileKind.SCRIPT, interpreter, script_kind)

    @classmethod
    def text(cls) -> "FileType":
        return cls(FileKind.TEXT)

    @classmethod
    def binary(cls) -> "FileType":
        return cls(FileKind.BINARY)

    @classmethod
    def missing(cls) -> "FileType":
        return cls(FileKind.MISSING)

    @classmethod
    def unknown(cls) -> "FileType":
        return cls(FileKind.UNKNOWN)

    @property
    def is_script(self) -> bool:
        return self.kind is FileKind.SCRIPT

    @property
    def has_content(self) -> bool:
        """True for kinds that were classified from the file's own bytes."""
        return self.kind in (FileKind.ELF, FileKind.SCRIPT, FileKind.TEXT, FileKind.BINARY)

    def describe(self) -> str:
        if self.kind is FileKind.SCRIPT:
            return f"script: {self.interpreter}" if self.interpreter else "script"
        return self.kind.value
