# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import stat
from typing import List, Optional

from loguru import logger

import symseek.plugin
from symseek.chaintypes import FileType
from symseek.errors import DetectionError
from symseek.utils.paths import basename_posix

SNIFF_SIZE = 512
ELF_MAGIC = b"\x7fELF"
SHEBANG = b"#!"

_SHELLS = {"sh", "ash", "bash", "dash", "zsh", "ksh", "mksh", "csh", "tcsh", "fish", "nu"}


def _interpreter_program(tokens: List[str]) -> str:
    """Name of the program that will actually run a script; looks through `env`."""
    program = basename_posix(tokens[0])
    if program == "env":
        for arg in tokens[1:]:
            # skip options like -S and variable assignments like FOO=bar
            if arg.startswith("-") or "=" in arg:
                continue
            return basename_posix(arg)
        return ""
    return program


def script_kind(shebang_line: str) -> str:
    """Sort a shebang line (without the leading '#!') into an interpreter family."""
    tokens = shebang_line.split()
    if not tokens:
        return "other"
    program = _interpreter_program(tokens)
    if program in _SHELLS:
        return "shell"
    if program.startswith("python"):
        return "python"
    if program.startswith("perl"):
        return "perl"
    return "other"


def classify_bytes(data: bytes) -> FileType:
    """Classify the leading bytes of a file. The first matching rule wins: ELF magic,
    then a shebang line, then UTF-8 text; anything else (including no data at all) is
    binary."""
    if data[:4] == ELF_MAGIC:
        return FileType.elf()
    if data[:2] == SHEBANG:
        first_line = data[2:].split(b"\n", 1)[0]
        # the line may be cut off by the sniff size, so decode leniently
        line = first_line.decode("utf-8", errors="replace").strip()
        interpreter = line.split(maxsplit=1)[0] if line else ""
        return FileType.script(interpreter, script_kind(line))
    if not data:
        return FileType.binary()
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return FileType.binary()
    return FileType.text()


def detect_file_type(filepath: str) -> FileType:
    """Classify the file at filepath without following it if it is a symlink.

    Raises:
        DetectionError: The file could not be inspected at all (missing, permission denied,
            a directory, or an I/O error). ``missing`` is set when the path does not exist.
    """
    logger.trace(f"[filetype] detecting {filepath}")
    try:
        st = os.lstat(filepath)
        if stat.S_ISLNK(st.st_mode):
            return FileType.symlink()
        # opening a FIFO or device could block or have side effects
        if not stat.S_ISREG(st.st_mode):
            raise DetectionError(str(filepath), "not a regular file")
        with open(filepath, "rb") as f:
            data = f.read(SNIFF_SIZE)
    except FileNotFoundError as e:
        raise DetectionError(str(filepath), e.strerror or str(e), missing=True) from e
    except OSError as e:
        raise DetectionError(str(filepath), e.strerror or str(e)) from e
    file_type = classify_bytes(data)
    logger.trace(f"[filetype] {filepath} read {len(data)} bytes → {file_type.describe()}")
    return file_type


@symseek.plugin.hookimpl
def identify_file_type(filepath: str) -> Optional[FileType]:
    return detect_file_type(filepath)
