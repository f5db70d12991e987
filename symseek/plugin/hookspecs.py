# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import List, Optional, TextIO, Union

from pluggy import HookspecMarker

from symseek.chaintypes import FileType, SymlinkChain
from symseek.errors import SymseekError

hookspec = HookspecMarker("symseek")


@hookspec(firstresult=True)
def identify_file_type(filepath: str) -> Optional[FileType]:
    """Determine the type of file located at filepath. The built-in implementation sniffs magic
    bytes and shebang lines; a plugin marked `tryfirst` can take over for formats it knows
    better. Return `None` to defer to the next implementation.

    Args:
        filepath (str): The path to the file to determine the type of.

    Returns:
        Optional[FileType]: The classification of the file, or None to defer.
    """


@hookspec(firstresult=True)
def detect_wrapper(filepath: str, content: str, file_type: FileType) -> Optional[str]:
    """Decide whether the file at filepath is a generated wrapper, and if so, return the path
    of the program it wraps. The first implementation to return a path wins, so detectors that
    recognize an exact wrapper format should be marked `tryfirst`.

    Args:
        filepath (str): Normalized absolute path of the candidate wrapper.
        content (str): Searchable text of the file; decoded UTF-8, or the printable strings
            embedded in a binary file. Never larger than the wrapper size limit.
        file_type (FileType): Classification of the candidate from `identify_file_type`.

    Returns:
        Optional[str]: The absolute path of the wrapped program, or None if this detector does
        not recognize the file as a wrapper.
    """


@hookspec(firstresult=True)
def write_chains(
    chains: List[Union[SymlinkChain, SymseekError]], outfile: TextIO, output_format: str
) -> Optional[bool]:
    """Write resolved chains (or the errors that stopped them) to outfile. Implementations should
    return `None` unless `output_format` matches their `short_name`.

    Args:
        chains (List[Union[SymlinkChain, SymseekError]]): One entry per traced starting path.
        outfile (TextIO): Open file handle to write to.
        output_format (str): The short name of the requested output format.

    Returns:
        Optional[bool]: True once the output has been written.
    """


@hookspec
def short_name() -> Optional[str]:
    """A short name to register the hook as.

    Returns:
        Optional[str]: The name to register the hook with.
    """
