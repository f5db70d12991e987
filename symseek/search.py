# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from loguru import logger

from symseek.errors import InvalidInputError, NotFoundError


@dataclass(frozen=True)
class CurrentDirectory:
    """The name contained a path separator and was found relative to the working directory."""

    path: str

    @property
    def paths(self) -> List[str]:
        return [self.path]


@dataclass(frozen=True)
class PathEnvironment:
    """The name was found in one or more PATH directories, in PATH order."""

    paths: Tuple[str, ...]


FileLocation = Union[CurrentDirectory, PathEnvironment]


def first_match(location: FileLocation) -> str:
    """The path a shell would run for this location."""
    return location.paths[0]


def find_file(
    name: str, cwd: Optional[str] = None, path_env: Optional[str] = None
) -> FileLocation:
    """
    Find where a name given on the command line lives.

    A name containing a path separator is treated as a path relative to cwd (absolute paths
    are kept as they are). Any other name is looked up in every PATH directory, the way a
    shell would, except that all matches are returned rather than just the first.

    Args:
        name (str): File path or program name.
        cwd (Optional[str]): Directory relative paths are taken from. Defaults to os.getcwd().
        path_env (Optional[str]): PATH-style directory list. Defaults to the PATH environment
            variable.

    Returns:
        FileLocation: Where the name was found.

    Raises:
        NotFoundError: The name does not exist in any searched location.
        InvalidInputError: The name is empty, or PATH is needed but not set.
    """
    logger.debug(f"[search] looking for {name!r}")
    if not name:
        raise InvalidInputError(name, "no file name given")
    base = cwd if cwd is not None else os.getcwd()

    if os.sep in name:
        candidate = os.path.join(base, name)
        # lexists so a broken symlink can still be traced
        if os.path.lexists(candidate):
            logger.debug(f"[search] found {candidate}")
            return CurrentDirectory(os.path.abspath(candidate))
        raise NotFoundError(name, ["current directory"])

    if path_env is None:
        path_env = os.environ.get("PATH")
        if path_env is None:
            raise InvalidInputError(name, "PATH environment variable not set")

    found: List[str] = []
    for directory in path_env.split(os.pathsep):
        # an empty PATH entry means the current directory
        full_path = os.path.abspath(os.path.join(base, directory, name))
        logger.trace(f"[search] checking {full_path}")
        if os.path.lexists(full_path) and full_path not in found:
            found.append(full_path)

    if not found:
        raise NotFoundError(name, ["PATH"])
    logger.debug(f"[search] found {len(found)} match(es) in PATH")
    return PathEnvironment(tuple(found))
