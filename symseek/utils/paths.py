import os
import pathlib
from typing import Union

WRAPPED_SUFFIX = "-wrapped"
UNWRAPPED_SUFFIX = "-unwrapped"


def normalize_path(*path_parts: Union[str, pathlib.PurePosixPath]) -> str:
    """
    Normalize one or more path parts into a single POSIX-style path string.

    Args:
        *path_parts: One or more path components, strings or PurePath objects.

    Returns:
        str: POSIX-style joined path with redundant separators collapsed. '.' and '..'
        components are left alone; see posix_normpath for that.
    """
    cleaned_parts = [os.fspath(p) for p in path_parts]
    return pathlib.PurePosixPath(*cleaned_parts).as_posix()


def posix_normpath(path: Union[str, pathlib.PurePath]) -> str:
    """Lexically normalize a path: collapse separators, drop '.' components, and let each '..'
    remove the component before it. Symlinks are not consulted, so a/b/../c becomes a/c even
    when a/b is a link elsewhere; the resolver only calls this on link targets it has already
    read. A '..' at the root stays at the root."""
    posix_path = pathlib.PurePosixPath(normalize_path(path))

    # PurePosixPath.parts is a tuple, so we can't modify it in-place
    parts = list(posix_path.parts)
    i = 0
    while i < len(parts):
        if parts[i] == "..":
            del parts[i]
            if i > 0:
                if i > 1 or parts[0] not in ("//", "/"):
                    del parts[i - 1]
                    i -= 1
        else:
            i += 1
    return pathlib.PurePosixPath(*parts).as_posix() if parts else "."


def basename_posix(path: Union[str, pathlib.PurePath]) -> str:
    """
    Return the POSIX-style basename of a path. Never raises for string inputs.
    Strips trailing slash for non-root paths so 'dir/' -> 'dir'.
    """
    s = normalize_path(path)
    if s and s != "/":
        s = s.rstrip("/")
    return pathlib.PurePosixPath(s).name


def normalize_program_name(name: str) -> str:
    """Reduce a program file name to the name wrappers and their targets share.

    Each step is applied at most once, in order: a leading '.' (nixpkgs hides wrapped programs
    as '.foo-wrapped'), a trailing file extension, then a trailing '-wrapped' or '-unwrapped'.

    >>> normalize_program_name(".nvim-wrapped")
    'nvim'
    >>> normalize_program_name("foo.sh")
    'foo'
    """
    result = name
    if result.startswith("."):
        result = result[1:]
    result = os.path.splitext(result)[0]
    if result.endswith(UNWRAPPED_SUFFIX):
        result = result[: -len(UNWRAPPED_SUFFIX)]
    elif result.endswith(WRAPPED_SUFFIX):
        result = result[: -len(WRAPPED_SUFFIX)]
    return result


def programs_match(
    current: Union[str, pathlib.PurePath], candidate: Union[str, pathlib.PurePath]
) -> bool:
    """True when both paths name the same program after normalization."""
    current_name = normalize_program_name(basename_posix(current))
    candidate_name = normalize_program_name(basename_posix(candidate))
    return bool(current_name) and current_name == candidate_name
