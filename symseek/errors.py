# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from symseek.chaintypes import SymlinkChain


class SymseekError(Exception):
    """Base class for all errors raised by symseek."""


class InvalidInputError(SymseekError):
    """The caller-supplied starting path is relative, missing, or unreadable."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid input {path!r}: {reason}")


class CycleDetectedError(SymseekError):
    """A path reappeared while walking a chain.

    Attributes:
        path (str): The path that was seen twice.
        chain (SymlinkChain): Every node appended before the cycle was found, for diagnostics.
    """

    def __init__(self, path: str, chain: "SymlinkChain"):
        self.path = path
        self.chain = chain
        super().__init__(f"Cycle detected in chain at {path!r}")


class DetectionError(SymseekError):
    """The content of a file could not be inspected at all.

    This is distinct from a file that was read and found to be opaque binary data.
    """

    def __init__(self, path: str, reason: str, missing: bool = False):
        self.path = path
        self.reason = reason
        self.missing = missing
        super().__init__(f"Failed to inspect {path!r}: {reason}")


class NotFoundError(SymseekError):
    def __init__(self, name: str, searched_locations: List[str]):
        self.name = name
        self.searched_locations = searched_locations
        super().__init__(f"File '{name}' not found in {', '.join(searched_locations)}")
