# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from dataclasses_json import dataclass_json

from ._filetype import FileType, LinkType


@dataclass_json
@dataclass(frozen=True)
class SymlinkNode:
    """One hop of a chain.

    Attributes:
        path (str): Normalized absolute path of this hop.
        link_type (LinkType): How this node was reached from the previous one.
        file_type (FileType): What was found at ``path``.
        target (Optional[str]): The next path to follow; None when this node is terminal.
    """

    path: str
    link_type: LinkType
    file_type: FileType
    target: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.target is None


@dataclass_json
@dataclass(frozen=True)
class SymlinkChain:
    """Ordered, immutable record of every hop from a starting path to its terminal artifact."""

    nodes: Tuple[SymlinkNode, ...]

    def __post_init__(self):
        # tuples keep the chain immutable even if a list was passed in
        object.__setattr__(self, "nodes", tuple(self.nodes))
        self._check_invariants()

    @classmethod
    def partial(cls, nodes: Iterable[SymlinkNode]) -> "SymlinkChain":
        """Build a chain from an interrupted walk, skipping the terminal-node checks.

        Used to attach the hops made before a cycle was found to the error.
        """
        chain = object.__new__(cls)
        object.__setattr__(chain, "nodes", tuple(nodes))
        return chain

    def _check_invariants(self) -> None:
        if not self.nodes:
            raise ValueError("a chain must contain at least one node")
        if self.nodes[0].link_type is not LinkType.ORIGIN:
            raise ValueError("the first node of a chain must be the origin")
        seen = set()
        for idx, node in enumerate(self.nodes):
            if idx > 0 and node.link_type is LinkType.ORIGIN:
                raise ValueError(f"origin node found at position {idx}")
            is_last = idx == len(self.nodes) - 1
            if is_last != node.is_terminal:
                raise ValueError(f"only the last node may lack a target (position {idx})")
            if node.path in seen:
                raise ValueError(f"path {node.path!r} appears more than once")
            seen.add(node.path)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[SymlinkNode]:
        return iter(self.nodes)

    def __getitem__(self, idx: int) -> SymlinkNode:
        return self.nodes[idx]

    @property
    def origin(self) -> str:
        return self.nodes[0].path

    @property
    def terminal(self) -> SymlinkNode:
        return self.nodes[-1]
