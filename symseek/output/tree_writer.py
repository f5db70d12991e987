# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import List, Optional, TextIO, Union

import symseek.plugin
from symseek.chaintypes import SymlinkChain, SymlinkNode
from symseek.errors import CycleDetectedError, SymseekError

BRANCH = "├"
LAST = "└"
CONNECTOR = "─"


def _annotation(node: SymlinkNode) -> str:
    # symlink and wrapper hops must stay distinguishable; terminal nodes add what was found
    parts = [node.link_type.value]
    if node.is_terminal:
        parts.append(node.file_type.describe())
    return ", ".join(parts)


def format_tree(chain: SymlinkChain) -> List[str]:
    """Lines of a tree drawing for a chain: the origin, then one branch per hop.

    /usr/bin/foo
    └─ /nix/store/abc123-foo-1.0/bin/foo  [symlink, elf]
    """
    if len(chain) == 1:
        return [f"{chain.origin}  [{chain.terminal.file_type.describe()}]"]
    lines = [chain.origin]
    hops = chain.nodes[1:]
    for idx, node in enumerate(hops):
        prefix = LAST if idx == len(hops) - 1 else BRANCH
        lines.append(f"{prefix}{CONNECTOR} {node.path}  [{_annotation(node)}]")
    return lines


def format_cycle(err: CycleDetectedError) -> List[str]:
    """The hops made before the cycle, ending with the path that was reached again."""
    lines = [f"cycle detected at {err.path}"]
    nodes = err.chain.nodes
    if nodes:
        lines.append(nodes[0].path)
        for node in nodes[1:]:
            lines.append(f"{BRANCH}{CONNECTOR} {node.path}  [{node.link_type.value}]")
    lines.append(f"{LAST}{CONNECTOR} {err.path}  [cycle]")
    return lines


def write_tree(chain: SymlinkChain, outfile: TextIO) -> None:
    outfile.write("\n".join(format_tree(chain)) + "\n")


def write_header(count: int, outfile: TextIO) -> None:
    outfile.write(f"Found {count} matches in PATH\n\n")


def write_error(err: SymseekError, outfile: TextIO) -> None:
    if isinstance(err, CycleDetectedError):
        lines = format_cycle(err)
    else:
        lines = [f"error: {err}"]
    outfile.write("\n".join(lines) + "\n")


@symseek.plugin.hookimpl
def write_chains(
    chains: List[Union[SymlinkChain, SymseekError]], outfile: TextIO, output_format: str
) -> Optional[bool]:
    if output_format != short_name():
        return None
    for idx, entry in enumerate(chains):
        if idx > 0:
            outfile.write("\n")
        if isinstance(entry, SymlinkChain):
            write_tree(entry, outfile)
        else:
            write_error(entry, outfile)
    return True


@symseek.plugin.hookimpl
def short_name() -> Optional[str]:
    return "tree"
