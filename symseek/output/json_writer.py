# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import json
from typing import Any, Dict, List, Optional, TextIO, Union

import symseek.plugin
from symseek.chaintypes import SymlinkChain
from symseek.errors import CycleDetectedError, InvalidInputError, NotFoundError, SymseekError


def chain_to_dict(chain: SymlinkChain) -> Dict[str, Any]:
    # to_json handles enums at any depth; to_dict would leave them as Enum members
    return {"origin": chain.origin, "links": json.loads(chain.to_json())["nodes"]}


def error_to_dict(err: SymseekError) -> Dict[str, Any]:
    if isinstance(err, CycleDetectedError):
        entry = chain_to_dict(err.chain)
        entry["error"] = {"kind": "cycle", "path": err.path, "message": str(err)}
        return entry
    if isinstance(err, InvalidInputError):
        return {"origin": err.path, "error": {"kind": "invalid_input", "message": str(err)}}
    if isinstance(err, NotFoundError):
        return {"origin": err.name, "error": {"kind": "not_found", "message": str(err)}}
    return {"origin": None, "error": {"kind": "error", "message": str(err)}}


def to_json_entries(chains: List[Union[SymlinkChain, SymseekError]]) -> List[Dict[str, Any]]:
    return [
        chain_to_dict(entry) if isinstance(entry, SymlinkChain) else error_to_dict(entry)
        for entry in chains
    ]


def write_json(chains: List[Union[SymlinkChain, SymseekError]], outfile: TextIO) -> None:
    entries = to_json_entries(chains)
    # a single trace is written as an object, several as an array
    document: Any = entries[0] if len(entries) == 1 else entries
    outfile.write(json.dumps(document, indent=2))
    outfile.write("\n")


@symseek.plugin.hookimpl
def write_chains(
    chains: List[Union[SymlinkChain, SymseekError]], outfile: TextIO, output_format: str
) -> Optional[bool]:
    if output_format != short_name():
        return None
    write_json(chains, outfile)
    return True


@symseek.plugin.hookimpl
def short_name() -> Optional[str]:
    return "json"
