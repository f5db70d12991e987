# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import json
import os

import pytest
from click.testing import CliRunner

from symseek.cmd.trace import trace
from symseek.configmanager import ConfigManager


@pytest.fixture(name="wrapped_tool")
def fixture_wrapped_tool(tmp_path, store, make_executable, make_elf, symlink):
    """bin/tool -> store wrapper script -> store ELF binary"""
    target = make_elf(store / "abc123-tool-1.0" / "bin" / ".tool-wrapped")
    wrapper = make_executable(
        store / "xyz-tool-1.0" / "bin" / "tool", f'#!/bin/sh\nexec "{target}" "$@"\n'.encode()
    )
    link = symlink(tmp_path / "bin" / "tool", wrapper)
    return link, wrapper, target


def test_trace_path(wrapped_tool):
    link, wrapper, target = wrapped_tool
    result = CliRunner().invoke(trace, [link])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        link,
        f"├─ {wrapper}  [symlink]",
        f"└─ {target}  [wrapper, elf]",
    ]


def test_trace_json(wrapped_tool):
    link, _, target = wrapped_tool
    result = CliRunner().invoke(trace, [link, "--format", "json"])
    assert result.exit_code == 0
    document = json.loads(result.stdout)
    assert document["origin"] == link
    assert document["links"][-1]["path"] == target


def test_trace_format_from_config(wrapped_tool):
    link, _, _ = wrapped_tool
    ConfigManager().set("trace", "output_format", "json")
    result = CliRunner().invoke(trace, [link])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["origin"] == link


def test_trace_output_file(wrapped_tool, tmp_path):
    link, _, _ = wrapped_tool
    outfile = tmp_path / "trace.txt"
    result = CliRunner().invoke(trace, [link, "--output", str(outfile)])
    assert result.exit_code == 0
    assert outfile.read_text(encoding="utf-8").startswith(f"{link}\n")


def test_trace_searches_path(tmp_path, make_elf):
    first = make_elf(tmp_path / "a" / "tool")
    second = make_elf(tmp_path / "b" / "tool")
    path_env = os.pathsep.join([str(tmp_path / "a"), str(tmp_path / "b")])
    runner = CliRunner(env={"PATH": path_env})

    result = runner.invoke(trace, ["tool"])
    assert result.exit_code == 0
    assert result.stdout.startswith("Found 2 matches in PATH\n\n")
    assert f"{first}  [elf]" in result.stdout
    assert f"{second}  [elf]" in result.stdout

    result = runner.invoke(trace, ["tool", "--first"])
    assert result.exit_code == 0
    assert result.stdout == f"{first}  [elf]\n"


def test_trace_not_found(tmp_path):
    result = CliRunner(env={"PATH": str(tmp_path)}).invoke(trace, ["no-such-tool"])
    assert result.exit_code == 1
    assert "error: File 'no-such-tool' not found in PATH" in result.stdout


def test_trace_cycle(tmp_path, symlink):
    a = symlink(tmp_path / "a", "b")
    symlink(tmp_path / "b", "a")
    result = CliRunner().invoke(trace, [a])
    assert result.exit_code == 1
    assert result.stdout.startswith(f"cycle detected at {a}\n")


def test_trace_cycle_json(tmp_path, symlink):
    a = symlink(tmp_path / "a", "a")
    result = CliRunner().invoke(trace, [a, "--format", "json"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["error"]["kind"] == "cycle"


def test_trace_unknown_format(wrapped_tool):
    link, _, _ = wrapped_tool
    result = CliRunner().invoke(trace, [link, "--format", "xml"])
    assert result.exit_code == 2
    assert "Unknown output format 'xml'" in result.output
