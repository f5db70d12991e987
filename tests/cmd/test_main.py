# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import importlib.metadata

from click.testing import CliRunner

from symseek.__main__ import main


def test_version():
    result = CliRunner().invoke(main, ["--log-level", "error", "version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == importlib.metadata.version("symseek")


def test_subcommands_registered():
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    for command in ("trace", "config", "plugin", "version"):
        assert command in result.stdout


def test_trace_through_main(tmp_path, make_elf):
    tool = make_elf(tmp_path / "tool")
    result = CliRunner().invoke(main, ["trace", tool, "--format", "json"])
    assert result.exit_code == 0
    assert f'"origin": "{tool}"' in result.stdout
