# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from click.testing import CliRunner

from symseek.cmd.config import config
from symseek.cmd.plugin import plugin_disable_cmd, plugin_enable_cmd, plugin_list_cmd
from symseek.configmanager import ConfigManager


def test_config_shows_default():
    result = CliRunner().invoke(config, ["trace.output_format"])
    assert result.exit_code == 0
    assert result.output == "trace.output_format = tree (default)\n"


def test_config_set_and_get():
    runner = CliRunner()
    result = runner.invoke(config, ["trace.output_format", "json"])
    assert result.exit_code == 0
    assert ConfigManager().get_setting("trace", "output_format") == "json"

    result = runner.invoke(config, ["trace.output_format"])
    assert result.output == "trace.output_format = json\n"


def test_config_converts_booleans():
    result = CliRunner().invoke(config, ["trace.all_matches", "false"])
    assert result.exit_code == 0
    assert ConfigManager().get_setting("trace", "all_matches") is False


def test_config_unknown_key():
    result = CliRunner().invoke(config, ["trace.colour"])
    assert "Configuration 'trace.colour' not found." in result.output


def test_config_invalid_key():
    result = CliRunner().invoke(config, ["nodot"])
    assert result.exit_code != 0
    assert "section.option" in result.output


def test_plugin_disable_and_enable():
    runner = CliRunner()
    result = runner.invoke(plugin_disable_cmd, ["symseek.wrappers.store_path"])
    assert result.exit_code == 0
    assert ConfigManager().get_setting("core", "disable_plugins") == ["symseek.wrappers.store_path"]

    result = runner.invoke(plugin_list_cmd)
    assert result.exit_code == 0
    assert "name: symseek.wrappers.make_c_wrapper" in result.output
    assert "\tname: symseek.wrappers.store_path" in result.output.split("DISABLED PLUGINS")[1]

    result = runner.invoke(plugin_enable_cmd, ["symseek.wrappers.store_path"])
    assert result.exit_code == 0
    assert ConfigManager().get_setting("core", "disable_plugins") == []


def test_plugin_disable_requires_name():
    result = CliRunner().invoke(plugin_disable_cmd, [])
    assert result.exit_code == 2
