# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import List, Optional

import pluggy
from loguru import logger

from symseek.configmanager import ConfigManager
from symseek.plugin import hookspecs


def _register_plugins(pm: pluggy.PluginManager) -> None:
    # pylint: disable=import-outside-toplevel
    # don't want all these imports as part of the file-level scope
    from symseek.filetypeid import id_magic
    from symseek.output import json_writer, tree_writer
    from symseek.wrappers import make_c_wrapper, store_path

    internal_plugins = (
        id_magic,
        make_c_wrapper,
        store_path,
        tree_writer,
        json_writer,
    )
    for plugin in internal_plugins:
        pm.register(plugin)


def get_disabled_plugins() -> List[str]:
    """Returns the list of plugin names disabled through the `core.disable_plugins` setting."""
    current_blocked_plugins = ConfigManager().get("core", "disable_plugins", [])
    if isinstance(current_blocked_plugins, str):
        return [current_blocked_plugins]
    return list(current_blocked_plugins)


def set_blocked_plugins(pm: pluggy.PluginManager) -> None:
    """Gets the current list of blocked plugins from the config manager, then blocks and unregisters them with the plugin manager."""
    for plugin_name in get_disabled_plugins():
        # Check if the plugin is already blocked
        if pm.is_blocked(plugin_name):
            logger.info(f"Plugin '{plugin_name}' is already disabled.")
            continue

        # Unregister the plugin
        plugin = pm.unregister(name=plugin_name)
        if plugin is None:
            logger.info(f"Disabled plugin '{plugin_name}' not found.")
            continue

        # Block the plugin to prevent future registration
        pm.set_blocked(plugin_name)


def get_plugin_manager() -> pluggy.PluginManager:
    pm = pluggy.PluginManager("symseek")
    pm.add_hookspecs(hookspecs)
    pm.load_setuptools_entrypoints("symseek")
    _register_plugins(pm)
    set_blocked_plugins(pm)
    pm.check_pending()
    return pm


def find_plugin_by_name(pm: pluggy.PluginManager, name: str) -> Optional[object]:
    """Finds a plugin by its registered name or by the name it reports through `short_name`.

    Args:
        pm (pluggy.PluginManager): The plugin manager instance.
        name (str): The name to look for.

    Returns:
        Optional[object]: The plugin, or None if no plugin has that name.
    """
    plugin = pm.get_plugin(name)
    if plugin is not None:
        return plugin
    for candidate in pm.get_plugins():
        if hasattr(candidate, "short_name") and candidate.short_name() == name:
            return candidate
    return None


def output_format_names(pm: pluggy.PluginManager) -> List[str]:
    """Short names of every registered plugin that can write chains."""
    names = []
    # registration order; blocked plugins are listed with None
    for _, plugin in pm.list_name_plugin():
        if plugin is None or not hasattr(plugin, "write_chains"):
            continue
        name = plugin.short_name() if hasattr(plugin, "short_name") else None
        if name:
            names.append(name)
    return names


def print_plugins(pm: pluggy.PluginManager) -> None:
    print("PLUGINS")
    for plugin in pm.get_plugins():
        plugin_name = pm.get_name(plugin) if pm.get_name(plugin) else ""
        print(f"\t> name: {plugin_name}")
        print(f"\t  canonical name: {pm.get_canonical_name(plugin)}")
        hooks = pm.get_hookcallers(plugin) or []
        print(f"\t  hooks: {', '.join(sorted(hook.name for hook in hooks))}")
