import click

from symseek.configmanager import ConfigManager
from symseek.plugin.manager import get_disabled_plugins, get_plugin_manager, print_plugins

SECTION = "core"
SECTION_KEY = "disable_plugins"


@click.command(name="list")
def plugin_list_cmd():
    """Lists plugins."""
    pm = get_plugin_manager()
    print_plugins(pm)

    current_blocked_plugins = get_disabled_plugins()
    print("\nDISABLED PLUGINS")
    if not current_blocked_plugins:
        print("\tThere are no disabled plugins.")
    else:
        for disabled_plugin in current_blocked_plugins:
            print(f"\tname: {disabled_plugin}")


@click.command(name="enable")
@click.argument("plugin_names", nargs=-1)
def plugin_enable_cmd(plugin_names):
    """Enables one or more plugins."""
    if not plugin_names:
        raise click.UsageError("At least one plugin name must be specified.")

    current_blocked_plugins = get_disabled_plugins()
    for plugin_name in plugin_names:
        if plugin_name in current_blocked_plugins:
            current_blocked_plugins.remove(plugin_name)

    ConfigManager().set(SECTION, SECTION_KEY, current_blocked_plugins)
    click.echo(f"Updated blocked plugins: {current_blocked_plugins}")


@click.command(name="disable")
@click.argument("plugin_names", nargs=-1)
def plugin_disable_cmd(plugin_names):
    """Disables one or more plugins.

    Plugins are named by module, e.g. 'symseek.wrappers.store_path'; see 'symseek plugin list'.
    """
    if not plugin_names:
        raise click.UsageError("At least one plugin name must be specified.")

    current_blocked_plugins = get_disabled_plugins()
    for plugin_name in plugin_names:
        if plugin_name not in current_blocked_plugins:
            current_blocked_plugins.append(plugin_name)

    ConfigManager().set(SECTION, SECTION_KEY, current_blocked_plugins)
    click.echo(f"Updated blocked plugins: {current_blocked_plugins}")
