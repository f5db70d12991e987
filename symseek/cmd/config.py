from typing import Any, List, Optional, Tuple

import click

from symseek.configmanager import DEFAULT_SETTINGS, ConfigManager, default_setting


def _split_key(key: str) -> Tuple[str, str]:
    try:
        section, option = key.split(".", 1)
    except ValueError as err:
        raise SystemExit("Invalid KEY given. Is it in the format 'section.option'?") from err
    return section, option


def _convert_value(value: str) -> Any:
    # 'true' and 'false' become booleans so settings like trace.all_matches work from the shell
    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False
    return value


@click.command("config")
@click.argument("key", required=True)
@click.argument("values", nargs=-1)
def config(key: str, values: Optional[List[str]]):
    """Get or set a configuration value.

    If only KEY is provided, the current value is displayed, or the built-in default when the
    value has not been set. If both KEY and one or more VALUES are provided, the configuration
    value is set. KEY should be in the format 'section.option', e.g. 'trace.output_format'.
    """
    config_manager = ConfigManager()
    section, option = _split_key(key)

    if not values:
        result = config_manager.get(section, option)
        if result is not None:
            click.echo(f"{key} = {result}")
        elif option in DEFAULT_SETTINGS.get(section, {}):
            click.echo(f"{key} = {default_setting(section, option)} (default)")
        else:
            click.echo(f"Configuration '{key}' not found.")
        return

    converted_values = [_convert_value(value) for value in values]
    # If there's only one value, store it as a single value, otherwise store as a list
    final_value = converted_values[0] if len(converted_values) == 1 else converted_values
    if section in DEFAULT_SETTINGS and option not in DEFAULT_SETTINGS[section]:
        click.echo(f"Warning: '{key}' is not a setting symseek uses.", err=True)
    config_manager.set(section, option, final_value)
    click.echo(f"Configuration '{key}' set to '{final_value}'.")
