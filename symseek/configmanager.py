# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import platform
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional, Union

import tomlkit

CONFIG_FILE_NAME = "config.toml"

# Used for any setting the config file does not provide
DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "core": {
        "log_level": "WARNING",
        "disable_plugins": [],
    },
    "trace": {
        "output_format": "tree",
        "all_matches": True,
    },
}


def default_setting(section: str, option: str) -> Any:
    """Built-in value for a setting, or None if symseek does not define it."""
    return DEFAULT_SETTINGS.get(section, {}).get(option)


def _user_config_root() -> Path:
    if platform.system() == "Windows":
        return Path(os.getenv("APPDATA", str(Path("~\\AppData\\Roaming"))))
    return Path(os.getenv("XDG_CONFIG_HOME", str(Path("~/.config"))))


class ConfigManager:
    """Settings read from, and saved to, a TOML file. There is one instance per app name.

    The file is read once when the instance is created; edits made by other processes are not
    seen until a new instance is made. Comments and layout in the file survive a save.

    Attributes:
        app_name (str): Name the settings belong to. (Default: 'symseek')
        config_dir (Optional[Path]): Directory holding the settings file, if overridden.
        config (tomlkit.TOMLDocument): The parsed settings file.
        config_file_path (Path): Where the settings file is read from and written to.
    """

    _initialized: bool = False
    _instances: Dict[str, "ConfigManager"] = {}
    _lock = Lock()

    def __new__(
        cls, app_name: str = "symseek", config_dir: Optional[Union[str, Path]] = None
    ) -> "ConfigManager":
        with cls._lock:
            if app_name not in cls._instances:
                instance = super(ConfigManager, cls).__new__(cls)
                instance._initialized = False
                cls._instances[app_name] = instance
            return cls._instances[app_name]

    def __init__(
        self, app_name: str = "symseek", config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        if self._initialized:
            return
        self._initialized = True

        self.app_name = app_name
        self.config_dir = Path(config_dir) / app_name if config_dir else None
        self.config = tomlkit.document()
        self.config_file_path = self._get_config_file_path()
        self._load_config()

    def _get_config_file_path(self) -> Path:
        config_dir = self.config_dir or _user_config_root() / self.app_name
        return (config_dir / CONFIG_FILE_NAME).expanduser()

    def _load_config(self) -> None:
        if self.config_file_path.exists():
            with open(self.config_file_path, "r") as configfile:
                self.config = tomlkit.parse(configfile.read())

    def get(self, section: str, option: str, fallback: Optional[Any] = None) -> Any:
        """Value of section.option as stored in the settings file, or fallback if it is not set."""
        return self.config.get(section, {}).get(option, fallback)

    def get_setting(self, section: str, option: str) -> Any:
        """Value of section.option, falling back to the built-in default.

        Returns plain Python values (str, bool, list, ...) rather than tomlkit items, and None
        for settings symseek does not define that are also missing from the file.
        """
        value = self.get(section, option, default_setting(section, option))
        return value.unwrap() if hasattr(value, "unwrap") else value

    def set(self, section: str, option: str, value: Any) -> None:
        """Store section.option and write the settings file."""
        if section not in self.config:
            self.config[section] = tomlkit.table()
        self.config[section][option] = value
        self._save_config()

    def _save_config(self) -> None:
        self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file_path, "w") as configfile:
            configfile.write(tomlkit.dumps(self.config))

    def __getitem__(self, key: str) -> Any:
        """A whole section of the settings file, e.g. config_manager["trace"], or None."""
        if key not in self.config:
            return None
        return self.config[key]

    @classmethod
    def delete_instance(cls, app_name: str) -> None:
        """Forget the instance for app_name so the next ConfigManager(app_name) rereads the file."""
        with cls._lock:
            cls._instances.pop(app_name, None)
