# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import pathlib

import pytest

from symseek.configmanager import ConfigManager

ELF_MAGIC = b"\x7fELF\x02\x01\x01\x00"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path_factory):
    """Keep tests away from the user's real configuration file."""
    ConfigManager.delete_instance("symseek")
    ConfigManager(app_name="symseek", config_dir=tmp_path_factory.mktemp("config"))
    yield
    ConfigManager.delete_instance("symseek")


def _write_executable(path: pathlib.Path, content: bytes) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    path.chmod(0o755)
    return str(path)


@pytest.fixture(name="make_executable")
def fixture_make_executable():
    """Write an executable file with the given content, creating parent directories."""
    return _write_executable


@pytest.fixture(name="make_elf")
def fixture_make_elf():
    """Write a file that starts with the ELF magic bytes."""

    def _make_elf(path: pathlib.Path, trailer: bytes = b"") -> str:
        return _write_executable(path, ELF_MAGIC + trailer)

    return _make_elf


@pytest.fixture(name="store")
def fixture_store(tmp_path):
    """A package store directory laid out like /nix/store, rooted inside tmp_path.

    Store paths are recognized by the "/nix/store/" infix, so everything created under this
    directory is eligible for wrapper scanning.
    """
    store_dir = tmp_path / "nix" / "store"
    store_dir.mkdir(parents=True)
    return store_dir


@pytest.fixture(name="symlink")
def fixture_symlink():
    """Create a symlink at `link` pointing to `target` (kept verbatim, so it may be relative)."""

    def _symlink(link: pathlib.Path, target) -> str:
        link.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, link)
        return str(link)

    return _symlink
