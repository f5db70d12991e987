# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT

from setuptools import find_namespace_packages, setup

setup(
    name="symseek",
    version="0.1.0",
    description="Trace executables through symlinks and package-manager wrappers to the file that runs",
    license="MIT",
    python_requires=">=3.9",
    packages=find_namespace_packages(include=["symseek", "symseek.*"]),
    install_requires=[
        "binary2strings",  # Printable strings embedded in binary launchers
        "click>=8.0",  # Command line interface
        "dataclasses_json",  # Serialization of chain types
        "loguru",  # Logging
        "pluggy",  # Wrapper detector, file type, and output plugins
        "tomlkit",  # Configuration file that preserves formatting and comments
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "symseek = symseek.__main__:main",
        ],
    },
)
