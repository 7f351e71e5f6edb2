# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file support for pumlgen."""

from pumlgen.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    find_config_file,
    load_generator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "GeneratorConfig",
    "GeneratorConfigError",
    "find_config_file",
    "load_generator_config",
]
