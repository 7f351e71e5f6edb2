# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""C# front end and file/directory generation workflows."""

from pumlgen.compiler.build import (
    EXCLUDE_FILE_NAME,
    INCLUDE_FILE_NAME,
    PUML_SUFFIX,
    BuildError,
    BuildResult,
    default_output_path,
    generate_directory,
    generate_file,
    is_excluded,
    read_exclude_file,
)
from pumlgen.compiler.parser import parse

__all__ = [
    "parse",
    "generate_file",
    "generate_directory",
    "default_output_path",
    "read_exclude_file",
    "is_excluded",
    "BuildError",
    "BuildResult",
    "PUML_SUFFIX",
    "EXCLUDE_FILE_NAME",
    "INCLUDE_FILE_NAME",
]
