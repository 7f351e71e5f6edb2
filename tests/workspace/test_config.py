# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the pumlgen configuration file."""

from pathlib import Path

import pytest

from pumlgen.model import Accessibilities
from pumlgen.workspace import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    find_config_file,
    load_generator_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config(tmp_path: Path) -> None:
    """An empty file leaves every setting unset."""
    config = load_generator_config(_write_config(tmp_path, ""))
    assert config == GeneratorConfig()


def test_full_config(tmp_path: Path) -> None:
    """Every supported key is parsed into its attribute."""
    content = """\
indent: 2
ignore: [private, internal]
create-association: true
association-labels: false
cascade-suppression: false
namespace-packages: true
all-in-one: true
exclude-paths:
  - obj
  - Generated/
"""
    config = load_generator_config(_write_config(tmp_path, content))

    assert config.indent == "  "
    assert config.ignore == Accessibilities.PRIVATE | Accessibilities.INTERNAL
    assert config.create_association is True
    assert config.association_labels is False
    assert config.cascade_suppression is False
    assert config.namespace_packages is True
    assert config.all_in_one is True
    assert config.public is None
    assert config.exclude_paths == ["obj", "Generated/"]


def test_indent_string(tmp_path: Path) -> None:
    """A string indent is used verbatim."""
    config = load_generator_config(_write_config(tmp_path, 'indent: "\\t"\n'))
    assert config.indent == "\t"


def test_comma_separated_lists(tmp_path: Path) -> None:
    """List settings also accept comma-separated strings."""
    config = load_generator_config(_write_config(tmp_path, "ignore: private, protected\nexclude-paths: obj, bin\n"))
    assert config.ignore == Accessibilities.PRIVATE | Accessibilities.PROTECTED
    assert config.exclude_paths == ["obj", "bin"]


def test_find_config_file(tmp_path: Path) -> None:
    """The config file is found only when present."""
    assert find_config_file(tmp_path) is None
    config_file = _write_config(tmp_path, "public: true\n")
    assert find_config_file(tmp_path) == config_file


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing file raises GeneratorConfigError."""
    with pytest.raises(GeneratorConfigError, match="not found"):
        load_generator_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML raises GeneratorConfigError."""
    with pytest.raises(GeneratorConfigError, match="Invalid YAML"):
        load_generator_config(_write_config(tmp_path, "indent: [unclosed\n"))


def test_non_mapping(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(GeneratorConfigError, match="mapping"):
        load_generator_config(_write_config(tmp_path, "- public\n"))


def test_unknown_key(tmp_path: Path) -> None:
    """Unknown settings are reported by name."""
    with pytest.raises(GeneratorConfigError, match="unknown setting\\(s\\) colour"):
        load_generator_config(_write_config(tmp_path, "colour: blue\n"))


def test_bool_wrong_type(tmp_path: Path) -> None:
    """Boolean settings reject other types."""
    with pytest.raises(GeneratorConfigError, match="'public' must be true or false"):
        load_generator_config(_write_config(tmp_path, "public: yes please\n"))


def test_negative_indent(tmp_path: Path) -> None:
    """A negative indent is rejected."""
    with pytest.raises(GeneratorConfigError, match="negative"):
        load_generator_config(_write_config(tmp_path, "indent: -1\n"))


def test_bool_indent(tmp_path: Path) -> None:
    """A boolean indent is rejected."""
    with pytest.raises(GeneratorConfigError, match="'indent'"):
        load_generator_config(_write_config(tmp_path, "indent: true\n"))


def test_unknown_accessibility(tmp_path: Path) -> None:
    """An unknown accessibility name is reported as a configuration error."""
    with pytest.raises(GeneratorConfigError):
        load_generator_config(_write_config(tmp_path, "ignore: [secret]\n"))


def test_exclude_paths_wrong_type(tmp_path: Path) -> None:
    """exclude-paths must be a list of strings."""
    with pytest.raises(GeneratorConfigError, match="'exclude-paths' must be a list of strings"):
        load_generator_config(_write_config(tmp_path, "exclude-paths: [1, 2]\n"))
