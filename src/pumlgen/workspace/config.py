# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the pumlgen configuration file.

Example ``.pumlgen.yaml``::

    indent: 4
    ignore: [private, internal]
    create-association: true
    exclude-paths:
      - obj
      - Generated/
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from pumlgen.model.accessibility import AccessibilityError, Accessibilities, parse_accessibilities

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".pumlgen.yaml"


class GeneratorConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """Settings read from a configuration file.

    Every scalar setting is ``None`` when the file does not mention it, so
    that command-line flags and built-in defaults can fill the gaps.

    Attributes:
        indent: Indentation unit string.
        public: Only emit public declarations.
        ignore: Accessibility levels to suppress.
        create_association: Emit association arrows.
        association_labels: Label association arrows with member names.
        cascade_suppression: Hide types nested in a suppressed type.
        namespace_packages: Render namespaces as ``namespace`` blocks.
        all_in_one: Inline diagrams into ``include.puml`` in directory mode.
        exclude_paths: Paths skipped in directory mode.
    """

    indent: str | None = None
    public: bool | None = None
    ignore: Accessibilities | None = None
    create_association: bool | None = None
    association_labels: bool | None = None
    cascade_suppression: bool | None = None
    namespace_packages: bool | None = None
    all_in_one: bool | None = None
    exclude_paths: list[str] = field(default_factory=list)


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a pumlgen configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Configuration file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read configuration file: {exc}") from exc

    return _parse_generator_config(text, source_label=str(path))


def find_config_file(directory: Path) -> Path | None:
    """Return the ``.pumlgen.yaml`` in *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


# ################
# Implementation
# ################

_BOOL_KEYS: dict[str, str] = {
    "public": "public",
    "create-association": "create_association",
    "association-labels": "association_labels",
    "cascade-suppression": "cascade_suppression",
    "namespace-packages": "namespace_packages",
    "all-in-one": "all_in_one",
}

_KNOWN_KEYS = frozenset(_BOOL_KEYS) | {"indent", "ignore", "exclude-paths"}


def _parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        A GeneratorConfig instance.

    Raises:
        GeneratorConfigError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown setting(s) {', '.join(unknown)}")

    config = GeneratorConfig()
    for key, attr in _BOOL_KEYS.items():
        if key in data:
            setattr(config, attr, _require_bool(data, key, source_label))

    if "indent" in data:
        config.indent = _parse_indent(data["indent"], source_label)
    if "ignore" in data:
        config.ignore = _parse_ignore(data["ignore"], source_label)
    if "exclude-paths" in data:
        config.exclude_paths = _parse_string_list(data["exclude-paths"], "exclude-paths", source_label)
    return config


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    """Extract a boolean field from a mapping, raising GeneratorConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, bool):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be true or false")
    return value


def _parse_indent(value: object, source_label: str) -> str:
    """Accept a number of spaces or a literal indentation string."""
    if isinstance(value, bool):
        raise GeneratorConfigError(f"{source_label}: 'indent' must be a number or a string")
    if isinstance(value, int):
        if value < 0:
            raise GeneratorConfigError(f"{source_label}: 'indent' must not be negative")
        return " " * value
    if isinstance(value, str):
        return value
    raise GeneratorConfigError(f"{source_label}: 'indent' must be a number or a string")


def _parse_ignore(value: object, source_label: str) -> Accessibilities:
    """Parse the ignore-set from a comma-separated string or a list of names."""
    if isinstance(value, str):
        names: list[str] = [value]
    else:
        names = _parse_string_list(value, "ignore", source_label)
    try:
        return parse_accessibilities(",".join(names))
    except AccessibilityError as exc:
        raise GeneratorConfigError(f"{source_label}: {exc}") from exc


def _parse_string_list(value: object, key: str, source_label: str) -> list[str]:
    """Accept a comma-separated string or a list of strings."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a list of strings")
    return [item.strip() for item in value if item.strip()]
