# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Accessibility levels of C# declarations and their default rules."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Flag, auto

# ###############
# Public Interface
# ###############


class AccessibilityError(Exception):
    """Raised when an accessibility name cannot be recognised."""


class Accessibilities(Flag):
    """Bit-set over the six accessibility levels of a declaration."""

    NONE = 0
    PUBLIC = auto()
    PRIVATE = auto()
    INTERNAL = auto()
    PROTECTED = auto()
    PROTECTED_INTERNAL = auto()
    PRIVATE_PROTECTED = auto()

    # Everything that is not visible to outside callers.
    NON_PUBLIC = PRIVATE | INTERNAL | PROTECTED | PROTECTED_INTERNAL | PRIVATE_PROTECTED


def effective_accessibility(modifiers: Iterable[str], container_kind: str | None) -> Accessibilities:
    """Return the single accessibility level of a declaration.

    Explicit access modifiers win. Without one, the C# defaults apply:
    interface and enum members are public, top-level types (no container)
    are internal, and everything else is private.

    Args:
        modifiers: Modifier keywords as written in source (``public``, ``static``, ...).
        container_kind: Kind of the enclosing type declaration (``"class"``,
            ``"interface"``, ...), or ``None`` for a top-level declaration.
    """
    present = {m for m in modifiers if m in _ACCESS_KEYWORDS}
    if {"protected", "internal"} <= present:
        return Accessibilities.PROTECTED_INTERNAL
    if {"private", "protected"} <= present:
        return Accessibilities.PRIVATE_PROTECTED
    for keyword in ("public", "private", "protected", "internal"):
        if keyword in present:
            return _ACCESS_KEYWORDS[keyword]
    if container_kind in ("interface", "enum"):
        return Accessibilities.PUBLIC
    if container_kind is None:
        return Accessibilities.INTERNAL
    return Accessibilities.PRIVATE


def parse_accessibilities(text: str | Iterable[str]) -> Accessibilities:
    """Parse accessibility names into a bit-set.

    Accepts a comma-separated string or an iterable of names. Names are
    case-insensitive; ``-`` and ``_`` separators are ignored, so
    ``ProtectedInternal``, ``protected-internal`` and ``PROTECTED_INTERNAL``
    are equivalent. ``public-only`` style shortcuts are not accepted here.

    Raises:
        AccessibilityError: If any name is not a known accessibility level.
    """
    items = text.split(",") if isinstance(text, str) else list(text)
    result = Accessibilities.NONE
    for item in items:
        key = item.strip().lower().replace("_", "").replace("-", "")
        if not key:
            continue
        if key not in _NAMES:
            raise AccessibilityError(f"Unknown accessibility '{item.strip()}'")
        result |= _NAMES[key]
    return result


# ################
# Implementation
# ################

_ACCESS_KEYWORDS: dict[str, Accessibilities] = {
    "public": Accessibilities.PUBLIC,
    "private": Accessibilities.PRIVATE,
    "protected": Accessibilities.PROTECTED,
    "internal": Accessibilities.INTERNAL,
}

_NAMES: dict[str, Accessibilities] = {
    "none": Accessibilities.NONE,
    "public": Accessibilities.PUBLIC,
    "private": Accessibilities.PRIVATE,
    "internal": Accessibilities.INTERNAL,
    "protected": Accessibilities.PROTECTED,
    "protectedinternal": Accessibilities.PROTECTED_INTERNAL,
    "privateprotected": Accessibilities.PRIVATE_PROTECTED,
    "nonpublic": Accessibilities.NON_PUBLIC,
}
