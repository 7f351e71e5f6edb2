# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Accessibility filtering and rendering of member declarations.

Each member becomes one diagram line made of an accessibility marker,
modifier decorations, and a kind-specific body::

    - _count : int
    + {static} Create(name:string) : Widget
    + Name : string <<get>> <<set>>
    + open : string = "\\{"
    # <<internal>> <<event>> Changed : EventHandler

Enum members are written as bare names.
"""

from __future__ import annotations

from dataclasses import dataclass

from pumlgen.diagram.formatter import format_type_ref
from pumlgen.model.accessibility import Accessibilities, effective_accessibility
from pumlgen.model.syntax import MemberNode, Parameter
from pumlgen.model.types import TypeRef

# ###############
# Public Interface
# ###############

ACCESSIBILITY_MARKERS: dict[Accessibilities, str] = {
    Accessibilities.PUBLIC: "+",
    Accessibilities.PRIVATE: "-",
    Accessibilities.PROTECTED: "#",
    Accessibilities.INTERNAL: "~",
    Accessibilities.PROTECTED_INTERNAL: "# <<internal>>",
    Accessibilities.PRIVATE_PROTECTED: "- <<protected>>",
}


@dataclass(frozen=True)
class AccessibilityFilter:
    """Predicate deciding whether a declaration is emitted.

    Attributes:
        ignore: Accessibility levels whose declarations are suppressed.
    """

    ignore: Accessibilities = Accessibilities.NONE

    def should_emit(self, accessibility: Accessibilities) -> bool:
        """Return True unless *accessibility* is in the ignore-set."""
        return not (accessibility & self.ignore)


class MemberRenderer:
    """Renders member declarations as diagram lines."""

    def __init__(self, accessibility_filter: AccessibilityFilter) -> None:
        self._filter = accessibility_filter

    def is_visible(self, member: MemberNode, container_kind: str) -> bool:
        """Return True if *member* passes the accessibility filter."""
        if member.kind == "unknown":
            return False
        if member.kind == "enum_member":
            return self._filter.should_emit(Accessibilities.PUBLIC)
        return self._filter.should_emit(effective_accessibility(member.modifiers, container_kind))

    def render(self, member: MemberNode, container_kind: str) -> str | None:
        """Return the diagram line for *member*, or None if it is suppressed.

        Args:
            member: The member declaration to render.
            container_kind: Kind of the declaring type, used for default accessibility.
        """
        if not self.is_visible(member, container_kind):
            return None
        if member.kind == "enum_member":
            return member.name
        if member.kind == "unknown":
            return None

        if member.kind == "field":
            body = f"{member.name} : {format_type_ref(member.type)}"
            body += _initializer_suffix(member.initializer)
        elif member.kind == "property":
            body = f"{member.name} : {format_type_ref(member.type)}"
            body += "".join(f" <<{accessor}>>" for accessor in member.accessors)
            body += _initializer_suffix(member.initializer)
        elif member.kind == "method":
            generics = f"<{', '.join(member.type_parameters)}>" if member.type_parameters else ""
            params = _format_parameters(member.parameters)
            body = f"{member.name}{generics}({params}) : {format_type_ref(member.return_type)}"
        elif member.kind == "constructor":
            body = f"{member.name}({_format_parameters(member.parameters)})"
        else:
            body = f"<<event>> {member.name} : {format_type_ref(member.type)}"

        accessibility = effective_accessibility(member.modifiers, container_kind)
        parts = [ACCESSIBILITY_MARKERS[accessibility], *_decorations(member.modifiers), body]
        return " ".join(parts)


def member_type_refs(member: MemberNode) -> list[TypeRef]:
    """Return every type reference a member mentions, in source order.

    Covers field, property and event types, method return types, and
    method or constructor parameter types.
    """
    if member.kind in ("field", "property", "event"):
        return [member.type]
    if member.kind == "method":
        return [member.return_type, *_parameter_types(member.parameters)]
    if member.kind == "constructor":
        return _parameter_types(member.parameters)
    return []


# ################
# Implementation
# ################

_ACCESS_KEYWORDS = frozenset({"public", "private", "protected", "internal"})


def _decorations(modifiers: tuple[str, ...]) -> list[str]:
    """Map non-access modifiers to diagram decorations in source order."""
    decorations: list[str] = []
    for modifier in modifiers:
        if modifier in _ACCESS_KEYWORDS:
            continue
        if modifier in ("static", "abstract"):
            decorations.append(f"{{{modifier}}}")
        else:
            decorations.append(f"<<{modifier}>>")
    return decorations


def _format_parameters(parameters: tuple[Parameter, ...]) -> str:
    rendered: list[str] = []
    for param in parameters:
        text = param.name if param.type is None else f"{param.name}:{format_type_ref(param.type)}"
        if param.modifier:
            text = f"{param.modifier} {text}"
        rendered.append(text)
    return ", ".join(rendered)


def _parameter_types(parameters: tuple[Parameter, ...]) -> list[TypeRef]:
    return [param.type for param in parameters if param.type is not None]


def _initializer_suffix(initializer: str | None) -> str:
    """Render `` = value`` with braces escaped so PlantUML keeps them literal."""
    if not initializer:
        return ""
    text = " ".join(initializer.split())
    return " = " + text.replace("{", "\\{").replace("}", "\\}")
