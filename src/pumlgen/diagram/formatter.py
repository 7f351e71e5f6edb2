# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of type references into diagram notation.

Formatting is a pure function of the type reference: the same reference
always yields the same text, and no shape is ever rejected. Rules:

- Names are written exactly as spelled, including a verbatim ``@`` prefix.
- ``T?`` for nullable types.
- ``Name<A, B>`` for generic types; an open generic is just ``Name``.
- ``T[]`` per array rank specifier, with commas for multi-dimensional ranks.
- ``(A, B)`` for tuples, element names dropped.
- Anything unrecognised falls back to its raw source text.
"""

from __future__ import annotations

from pumlgen.model.types import TypeRef

# ###############
# Public Interface
# ###############


def format_type_ref(type_ref: TypeRef) -> str:
    """Return the diagram spelling of *type_ref*."""
    if type_ref.kind == "named":
        return type_ref.name
    if type_ref.kind == "nullable":
        return format_type_ref(type_ref.inner) + "?"
    if type_ref.kind == "generic":
        if not type_ref.arguments:
            return type_ref.name
        args = ", ".join(format_type_ref(arg) for arg in type_ref.arguments)
        return f"{type_ref.name}<{args}>"
    if type_ref.kind == "array":
        return format_type_ref(type_ref.element) + "[" + "," * (max(type_ref.rank, 1) - 1) + "]"
    if type_ref.kind == "tuple":
        return "(" + ", ".join(format_type_ref(e) for e in type_ref.elements) + ")"
    # RawTypeRef is the only remaining variant.
    return _collapse(type_ref.text)


def bare_name(type_ref: TypeRef) -> str:
    """Return the name used for *type_ref* in relationship arrows.

    Generic arguments and the nullable marker are dropped so that
    ``Base<int>`` and ``Base<T>`` both point at ``Base``.
    """
    if type_ref.kind in ("named", "generic"):
        return type_ref.name
    if type_ref.kind == "nullable":
        return bare_name(type_ref.inner)
    return format_type_ref(type_ref)


def simple_name(name: str) -> str:
    """Strip any namespace or alias qualifier: ``System.IO.Stream`` -> ``Stream``."""
    return name.rsplit("::", 1)[-1].rsplit(".", 1)[-1]


def referenced_type_names(type_ref: TypeRef) -> list[str]:
    """Collect the names a reference may associate with, unwrapping containers.

    ``List<Foo>`` yields ``["List", "Foo"]``, ``Foo[]`` and ``Foo?`` yield
    ``["Foo"]`` and ``(Foo, Bar)`` yields ``["Foo", "Bar"]``. Callers keep
    only the names present in their declared-type registry, so a wrapper
    that is not declared locally drops out and its element type remains.
    """
    if type_ref.kind == "named":
        return [simple_name(type_ref.name)]
    if type_ref.kind == "generic":
        names = [simple_name(type_ref.name)]
        for arg in type_ref.arguments:
            names.extend(referenced_type_names(arg))
        return names
    if type_ref.kind == "nullable":
        return referenced_type_names(type_ref.inner)
    if type_ref.kind == "array":
        return referenced_type_names(type_ref.element)
    if type_ref.kind == "tuple":
        return [name for element in type_ref.elements for name in referenced_type_names(element)]
    return []


# ################
# Implementation
# ################


def _collapse(text: str) -> str:
    """Collapse whitespace runs so a multi-line fragment stays on one diagram line."""
    return " ".join(text.split())
