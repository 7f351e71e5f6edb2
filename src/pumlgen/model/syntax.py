# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax surface consumed by the diagram generator.

One compilation unit is described as a tree of declaration nodes. Every node
carries a ``kind`` literal so that consumers can dispatch on it without
inspecting Python classes. The tree is produced by a front end (see
:mod:`pumlgen.compiler.parser`) and never mutated afterwards.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from pumlgen.model.types import TypeRef

# ###############
# Public Interface
# ###############

TypeKind = Literal["class", "interface", "struct", "enum", "record"]


class Parameter(BaseModel):
    """A method or constructor parameter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["parameter"] = "parameter"
    name: str
    type: TypeRef | None = None
    modifier: str | None = None


class FieldDeclaration(BaseModel):
    """A single field declarator. ``int a, b;`` yields two nodes.

    ``initializer`` is the source text after ``=``, if any.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["field"] = "field"
    name: str
    type: TypeRef
    modifiers: tuple[str, ...] = ()
    initializer: str | None = None


class PropertyDeclaration(BaseModel):
    """A property with its accessor keywords (``get``, ``set``, ``init``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["property"] = "property"
    name: str
    type: TypeRef
    modifiers: tuple[str, ...] = ()
    accessors: tuple[str, ...] = ()
    initializer: str | None = None


class MethodDeclaration(BaseModel):
    """A method, including its generic parameters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["method"] = "method"
    name: str
    return_type: TypeRef
    modifiers: tuple[str, ...] = ()
    type_parameters: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()


class ConstructorDeclaration(BaseModel):
    """An instance or static constructor."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["constructor"] = "constructor"
    name: str
    modifiers: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()


class EventDeclaration(BaseModel):
    """A field-like or accessor-style event."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["event"] = "event"
    name: str
    type: TypeRef
    modifiers: tuple[str, ...] = ()


class EnumMemberDeclaration(BaseModel):
    """A named value inside an enum."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["enum_member"] = "enum_member"
    name: str


class UnknownNode(BaseModel):
    """A construct the front end could not classify.

    Attributes:
        raw_kind: The front end's own name for the construct.
        text: Source text of the construct.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"
    raw_kind: str = ""
    text: str = ""


class TypeDeclaration(BaseModel):
    """A class, interface, struct, enum, or record declaration.

    Attributes:
        type_kind: Which kind of type is declared.
        name: Identifier as spelled in source.
        modifiers: Modifier keywords in source order.
        type_parameters: Generic parameter names (``T``, ``TKey``).
        base_types: Base class and interfaces in source order.
        members: Member and nested type declarations in source order.
        is_record_struct: True for ``record struct`` declarations.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["type"] = "type"
    type_kind: TypeKind
    name: str
    modifiers: tuple[str, ...] = ()
    type_parameters: tuple[str, ...] = ()
    base_types: tuple[TypeRef, ...] = ()
    members: tuple[Node, ...] = ()
    is_record_struct: bool = False


class NamespaceDeclaration(BaseModel):
    """A block or file-scoped namespace."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["namespace"] = "namespace"
    name: str
    members: tuple[Node, ...] = ()


class CompilationUnit(BaseModel):
    """Root of the syntax surface for one source file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["compilation_unit"] = "compilation_unit"
    members: tuple[Node, ...] = ()


# A node that may appear inside a compilation unit, namespace, or type body.
Node = Annotated[
    NamespaceDeclaration
    | TypeDeclaration
    | FieldDeclaration
    | PropertyDeclaration
    | MethodDeclaration
    | ConstructorDeclaration
    | EventDeclaration
    | EnumMemberDeclaration
    | UnknownNode,
    _Field(discriminator="kind"),
]

MemberNode = (
    FieldDeclaration
    | PropertyDeclaration
    | MethodDeclaration
    | ConstructorDeclaration
    | EventDeclaration
    | EnumMemberDeclaration
    | UnknownNode
)


# Resolve forward references in self-referential models.
TypeDeclaration.model_rebuild()
NamespaceDeclaration.model_rebuild()
CompilationUnit.model_rebuild()
