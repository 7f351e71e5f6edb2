# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax surface for pumlgen (declarations, type references, accessibility)."""

from pumlgen.model.accessibility import (
    AccessibilityError,
    Accessibilities,
    effective_accessibility,
    parse_accessibilities,
)
from pumlgen.model.syntax import (
    CompilationUnit,
    ConstructorDeclaration,
    EnumMemberDeclaration,
    EventDeclaration,
    FieldDeclaration,
    MemberNode,
    MethodDeclaration,
    NamespaceDeclaration,
    Node,
    Parameter,
    PropertyDeclaration,
    TypeDeclaration,
    TypeKind,
    UnknownNode,
)
from pumlgen.model.types import (
    ArrayTypeRef,
    GenericTypeRef,
    NamedTypeRef,
    NullableTypeRef,
    RawTypeRef,
    TupleTypeRef,
    TypeRef,
)

__all__ = [
    # Accessibility
    "Accessibilities",
    "AccessibilityError",
    "effective_accessibility",
    "parse_accessibilities",
    # Type references
    "NamedTypeRef",
    "GenericTypeRef",
    "NullableTypeRef",
    "ArrayTypeRef",
    "TupleTypeRef",
    "RawTypeRef",
    "TypeRef",
    # Declarations
    "TypeKind",
    "Parameter",
    "FieldDeclaration",
    "PropertyDeclaration",
    "MethodDeclaration",
    "ConstructorDeclaration",
    "EventDeclaration",
    "EnumMemberDeclaration",
    "UnknownNode",
    "TypeDeclaration",
    "NamespaceDeclaration",
    "CompilationUnit",
    "Node",
    "MemberNode",
]
