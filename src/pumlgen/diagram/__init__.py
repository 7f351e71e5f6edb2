# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Class diagram generation: type formatting, members, relationships, emission."""

from pumlgen.diagram.emitter import (
    DOCUMENT_CLOSE,
    DOCUMENT_OPEN,
    ClassDiagramGenerator,
    DiagramBlock,
    GeneratorOptions,
    generate,
    type_header,
)
from pumlgen.diagram.formatter import bare_name, format_type_ref, referenced_type_names, simple_name
from pumlgen.diagram.members import (
    ACCESSIBILITY_MARKERS,
    AccessibilityFilter,
    MemberRenderer,
    member_type_refs,
)
from pumlgen.diagram.relations import (
    DeclaredTypeRegistry,
    RelationshipCollector,
    RelationshipEdge,
    RelationshipKind,
)

__all__ = [
    # Formatting
    "format_type_ref",
    "bare_name",
    "simple_name",
    "referenced_type_names",
    # Members
    "ACCESSIBILITY_MARKERS",
    "AccessibilityFilter",
    "MemberRenderer",
    "member_type_refs",
    # Relationships
    "DeclaredTypeRegistry",
    "RelationshipCollector",
    "RelationshipEdge",
    "RelationshipKind",
    # Emission
    "DOCUMENT_OPEN",
    "DOCUMENT_CLOSE",
    "ClassDiagramGenerator",
    "DiagramBlock",
    "GeneratorOptions",
    "generate",
    "type_header",
]
