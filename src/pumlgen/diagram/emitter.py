# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Class diagram generation from a compilation unit.

Builds a tree of :class:`DiagramBlock` values from the syntax surface and
serializes it as PlantUML class diagram markup::

    @startuml
    class Owner {
        - Items : List<Target>
        class Inner {
        }
    }
    class Target {
    }
    Owner --> Target
    @enduml

Generation runs in two passes. The first registers every declared type name
in the unit, the second renders blocks and collects relationship edges
against the completed registry, so forward references resolve the same way
as backward ones. Relationship lines follow all blocks, in discovery order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pumlgen.diagram.formatter import bare_name, referenced_type_names, simple_name
from pumlgen.diagram.members import AccessibilityFilter, MemberRenderer, member_type_refs
from pumlgen.diagram.relations import (
    DeclaredTypeRegistry,
    RelationshipCollector,
    RelationshipEdge,
    RelationshipKind,
)
from pumlgen.model.accessibility import Accessibilities, effective_accessibility
from pumlgen.model.syntax import CompilationUnit, MemberNode, Node, TypeDeclaration
from pumlgen.model.types import TypeRef

# ###############
# Public Interface
# ###############

DOCUMENT_OPEN = "@startuml"
DOCUMENT_CLOSE = "@enduml"


@dataclass(frozen=True)
class GeneratorOptions:
    """Settings for one generator.

    Attributes:
        indent: Indentation unit repeated once per nesting level.
        ignore: Accessibility levels whose declarations are suppressed.
        create_association: Emit association arrows for members that
            reference other types declared in the same unit.
        association_labels: Label association arrows with the member name.
        cascade_suppression: When a type is suppressed, also hide the types
            nested in it. When False, nested types are filtered on their own
            and keep their source indentation.
        namespace_packages: Wrap namespace contents in ``namespace`` blocks.
    """

    indent: str = "    "
    ignore: Accessibilities = Accessibilities.NONE
    create_association: bool = False
    association_labels: bool = False
    cascade_suppression: bool = True
    namespace_packages: bool = False


@dataclass
class DiagramBlock:
    """The rendered form of one type declaration or namespace package.

    Attributes:
        header: Opening line without indentation or brace, for example
            ``abstract class Shape``. None marks a suppressed container that
            only keeps the nesting depth of the blocks below it.
        members: Rendered member lines in declaration order.
        nested: Blocks of nested type declarations.
    """

    header: str | None
    members: list[str] = field(default_factory=list)
    nested: list[DiagramBlock] = field(default_factory=list)

    def render(self, indent: str, depth: int = 0) -> list[str]:
        """Return the lines of this block with its header at *depth* units."""
        pad = indent * depth
        lines: list[str] = []
        if self.header is not None:
            lines.append(f"{pad}{self.header} {{")
            lines.extend(f"{pad}{indent}{member}" for member in self.members)
        for child in self.nested:
            lines.extend(child.render(indent, depth + 1))
        if self.header is not None:
            lines.append(f"{pad}}}")
        return lines


class ClassDiagramGenerator:
    """Generates class diagram markup for compilation units.

    The generator holds only configuration; every call to :meth:`generate`
    uses a fresh registry and relationship collector.
    """

    def __init__(self, options: GeneratorOptions | None = None) -> None:
        self.options = options or GeneratorOptions()

    def generate(self, unit: CompilationUnit) -> list[str]:
        """Return the diagram lines for *unit*, document markers included."""
        traversal = _Traversal(self.options, DeclaredTypeRegistry.from_nodes(unit.members))
        blocks = traversal.visit_nodes(unit.members, container=None)

        lines = [DOCUMENT_OPEN]
        for block in blocks:
            lines.extend(block.render(self.options.indent))
        lines.extend(traversal.relationships.render())
        lines.append(DOCUMENT_CLOSE)
        return lines


def generate(unit: CompilationUnit, options: GeneratorOptions | None = None) -> str:
    """Return the diagram text for *unit*, one line per entry, newline-terminated."""
    return "\n".join(ClassDiagramGenerator(options).generate(unit)) + "\n"


def type_header(decl: TypeDeclaration) -> str:
    """Return the opening line of a type block, without the brace."""
    keyword: str = decl.type_kind
    stereotypes: list[str] = []
    if decl.type_kind == "class":
        if "abstract" in decl.modifiers:
            keyword = "abstract class"
        if "static" in decl.modifiers:
            stereotypes.append("static")
    elif decl.type_kind == "record" and decl.is_record_struct:
        keyword = "struct"
        stereotypes.append("record")

    name = decl.name
    if decl.type_parameters:
        name += "<" + ", ".join(decl.type_parameters) + ">"
    suffix = "".join(f" <<{s}>>" for s in stereotypes)
    return f"{keyword} {name}{suffix}"


# ################
# Implementation
# ################


def _looks_like_interface(name: str) -> bool:
    """Apply the .NET naming convention: ``I`` followed by an uppercase letter."""
    name = simple_name(name).lstrip("@")
    return len(name) >= 2 and name[0] == "I" and name[1].isupper()


class _Traversal:
    """State of one generation run: the registry, filter, and edges found so far."""

    def __init__(self, options: GeneratorOptions, registry: DeclaredTypeRegistry) -> None:
        self._options = options
        self._registry = registry
        self._filter = AccessibilityFilter(options.ignore)
        self._renderer = MemberRenderer(self._filter)
        self.relationships = RelationshipCollector()

    def visit_nodes(self, nodes: Iterable[Node], container: TypeDeclaration | None) -> list[DiagramBlock]:
        """Build blocks for the namespaces and type declarations among *nodes*."""
        blocks: list[DiagramBlock] = []
        for node in nodes:
            if node.kind == "namespace":
                inner = self.visit_nodes(node.members, container=None)
                if self._options.namespace_packages:
                    blocks.append(DiagramBlock(header=f"namespace {node.name}", nested=inner))
                else:
                    blocks.extend(inner)
            elif node.kind == "type":
                block = self._visit_type(node, container)
                if block is not None:
                    blocks.append(block)
            # Members outside a type and unknown nodes contribute nothing.
        return blocks

    def _visit_type(self, decl: TypeDeclaration, container: TypeDeclaration | None) -> DiagramBlock | None:
        container_kind = container.type_kind if container is not None else None
        accessibility = effective_accessibility(decl.modifiers, container_kind)
        if not self._filter.should_emit(accessibility):
            if self._options.cascade_suppression:
                return None
            nested = self.visit_nodes(decl.members, container=decl)
            return DiagramBlock(header=None, nested=nested) if nested else None

        self._collect_bases(decl)
        block = DiagramBlock(header=type_header(decl))
        for member in decl.members:
            if member.kind == "type":
                nested_block = self._visit_type(member, decl)
                if nested_block is not None:
                    block.nested.append(nested_block)
                continue
            if member.kind == "namespace":
                continue
            line = self._renderer.render(member, decl.type_kind)
            if line is None:
                continue
            block.members.append(line)
            if self._options.create_association:
                self._collect_associations(decl, member)
        return block

    def _collect_bases(self, decl: TypeDeclaration) -> None:
        if decl.type_kind == "enum":
            # An enum base is its underlying integral type, not a supertype.
            return
        for index, base in enumerate(decl.base_types):
            self.relationships.add(
                RelationshipEdge(
                    source=decl.name,
                    target=bare_name(base),
                    kind=self._base_kind(decl, base, index),
                )
            )

    def _base_kind(self, decl: TypeDeclaration, base: TypeRef, index: int) -> RelationshipKind:
        """Classify a base type as superclass or implemented interface."""
        if decl.type_kind == "interface":
            return RelationshipKind.INHERITANCE
        if decl.type_kind == "struct" or decl.is_record_struct:
            return RelationshipKind.REALIZATION

        name = bare_name(base)
        declared = self._registry.kind_of(name)
        if declared == "interface":
            return RelationshipKind.REALIZATION
        if declared is not None:
            return RelationshipKind.INHERITANCE
        if _looks_like_interface(name) or index > 0:
            return RelationshipKind.REALIZATION
        return RelationshipKind.INHERITANCE

    def _collect_associations(self, decl: TypeDeclaration, member: MemberNode) -> None:
        label = getattr(member, "name", None) if self._options.association_labels else None
        for type_ref in member_type_refs(member):
            for name in referenced_type_names(type_ref):
                if name in self._registry:
                    self.relationships.add(
                        RelationshipEdge(
                            source=decl.name,
                            target=name,
                            kind=RelationshipKind.ASSOCIATION,
                            label=label,
                        )
                    )
