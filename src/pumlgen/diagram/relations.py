# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declared-type registry and relationship collection for one traversal.

Both objects are owned by a single generator run and never shared, so
independent compilation units can be processed concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pumlgen.diagram.formatter import simple_name
from pumlgen.model.syntax import Node, TypeKind

# ###############
# Public Interface
# ###############


class RelationshipKind(Enum):
    """Kinds of relationship arrows and their notation."""

    INHERITANCE = "<|--"
    REALIZATION = "<|.."
    ASSOCIATION = "-->"


@dataclass(frozen=True)
class RelationshipEdge:
    """A directed relationship between two types.

    For inheritance and realization the *target* is the base type and the
    *source* the derived type; the arrow is written ``target <|-- source``.
    For associations the arrow is written ``source --> target``.

    Attributes:
        source: Name of the derived or owning type.
        target: Name of the base or referenced type.
        kind: The relationship kind.
        label: Optional role label for associations (the member name).
    """

    source: str
    target: str
    kind: RelationshipKind
    label: str | None = None

    def render(self) -> str:
        """Return the diagram line for this edge."""
        if self.kind is RelationshipKind.ASSOCIATION:
            if self.label:
                return f'{self.source} {self.kind.value} "{self.label}" {self.target}'
            return f"{self.source} {self.kind.value} {self.target}"
        return f"{self.target} {self.kind.value} {self.source}"


class DeclaredTypeRegistry:
    """Names of the types declared within one compilation unit.

    Names are registered without generic parameters or namespace
    qualifiers. The first declaration of a name determines its kind.
    """

    def __init__(self) -> None:
        self._kinds: dict[str, TypeKind] = {}

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node]) -> DeclaredTypeRegistry:
        """Build a registry by walking every type declaration under *nodes*.

        Registration ignores accessibility, so relationship detection does
        not depend on which declarations end up being rendered.
        """
        registry = cls()
        registry._register_all(nodes)
        return registry

    def register(self, name: str, kind: TypeKind) -> None:
        """Record *name* as a declared type of the given *kind*."""
        self._kinds.setdefault(simple_name(name), kind)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and simple_name(name) in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def kind_of(self, name: str) -> TypeKind | None:
        """Return the declared kind of *name*, or None if it is not declared here."""
        return self._kinds.get(simple_name(name))

    def _register_all(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            if node.kind == "namespace":
                self._register_all(node.members)
            elif node.kind == "type":
                self.register(node.name, node.type_kind)
                self._register_all(node.members)


class RelationshipCollector:
    """Accumulates relationship edges in first-discovered order.

    Edges are deduplicated on the full ``(source, target, kind, label)``
    tuple, so the same pair may appear once per relationship kind.
    """

    def __init__(self) -> None:
        self._edges: dict[RelationshipEdge, None] = {}

    def add(self, edge: RelationshipEdge) -> bool:
        """Record *edge*; return False if an identical edge was already seen."""
        if edge in self._edges:
            return False
        self._edges[edge] = None
        return True

    @property
    def edges(self) -> list[RelationshipEdge]:
        """Collected edges in discovery order."""
        return list(self._edges)

    def render(self) -> list[str]:
        """Return one diagram line per collected edge."""
        return [edge.render() for edge in self._edges]
