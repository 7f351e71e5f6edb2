# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the declared-type registry and relationship collector."""

from pumlgen.diagram import DeclaredTypeRegistry, RelationshipCollector, RelationshipEdge, RelationshipKind
from pumlgen.model import NamespaceDeclaration, TypeDeclaration

# ###############
# DeclaredTypeRegistry
# ###############


def test_registry_collects_nested_and_namespaced_types() -> None:
    """Types inside namespaces and other types are all registered."""
    nodes = [
        NamespaceDeclaration(
            name="App",
            members=(
                TypeDeclaration(
                    type_kind="class",
                    name="Outer",
                    members=(TypeDeclaration(type_kind="enum", name="Inner", modifiers=("private",)),),
                ),
            ),
        ),
        TypeDeclaration(type_kind="interface", name="IService"),
    ]
    registry = DeclaredTypeRegistry.from_nodes(nodes)

    assert len(registry) == 3
    assert "Outer" in registry
    assert "Inner" in registry
    assert registry.kind_of("IService") == "interface"
    assert registry.kind_of("Inner") == "enum"


def test_registry_ignores_qualifiers_on_lookup() -> None:
    """Qualified lookups resolve to the simple declared name."""
    registry = DeclaredTypeRegistry()
    registry.register("Widget", "class")
    assert "UI.Controls.Widget" in registry
    assert "Gadget" not in registry
    assert registry.kind_of("Gadget") is None


def test_first_registration_wins() -> None:
    """A second declaration of the same name keeps the first kind."""
    registry = DeclaredTypeRegistry()
    registry.register("Shape", "interface")
    registry.register("Shape", "class")
    assert registry.kind_of("Shape") == "interface"


# ###############
# RelationshipEdge rendering
# ###############


def test_edge_rendering() -> None:
    """Each relationship kind has its own arrow direction and style."""
    assert RelationshipEdge("Derived", "Base", RelationshipKind.INHERITANCE).render() == "Base <|-- Derived"
    assert RelationshipEdge("Impl", "IFoo", RelationshipKind.REALIZATION).render() == "IFoo <|.. Impl"
    assert RelationshipEdge("Owner", "Target", RelationshipKind.ASSOCIATION).render() == "Owner --> Target"
    labelled = RelationshipEdge("Owner", "Target", RelationshipKind.ASSOCIATION, label="Items")
    assert labelled.render() == 'Owner --> "Items" Target'


# ###############
# RelationshipCollector
# ###############


def test_collector_deduplicates_identical_edges() -> None:
    """An identical edge is recorded only once."""
    collector = RelationshipCollector()
    edge = RelationshipEdge("A", "B", RelationshipKind.ASSOCIATION)
    assert collector.add(edge) is True
    assert collector.add(RelationshipEdge("A", "B", RelationshipKind.ASSOCIATION)) is False
    assert collector.render() == ["A --> B"]


def test_collector_keeps_same_pair_with_different_kind() -> None:
    """Edges between the same types but of a different kind are all kept."""
    collector = RelationshipCollector()
    collector.add(RelationshipEdge("A", "B", RelationshipKind.INHERITANCE))
    collector.add(RelationshipEdge("A", "B", RelationshipKind.ASSOCIATION))
    assert collector.render() == ["B <|-- A", "A --> B"]


def test_collector_preserves_discovery_order() -> None:
    """Edges are rendered in the order they were first added."""
    collector = RelationshipCollector()
    for target in ["C", "A", "B", "A"]:
        collector.add(RelationshipEdge("X", target, RelationshipKind.ASSOCIATION))
    assert [e.target for e in collector.edges] == ["C", "A", "B"]
