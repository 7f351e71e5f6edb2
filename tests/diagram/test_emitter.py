# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for class diagram emission."""

from pumlgen.diagram import ClassDiagramGenerator, DiagramBlock, GeneratorOptions, generate, type_header
from pumlgen.model import (
    Accessibilities,
    CompilationUnit,
    EnumMemberDeclaration,
    FieldDeclaration,
    GenericTypeRef,
    MethodDeclaration,
    NamedTypeRef,
    NamespaceDeclaration,
    Parameter,
    PropertyDeclaration,
    TypeDeclaration,
    UnknownNode,
)

# ###############
# Helpers
# ###############


def _n(name: str) -> NamedTypeRef:
    return NamedTypeRef(name=name)


def _class(name: str, *members: object, **kwargs: object) -> TypeDeclaration:
    kwargs.setdefault("modifiers", ("public",))
    return TypeDeclaration(type_kind="class", name=name, members=members, **kwargs)  # type: ignore[arg-type]


def _lines(*nodes: object, **options: object) -> list[str]:
    unit = CompilationUnit(members=nodes)  # type: ignore[arg-type]
    return ClassDiagramGenerator(GeneratorOptions(**options)).generate(unit)  # type: ignore[arg-type]


def _owner_and_target(field_modifiers: tuple[str, ...] = ("private",)) -> tuple[TypeDeclaration, TypeDeclaration]:
    owner = _class(
        "Owner",
        FieldDeclaration(
            name="Items",
            type=GenericTypeRef(name="List", arguments=(_n("Target"),)),
            modifiers=field_modifiers,
        ),
    )
    return owner, _class("Target")


# ###############
# Scenarios
# ###############


def test_empty_unit() -> None:
    """An empty unit yields only the document markers."""
    assert _lines() == ["@startuml", "@enduml"]


def test_single_empty_class() -> None:
    """A class without members is an empty block and has no relationships."""
    assert _lines(_class("A")) == ["@startuml", "class A {", "}", "@enduml"]


def test_inheritance() -> None:
    """A class deriving from a declared class produces one inheritance arrow."""
    lines = _lines(_class("Base"), _class("Derived", base_types=(_n("Base"),)))
    assert lines == [
        "@startuml",
        "class Base {",
        "}",
        "class Derived {",
        "}",
        "Base <|-- Derived",
        "@enduml",
    ]


def test_association_through_collection() -> None:
    """A field of List<Target> associates the owner with Target, not List."""
    owner, target = _owner_and_target()
    lines = _lines(owner, target, create_association=True)
    assert lines == [
        "@startuml",
        "class Owner {",
        "    - Items : List<Target>",
        "}",
        "class Target {",
        "}",
        "Owner --> Target",
        "@enduml",
    ]


def test_suppressed_member_produces_no_association() -> None:
    """Only emitted members take part in association discovery."""
    owner, target = _owner_and_target()
    lines = _lines(owner, target, create_association=True, ignore=Accessibilities.PRIVATE)
    assert lines == ["@startuml", "class Owner {", "}", "class Target {", "}", "@enduml"]


def test_nested_class_indentation() -> None:
    """A nested block opens one unit deeper than its container and its members one more."""
    inner = _class("Inner", FieldDeclaration(name="Value", type=_n("int"), modifiers=("public",)))
    outer = _class("Outer", FieldDeclaration(name="Count", type=_n("int"), modifiers=("public",)), inner)
    assert _lines(outer) == [
        "@startuml",
        "class Outer {",
        "    + Count : int",
        "    class Inner {",
        "        + Value : int",
        "    }",
        "}",
        "@enduml",
    ]


# ###############
# Properties
# ###############


def test_association_is_independent_of_declaration_order() -> None:
    """Forward and backward references produce the same single association."""
    owner, target = _owner_and_target()
    forward = _lines(owner, target, create_association=True)
    backward = _lines(target, owner, create_association=True)
    assert forward.count("Owner --> Target") == 1
    assert backward.count("Owner --> Target") == 1


def test_associations_are_off_by_default() -> None:
    """Association arrows require the association option."""
    owner, target = _owner_and_target()
    assert "Owner --> Target" not in _lines(owner, target)


def test_duplicate_associations_collapse() -> None:
    """Two members referencing the same type yield one unlabelled arrow."""
    owner = _class(
        "Owner",
        FieldDeclaration(name="First", type=_n("Target"), modifiers=("public",)),
        PropertyDeclaration(name="Second", type=_n("Target"), modifiers=("public",), accessors=("get",)),
    )
    lines = _lines(owner, _class("Target"), create_association=True)
    assert lines.count("Owner --> Target") == 1


def test_association_labels() -> None:
    """With labels enabled each member gets its own labelled arrow."""
    owner = _class(
        "Owner",
        FieldDeclaration(name="First", type=_n("Target"), modifiers=("public",)),
        MethodDeclaration(
            name="Use",
            return_type=_n("void"),
            modifiers=("public",),
            parameters=(Parameter(name="t", type=_n("Target")),),
        ),
    )
    lines = _lines(owner, _class("Target"), create_association=True, association_labels=True)
    assert 'Owner --> "First" Target' in lines
    assert 'Owner --> "Use" Target' in lines


def test_external_types_never_associate() -> None:
    """References to types not declared in the unit produce no arrow."""
    owner = _class("Owner", FieldDeclaration(name="Name", type=_n("string"), modifiers=("public",)))
    assert _lines(owner, create_association=True)[-2:] == ["}", "@enduml"]


def test_suppressed_container_hides_nested_types_but_not_siblings() -> None:
    """Suppressing a type hides its nested blocks; siblings stay."""
    hidden = _class("Hidden", _class("Child"), modifiers=("internal",))
    sibling = _class("Sibling")
    lines = _lines(hidden, sibling, ignore=Accessibilities.INTERNAL)
    assert lines == ["@startuml", "class Sibling {", "}", "@enduml"]


def test_suppression_without_cascade_keeps_nested_depth() -> None:
    """Without cascading, nested types keep their source indentation."""
    hidden = _class("Hidden", _class("Child"), modifiers=("internal",))
    lines = _lines(hidden, ignore=Accessibilities.INTERNAL, cascade_suppression=False)
    assert lines == ["@startuml", "    class Child {", "    }", "@enduml"]


def test_depth_matches_indent_repetitions() -> None:
    """A type nested d levels deep is indented by exactly d indent units."""
    innermost = _class("Level3")
    tree = _class("Level0", _class("Level1", _class("Level2", innermost)))
    lines = _lines(tree, indent="\t")
    for depth in range(4):
        pad = "\t" * depth
        assert f"{pad}class Level{depth} {{" in lines


def test_namespaces_are_transparent_by_default() -> None:
    """Namespaces add no block of their own."""
    unit_lines = _lines(NamespaceDeclaration(name="App", members=(_class("A"),)))
    assert unit_lines == ["@startuml", "class A {", "}", "@enduml"]


def test_namespace_packages() -> None:
    """With namespace packages, contents are wrapped and indented."""
    lines = _lines(NamespaceDeclaration(name="App", members=(_class("A"),)), namespace_packages=True)
    assert lines == ["@startuml", "namespace App {", "    class A {", "    }", "}", "@enduml"]


def test_unknown_nodes_are_ignored() -> None:
    """Unclassified nodes never abort generation."""
    lines = _lines(
        UnknownNode(raw_kind="global_statement"),
        _class("A", UnknownNode(raw_kind="operator_declaration", text="operator +")),
    )
    assert lines == ["@startuml", "class A {", "}", "@enduml"]


def test_relationships_follow_all_blocks() -> None:
    """All arrows come after the last block, in discovery order."""
    lines = _lines(
        _class("Derived", base_types=(_n("Base"), _n("IDisposable"))),
        _class("Base"),
    )
    assert lines[-3:] == ["Base <|-- Derived", "IDisposable <|.. Derived", "@enduml"]


# ###############
# Inheritance classification
# ###############


def test_declared_interface_base_is_realization() -> None:
    """A base declared as an interface is realized, even without the I prefix."""
    contract = TypeDeclaration(type_kind="interface", name="Contract", modifiers=("public",))
    lines = _lines(contract, _class("Impl", base_types=(_n("Contract"),)))
    assert "Contract <|.. Impl" in lines


def test_external_bases_use_naming_convention() -> None:
    """External bases: first non-interface name is the superclass, the rest are realized."""
    lines = _lines(_class("Form1", base_types=(_n("Form"), _n("INotify"), _n("Extra"))))
    assert lines[-4:-1] == ["Form <|-- Form1", "INotify <|.. Form1", "Extra <|.. Form1"]


def test_generic_base_uses_bare_name() -> None:
    """Generic arguments are dropped from arrow endpoints."""
    base = TypeDeclaration(type_kind="class", name="Repo", type_parameters=("T",), modifiers=("public",))
    derived = _class("UserRepo", base_types=(GenericTypeRef(name="Repo", arguments=(_n("User"),)),))
    lines = _lines(base, derived)
    assert "class Repo<T> {" in lines
    assert "Repo <|-- UserRepo" in lines


def test_interface_extending_interface_is_inheritance() -> None:
    """Interfaces inherit from their base interfaces."""
    child = TypeDeclaration(type_kind="interface", name="IChild", base_types=(_n("IParent"),))
    assert "IParent <|-- IChild" in _lines(child)


def test_struct_bases_are_realizations() -> None:
    """Struct bases can only be interfaces."""
    point = TypeDeclaration(type_kind="struct", name="Point", base_types=(_n("Equatable"),))
    assert "Equatable <|.. Point" in _lines(point)


def test_enum_underlying_type_is_not_a_relationship() -> None:
    """``enum Flags : byte`` has no arrow to byte."""
    flags = TypeDeclaration(
        type_kind="enum",
        name="Flags",
        base_types=(_n("byte"),),
        members=(EnumMemberDeclaration(name="A"), EnumMemberDeclaration(name="B")),
    )
    assert _lines(flags) == ["@startuml", "enum Flags {", "    A", "    B", "}", "@enduml"]


# ###############
# Headers and blocks
# ###############


def test_type_headers() -> None:
    """Each kind of type uses its own keyword and stereotypes."""
    assert type_header(TypeDeclaration(type_kind="class", name="Shape", modifiers=("abstract",))) == (
        "abstract class Shape"
    )
    assert type_header(TypeDeclaration(type_kind="class", name="Util", modifiers=("static",))) == (
        "class Util <<static>>"
    )
    assert type_header(TypeDeclaration(type_kind="interface", name="IFoo", type_parameters=("T", "U"))) == (
        "interface IFoo<T, U>"
    )
    assert type_header(TypeDeclaration(type_kind="struct", name="Point")) == "struct Point"
    assert type_header(TypeDeclaration(type_kind="record", name="Person")) == "record Person"
    assert type_header(TypeDeclaration(type_kind="record", name="Money", is_record_struct=True)) == (
        "struct Money <<record>>"
    )


def test_diagram_block_render() -> None:
    """Blocks render header, members and nested blocks with the given indent."""
    block = DiagramBlock(header="class A", members=["+ X : int"], nested=[DiagramBlock(header="class B")])
    assert block.render("  ") == ["class A {", "  + X : int", "  class B {", "  }", "}"]


def test_generate_returns_newline_terminated_text() -> None:
    """The text form joins lines with newlines and ends with one."""
    text = generate(CompilationUnit(members=(_class("A"),)))
    assert text == "@startuml\nclass A {\n}\n@enduml\n"


def test_generator_is_reusable() -> None:
    """State from one run does not leak into the next."""
    generator = ClassDiagramGenerator(GeneratorOptions(create_association=True))
    owner, target = _owner_and_target(("public",))
    first = generator.generate(CompilationUnit(members=(owner, target)))
    second = generator.generate(CompilationUnit(members=(_class("Other"),)))
    assert "Owner --> Target" in first
    assert second == ["@startuml", "class Other {", "}", "@enduml"]
