# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""C# front end built on tree-sitter.

Converts C# source text into the :mod:`pumlgen.model.syntax` surface. Only
declarations are examined; method bodies, expressions and attributes are
ignored. Source with syntax errors still yields a best-effort tree because
tree-sitter recovers from errors locally.
"""

from __future__ import annotations

import tree_sitter
import tree_sitter_c_sharp

from pumlgen.model.syntax import (
    CompilationUnit,
    ConstructorDeclaration,
    EnumMemberDeclaration,
    EventDeclaration,
    FieldDeclaration,
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

# ###############
# Public Interface
# ###############

CSHARP_LANGUAGE = tree_sitter.Language(tree_sitter_c_sharp.language())


def parse(source: str) -> CompilationUnit:
    """Parse C# source text into a :class:`CompilationUnit`.

    Args:
        source: The full text of a ``.cs`` file.

    Returns:
        The declarations found in the file, in source order.
    """
    data = source.lstrip("\ufeff").encode("utf-8")
    tree = tree_sitter.Parser(CSHARP_LANGUAGE).parse(data)
    return _Converter(data).convert(tree.root_node)


# ################
# Implementation
# ################

_TYPE_DECLARATIONS: dict[str, TypeKind] = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "struct_declaration": "struct",
    "enum_declaration": "enum",
    "record_declaration": "record",
    "record_struct_declaration": "record",
}

_NAMESPACE_DECLARATIONS = frozenset({"namespace_declaration", "file_scoped_namespace_declaration"})

# Named nodes that carry no declaration of interest.
_IGNORED_NODES = frozenset(
    {
        "comment",
        "attribute_list",
        "using_directive",
        "extern_alias_directive",
        "global_attribute",
        "global_attribute_list",
        "global_statement",
        "shebang_directive",
        "modifier",
        "identifier",
        "qualified_name",
        "type_parameter_list",
        "type_parameter_constraints_clause",
        "base_list",
        "parameter_list",
    }
)

_PARAMETER_MODIFIERS = frozenset({"ref", "out", "in", "params", "this", "scoped", "readonly"})

_ACCESSOR_KEYWORDS = ("get", "set", "init", "add", "remove")


class _Converter:
    """Converts a tree-sitter C# tree into syntax surface nodes."""

    def __init__(self, source: bytes) -> None:
        self._source = source

    def convert(self, root: tree_sitter.Node) -> CompilationUnit:
        members: list[Node] = []
        file_namespace: tuple[str, list[Node]] | None = None
        for child in root.named_children:
            if child.type == "file_scoped_namespace_declaration":
                # Depending on the grammar version the namespace members are
                # either children of this node or the siblings that follow it.
                file_namespace = (self._name_of(child), self._declarations(child))
                continue
            converted = self._declaration(child, container_kind=None)
            if converted is None:
                continue
            if file_namespace is not None:
                file_namespace[1].extend(converted)
            else:
                members.extend(converted)
        if file_namespace is not None:
            name, inner = file_namespace
            members.append(NamespaceDeclaration(name=name, members=tuple(inner)))
        return CompilationUnit(members=tuple(members))

    # -------- declarations --------

    def _declarations(self, node: tree_sitter.Node, container_kind: str | None = None) -> list[Node]:
        """Convert every declaration among the named children of *node*."""
        result: list[Node] = []
        for child in node.named_children:
            converted = self._declaration(child, container_kind)
            if converted:
                result.extend(converted)
        return result

    def _declaration(self, node: tree_sitter.Node, container_kind: str | None) -> list[Node] | None:
        """Convert one declaration node; None means the node is not a declaration."""
        kind = node.type
        if kind in _IGNORED_NODES or kind.startswith("preproc") or not node.is_named:
            return None
        if kind in _NAMESPACE_DECLARATIONS:
            body = node.child_by_field_name("body") or _child_of_type(node, "declaration_list") or node
            return [NamespaceDeclaration(name=self._name_of(node), members=tuple(self._declarations(body)))]
        if kind == "declaration_list":
            return self._declarations(node, container_kind)
        if kind in _TYPE_DECLARATIONS:
            return [self._type_declaration(node, _TYPE_DECLARATIONS[kind])]
        if container_kind is None:
            # Statements and stray members at file scope are not diagram content.
            return None
        if kind == "field_declaration":
            return list(self._fields(node))
        if kind == "event_field_declaration":
            return list(self._field_events(node))
        if kind == "property_declaration":
            return [self._property(node)]
        if kind == "method_declaration":
            return [self._method(node)]
        if kind == "constructor_declaration":
            return [self._constructor(node)]
        if kind == "event_declaration":
            return [self._event(node)]
        if kind == "enum_member_declaration":
            return [EnumMemberDeclaration(name=self._name_of(node))]
        return [UnknownNode(raw_kind=kind, text=self._text(node))]

    def _type_declaration(self, node: tree_sitter.Node, type_kind: TypeKind) -> TypeDeclaration:
        name = self._name_of(node)
        is_record_struct = node.type == "record_struct_declaration" or (
            type_kind == "record" and any(c.type == "struct" for c in node.children)
        )

        members: list[Node] = []
        parameters = _child_of_type(node, "parameter_list")
        if type_kind == "record" and parameters is not None:
            # Positional record parameters declare public init-only properties.
            for param in self._parameters(parameters):
                if param.type is not None:
                    members.append(
                        PropertyDeclaration(
                            name=param.name,
                            type=param.type,
                            modifiers=("public",),
                            accessors=("get", "init"),
                        )
                    )

        body = node.child_by_field_name("body")
        if body is None:
            body = _child_of_type(node, "declaration_list") or _child_of_type(node, "enum_member_declaration_list")
        if body is not None:
            members.extend(self._declarations(body, container_kind=type_kind))

        return TypeDeclaration(
            type_kind=type_kind,
            name=name,
            modifiers=self._modifiers(node),
            type_parameters=self._type_parameters(node),
            base_types=self._base_types(node),
            members=tuple(members),
            is_record_struct=is_record_struct,
        )

    # -------- members --------

    def _fields(self, node: tree_sitter.Node) -> list[FieldDeclaration]:
        modifiers = self._modifiers(node)
        declaration = _child_of_type(node, "variable_declaration")
        if declaration is None:
            return []
        type_ref = self._declared_type(declaration)
        return [
            FieldDeclaration(
                name=self._name_of(declarator),
                type=type_ref,
                modifiers=modifiers,
                initializer=self._initializer(declarator),
            )
            for declarator in self._declarators(declaration)
        ]

    def _field_events(self, node: tree_sitter.Node) -> list[EventDeclaration]:
        modifiers = self._modifiers(node)
        declaration = _child_of_type(node, "variable_declaration")
        if declaration is None:
            return []
        type_ref = self._declared_type(declaration)
        return [
            EventDeclaration(name=self._name_of(declarator), type=type_ref, modifiers=modifiers)
            for declarator in self._declarators(declaration)
        ]

    def _property(self, node: tree_sitter.Node) -> PropertyDeclaration:
        accessors: list[str] = []
        accessor_list = node.child_by_field_name("accessors") or _child_of_type(node, "accessor_list")
        if accessor_list is not None:
            for accessor in accessor_list.named_children:
                if accessor.type == "accessor_declaration":
                    keyword = self._accessor_keyword(accessor)
                    if keyword:
                        accessors.append(keyword)
        elif _child_of_type(node, "arrow_expression_clause") is not None:
            accessors.append("get")
        return PropertyDeclaration(
            name=self._name_of(node),
            type=self._declared_type(node),
            modifiers=self._modifiers(node),
            accessors=tuple(accessors),
            initializer=self._initializer(node) if accessor_list is not None else None,
        )

    def _method(self, node: tree_sitter.Node) -> MethodDeclaration:
        returns = node.child_by_field_name("returns") or node.child_by_field_name("type")
        parameters = node.child_by_field_name("parameters") or _child_of_type(node, "parameter_list")
        return MethodDeclaration(
            name=self._name_of(node),
            return_type=self.type_ref(returns) if returns is not None else NamedTypeRef(name="void"),
            modifiers=self._modifiers(node),
            type_parameters=self._type_parameters(node),
            parameters=tuple(self._parameters(parameters)) if parameters is not None else (),
        )

    def _constructor(self, node: tree_sitter.Node) -> ConstructorDeclaration:
        parameters = node.child_by_field_name("parameters") or _child_of_type(node, "parameter_list")
        return ConstructorDeclaration(
            name=self._name_of(node),
            modifiers=self._modifiers(node),
            parameters=tuple(self._parameters(parameters)) if parameters is not None else (),
        )

    def _event(self, node: tree_sitter.Node) -> EventDeclaration:
        return EventDeclaration(
            name=self._name_of(node),
            type=self._declared_type(node),
            modifiers=self._modifiers(node),
        )

    def _parameters(self, node: tree_sitter.Node) -> list[Parameter]:
        result: list[Parameter] = []
        # Some grammar versions put `params T[] name` straight into the list
        # instead of wrapping it in a parameter node.
        params_type: tree_sitter.Node | None = None
        in_params = False
        for param in node.children:
            if param.type == "params":
                in_params, params_type = True, None
                continue
            if in_params and param.is_named and param.type not in ("attribute_list", "comment"):
                if params_type is None:
                    params_type = param
                    continue
                result.append(Parameter(name=self._text(param), type=self.type_ref(params_type), modifier="params"))
                in_params = False
                continue
            if param.type not in ("parameter", "parameter_array"):
                continue
            type_node = param.child_by_field_name("type")
            name_node = param.child_by_field_name("name")
            if type_node is None or name_node is None:
                # Older grammars leave these fields unnamed.
                candidates = [c for c in param.named_children if c.type not in ("attribute_list", "modifier")]
                candidates = [c for c in candidates if c.type != "equals_value_clause"]
                if name_node is None and candidates:
                    name_node = candidates[-1]
                if type_node is None and len(candidates) > 1:
                    type_node = candidates[0]
            modifiers = [self._text(c) for c in param.children if self._text(c) in _PARAMETER_MODIFIERS]
            result.append(
                Parameter(
                    name=self._text(name_node) if name_node is not None else "",
                    type=self.type_ref(type_node) if type_node is not None else None,
                    modifier=" ".join(modifiers) or None,
                )
            )
        return result

    # -------- types --------

    def type_ref(self, node: tree_sitter.Node) -> TypeRef:
        """Convert a type node into a :data:`TypeRef`, falling back to raw text."""
        kind = node.type
        if kind in ("identifier", "predefined_type", "implicit_type", "alias_qualified_name"):
            return NamedTypeRef(name=self._text(node))
        if kind == "qualified_name":
            last = node.child_by_field_name("name") or node.named_children[-1]
            if last.type == "generic_name":
                qualifier = node.child_by_field_name("qualifier") or node.named_children[0]
                inner = self.type_ref(last)
                if inner.kind == "generic":
                    return inner.model_copy(update={"name": f"{self._text(qualifier)}.{inner.name}"})
            return NamedTypeRef(name=self._text(node))
        if kind == "generic_name":
            name_node = node.child_by_field_name("name") or _child_of_type(node, "identifier")
            args = _child_of_type(node, "type_argument_list")
            arguments = tuple(self.type_ref(a) for a in args.named_children) if args is not None else ()
            # `Foo<>` in typeof() has no named arguments; it renders as the open type.
            name = self._text(name_node) if name_node is not None else self._text(node).split("<", 1)[0]
            return GenericTypeRef(name=name, arguments=arguments)
        if kind == "nullable_type":
            inner = node.child_by_field_name("type") or node.named_children[0]
            return NullableTypeRef(inner=self.type_ref(inner))
        if kind == "array_type":
            element = node.child_by_field_name("type") or node.named_children[0]
            rank = node.child_by_field_name("rank") or _child_of_type(node, "array_rank_specifier")
            dimensions = 1 + sum(1 for c in rank.children if c.type == ",") if rank is not None else 1
            return ArrayTypeRef(element=self.type_ref(element), rank=dimensions)
        if kind == "tuple_type":
            elements: list[TypeRef] = []
            for element in node.named_children:
                if element.type != "tuple_element":
                    continue
                type_node = element.child_by_field_name("type") or element.named_children[0]
                elements.append(self.type_ref(type_node))
            return TupleTypeRef(elements=tuple(elements))
        return RawTypeRef(text=self._text(node))

    def _declared_type(self, node: tree_sitter.Node) -> TypeRef:
        type_node = node.child_by_field_name("type")
        if type_node is None:
            named = [c for c in node.named_children if c.type not in ("attribute_list", "modifier")]
            if not named:
                return RawTypeRef(text="")
            type_node = named[0]
        return self.type_ref(type_node)

    def _base_types(self, node: tree_sitter.Node) -> tuple[TypeRef, ...]:
        base_list = node.child_by_field_name("bases") or _child_of_type(node, "base_list")
        if base_list is None:
            return ()
        bases: list[TypeRef] = []
        for child in base_list.named_children:
            if child.type in ("argument_list", "comment"):
                continue
            if child.type == "primary_constructor_base_type":
                inner = child.child_by_field_name("type") or child.named_children[0]
                bases.append(self.type_ref(inner))
            else:
                bases.append(self.type_ref(child))
        return tuple(bases)

    # -------- helpers --------

    def _modifiers(self, node: tree_sitter.Node) -> tuple[str, ...]:
        return tuple(self._text(c) for c in node.children if c.type == "modifier")

    def _type_parameters(self, node: tree_sitter.Node) -> tuple[str, ...]:
        params = node.child_by_field_name("type_parameters") or _child_of_type(node, "type_parameter_list")
        if params is None:
            return ()
        names: list[str] = []
        for param in params.named_children:
            if param.type != "type_parameter":
                continue
            name_node = param.child_by_field_name("name") or _child_of_type(param, "identifier")
            names.append(self._text(name_node) if name_node is not None else self._text(param))
        return tuple(names)

    def _declarators(self, declaration: tree_sitter.Node) -> list[tree_sitter.Node]:
        return [c for c in declaration.named_children if c.type == "variable_declarator"]

    def _initializer(self, node: tree_sitter.Node) -> str | None:
        """Return the text of the expression after ``=`` in *node*, if any."""
        clause = _child_of_type(node, "equals_value_clause")
        if clause is not None:
            node = clause
        seen_equals = False
        for child in node.children:
            if child.type == "=":
                seen_equals = True
            elif seen_equals and child.is_named and child.type != "comment":
                return self._text(child)
        return None

    def _accessor_keyword(self, accessor: tree_sitter.Node) -> str | None:
        name_node = accessor.child_by_field_name("name")
        if name_node is not None:
            return self._text(name_node)
        for child in accessor.children:
            if child.type in _ACCESSOR_KEYWORDS:
                return child.type
        return None

    def _name_of(self, node: tree_sitter.Node) -> str:
        name_node = node.child_by_field_name("name") or _child_of_type(node, "identifier")
        if name_node is None:
            name_node = _child_of_type(node, "qualified_name")
        return self._text(name_node) if name_node is not None else ""

    def _text(self, node: tree_sitter.Node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _child_of_type(node: tree_sitter.Node, type_name: str) -> tree_sitter.Node | None:
    for child in node.children:
        if child.type == type_name:
            return child
    return None
