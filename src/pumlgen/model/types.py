# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type reference representations for the pumlgen syntax surface."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class NamedTypeRef(BaseModel):
    """Reference to a simple, qualified, or predefined type by name.

    The name is kept exactly as spelled in source, including the ``@``
    prefix of a verbatim identifier.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str


class GenericTypeRef(BaseModel):
    """Reference to a generic type such as ``Dictionary<string, Foo>``.

    An empty argument list denotes an open (unbound) generic type.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["generic"] = "generic"
    name: str
    arguments: tuple[TypeRef, ...] = ()


class NullableTypeRef(BaseModel):
    """Reference to a nullable type, ``T?``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nullable"] = "nullable"
    inner: TypeRef


class ArrayTypeRef(BaseModel):
    """Reference to an array type.

    Attributes:
        element: The element type; jagged arrays nest another ArrayTypeRef.
        rank: Number of dimensions of this rank specifier (``int[,]`` has 2).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element: TypeRef
    rank: int = 1


class TupleTypeRef(BaseModel):
    """Reference to a tuple type; element names are not retained."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tuple"] = "tuple"
    elements: tuple[TypeRef, ...] = ()


class RawTypeRef(BaseModel):
    """A type whose shape was not recognised, kept as its source text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    text: str


# The `kind` discriminator field enables fast, unambiguous validation.
TypeRef = Annotated[
    NamedTypeRef | GenericTypeRef | NullableTypeRef | ArrayTypeRef | TupleTypeRef | RawTypeRef,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that use TypeRef.
GenericTypeRef.model_rebuild()
NullableTypeRef.model_rebuild()
ArrayTypeRef.model_rebuild()
TupleTypeRef.model_rebuild()
