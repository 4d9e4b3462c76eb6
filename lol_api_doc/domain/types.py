"""Structured type representation produced by the type resolver.

A type is one of four frozen value objects. ``NamedType`` only references a
class by its resolved target name; class bodies live in
``Resource.definitions``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .enums import PrimitiveKind


@dataclass(frozen=True)
class PrimitiveType:
    kind: PrimitiveKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ListType:
    elem: TypeRef

    def __str__(self) -> str:
        return f"[]{self.elem}"


@dataclass(frozen=True)
class MapType:
    key: TypeRef
    value: TypeRef

    def __str__(self) -> str:
        return f"map[{self.key}]{self.value}"


@dataclass(frozen=True)
class NamedType:
    name: str

    def __str__(self) -> str:
        return f"*{self.name}"


TypeRef = Union[PrimitiveType, ListType, MapType, NamedType]
