"""Resolution of vendor type strings into structured types.

Grammar::

    Type      := Primitive | "List[" Type "]" | "Set[" Type "]"
               | "Map[" Type "," Type "]" | ClassName
    Primitive := boolean | int | long | string | double | float

Class names always go through the override registry, apart from the few
classes listed in :mod:`.repairs`.
"""

from __future__ import annotations

import logging

from lol_api_doc.domain.enums import PrimitiveKind
from lol_api_doc.domain.exceptions import MalformedTypeError
from lol_api_doc.domain.types import ListType, MapType, NamedType, PrimitiveType, TypeRef

from . import repairs
from .registry import OverrideRegistry

logger = logging.getLogger(__name__)

JAVA_PRIMITIVES: dict[str, PrimitiveKind] = {
    "boolean": PrimitiveKind.BOOL,
    "int": PrimitiveKind.INT32,
    "long": PrimitiveKind.INT64,
    "string": PrimitiveKind.STRING,
    "double": PrimitiveKind.FLOAT64,
    "float": PrimitiveKind.FLOAT32,
}

# Both are ordered sequences at the type level.
_SEQUENCE_PREFIXES = ("List[", "Set[")
_MAP_PREFIX = "Map["


def split_type_terms(s: str) -> list[str]:
    """Split on commas that are not nested inside brackets."""
    terms: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(s):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == "," and depth == 0:
            terms.append(s[start:i].strip())
            start = i + 1
    terms.append(s[start:].strip())
    return terms


class TypeResolver:
    """Resolves type strings within one registry."""

    def __init__(self, registry: OverrideRegistry) -> None:
        self._registry = registry

    def resolve(self, resource_id: str, raw: str) -> TypeRef:
        s = raw.strip()

        kind = JAVA_PRIMITIVES.get(s)
        if kind is not None:
            return PrimitiveType(kind)

        if not s:
            raise MalformedTypeError(raw, "cannot resolve an empty type string")

        for prefix in _SEQUENCE_PREFIXES:
            if s.startswith(prefix) and s.endswith("]"):
                return ListType(self.resolve(resource_id, s[len(prefix):-1]))

        if s.startswith(_MAP_PREFIX) and s.endswith("]"):
            terms = split_type_terms(s[len(_MAP_PREFIX):-1])
            if len(terms) != 2:
                raise MalformedTypeError(raw, f"map needs 2 type terms, but has {len(terms)}")
            return MapType(self.resolve(resource_id, terms[0]), self.resolve(resource_id, terms[1]))

        if "[" in s or "]" in s or "," in s:
            raise MalformedTypeError(raw, "unbalanced or unknown composite type")

        return self.resolve_class(resource_id, s)

    def resolve_class(self, resource_id: str, class_name: str) -> NamedType:
        if repairs.bypasses_registry(resource_id, class_name):
            logger.debug("class %r in resource %r bypasses the registry", class_name, resource_id)
            return NamedType(class_name)
        return NamedType(self._registry.class_name(resource_id, class_name))

    def region_type(self) -> NamedType:
        return NamedType(repairs.REGION_TYPE_NAME)
