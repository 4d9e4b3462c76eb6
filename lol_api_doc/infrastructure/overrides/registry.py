"""Curated override registry keyed by resource id.

The reference page does not name things the way generated code should, and
sometimes leaves out information entirely. The registry supplies, per
resource, the target name of every operation (keyed by a request path
suffix) and of every response class (keyed by its original name).

A registry is built once through :class:`RegistryBuilder` and is immutable
afterwards, so it can be shared freely between parses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Union

from lol_api_doc.domain.enums import PrimitiveKind
from lol_api_doc.domain.exceptions import (
    AmbiguousPatchError,
    DuplicateResourceError,
    PatchRequiredError,
    RegistryError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationPatch:
    # Method name on the generated client.
    name: str
    # Key kind to use when the documented return value is a map whose key
    # type the page does not state.
    map_key: PrimitiveKind | None = None


@dataclass(frozen=True)
class ClassPatch:
    name: str


def _normalize_suffix(suffix: str) -> str:
    return suffix.strip().rstrip("/")


@dataclass(frozen=True)
class ResourcePatch:
    operations: Mapping[str, OperationPatch] = field(default_factory=dict)
    classes: Mapping[str, ClassPatch] = field(default_factory=dict)

    def __post_init__(self) -> None:
        operations: dict[str, OperationPatch] = {}
        for suffix, op in self.operations.items():
            key = _normalize_suffix(suffix)
            if not key:
                raise RegistryError(f"operation suffix {suffix!r} is empty and would match every path")
            if key in operations:
                raise AmbiguousPatchError(suffix, [key, suffix])
            operations[key] = op
        object.__setattr__(self, "operations", MappingProxyType(operations))
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))

    def operation_for(self, resource_id: str, path: str) -> OperationPatch:
        """Select the patch whose suffix matches ``path``; the longest suffix wins."""
        target = _normalize_suffix(path)
        matches = [suffix for suffix in self.operations if target.endswith(suffix)]
        if not matches:
            raise PatchRequiredError(resource_id, f"operation {path!r}")

        # suffixes are unique, so two matches of equal length cannot exist
        return self.operations[max(matches, key=len)]

    def class_for(self, resource_id: str, class_name: str) -> ClassPatch:
        patch = self.classes.get(class_name)
        if patch is None:
            raise PatchRequiredError(resource_id, f"class {class_name!r}")
        return patch


PatchValue = Union[str, OperationPatch]


def resource_patch(
    operations: Mapping[str, PatchValue] | None = None,
    classes: Mapping[str, str] | None = None,
) -> ResourcePatch:
    """Build a :class:`ResourcePatch` from plain target names.

    Operation values may be a name or a full :class:`OperationPatch` when a
    map key hint is needed.
    """
    return ResourcePatch(
        operations={
            suffix: value if isinstance(value, OperationPatch) else OperationPatch(value)
            for suffix, value in (operations or {}).items()
        },
        classes={orig: ClassPatch(name) for orig, name in (classes or {}).items()},
    )


class OverrideRegistry:
    """Read-only lookup of resource patches."""

    def __init__(self, resources: Mapping[str, ResourcePatch]) -> None:
        self._resources = MappingProxyType(dict(resources))

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)

    def for_resource(self, resource_id: str) -> ResourcePatch:
        patch = self._resources.get(resource_id)
        if patch is None:
            raise PatchRequiredError(resource_id)
        return patch

    def for_operation(self, resource_id: str, path: str) -> OperationPatch:
        return self.for_resource(resource_id).operation_for(resource_id, path)

    def for_class(self, resource_id: str, class_name: str) -> ClassPatch:
        return self.for_resource(resource_id).class_for(resource_id, class_name)

    def operation_name(self, resource_id: str, path: str) -> str:
        return self.for_operation(resource_id, path).name

    def class_name(self, resource_id: str, class_name: str) -> str:
        return self.for_class(resource_id, class_name).name


class RegistryBuilder:
    """Collects resource patches and freezes them into an :class:`OverrideRegistry`."""

    def __init__(self) -> None:
        self._resources: dict[str, ResourcePatch] = {}

    def add(self, resource_id: str, patch: ResourcePatch) -> RegistryBuilder:
        if resource_id in self._resources:
            raise DuplicateResourceError(resource_id)
        self._resources[resource_id] = patch
        return self

    def build(self) -> OverrideRegistry:
        logger.debug("Built override registry with %d resources", len(self._resources))
        return OverrideRegistry(self._resources)
