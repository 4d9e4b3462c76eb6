"""Loading of override registries declared in YAML.

The file maps resource ids to their operation and class overrides::

    summoner:
      operations:
        "/summoner/by-name/{summonerNames}": SummonersByName
        "/summoner/{summonerIds}":
          name: Summoners
          map_key: int64
      classes:
        SummonerDto: Summoner
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from lol_api_doc.domain.enums import PrimitiveKind
from lol_api_doc.domain.exceptions import RegistryError

from .registry import OperationPatch, OverrideRegistry, RegistryBuilder, resource_patch

logger = logging.getLogger(__name__)


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects repeated mapping keys instead of keeping the last one."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise RegistryError(f"duplicate key {key!r} at line {key_node.start_mark.line + 1}")
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load_registry(path: str | Path, builder: RegistryBuilder | None = None) -> OverrideRegistry:
    """Read a YAML registry file, optionally on top of already collected patches."""
    file_path = Path(path)
    if not file_path.is_file():
        raise RegistryError(f"Registry file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        try:
            data = yaml.load(f, Loader=_UniqueKeyLoader)
        except yaml.YAMLError as e:
            raise RegistryError(f"Invalid YAML in registry file {file_path}: {e}") from e

    registry = registry_from_mapping(data, builder)
    logger.info("Loaded overrides for %d resources from %s", len(registry), file_path)
    return registry


def registry_from_mapping(data: Any, builder: RegistryBuilder | None = None) -> OverrideRegistry:
    if not isinstance(data, dict):
        raise RegistryError("Registry must be a mapping of resource ids")

    builder = builder or RegistryBuilder()
    for resource_id, section in data.items():
        if not isinstance(section, dict):
            raise RegistryError(f"Overrides of resource {resource_id!r} must be a mapping")
        unknown = set(section) - {"operations", "classes"}
        if unknown:
            raise RegistryError(f"Unknown sections {sorted(unknown)} in resource {resource_id!r}")

        operations = {
            str(suffix): _operation_patch(resource_id, suffix, value)
            for suffix, value in (section.get("operations") or {}).items()
        }
        classes = {str(orig): str(name) for orig, name in (section.get("classes") or {}).items()}
        builder.add(str(resource_id), resource_patch(operations, classes))
    return builder.build()


def _operation_patch(resource_id: str, suffix: str, value: Any) -> OperationPatch:
    if isinstance(value, str):
        return OperationPatch(value)

    if not isinstance(value, dict) or "name" not in value:
        raise RegistryError(f"Operation {suffix!r} in resource {resource_id!r} needs a name")

    map_key = value.get("map_key")
    if map_key is None:
        return OperationPatch(str(value["name"]))

    kind = PrimitiveKind.from_string(str(map_key))
    if kind is None:
        raise RegistryError(f"Unknown map key kind {map_key!r} for operation {suffix!r}")
    return OperationPatch(str(value["name"]), kind)
