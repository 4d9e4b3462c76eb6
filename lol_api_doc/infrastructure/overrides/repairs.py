"""Named exception tables for gaps and inconsistencies in the reference page.

Each table is a deliberate, narrow repair of the upstream documentation. They
are kept apart from the registry so they can be audited on their own.
"""

from __future__ import annotations

from lol_api_doc.domain.entities import REGION_PARAMETER_NAMES

# Resources whose API family the client does not support.
SKIPPED_RESOURCES = frozenset({"tournament-provider"})

# Path placeholders in REGION_PARAMETER_NAMES select the region but are never
# declared in a parameters table; they are typed as this class.
REGION_TYPE_NAME = "Region"

# Classes referenced by the page that need no registry entry.
GLOBAL_BYPASS_CLASSES = frozenset({REGION_TYPE_NAME})
RESOURCE_BYPASS_CLASSES: dict[str, frozenset[str]] = {
    "lol-static-data": frozenset({"SpellRange"}),
}

# Path parameters documented with the wrong type.
PATH_PARAM_TYPE_REPAIRS: dict[str, str] = {
    "summonerIds": "List[long]",
    "summonerNames": "List[string]",
}

# (resource id, class name, field name) -> type string.
FIELD_TYPE_REPAIRS: dict[tuple[str, str, str], str] = {
    ("lol-static-data", "SummonerSpellDto", "effect"): "List[List[double]]",
    ("lol-static-data", "SummonerSpellDto", "range"): "SpellRange",
    ("lol-static-data", "ChampionSpellDto", "effect"): "List[List[double]]",
    ("lol-static-data", "ChampionSpellDto", "range"): "SpellRange",
}


def is_skipped_resource(resource_id: str) -> bool:
    return resource_id in SKIPPED_RESOURCES


def bypasses_registry(resource_id: str, class_name: str) -> bool:
    if class_name in GLOBAL_BYPASS_CLASSES:
        return True
    return class_name in RESOURCE_BYPASS_CLASSES.get(resource_id, frozenset())


def path_param_type(param_name: str, type_str: str) -> str:
    return PATH_PARAM_TYPE_REPAIRS.get(param_name, type_str)


def field_type(resource_id: str, class_name: str, field_name: str, type_str: str) -> str:
    return FIELD_TYPE_REPAIRS.get((resource_id, class_name, field_name), type_str)


def region_placeholders(request_path: str) -> list[str]:
    """Return the region placeholders present in a request path template."""
    return [name for name in REGION_PARAMETER_NAMES if "{" + name + "}" in request_path]
