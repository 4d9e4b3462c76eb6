"""Domain entities describing a parsed API reference document."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .enums import HTTPMethod, PrimitiveKind
from .types import MapType, PrimitiveType, TypeRef

REGION_PARAMETER_NAMES = ("region", "platformId")

# Resources served from a dedicated host instead of the regional one.
_SPECIAL_API_BASES = {
    "lol-static-data": "https://global.api.pvp.net",
    "lol-status": "https://status.leagueoflegends.com",
}

_KEYLESS_RESOURCES = frozenset({"lol-status"})


@dataclass(frozen=True)
class Parameter:
    name: str
    type: TypeRef
    description: str = ""
    required: bool = False


def is_region_parameter(param: Parameter) -> bool:
    return param.name in REGION_PARAMETER_NAMES


def has_parameter(params: list[Parameter], name: str) -> bool:
    return any(p.name == name for p in params)


@dataclass(frozen=True)
class ResponseError:
    code: int
    reason: str


@dataclass(frozen=True)
class Field:
    original_name: str
    target_name: str
    type: TypeRef
    description: str = ""


@dataclass
class Schema:
    original_name: str
    target_name: str
    description: str = ""
    fields: list[Field] = field(default_factory=list)


@dataclass
class Resource:
    id: str
    version: str = ""
    regions: list[str] = field(default_factory=list)
    definitions: dict[str, Schema] = field(default_factory=dict)
    operations: list[Operation] = field(default_factory=list)

    def api_base(self) -> str:
        """Return the dedicated host of a special resource, or "" for regional ones."""
        return _SPECIAL_API_BASES.get(self.id, "")

    def needs_api_key(self) -> bool:
        return self.id not in _KEYLESS_RESOURCES

    def add_definition(self, schema: Schema) -> None:
        self.definitions[schema.original_name] = schema

    def __repr__(self) -> str:
        return (
            f"Resource(id='{self.id}', version='{self.version}', "
            f"operations={len(self.operations)}, definitions={len(self.definitions)})"
        )


@dataclass
class Operation:
    resource: Resource = field(repr=False, compare=False)
    http_method: HTTPMethod = HTTPMethod.GET
    request_path: str = ""
    description: str = ""
    target_name: str = ""
    path_params: list[Parameter] = field(default_factory=list)
    query_params: list[Parameter] = field(default_factory=list)
    return_type: TypeRef | None = None
    overridden_map_key: PrimitiveKind | None = None
    response_errors: list[ResponseError] = field(default_factory=list)
    implementation_notes: str = ""
    rate_limit_notes: str = ""

    @property
    def resource_id(self) -> str:
        return self.resource.id

    def api_base(self) -> str:
        return self.resource.api_base()

    def needs_api_key(self) -> bool:
        return self.resource.needs_api_key()

    def supported_regions(self) -> list[str]:
        return self.resource.regions

    def is_regional(self) -> bool:
        """Report whether the request host depends on a region.

        Normal resources are always regional. Resources with a dedicated host
        are regional only when a path parameter selects the region.
        """
        if self.api_base() == "":
            return True
        return any(is_region_parameter(p) for p in self.path_params)

    def effective_return_type(self) -> TypeRef | None:
        """Return type with the map key replaced by the override hint, if any."""
        if self.overridden_map_key is None or not isinstance(self.return_type, MapType):
            return self.return_type
        return replace(self.return_type, key=PrimitiveType(self.overridden_map_key))


@dataclass
class Document:
    resources: list[Resource] = field(default_factory=list)

    def resource(self, resource_id: str) -> Resource | None:
        for res in self.resources:
            if res.id == resource_id:
                return res
        return None

    def operations(self) -> list[Operation]:
        return [op for res in self.resources for op in res.operations]
