"""HTTP method and primitive type kind enumerations."""

from __future__ import annotations

from enum import Enum


class HTTPMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"

    @classmethod
    def from_css_class(cls, css_class: str) -> HTTPMethod | None:
        return _CSS_CLASS_MAPPING.get(css_class)


class PrimitiveKind(Enum):
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    STRING = "string"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @classmethod
    def from_string(cls, kind: str) -> PrimitiveKind | None:
        try:
            return cls(kind.lower())
        except ValueError:
            return None


# Operation list items carry the method as a css class: <li class="operation get">
_CSS_CLASS_MAPPING: dict[str, HTTPMethod] = {
    "get": HTTPMethod.GET,
    "post": HTTPMethod.POST,
    "put": HTTPMethod.PUT,
}
