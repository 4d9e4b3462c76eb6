"""Mapper: converts a parsed document into JSON-ready structures for code emitters."""

from __future__ import annotations

import json
from typing import Any

from lol_api_doc.domain.entities import (
    Document,
    Field,
    Operation,
    Parameter,
    Resource,
    ResponseError,
    Schema,
)
from lol_api_doc.domain.types import ListType, MapType, NamedType, PrimitiveType, TypeRef


def type_to_dict(typ: TypeRef | None) -> dict[str, Any] | None:
    if typ is None:
        return None
    if isinstance(typ, PrimitiveType):
        return {"kind": "primitive", "name": typ.kind.value}
    if isinstance(typ, ListType):
        return {"kind": "list", "elem": type_to_dict(typ.elem)}
    if isinstance(typ, MapType):
        return {"kind": "map", "key": type_to_dict(typ.key), "value": type_to_dict(typ.value)}
    if isinstance(typ, NamedType):
        return {"kind": "named", "name": typ.name}
    raise TypeError(f"unsupported type {typ!r}")


def parameter_to_dict(param: Parameter) -> dict[str, Any]:
    return {
        "name": param.name,
        "description": param.description,
        "required": param.required,
        "type": type_to_dict(param.type),
    }


def response_error_to_dict(err: ResponseError) -> dict[str, Any]:
    return {"code": err.code, "reason": err.reason}


def field_to_dict(f: Field) -> dict[str, Any]:
    return {
        "original_name": f.original_name,
        "target_name": f.target_name,
        "type": type_to_dict(f.type),
        "description": f.description,
    }


def schema_to_dict(schema: Schema) -> dict[str, Any]:
    return {
        "original_name": schema.original_name,
        "target_name": schema.target_name,
        "description": schema.description,
        "fields": [field_to_dict(f) for f in schema.fields],
    }


def operation_to_dict(op: Operation) -> dict[str, Any]:
    return {
        "target_name": op.target_name,
        "http_method": op.http_method.value,
        "request_path": op.request_path,
        "description": op.description,
        "path_params": [parameter_to_dict(p) for p in op.path_params],
        "query_params": [parameter_to_dict(p) for p in op.query_params],
        "return_type": type_to_dict(op.return_type),
        "overridden_map_key": op.overridden_map_key.value if op.overridden_map_key else None,
        "response_errors": [response_error_to_dict(e) for e in op.response_errors],
        "implementation_notes": op.implementation_notes,
        "rate_limit_notes": op.rate_limit_notes,
        "regional": op.is_regional(),
    }


def resource_to_dict(res: Resource) -> dict[str, Any]:
    return {
        "id": res.id,
        "version": res.version,
        "regions": list(res.regions),
        "api_base": res.api_base(),
        "needs_api_key": res.needs_api_key(),
        "definitions": [schema_to_dict(s) for s in res.definitions.values()],
        "operations": [operation_to_dict(op) for op in res.operations],
    }


def document_to_dict(doc: Document) -> dict[str, Any]:
    return {"resources": [resource_to_dict(res) for res in doc.resources]}


def document_to_json(doc: Document, indent: int | None = 2) -> str:
    return json.dumps(document_to_dict(doc), ensure_ascii=False, indent=indent)
