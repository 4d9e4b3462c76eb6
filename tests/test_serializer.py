"""Tests for the JSON mapper."""

import json

from lol_api_doc.domain.entities import Document, Field, Operation, Parameter, Resource, ResponseError, Schema
from lol_api_doc.domain.enums import HTTPMethod, PrimitiveKind
from lol_api_doc.domain.types import ListType, MapType, NamedType, PrimitiveType
from lol_api_doc.presentation.serializer import document_to_dict, document_to_json, type_to_dict

LONG = PrimitiveType(PrimitiveKind.INT64)


class TestTypeToDict:
    def test_nested(self):
        typ = MapType(LONG, ListType(NamedType("Summoner")))
        assert type_to_dict(typ) == {
            "kind": "map",
            "key": {"kind": "primitive", "name": "int64"},
            "value": {"kind": "list", "elem": {"kind": "named", "name": "Summoner"}},
        }

    def test_none(self):
        assert type_to_dict(None) is None


class TestDocumentToDict:
    def _document(self) -> Document:
        res = Resource(id="lol-static-data", version="v1.2", regions=["NA"])
        res.add_definition(Schema("RealmDto", "Realm", "realm data", [Field("v", "V", PrimitiveType(PrimitiveKind.STRING))]))
        res.operations.append(
            Operation(
                resource=res,
                http_method=HTTPMethod.GET,
                request_path="/api/lol/static-data/{region}/v1.2/realm",
                target_name="Realm",
                path_params=[Parameter("region", NamedType("Region"), required=True)],
                return_type=NamedType("Realm"),
                overridden_map_key=None,
                response_errors=[ResponseError(500, "Internal server error")],
            )
        )
        return Document(resources=[res])

    def test_resource(self):
        data = document_to_dict(self._document())
        res = data["resources"][0]
        assert res["id"] == "lol-static-data"
        assert res["api_base"] == "https://global.api.pvp.net"
        assert res["needs_api_key"] is True
        assert res["definitions"][0]["fields"][0] == {
            "original_name": "v",
            "target_name": "V",
            "type": {"kind": "primitive", "name": "string"},
            "description": "",
        }

    def test_operation(self):
        op = document_to_dict(self._document())["resources"][0]["operations"][0]
        assert op["http_method"] == "GET"
        assert op["regional"] is True
        assert op["overridden_map_key"] is None
        assert op["path_params"][0]["required"] is True
        assert op["response_errors"] == [{"code": 500, "reason": "Internal server error"}]

    def test_map_key_hint(self):
        doc = self._document()
        doc.resources[0].operations[0].overridden_map_key = PrimitiveKind.INT64
        op = document_to_dict(doc)["resources"][0]["operations"][0]
        assert op["overridden_map_key"] == "int64"

    def test_json_is_valid(self):
        assert json.loads(document_to_json(self._document())) == document_to_dict(self._document())
