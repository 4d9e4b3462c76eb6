"""Tests for resolution of vendor type strings."""

import pytest

from lol_api_doc.domain.enums import PrimitiveKind
from lol_api_doc.domain.exceptions import MalformedTypeError, PatchRequiredError
from lol_api_doc.domain.types import ListType, MapType, NamedType, PrimitiveType
from lol_api_doc.infrastructure.overrides.type_resolver import TypeResolver, split_type_terms


@pytest.fixture
def resolver(registry):
    return TypeResolver(registry)


class TestPrimitives:
    @pytest.mark.parametrize(
        "raw,kind",
        [
            ("boolean", PrimitiveKind.BOOL),
            ("int", PrimitiveKind.INT32),
            ("long", PrimitiveKind.INT64),
            ("string", PrimitiveKind.STRING),
            ("double", PrimitiveKind.FLOAT64),
            ("float", PrimitiveKind.FLOAT32),
        ],
    )
    def test_primitive(self, resolver, raw, kind):
        assert resolver.resolve("test", raw) == PrimitiveType(kind)

    def test_surrounding_whitespace(self, resolver):
        assert resolver.resolve("test", "  long ") == PrimitiveType(PrimitiveKind.INT64)

    def test_empty_string(self, resolver):
        with pytest.raises(MalformedTypeError):
            resolver.resolve("test", "")


class TestComposites:
    def test_list_of_map(self, resolver):
        result = resolver.resolve("test", "List[Map[string, int]]")
        assert result == ListType(MapType(PrimitiveType(PrimitiveKind.STRING), PrimitiveType(PrimitiveKind.INT32)))
        assert str(result) == "[]map[string]int32"

    def test_set_is_a_list(self, resolver):
        assert resolver.resolve("test", "Set[long]") == ListType(PrimitiveType(PrimitiveKind.INT64))

    def test_nested_map_value(self, resolver):
        result = resolver.resolve("test", "Map[string, List[ThingDto]]")
        assert result == MapType(PrimitiveType(PrimitiveKind.STRING), ListType(NamedType("Thing")))

    def test_map_with_one_term(self, resolver):
        with pytest.raises(MalformedTypeError, match="map needs 2 type terms, but has 1"):
            resolver.resolve("test", "Map[string]")

    def test_map_with_three_terms(self, resolver):
        with pytest.raises(MalformedTypeError, match="but has 3"):
            resolver.resolve("test", "Map[string, int, long]")

    def test_unclosed_list(self, resolver):
        with pytest.raises(MalformedTypeError):
            resolver.resolve("test", "List[long")

    def test_empty_list_element(self, resolver):
        with pytest.raises(MalformedTypeError):
            resolver.resolve("test", "List[]")


class TestClasses:
    def test_registry_name(self, resolver):
        assert resolver.resolve("test", "ThingDto") == NamedType("Thing")

    def test_unknown_class(self, resolver):
        with pytest.raises(PatchRequiredError) as exc_info:
            resolver.resolve("test", "UnknownDto")
        assert exc_info.value.resource_id == "test"
        assert "UnknownDto" in str(exc_info.value)

    def test_unknown_resource(self, resolver):
        with pytest.raises(PatchRequiredError, match="resource 'missing'"):
            resolver.resolve("missing", "ThingDto")

    def test_region_bypasses_registry(self, resolver):
        assert resolver.resolve("test", "Region") == NamedType("Region")
        assert resolver.region_type() == NamedType("Region")

    def test_resource_scoped_bypass(self, resolver):
        assert resolver.resolve("lol-static-data", "SpellRange") == NamedType("SpellRange")
        with pytest.raises(PatchRequiredError):
            resolver.resolve("test", "SpellRange")


class TestSplitTypeTerms:
    def test_top_level_only(self):
        assert split_type_terms("string, Map[int, long]") == ["string", "Map[int, long]"]

    def test_single_term(self):
        assert split_type_terms("List[long]") == ["List[long]"]
