"""Recursive-descent parser for the API reference page.

The walk is ``Document -> Resource* -> Endpoint* -> Operation* -> ApiBlock*``.
Every level asserts the shape it expects and fails instead of trying another
interpretation. The parser works on a private copy of the input tree and
consumes it as it goes; the copy is kept as :attr:`RiotDocumentParser.last_tree`
so whatever was left unconsumed can be inspected afterwards.
"""

from __future__ import annotations

import copy
import logging

from bs4 import BeautifulSoup

from lol_api_doc.domain.entities import Document, Operation, Parameter, Resource
from lol_api_doc.domain.enums import HTTPMethod
from lol_api_doc.domain.exceptions import ApiDocError, StructuralError
from lol_api_doc.domain.types import MapType
from lol_api_doc.infrastructure.html.cleanup import remaining_content, remove_if_useless
from lol_api_doc.infrastructure.html.consume import consume_text, read_text
from lol_api_doc.infrastructure.html.selection import Sel
from lol_api_doc.infrastructure.overrides import repairs
from lol_api_doc.infrastructure.overrides.default_patches import default_registry
from lol_api_doc.infrastructure.overrides.registry import OverrideRegistry
from lol_api_doc.infrastructure.overrides.type_resolver import TypeResolver

from .blocks import ApiBlockParser
from .context import ParseContext
from .text import parse_regions, parse_resource_id_version

logger = logging.getLogger(__name__)

# html > body > #wrap > .body.container
CONTAINER_PATH = ("html", "body", "#wrap", ".body.container")
API_DETAIL_SELECTOR = ".row .span12 #api_detail"


class RiotDocumentParser:
    """Parses the reference page into a :class:`Document`."""

    def __init__(self, registry: OverrideRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._types = TypeResolver(self._registry)
        self._blocks = ApiBlockParser(self._registry, self._types)
        self.last_tree: BeautifulSoup | None = None
        self._last_container: Sel | None = None

    def parse(self, soup: BeautifulSoup, ctx: ParseContext | None = None) -> Document:
        """Parse a page. The given tree is left untouched."""
        ctx = ctx or ParseContext()
        tree = copy.copy(soup)
        self.last_tree = tree

        container = Sel(tree)
        for selector in CONTAINER_PATH:
            container = container.children_filtered(selector).must_be_single()

        remove_if_useless(container)
        self._last_container = container

        doc = Document()
        for detail in container.find(API_DETAIL_SELECTOR):
            detail.ensure("div#api_detail")
            resources = detail.children().first().ensure("ul#resources")

            for li in resources.children():
                res = self._parse_resource(ctx, li)
                if res is None:
                    continue
                doc.resources.append(res)

        logger.info("Parsed %d resources", len(doc.resources))
        return doc

    def unconsumed(self) -> list[str]:
        """Text the last parse left live inside the documentation container."""
        if self._last_container is None:
            return []
        return remaining_content(self._last_container)

    def _parse_resource(self, ctx: ParseContext, li: Sel) -> Resource | None:
        li.ensure("li.resource")

        heading = li.children_filtered(".heading").must_be_single()
        heading.children_filtered("ul.options").must_be_single().remove()

        a = heading.children().first().ensure("h2").children().first().ensure("a")
        resource_id, version = parse_resource_id_version(read_text(a.children().first().ensure("span")))
        # [BR, EUNE, ..., TR]
        regions = parse_regions(read_text(a.children().last().ensure("span")))

        if repairs.is_skipped_resource(resource_id):
            ctx.logger.warning("skipping resource %r", resource_id)
            li.replace_with_comment(f"skipped resource: {resource_id}")
            return None

        heading.replace_with_comment(f"resource: {resource_id} {version}")
        res = Resource(id=resource_id, version=version, regions=regions)
        ctx = ctx.with_resource(resource_id)

        try:
            for endpoint in li.children_filtered("ul.endpoints").children():
                res.operations.extend(self._parse_endpoint(ctx, res, endpoint))
        except ApiDocError as err:
            err.add_note(f"failed to parse resource {resource_id!r}")
            raise

        ctx.logger.info("parsed resource %r", resource_id)
        return res

    def _parse_endpoint(self, ctx: ParseContext, res: Resource, li: Sel) -> list[Operation]:
        li.ensure("li.endpoint")
        return [self._parse_operation(ctx, res, op) for op in li.children_filtered("ul.operations").children()]

    def _parse_operation(self, ctx: ParseContext, res: Resource, li: Sel) -> Operation:
        """Parse one ``li.operation``.

        ``.heading > .path`` holds the request path and ``.heading > .options``
        the description; the method is one of the item's css classes.
        """
        li.ensure("li.operation")

        op = Operation(resource=res, http_method=self._http_method(li))

        heading = li.children_filtered("div.heading").must_be_single()
        op.request_path = consume_text(
            heading.children_filtered(".path").must_be_single().children().must_be_single()
        )
        op.description = consume_text(
            heading.children_filtered("ul.options").must_be_single()
            .children().must_be_single().ensure("li")
            .children().must_be_single().ensure("a")
        )
        heading.remove()

        # region placeholders are never listed in the parameters table
        for name in repairs.region_placeholders(op.request_path):
            op.path_params.append(Parameter(name=name, type=self._types.region_type(), required=True))

        try:
            patch = self._registry.for_operation(res.id, op.request_path)
        except ApiDocError as err:
            err.add_note(li.dump())
            raise
        op.target_name = patch.name
        op.overridden_map_key = patch.map_key

        for block in li.find(".content .api_block"):
            try:
                self._blocks.parse(ctx, res, op, block)
            except ApiDocError as err:
                err.add_note(f"failed to parse api block of {op.request_path!r}")
                raise

        if op.overridden_map_key is not None and not isinstance(op.return_type, MapType):
            raise StructuralError(
                f"operation {op.request_path!r} overrides the map key, "
                f"but returns {op.return_type or 'nothing'}",
                li.dump(),
            )
        return op

    def _http_method(self, li: Sel) -> HTTPMethod:
        for css_class in li.tag.get("class") or []:
            method = HTTPMethod.from_css_class(css_class)
            if method is not None:
                return method
        raise StructuralError("unknown operation method", li.dump())


def parse_document(
    soup: BeautifulSoup,
    registry: OverrideRegistry | None = None,
    ctx: ParseContext | None = None,
) -> Document:
    return RiotDocumentParser(registry).parse(soup, ctx)
