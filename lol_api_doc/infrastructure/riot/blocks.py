"""Parsing of the labelled content blocks inside an operation.

Each ``.api_block`` starts with an ``<h4>`` label that selects its handler.
"""

from __future__ import annotations

from typing import Callable

from lol_api_doc.domain.entities import (
    Field,
    Operation,
    Parameter,
    Resource,
    ResponseError,
    Schema,
    has_parameter,
)
from lol_api_doc.domain.exceptions import ApiDocError, StructuralError
from lol_api_doc.infrastructure.html.consume import (
    consume_exact,
    consume_table,
    consume_table_row,
    consume_text,
    read_text,
)
from lol_api_doc.infrastructure.html.selection import Sel
from lol_api_doc.infrastructure.overrides import repairs
from lol_api_doc.infrastructure.overrides.names import target_identifier
from lol_api_doc.infrastructure.overrides.registry import OverrideRegistry
from lol_api_doc.infrastructure.overrides.type_resolver import TypeResolver

from .context import ParseContext

RESPONSE_CLASSES = "Response Classes"
RESPONSE_ERRORS = "Response Errors"
QUERY_PARAMETERS = "Query Parameters"
PATH_PARAMETERS = "Path Parameters"
SELECT_REGION = "Select Region to Execute Against"
IMPLEMENTATION_NOTES = "Implementation Notes"
RATE_LIMIT_NOTES = "Rate Limit Notes"

RETURN_VALUE_LABEL = "Return Value:"

_REQUIRED_MARKERS = {"required": True, "optional": False}

BlockHandler = Callable[[ParseContext, Resource, Operation, Sel], None]


def _column(row: dict[str, str], name: str, table: Sel) -> str:
    if name not in row:
        raise StructuralError(f"table has no column {name!r}, columns are {list(row)}", table.dump())
    return row[name]


class ApiBlockParser:
    """Dispatches ``.api_block`` elements to the handler named by their label."""

    def __init__(self, registry: OverrideRegistry, types: TypeResolver) -> None:
        self._registry = registry
        self._types = types
        self._handlers: dict[str, BlockHandler] = {
            RESPONSE_CLASSES: self._parse_response_classes,
            RESPONSE_ERRORS: self._parse_response_errors,
            QUERY_PARAMETERS: self._parse_query_params,
            PATH_PARAMETERS: self._parse_path_params,
            SELECT_REGION: self._skip_block,
            IMPLEMENTATION_NOTES: self._parse_implementation_notes,
            RATE_LIMIT_NOTES: self._parse_rate_limit_notes,
        }

    def parse(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        block.ensure(".api_block")

        # the status api has an empty .api_block
        if len(block.children()) == 0:
            return

        label = consume_text(block.children().first().ensure("h4"))
        handler = self._handlers.get(label)
        if handler is None:
            raise StructuralError(f"unknown api block {label!r}", block.dump())
        handler(ctx, res, op, block)

    # --- Response Classes ---

    def _parse_response_classes(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        for body in block.children_filtered(".block.response_body").reverse():
            count = len(body.children())
            if count == 1:
                self._parse_return_value(ctx, res, op, body)
            elif count == 3:
                schema = self._parse_response_class(ctx, res, body)
                if schema.original_name in res.definitions:
                    ctx.logger.debug("class %r documented again", schema.original_name)
                res.add_definition(schema)
            else:
                raise StructuralError(f"unexpected child count {count} from response classes", body.dump())

    def _parse_return_value(self, ctx: ParseContext, res: Resource, op: Operation, body: Sel) -> None:
        """Parse ``<b>Return Value:</b> $class``."""
        consume_exact(body.children().first().ensure("b"), RETURN_VALUE_LABEL)

        raw = read_text(body)
        try:
            op.return_type = self._types.resolve(res.id, raw)
        except ApiDocError as err:
            err.add_note(f"failed to parse return value of {op.request_path!r}")
            err.add_note(body.dump())
            raise
        body.replace_with_comment(f"return: {raw}")
        ctx.logger.debug("return value: %r", raw)

    def _parse_response_class(self, ctx: ParseContext, res: Resource, body: Sel) -> Schema:
        """Parse ``<b>$class</b> - $description <br> <table> $fields </table>``."""
        body.ensure(".response_body")

        original_name = consume_text(body.children().first().ensure("b"))
        try:
            schema = Schema(original_name, self._registry.class_name(res.id, original_name))
            ctx = ctx.with_field("class", schema.target_name)

            body.children().first().ensure("br").remove()

            table = body.children().first().ensure("table")
            for row in consume_table(table):
                raw_name = _column(row, "Name", table)
                type_str = repairs.field_type(res.id, original_name, raw_name, _column(row, "Data Type", table))
                try:
                    field_type = self._types.resolve(res.id, type_str)
                except ApiDocError as err:
                    err.add_note(f"failed to parse type of field {raw_name!r}")
                    err.add_note(table.dump())
                    raise
                schema.fields.append(
                    Field(raw_name, target_identifier(raw_name), field_type, _column(row, "Description", table))
                )
            table.remove()

            schema.description = read_text(body).removeprefix("-").strip()
        except ApiDocError as err:
            err.add_note(f"failed to parse class {original_name!r}")
            err.add_note(body.dump())
            raise

        body.replace_with_comment(f"class: {original_name}")
        ctx.logger.debug("parsed class with %d fields", len(schema.fields))
        return schema

    # --- Response Errors ---

    def _parse_response_errors(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        table = block.children().first()
        errors: list[ResponseError] = []
        for row in consume_table(table):
            code = _column(row, "HTTP Status Code", table)
            if not code.isdigit():
                raise StructuralError(f"invalid HTTP status code {code!r}", block.dump())
            errors.append(ResponseError(int(code), _column(row, "Reason", table)))

        op.response_errors = errors
        block.replace_with_comment("<table> Response Errors </table>")

    # --- Parameters ---

    def _parse_query_params(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        table = block.children().first().ensure("table")
        op.query_params = self._parse_param_table(ctx, res, table, path=False)

    def _parse_path_params(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        table = block.children().first().ensure("table.table")
        for param in self._parse_param_table(ctx, res, table, path=True):
            if has_parameter(op.path_params, param.name):
                ctx.logger.debug("path param %r already declared", param.name)
                continue
            op.path_params.append(param)

    def _parse_param_table(self, ctx: ParseContext, res: Resource, table: Sel, path: bool) -> list[Parameter]:
        thead = table.children_filtered("thead")
        if len(thead) == 1:
            consume_table_row(thead.must_be_single().children().must_be_single(), is_head=True)
        tbody = table.children_filtered("tbody").must_be_single().ensure(".operation-params")

        params = [self._parse_param_row(res, tr, path) for tr in tbody.children()]
        for param in params:
            ctx.logger.debug("%s param %r", "path" if path else "query", param.name)
        return params

    def _parse_param_row(self, res: Resource, tr: Sel, path: bool) -> Parameter:
        tr.ensure("tr")

        code = tr.children().first().ensure("td.code")
        marker = consume_text(code.children_filtered("div.required").must_be_single())
        if marker not in _REQUIRED_MARKERS:
            raise StructuralError(f"unknown parameter marker {marker!r}", tr.dump())
        name = consume_text(code)

        last = tr.children().last().ensure("td")
        type_cell: Sel | None = None
        signature = last.children_filtered("span.model-signature")
        if len(signature) != 0:
            # description and type signature share the last cell
            type_str = consume_text(signature.must_be_single())
            description = consume_text(last)
        else:
            description = consume_text(last)
            type_cell = tr.children().last().ensure("td")
            type_str = read_text(type_cell.children().first().ensure("span.model-signature"))

        if path:
            type_str = repairs.path_param_type(name, type_str)
        try:
            param_type = self._types.resolve(res.id, type_str)
        except ApiDocError as err:
            err.add_note(f"failed to parse type of parameter {name!r}")
            err.add_note(tr.dump())
            raise

        if type_cell is not None:
            type_cell.remove()

        return Parameter(name=name, type=param_type, description=description, required=_REQUIRED_MARKERS[marker])

    # --- Notes ---

    def _parse_implementation_notes(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        # has a single <p> as a child
        op.implementation_notes = consume_text(block.children().must_be_single().ensure("p"))

    def _parse_rate_limit_notes(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        # <p> <span> $text </span> </p>
        p = block.children().must_be_single().ensure("p")
        op.rate_limit_notes = consume_text(p.children().must_be_single().ensure("span"))

    def _skip_block(self, ctx: ParseContext, res: Resource, op: Operation, block: Sel) -> None:
        block.replace_with_comment(f"ignored: {SELECT_REGION}")
