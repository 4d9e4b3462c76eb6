"""Explicit diagnostic context threaded through the parser stages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping

_parser_logger = logging.getLogger("lol_api_doc.infrastructure.riot")


class _FieldsAdapter(logging.LoggerAdapter):
    """Prefixes every message with the context fields, e.g. ``[resource=summoner]``."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        if not self.extra:
            return msg, kwargs
        prefix = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"[{prefix}] {msg}", kwargs


@dataclass(frozen=True)
class ParseContext:
    resource_id: str = ""
    fields: Mapping[str, str] = field(default_factory=dict)
    base_logger: logging.Logger = field(default=_parser_logger, repr=False, compare=False)

    @property
    def logger(self) -> logging.LoggerAdapter:
        return _FieldsAdapter(self.base_logger, dict(self.fields))

    def with_field(self, key: str, value: str) -> ParseContext:
        return ParseContext(self.resource_id, {**self.fields, key: value}, self.base_logger)

    def with_resource(self, resource_id: str) -> ParseContext:
        ctx = self.with_field("resource", resource_id)
        return ParseContext(resource_id, ctx.fields, self.base_logger)
