"""Markdown formatter for parsed API documents."""

from __future__ import annotations

from lol_api_doc.domain.entities import Document, Operation, Parameter, Resource, Schema


class MarkdownFormatter:
    """Formats a parsed document as a Markdown summary."""

    def format_error(self, exception: Exception) -> str:
        notes = "".join(f"\n{note}" for note in getattr(exception, "__notes__", []))
        return f"**Error:** {exception}{notes}\n"

    def format_document(self, doc: Document) -> str:
        if not doc.resources:
            return "No resources found.\n"

        operations = doc.operations()
        parts: list[str] = [
            f"# API reference ({len(doc.resources)} resources, {len(operations)} operations)\n",
            "| Resource | Version | Operations | Classes |",
            "|----------|---------|------------|---------|",
        ]
        for res in doc.resources:
            parts.append(f"| `{res.id}` | {res.version} | {len(res.operations)} | {len(res.definitions)} |")
        parts.append("")

        for res in doc.resources:
            parts.append(self.format_resource(res))

        return "\n".join(parts)

    def format_resource(self, res: Resource) -> str:
        parts: list[str] = [f"## {res.id} ({res.version})\n"]

        if res.regions:
            parts.append(f"**Regions:** {', '.join(res.regions)}\n")
        if res.api_base():
            parts.append(f"**Host:** {res.api_base()}\n")

        for op in res.operations:
            parts.append(self.format_operation(op))

        if res.definitions:
            parts.append(f"### Classes ({len(res.definitions)})\n")
            for schema in res.definitions.values():
                parts.append(self.format_schema(schema))

        return "\n".join(parts)

    def format_operation(self, op: Operation) -> str:
        parts: list[str] = [
            f"### {op.target_name}\n",
            f"```\n{op.http_method.value} {op.request_path}\n```\n",
        ]

        if op.description:
            parts.append(op.description)
            parts.append("")

        params = op.path_params + op.query_params
        if params:
            parts.append("**Parameters:**\n")
            for p in params:
                parts.append(_format_parameter(p))
            parts.append("")

        returns = op.effective_return_type()
        if returns is not None:
            parts.append(f"**Returns:** `{returns}`\n")

        if op.response_errors:
            codes = ", ".join(str(e.code) for e in op.response_errors)
            parts.append(f"**Errors:** {codes}\n")

        if op.rate_limit_notes:
            parts.append(f"*{op.rate_limit_notes}*\n")

        return "\n".join(parts)

    def format_schema(self, schema: Schema) -> str:
        parts: list[str] = [f"#### {schema.target_name} (`{schema.original_name}`)\n"]

        if schema.description:
            parts.append(schema.description)
            parts.append("")

        for f in schema.fields:
            desc = f" — {f.description}" if f.description else ""
            parts.append(f"- `{f.target_name}` `{f.type}`{desc}")
        parts.append("")

        return "\n".join(parts)

    def format_audit(self, remaining: list[str]) -> str:
        if not remaining:
            return "All content consumed.\n"

        parts: list[str] = [f"**Unconsumed content ({len(remaining)}):**\n"]
        for text in remaining[:20]:
            short = text[:80]
            if len(text) > 80:
                short += "..."
            parts.append(f"- {short}")
        if len(remaining) > 20:
            parts.append(f"- ... and {len(remaining) - 20} more")
        parts.append("")
        return "\n".join(parts)


def _format_parameter(p: Parameter) -> str:
    req = " *(required)*" if p.required else ""
    desc = f" — {p.description}" if p.description else ""
    return f"- `{p.name}` `{p.type}`{req}{desc}"
