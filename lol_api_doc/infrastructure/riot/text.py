"""Parsing of small text fragments found in resource headings."""

from __future__ import annotations


def parse_resource_id_version(s: str) -> tuple[str, str]:
    """Split ``"champion-v1.2"`` into ``("champion", "v1.2")`` at the last dash.

    Without a dash the whole string is the id; strings shorter than two
    characters yield two empty strings.
    """
    if len(s) < 2:
        return "", ""
    resource_id, sep, version = s.rpartition("-")
    if not sep:
        return s, ""
    return resource_id, version


def parse_regions(src: str) -> list[str]:
    """Parse ``"[BR, EUNE, EUW]"`` into ``["BR", "EUNE", "EUW"]``.

    Region lists are optional decoration, so anything not bracketed yields an
    empty list.
    """
    src = "".join(src.split())
    if len(src) <= 2:
        return []
    if src[0] != "[" or src[-1] != "]":
        return []
    return [region for region in src[1:-1].split(",") if region]
