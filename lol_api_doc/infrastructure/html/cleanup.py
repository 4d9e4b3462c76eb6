"""Pruning of presentational subtrees and audit of unconsumed content."""

from __future__ import annotations

import logging

from .selection import Sel, is_text

logger = logging.getLogger(__name__)

USELESS_TAGS = frozenset({"head", "script", "style", "title"})
USELESS_LINK_RELS = frozenset({"stylesheet", "shortcut icon"})
USELESS_SELECTORS = (
    "div#footer",
    "div.navbar",
    "div.header.container.ezreal",
    "div#inputs-link",
    ".sandbox_header",
)
STRIPPED_ATTRIBUTES = ("onclick", "style")


def is_useless(sel: Sel) -> bool:
    if sel.name in USELESS_TAGS:
        return True

    if sel.name == "link" and sel.attr("rel") in USELESS_LINK_RELS:
        return True

    if any(sel.is_(selector) for selector in USELESS_SELECTORS):
        return True

    # placeholder used for sticky footers
    if sel.is_("div.push") and len(sel.children()) == 0:
        return True

    return False


def remove_if_useless(sel: Sel) -> bool:
    """Prune ``sel`` and its useless descendants. Returns True if ``sel`` was removed.

    A node is checked again after its children are pruned because it may only
    become useless once they are gone.
    """
    if is_useless(sel):
        logger.debug("pruned <%s>", sel.name)
        sel.remove()
        return True

    for name in STRIPPED_ATTRIBUTES:
        if name in sel.tag.attrs:
            del sel.tag.attrs[name]

    for child in sel.children():
        remove_if_useless(child)

    if is_useless(sel):
        sel.remove()
        return True
    return False


def remaining_content(sel: Sel) -> list[str]:
    """List the live, non-whitespace text left under ``sel``."""
    remaining: list[str] = []
    for node in sel.tag.descendants:
        if is_text(node) and node.strip():
            remaining.append(node.strip())
    return remaining
