"""Loading of reference pages into BeautifulSoup trees."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from lol_api_doc.domain.exceptions import ApiDocError

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"


def load_html(html: str | bytes) -> BeautifulSoup:
    """Parse HTML markup into a tree."""
    return BeautifulSoup(html, HTML_PARSER)


def load_html_file(path: str | Path, encoding: str = "utf-8") -> BeautifulSoup:
    """Read and parse a saved reference page."""
    file_path = Path(path)
    if not file_path.is_file():
        raise ApiDocError(f"HTML file not found: {file_path}")

    with open(file_path, encoding=encoding) as f:
        html = f.read()

    logger.info("Loaded %d characters from %s", len(html), file_path)
    return load_html(html)
