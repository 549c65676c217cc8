"""Shared test configuration and fixtures."""

import pytest
from bs4 import BeautifulSoup

from gfm_tables import MarkdownConverter, SoupNode, tables


@pytest.fixture
def converter() -> MarkdownConverter:
    """Converter with the table rules registered."""
    return MarkdownConverter().use(tables)


@pytest.fixture
def to_markdown(converter):
    """Convert an HTML string to Markdown with the table rules."""

    def _convert(html: str) -> str:
        return converter.convert_soup(BeautifulSoup(html, "lxml"))

    return _convert


@pytest.fixture
def find_node():
    """Parse HTML with lxml and wrap the n-th matching tag in a SoupNode."""

    def _find(html: str, tag: str, index: int = 0) -> SoupNode:
        soup = BeautifulSoup(html, "lxml")
        return SoupNode(soup.find_all(tag)[index])

    return _find
