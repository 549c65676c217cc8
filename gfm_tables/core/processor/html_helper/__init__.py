# gfm_tables/core/processor/html_helper/__init__.py
"""HTML helper module exposing parsed HTML through the DOM interface."""

from gfm_tables.core.processor.html_helper.soup_node import SoupNode

__all__ = ['SoupNode']
