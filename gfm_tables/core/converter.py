# gfm_tables/core/converter.py
"""
Markdown Converter - markdownify Host with Registered Table Rules

markdownify converts children before parents and hands each convert_<tag>
hook the element plus its already-converted Markdown. The table hooks wrap
the element in a SoupNode and dispatch to the rule registered for the tag;
everything else (emphasis, links, lists, paragraphs) is markdownify's own
conversion.

Usage Example:
    from bs4 import BeautifulSoup
    from gfm_tables import MarkdownConverter, tables

    converter = MarkdownConverter().use(tables)
    soup = BeautifulSoup(html, "lxml")
    markdown = converter.convert_soup(soup)
"""
import logging
import re
from typing import Callable, Iterable, Optional, Union

import markdownify
from bs4 import Tag

from gfm_tables.core.processor.html_helper.soup_node import SoupNode
from gfm_tables.core.rules import RuleRegistry

logger = logging.getLogger("gfm-tables")

Plugin = Callable[[RuleRegistry], object]


class MarkdownConverter(markdownify.MarkdownConverter):
    """markdownify converter whose table hooks dispatch to a RuleRegistry.

    Tags without a registered rule keep markdownify's default conversion.
    """

    class Options(markdownify.MarkdownConverter.DefaultOptions):
        # Cell sanitizing doubles backslashes, so text escapes would be doubled too
        escape_asterisks = False
        escape_underscores = False
        escape_misc = False

    def __init__(self, registry: Optional[RuleRegistry] = None, **options):
        super().__init__(**options)
        self.registry = registry if registry is not None else RuleRegistry()
        self.logger = logging.getLogger("gfm-tables")

    def use(self, plugin: Union[Plugin, Iterable[Plugin]]) -> "MarkdownConverter":
        """Apply one plugin, or a list of plugins, to the registry."""
        if callable(plugin):
            plugin(self.registry)
        else:
            for item in plugin:
                item(self.registry)
        return self

    def convert_soup(self, soup: Tag) -> str:
        output = super().convert_soup(soup)
        output = re.sub(r'\n{3,}', '\n\n', output)
        return output.strip()

    def _apply_rule(self, el: Tag, text: str, fallback: Optional[Callable[..., str]], parent_tags) -> str:
        node = SoupNode(el)
        rule = self.registry.find_rule(node)
        if rule is not None:
            return rule.replacement(text, node)
        if fallback is not None:
            return fallback(el, text, parent_tags=parent_tags)
        return text

    def convert_table(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, super().convert_table, parent_tags)

    def convert_tr(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, super().convert_tr, parent_tags)

    def convert_td(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, super().convert_td, parent_tags)

    def convert_th(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, super().convert_th, parent_tags)

    def convert_caption(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, getattr(super(), "convert_caption", None), parent_tags)

    def convert_thead(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, None, parent_tags)

    def convert_tbody(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, None, parent_tags)

    def convert_tfoot(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, None, parent_tags)

    def convert_colgroup(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, None, parent_tags)

    def convert_col(self, el, text, parent_tags=None):
        return self._apply_rule(el, text, None, parent_tags)
