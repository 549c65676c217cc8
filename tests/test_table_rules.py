"""Unit tests for the table rule set, rule registration and configuration."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import dataclasses
import logging

import pytest

from gfm_tables import (
    ColumnCountSource,
    Rule,
    RuleRegistry,
    TableRulesConfig,
    build_table_rules,
    register_table_rules,
)
from gfm_tables.core.processor.table_rules import (
    DEFAULT_TABLE_RULES_CONFIG,
    TableRuleSet,
    create_table_rule_set,
)
from fakes import FakeNode, cell

RULE_NAMES = {"tableCell", "tableRow", "table", "tableSection", "tableCaption", "tableColgroup"}


# ===========================================================================
# Rule and RuleRegistry tests
# ===========================================================================


class TestRule:

    def test_string_filter_normalized(self):
        rule = Rule("TR", lambda content, node: content)
        assert rule.filter == ("tr",)

    def test_matches_elements_only(self):
        rule = Rule(("td", "th"), lambda content, node: content)
        assert rule.matches(cell("th", "A")) is True
        assert rule.matches(cell("tr")) is False
        assert rule.matches(FakeNode("#text", text="td")) is False

    def test_empty_filter_rejected(self):
        with pytest.raises(ValueError):
            Rule((), lambda content, node: content)

    def test_non_callable_replacement_rejected(self):
        with pytest.raises(TypeError):
            Rule(("td",), "not callable")


class TestRegistration:

    def test_all_rules_registered(self):
        registry = register_table_rules(RuleRegistry())
        assert set(registry.rules) == RULE_NAMES

    def test_filters(self):
        rules = build_table_rules()
        assert rules["tableCell"].filter == ("th", "td")
        assert rules["tableRow"].filter == ("tr",)
        assert rules["table"].filter == ("table",)
        assert rules["tableSection"].filter == ("thead", "tbody", "tfoot")
        assert rules["tableCaption"].filter == ("caption",)
        assert rules["tableColgroup"].filter == ("colgroup", "col")

    def test_registering_twice_is_idempotent(self):
        registry = RuleRegistry()
        register_table_rules(registry)
        first = dict(registry.rules)
        register_table_rules(registry)
        assert len(registry) == len(first) == 6
        assert list(registry.rules) == list(first)

    def test_last_registration_wins(self):
        registry = register_table_rules(RuleRegistry())
        custom = Rule(("caption",), lambda content, node: content)
        registry.add_rule("tableCaption", custom)
        assert registry.rules["tableCaption"] is custom
        assert len(registry) == 6

    def test_build_returns_fresh_mapping(self):
        first = build_table_rules()
        first.pop("table")
        assert "table" in build_table_rules()

    def test_independent_registries(self):
        plain = RuleRegistry()
        registered = register_table_rules(RuleRegistry())
        assert len(plain) == 0
        assert "table" in registered

    def test_non_rule_rejected(self):
        with pytest.raises(TypeError):
            RuleRegistry().add_rule("table", {"filter": "table"})

    def test_find_rule(self):
        registry = register_table_rules(RuleRegistry())
        assert registry.find_rule(cell("td", "x")) is registry.rules["tableCell"]
        assert registry.find_rule(FakeNode("thead")) is registry.rules["tableSection"]
        assert registry.find_rule(FakeNode("div")) is None


# ===========================================================================
# Row replacement tests
# ===========================================================================


class TestRowReplacement:

    def setup_method(self):
        self.rule_set = create_table_rule_set()

    @pytest.mark.parametrize("content", ["", "   ", "\n"])
    def test_empty_row_dropped(self, content):
        row = FakeNode("tr")
        FakeNode("table", row)
        assert self.rule_set.row_replacement(content, row) == ""

    def test_body_row(self):
        header = FakeNode("tr", cell("td", "a"), cell("td", "b"))
        body = FakeNode("tr", cell("td", "1"), cell("td", "2"))
        FakeNode("table", header, body)
        assert self.rule_set.row_replacement("| 1   | 2   |", body) == "\n| 1   | 2   |"

    def test_header_row_gets_separator(self):
        header = FakeNode("tr", cell("th", "A"), cell("th", "B", colspan="2"))
        FakeNode("table", header, FakeNode("tr", cell("td", "1")))
        result = self.rule_set.row_replacement("| A   | B   |   |", header)
        assert result == "\n| A   | B   |   |\n| --- | --- | --- |"

    def test_only_leading_header_row_gets_separator(self):
        first = FakeNode("tr", cell("th", "A"), cell("th", "B"))
        second = FakeNode("tr", cell("th", "C"), cell("th", "D"))
        FakeNode("table", FakeNode("thead", first, second))
        assert self.rule_set.row_replacement("| A   | B   |", first) == "\n| A   | B   |\n| --- | --- |"
        assert self.rule_set.row_replacement("| C   | D   |", second) == "\n| C   | D   |"

    @pytest.mark.parametrize("header_rows", [10, 200])
    def test_column_count_computed_once_per_table(self, header_rows):
        class CountingTable(FakeNode):
            row_reads = 0

            @property
            def rows(self):
                CountingTable.row_reads += 1
                return super().rows

        header = [FakeNode("tr", cell("th", "A"), cell("th", "B")) for _ in range(header_rows)]
        CountingTable("table", FakeNode("thead", *header))
        for row in header:
            self.rule_set.row_replacement("| A   | B   |", row)
        assert CountingTable.row_reads == 1

    def test_header_row_outside_table(self):
        header = FakeNode("tr", cell("th", "A"))
        FakeNode("thead", header)
        assert self.rule_set.row_replacement("| A   |", header) == "\n| A   |"


# ===========================================================================
# Table replacement tests
# ===========================================================================


class TestTableReplacement:

    def _table(self, *rows):
        return FakeNode("table", *[FakeNode("tr", *cells) for cells in rows])

    def test_skipped_table(self):
        table = self._table([cell("td")])
        assert create_table_rule_set().table_replacement("\n|     |", table) == ""

    def test_separator_synthesized(self):
        table = self._table([cell("td", "X"), cell("td", "Y")])
        result = create_table_rule_set().table_replacement("\n| X   | Y   |", table)
        assert result == "\n\n| X   | Y   |\n| --- | --- |\n\n"

    def test_separator_synthesis_logged(self, caplog):
        table = self._table([cell("td", "X"), cell("td", "Y")])
        with caplog.at_level(logging.DEBUG, logger="gfm-tables"):
            create_table_rule_set().table_replacement("\n| X   | Y   |", table)
        assert "Synthesized separator with 2 columns" in caplog.text

    def test_existing_separator_kept(self):
        table = self._table([cell("th", "A")], [cell("td", "1")])
        content = "\n| A   |\n| --- |\n| 1   |"
        result = create_table_rule_set().table_replacement(content, table)
        assert result == "\n\n| A   |\n| --- |\n| 1   |\n\n"

    def test_blank_lines_collapsed(self):
        table = self._table([cell("td", "a"), cell("td", "b")], [cell("td", "1"), cell("td", "2")])
        content = "\n\n| a   | b   |\n\n\n   \n| 1   | 2   |\n"
        result = create_table_rule_set().table_replacement(content, table)
        assert result == "\n\n| a   | b   |\n| --- | --- |\n| 1   | 2   |\n\n"

    def test_blank_content(self):
        table = self._table([cell("td", "a"), cell("td", "b")])
        assert create_table_rule_set().table_replacement("\n  \n", table) == ""

    def test_separator_uses_widest_row(self):
        table = self._table([cell("td", "a", colspan="2")], [cell("td", "1"), cell("td", "2"), cell("td", "3")])
        content = "\n| a   |   |\n| 1   | 2   | 3   |"
        result = create_table_rule_set().table_replacement(content, table)
        assert result.split("\n")[3] == "| --- | --- | --- |"

    def test_first_line_pipes_source(self):
        config = TableRulesConfig(separator_column_source=ColumnCountSource.FIRST_LINE_PIPES)
        table = self._table([cell("td", "a", colspan="2")], [cell("td", "1"), cell("td", "2"), cell("td", "3")])
        content = "\n| a   |   |\n| 1   | 2   | 3   |"
        result = TableRuleSet(config).table_replacement(content, table)
        assert result.split("\n")[3] == "| --- | --- |"

    def test_zero_columns_leaves_table_unseparated(self):
        table = self._table([])
        config = TableRulesConfig(skip_degenerate_tables=False)
        result = TableRuleSet(config).table_replacement("stray text", table)
        assert result == "\n\nstray text\n\n"

    def test_degenerate_table_kept_when_skipping_disabled(self):
        table = self._table([cell("td")])
        config = TableRulesConfig(skip_degenerate_tables=False)
        result = TableRuleSet(config).table_replacement("\n|     |", table)
        assert result == "\n\n|     |\n| --- |\n\n"


# ===========================================================================
# Section and noise rules
# ===========================================================================


class TestSectionRules:

    def test_sections_pass_through(self):
        rules = build_table_rules()
        for tag in ("thead", "tbody", "tfoot"):
            assert rules["tableSection"].replacement("\n| a   |", FakeNode(tag)) == "\n| a   |"

    def test_caption_and_colgroup_discarded(self):
        rules = build_table_rules()
        assert rules["tableCaption"].replacement("Caption", FakeNode("caption")) == ""
        assert rules["tableColgroup"].replacement("x", FakeNode("colgroup")) == ""
        assert rules["tableColgroup"].replacement("", FakeNode("col")) == ""


class TestConfig:

    def test_min_cell_width(self):
        rule_set = TableRuleSet(TableRulesConfig(min_cell_width=5))
        row = FakeNode("tr", cell("td", "ab"))
        assert rule_set.cell_replacement("ab", row.child_nodes[0]) == "| ab    |"

    def test_defaults(self):
        config = TableRulesConfig()
        assert config.min_cell_width == 3
        assert config.separator_column_source == ColumnCountSource.COLSPAN
        assert config.skip_degenerate_tables is True

    def test_frozen(self):
        config = TableRulesConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.min_cell_width = 5

    def test_default_config_shared_safely(self):
        rule_set = create_table_rule_set(DEFAULT_TABLE_RULES_CONFIG)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule_set.config.skip_degenerate_tables = False
        assert DEFAULT_TABLE_RULES_CONFIG.skip_degenerate_tables is True
