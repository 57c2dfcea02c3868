"""Tests for directive extraction, conditions and bindings.

Verifies that:
1. directives are extracted once per kind, in fixed precedence
2. prefixes are tried in order (data- before bare names)
3. `[!]path` conditions resolve with JavaScript truthiness
4. attr/style pairs parse and bind as documented
"""

import logging

import pytest

from vanillatemplates.core import TemplateNode
from vanillatemplates.templates.bindings import (
    AttributeBinder,
    StyleBinder,
    format_css,
    parse_css,
    parse_pairs,
)
from vanillatemplates.templates.conditions import (
    ConditionalFilter,
    ConditionEvaluator,
    ConditionOutcome,
)
from vanillatemplates.templates.directives import (
    DIRECTIVES,
    PRECEDENCE,
    DirectiveDispatcher,
    DirectiveKind,
    Outcome,
)

# =============================================================================
# DISPATCHER
# =============================================================================


class TestDirectiveDispatcher:
    """Test directive extraction from element attributes."""

    def test_precedence_order(self):
        assert [k.value for k in PRECEDENCE] == ["include", "if", "loop", "style", "attr"]

    def test_extract_in_precedence_regardless_of_attribute_order(self):
        node = TemplateNode.element("li", {"attr": "id:x", "loop": "items", "if": "show"})
        kinds = [d.kind for d in DirectiveDispatcher().extract(node)]
        assert kinds == [DirectiveKind.IF, DirectiveKind.LOOP, DirectiveKind.ATTR]

    def test_no_directives(self):
        node = TemplateNode.element("div", {"class": "box"})
        assert DirectiveDispatcher().extract(node) == []

    def test_non_element_has_no_directives(self):
        assert DirectiveDispatcher().extract(TemplateNode.text_node("if")) == []

    def test_data_prefix_recognized(self):
        node = TemplateNode.element("li", {"data-loop": "items"})
        (directive,) = DirectiveDispatcher().extract(node)
        assert directive.kind == DirectiveKind.LOOP
        assert directive.attr_name == "data-loop"
        assert directive.value == "items"

    def test_first_prefix_wins(self):
        node = TemplateNode.element("p", {"if": "b", "data-if": "a"})
        (directive,) = DirectiveDispatcher().extract(node)
        assert directive.attr_name == "data-if"
        assert directive.value == "a"

    def test_custom_prefixes(self):
        node = TemplateNode.element("p", {"if": "a", "v-if": "b"})
        (directive,) = DirectiveDispatcher(("v-",)).extract(node)
        assert directive.value == "b"

    def test_empty_prefixes_rejected(self):
        with pytest.raises(ValueError):
            DirectiveDispatcher(())

    def test_strip_removes_only_the_directive(self):
        node = TemplateNode.element("p", {"class": "c", "data-if": "x"})
        (directive,) = DirectiveDispatcher().extract(node)
        assert DirectiveDispatcher.strip(node, directive).attributes == {"class": "c"}

    def test_vocabulary_covers_every_kind(self):
        assert [info.kind for info in DIRECTIVES] == list(PRECEDENCE)


class TestOutcome:
    """Test handler outcomes."""

    def test_proceed_is_not_terminal(self):
        node = TemplateNode.element("p")
        outcome = Outcome.proceed(node)
        assert not outcome.is_terminal
        assert outcome.node is node

    def test_empty_replacement_is_terminal(self):
        assert Outcome.replace_with([]).is_terminal


# =============================================================================
# CONDITIONS
# =============================================================================


class TestConditionEvaluator:
    """Test `[!]path` evaluation."""

    def test_parse(self):
        assert ConditionEvaluator.parse("show") == ("show", False)
        assert ConditionEvaluator.parse(" ! show ") == ("show", True)

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("show", True),
            ("!show", False),
            ("hide", False),
            ("!hide", True),
            ("missing", False),
            ("!missing", True),
            ("empty_list", True),
            ("zero", False),
            ("user.name", True),
        ],
    )
    def test_evaluate(self, expression, expected):
        ctx = {
            "show": True,
            "hide": False,
            "empty_list": [],
            "zero": 0,
            "user": {"name": "Ada"},
        }
        assert ConditionEvaluator().evaluate(expression, ctx) is expected


class TestConditionalFilter:
    """Test the keep / drop / unwrap decision."""

    def test_false_drops(self):
        node = TemplateNode.element("p")
        assert ConditionalFilter().decide(node, "x", {"x": 0}) == ConditionOutcome.DROP

    def test_true_keeps(self):
        node = TemplateNode.element("p")
        assert ConditionalFilter().decide(node, "x", {"x": 1}) == ConditionOutcome.KEEP

    def test_true_placeholder_unwraps(self):
        node = TemplateNode.element("var")
        assert ConditionalFilter().decide(node, "x", {"x": 1}) == ConditionOutcome.UNWRAP

    def test_false_placeholder_drops(self):
        node = TemplateNode.element("var")
        assert ConditionalFilter().decide(node, "x", {}) == ConditionOutcome.DROP


# =============================================================================
# BINDINGS
# =============================================================================


class TestParsePairs:
    """Test `name:path|name:path` parsing."""

    def test_pairs(self):
        assert parse_pairs("src:url|alt:label") == [("src", "url"), ("alt", "label")]

    def test_whitespace_trimmed(self):
        assert parse_pairs(" src : url | alt:label ") == [("src", "url"), ("alt", "label")]

    def test_splits_on_first_colon(self):
        assert parse_pairs("aria-label:a:b") == [("aria-label", "a:b")]

    def test_empty_pairs_ignored(self):
        assert parse_pairs("a:x||b:y|") == [("a", "x"), ("b", "y")]

    def test_missing_path_binds_context(self):
        assert parse_pairs("title") == [("title", "")]

    def test_nameless_pair_skipped(self):
        assert parse_pairs(":x|a:y") == [("a", "y")]


class TestCss:
    """Test inline style parsing and formatting."""

    def test_parse_css(self):
        assert parse_css("color: red; Width:10px;") == {"color": "red", "width": "10px"}

    def test_custom_property_case_kept(self):
        assert parse_css("--Main-Color: red") == {"--Main-Color": "red"}

    def test_format_css(self):
        assert format_css({"color": "red", "width": "1px"}) == "color: red; width: 1px;"


class TestAttributeBinder:
    """Test the attr directive."""

    def test_binds_values(self):
        node = TemplateNode.element("img")
        bound = AttributeBinder().apply(node, "src:url|alt:label", {"url": "a.png", "label": "Pic"})
        assert bound.attributes == {"src": "a.png", "alt": "Pic"}

    def test_replaces_existing_attribute_in_place(self):
        node = TemplateNode.element("a", {"href": "#", "class": "x"})
        bound = AttributeBinder().apply(node, "href:link", {"link": "/home"})
        assert bound.attrs == (("href", "/home"), ("class", "x"))

    def test_missing_value_written_literally(self):
        node = TemplateNode.element("img")
        bound = AttributeBinder().apply(node, "alt:missing|title:nothing", {"nothing": None})
        assert bound.attributes == {"alt": "undefined", "title": "null"}

    def test_non_string_values(self):
        node = TemplateNode.element("input")
        bound = AttributeBinder().apply(node, "value:n|checked:on", {"n": 3, "on": True})
        assert bound.attributes == {"value": "3", "checked": "true"}


class TestStyleBinder:
    """Test the style directive."""

    def test_binds_properties(self):
        node = TemplateNode.element("div")
        bound = StyleBinder().apply(node, "color:fg|width:w", {"fg": "red", "w": "10px"})
        assert bound.get_attr("style") == "color: red; width: 10px;"

    def test_missing_values_skipped(self):
        node = TemplateNode.element("div")
        bound = StyleBinder().apply(node, "color:fg|width:none", {"none": None})
        assert not bound.has_attr("style")

    def test_merges_with_existing_style(self):
        node = TemplateNode.element("div", {"style": "margin: 0; color: blue"})
        bound = StyleBinder().apply(node, "color:fg", {"fg": "red"})
        assert bound.get_attr("style") == "margin: 0; color: red;"

    def test_property_names_lowercased(self):
        node = TemplateNode.element("div")
        bound = StyleBinder().apply(node, "Color:fg", {"fg": "red"})
        assert bound.get_attr("style") == "color: red;"

    def test_custom_property(self):
        node = TemplateNode.element("div")
        bound = StyleBinder().apply(node, "--accentColor:fg", {"fg": "#fff"})
        assert bound.get_attr("style") == "--accentColor: #fff;"

    def test_dropped_declaration_logged(self, caplog):
        node = TemplateNode.element("div")
        with caplog.at_level(logging.DEBUG, logger="vanillatemplates.templates.bindings"):
            bound = StyleBinder().apply(node, "margin: 0", {})
        assert not bound.has_attr("style")
        assert any("Dropping style margin:0" in r.getMessage() for r in caplog.records)
