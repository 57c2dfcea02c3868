"""Tests for partial inclusion.

Verifies that:
1. include replaces the element with the rendered partial
2. partials render with the including element's context
3. includes load strictly in document order, one at a time
4. load failures and runaway nesting abort the render
"""

import asyncio

import pytest

from vanillatemplates.core import PartialLoader
from vanillatemplates.loaders import InMemoryLoader
from vanillatemplates.templates import render_markup


class SlowLoader(InMemoryLoader):
    """In-memory loader whose loads finish in reverse request order if run concurrently."""

    def __init__(self, partials: dict[str, str], delays: dict[str, float]):
        super().__init__(partials)
        self._delays = delays
        self.in_flight = 0
        self.max_in_flight = 0

    async def load(self, identifier: str) -> str:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self._delays.get(identifier, 0))
            return await super().load(identifier)
        finally:
            self.in_flight -= 1


class BrokenLoader(PartialLoader):
    @property
    def name(self) -> str:
        return "broken"

    async def load(self, identifier: str) -> str:
        raise ConnectionError(f"cannot reach {identifier}")


def render_html(markup: str, data, loader: PartialLoader | None, **kwargs) -> str:
    return asyncio.run(render_markup(markup, data, loader=loader, **kwargs))


# =============================================================================
# INCLUDE
# =============================================================================


class TestInclude:
    """Test include resolution."""

    def test_element_replaced_by_partial(self):
        loader = InMemoryLoader({"header.html": "<h1><var>title</var></h1>"})
        html = render_html(
            '<header class="x" include="header.html">ignored</header>', {"title": "Hi"}, loader
        )
        assert html == "<h1>Hi</h1>"

    def test_partial_whitespace_trimmed(self):
        loader = InMemoryLoader({"p.html": "\n  <b>x</b>\n"})
        assert render_html('<div include="p.html"></div>', {}, loader) == "<b>x</b>"

    def test_partial_with_several_roots(self):
        loader = InMemoryLoader({"p.html": "<dt>a</dt><dd>b</dd>"})
        assert render_html('<dl><i include="p.html"></i></dl>', {}, loader) == (
            "<dl><dt>a</dt><dd>b</dd></dl>"
        )

    def test_partial_directives_evaluated(self):
        loader = InMemoryLoader({"list.html": '<li loop="items"><var>name</var></li>'})
        html = render_html(
            '<ul><x include="list.html"></x></ul>', {"items": [{"name": "A"}]}, loader
        )
        assert html == "<ul><li>A</li></ul>"

    def test_include_inside_loop_uses_item_context(self):
        loader = InMemoryLoader({"item.html": "<var>name</var>"})
        html = render_html(
            '<li loop="items"><span include="item.html"></span></li>',
            {"items": [{"name": "A"}, {"name": "B"}]},
            loader,
        )
        assert html == "<li>A</li><li>B</li>"
        assert loader.requests == ["item.html", "item.html"]

    def test_include_takes_precedence_over_if(self):
        loader = InMemoryLoader({"p.html": "<p>in</p>"})
        assert render_html('<div include="p.html" if="nope"></div>', {}, loader) == "<p>in</p>"

    def test_nested_includes(self):
        loader = InMemoryLoader(
            {
                "page.html": '<main><section include="body.html"></section></main>',
                "body.html": "<p><var>text</var></p>",
            }
        )
        html = render_html('<div include="page.html"></div>', {"text": "deep"}, loader)
        assert html == "<main><p>deep</p></main>"

    def test_identifier_trimmed(self):
        loader = InMemoryLoader({"a.html": "<b>a</b>"})
        assert render_html('<i include=" a.html "></i>', {}, loader) == "<b>a</b>"

    def test_partial_comments_removed(self):
        loader = InMemoryLoader({"a.html": "<!-- note --><b>a</b>"})
        assert render_html('<i include="a.html"></i>', {}, loader) == "<b>a</b>"


# =============================================================================
# ORDERING
# =============================================================================


class TestIncludeOrdering:
    """Includes are awaited one at a time in document order."""

    def test_output_mirrors_input_order(self):
        loader = SlowLoader(
            {"slow.html": "<b>slow</b>", "fast.html": "<i>fast</i>"},
            delays={"slow.html": 0.05, "fast.html": 0},
        )
        html = render_html(
            '<p include="slow.html"></p><p include="fast.html"></p><p include="slow.html"></p>',
            {},
            loader,
        )
        assert html == "<b>slow</b><i>fast</i><b>slow</b>"
        assert loader.requests == ["slow.html", "fast.html", "slow.html"]
        assert loader.max_in_flight == 1


# =============================================================================
# FAILURES
# =============================================================================


class TestIncludeFailures:
    """Include failures are fatal."""

    def test_missing_partial_propagates(self):
        loader = InMemoryLoader({})
        with pytest.raises(KeyError, match="missing.html"):
            render_html('<p>a</p><div include="missing.html"></div>', {}, loader)

    def test_loader_error_propagates(self):
        with pytest.raises(ConnectionError):
            render_html('<div include="a.html"></div>', {}, BrokenLoader())

    def test_no_loader(self):
        with pytest.raises(RuntimeError, match="no partial loader"):
            render_html('<div include="a.html"></div>', {}, None)

    def test_self_include_hits_depth_limit(self):
        loader = InMemoryLoader({"self.html": '<div include="self.html"></div>'})
        with pytest.raises(RecursionError, match="depth limit \\(3\\)"):
            render_html('<div include="self.html"></div>', {}, loader, max_include_depth=3)
        assert len(loader.requests) == 3

    def test_depth_counts_nesting_not_siblings(self):
        loader = InMemoryLoader({"a.html": "<b>a</b>"})
        markup = '<i include="a.html"></i>' * 5
        assert render_html(markup, {}, loader, max_include_depth=1) == "<b>a</b>" * 5
