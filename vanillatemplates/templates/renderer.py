"""Template renderer.

Walks a template tree and builds the output fragment:

    template = parse_markup('<li loop="items"><var>name</var></li>')
    nodes = await render(template, {"items": [{"name": "A"}, {"name": "B"}]})
    to_html(nodes)  # -> "<li>A</li><li>B</li>"

Per element, directives run in fixed order (include, if, loop, style, attr),
then `<var>` placeholders are interpolated or children are walked. Comments
are dropped, text passes through.

The walk is a pure function of (template, context): the template tree is
immutable, every level returns freshly built nodes, and no state survives a
render. Siblings are processed strictly in document order; include loading
is the only await.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any

from vanillatemplates.config import get_directive_prefixes, get_max_include_depth
from vanillatemplates.core import (
    MarkupParser,
    NodeKind,
    OutputFragment,
    PartialLoader,
    TemplateNode,
)
from vanillatemplates.markup import parse_markup, to_html
from vanillatemplates.templates.bindings import AttributeBinder, StyleBinder
from vanillatemplates.templates.conditions import ConditionalFilter, ConditionOutcome
from vanillatemplates.templates.context import RenderSettings
from vanillatemplates.templates.directives import (
    Directive,
    DirectiveDispatcher,
    DirectiveKind,
    Outcome,
)
from vanillatemplates.templates.includes import IncludeResolver
from vanillatemplates.templates.loops import LoopExpander
from vanillatemplates.templates.variables import VariableInterpolator, is_placeholder

logger = logging.getLogger(__name__)


class TreeWalker:
    """Recursive directive-evaluating walk over a template tree.

    Usage:
        walker = TreeWalker(RenderSettings(loader=loader, parser=parse_markup))
        nodes = await walker.render(template_root, data)
    """

    def __init__(self, settings: RenderSettings):
        self._settings = settings
        self._dispatcher = DirectiveDispatcher(settings.prefixes)
        self._conditions = ConditionalFilter()
        self._loops = LoopExpander()
        self._includes = IncludeResolver()
        self._attrs = AttributeBinder()
        self._styles = StyleBinder()
        self._variables = VariableInterpolator()

        # Fixed dispatch table - order comes from DirectiveDispatcher.extract
        self._handlers = {
            DirectiveKind.INCLUDE: self._handle_include,
            DirectiveKind.IF: self._handle_if,
            DirectiveKind.LOOP: self._handle_loop,
            DirectiveKind.STYLE: self._handle_style,
            DirectiveKind.ATTR: self._handle_attr,
        }

    async def render(self, root: TemplateNode, ctx: Any) -> OutputFragment:
        """Render the content (children) of a template root."""
        return await self.walk_children(root.children, ctx)

    async def walk_children(
        self, children: tuple[TemplateNode, ...], ctx: Any
    ) -> OutputFragment:
        output: OutputFragment = []
        for child in children:
            output.extend(await self.visit(child, ctx))
        return output

    async def visit(self, node: TemplateNode, ctx: Any) -> OutputFragment:
        """Render one node into zero or more output nodes."""
        if node.kind == NodeKind.COMMENT:
            return []
        if not node.is_element:
            return [node]

        return await self._process(node, self._dispatcher.extract(node), ctx)

    async def _process(
        self, node: TemplateNode, directives: list[Directive], ctx: Any
    ) -> OutputFragment:
        """Run the node's pending directives, then interpolate or walk children.

        Directives are extracted once per template element; loop clones carry
        on with the directives that follow the loop, never re-extracting.
        """
        for position, directive in enumerate(directives):
            remaining = directives[position + 1 :]
            outcome = await self._handlers[directive.kind](node, directive, ctx, remaining)
            if outcome.is_terminal:
                return outcome.output
            node = outcome.node

        if is_placeholder(node):
            return [self._variables.interpolate(node, ctx)]

        children = await self.walk_children(node.children, ctx)
        return [node.with_children(children)]

    # =========================================================================
    # Directive handlers
    # =========================================================================

    async def _handle_include(
        self, node: TemplateNode, directive: Directive, ctx: Any, remaining: list[Directive]
    ) -> Outcome:
        identifier = directive.value.strip()
        partial = await self._includes.fetch(identifier, self._settings)

        nested = TreeWalker(
            replace(
                self._settings,
                include_stack=(*self._settings.include_stack, identifier),
            )
        )
        return Outcome.replace_with(await nested.render(partial, ctx))

    async def _handle_if(
        self, node: TemplateNode, directive: Directive, ctx: Any, remaining: list[Directive]
    ) -> Outcome:
        decision = self._conditions.decide(node, directive.value, ctx)

        if decision == ConditionOutcome.DROP:
            return Outcome.replace_with([])
        if decision == ConditionOutcome.UNWRAP:
            return Outcome.replace_with(await self.walk_children(node.children, ctx))
        return Outcome.proceed(self._dispatcher.strip(node, directive))

    async def _handle_loop(
        self, node: TemplateNode, directive: Directive, ctx: Any, remaining: list[Directive]
    ) -> Outcome:
        template = self._dispatcher.strip(node, directive)

        output: OutputFragment = []
        for clone, item_ctx in self._loops.iterations(template, directive.value, ctx):
            output.extend(await self._process(clone, remaining, item_ctx))
        return Outcome.replace_with(output)

    async def _handle_style(
        self, node: TemplateNode, directive: Directive, ctx: Any, remaining: list[Directive]
    ) -> Outcome:
        stripped = self._dispatcher.strip(node, directive)
        return Outcome.proceed(self._styles.apply(stripped, directive.value, ctx))

    async def _handle_attr(
        self, node: TemplateNode, directive: Directive, ctx: Any, remaining: list[Directive]
    ) -> Outcome:
        stripped = self._dispatcher.strip(node, directive)
        return Outcome.proceed(self._attrs.apply(stripped, directive.value, ctx))


# =============================================================================
# Entry points
# =============================================================================


async def render(
    template: TemplateNode,
    data: Any,
    *,
    loader: PartialLoader | None = None,
    parser: MarkupParser | None = None,
    prefixes: tuple[str, ...] | None = None,
    max_include_depth: int | None = None,
) -> OutputFragment:
    """Render a template root against data.

    Args:
        template: Template root - a FRAGMENT from the parser or a <template>
            element; its children are the content rendered
        data: JSON-like data value (the root context)
        loader: Partial loader for include directives
        parser: Markup parser for partials (default: parse_markup)
        prefixes: Directive attribute prefixes (default: from Config)
        max_include_depth: Include nesting limit (default: from Config)

    Returns:
        Rendered output nodes

    Raises:
        TypeError: A loop source is neither a list nor a map
        RuntimeError: An include was met without a loader
        RecursionError: Include nesting too deep
        Exception: Whatever the loader raises for a failed include
    """
    settings = RenderSettings(
        loader=loader,
        parser=parser or parse_markup,
        prefixes=prefixes if prefixes is not None else get_directive_prefixes(),
        max_include_depth=(
            max_include_depth if max_include_depth is not None else get_max_include_depth()
        ),
    )
    logger.debug("[RENDER] Start: %d top-level node(s)", len(template.children))
    output = await TreeWalker(settings).render(template, data)
    logger.debug("[RENDER] Done: %d output node(s)", len(output))
    return output


async def render_markup(markup: str, data: Any, **kwargs: Any) -> str:
    """Parse, render and serialize in one step.

    Keyword arguments are passed through to render().
    """
    nodes = await render(parse_markup(markup), data, **kwargs)
    return to_html(nodes)


def render_sync(template: TemplateNode, data: Any, **kwargs: Any) -> OutputFragment:
    """Blocking wrapper around render() for callers without an event loop."""
    return asyncio.run(render(template, data, **kwargs))
