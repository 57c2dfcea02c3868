"""Mounting rendered fragments.

The live-document counterpart of static generation: load data and a
template through a loader, render, and attach the output to a target
element.

    page = parse_markup('<main id="out"></main>').children[0]
    page = await load_and_mount("data.json", "template.html", page, loader)

`replace` is the only mounting option. Anything else a caller needs on the
mounted content (event handlers, focus, ...) is its own business after
mounting.
"""

import json
import logging

from vanillatemplates.core import OutputFragment, PartialLoader, TemplateNode
from vanillatemplates.markup import parse_markup
from vanillatemplates.templates import render

logger = logging.getLogger(__name__)


def mount(
    target: TemplateNode,
    fragment: OutputFragment,
    replace: bool = False,
) -> TemplateNode:
    """Attach a rendered fragment to a target element.

    Args:
        target: Mount point element
        fragment: Rendered output nodes
        replace: Clear the target's existing children first

    Returns:
        New target element (the input target is unchanged)
    """
    if replace:
        return target.with_children(fragment)
    return target.with_children([*target.children, *fragment])


async def load_and_mount(
    data_id: str,
    template_id: str,
    target: TemplateNode,
    loader: PartialLoader,
    replace: bool = False,
) -> TemplateNode:
    """Load JSON data and a template, render, and mount the result.

    Data, template and any partials all come through `loader`.

    Raises:
        ValueError: Template markup is empty
        Exception: Load, parse or render failures (logged, then re-raised)
    """
    try:
        data = json.loads(await loader.load(data_id))

        template = parse_markup((await loader.load(template_id)).strip())
        if not template.children:
            raise ValueError(f"Template is empty: {template_id}")

        fragment = await render(template, data, loader=loader)
    except Exception as e:
        logger.exception("[MOUNT] Loading failed for %s / %s: %s", data_id, template_id, e)
        raise

    logger.debug("[MOUNT] Mounted %d node(s) into <%s>", len(fragment), target.tag)
    return mount(target, fragment, replace=replace)
