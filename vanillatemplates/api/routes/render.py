"""Render API endpoints."""

import logging

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from vanillatemplates.api.models import (
    DirectiveListResponse,
    DirectiveResponse,
    RenderRequest,
    RenderResponse,
)
from vanillatemplates.config import get_directive_prefixes
from vanillatemplates.core import PartialLoader, TemplateNode
from vanillatemplates.loaders import ChainLoader, InMemoryLoader
from vanillatemplates.markup import parse_markup, to_html
from vanillatemplates.services import mount
from vanillatemplates.templates import DIRECTIVES, render
from vanillatemplates.templates.context import (
    FIRST_KEY,
    INDEX_KEY,
    KEY_KEY,
    LAST_KEY,
    VALUE_KEY,
)
from vanillatemplates.templates.variables import PLACEHOLDER_TAG

logger = logging.getLogger(__name__)

router = APIRouter()


def _build_loader(request: Request, partials: dict[str, str]) -> PartialLoader:
    """Inline partials first, then the app's configured loader (if any)."""
    inline = InMemoryLoader(partials)
    fallback = getattr(request.app.state, "loader", None)
    if fallback is None:
        return inline
    return ChainLoader([inline, fallback])


def _parse_target(markup: str) -> TemplateNode:
    """Parse mount target markup, which must hold exactly one element."""
    elements = [node for node in parse_markup(markup.strip()).children if node.is_element]
    if len(elements) != 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Target must be a single element, got {len(elements)}",
        )
    return elements[0]


@router.post("/render", response_model=RenderResponse)
async def render_template(body: RenderRequest, request: Request) -> RenderResponse:
    """Render a template against data.

    Include directives resolve against `partials` first, then the configured
    loader. With `target`, the output is mounted into that element and the
    element itself is returned.
    """
    template = parse_markup(body.template.strip())
    if not template.children:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Template is empty",
        )
    target = _parse_target(body.target) if body.target is not None else None

    loader = _build_loader(request, body.partials)
    try:
        fragment = await render(template, body.data, loader=loader)
    except (TypeError, RecursionError) as e:
        # Invalid loop source or runaway include nesting
        logger.warning("[RENDER] Template error: %s", e)
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e
    except (KeyError, OSError, httpx.HTTPError) as e:
        logger.warning("[RENDER] Include failed: %s", e)
        # KeyError wraps its message in quotes
        detail = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Include failed: {detail}",
        ) from e

    if target is not None:
        return RenderResponse(html=to_html(mount(target, fragment, replace=body.replace)))
    return RenderResponse(html=to_html(fragment))


@router.get("/directives", response_model=DirectiveListResponse)
def list_directives() -> DirectiveListResponse:
    """Get the directive vocabulary in processing order.

    Each directive lists the attribute spellings recognized under the
    configured prefixes.
    """
    prefixes = get_directive_prefixes()
    return DirectiveListResponse(
        directives=[
            DirectiveResponse(
                name=info.kind.value,
                attributes=[f"{prefix}{info.kind.value}" for prefix in prefixes],
                syntax=info.syntax,
                description=info.description,
            )
            for info in DIRECTIVES
        ],
        placeholder=PLACEHOLDER_TAG,
        synthetic_keys=[INDEX_KEY, FIRST_KEY, LAST_KEY, KEY_KEY, VALUE_KEY],
    )
