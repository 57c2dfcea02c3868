"""Service layer.

Drivers built on the renderer: static site generation and mounting.

Layer hierarchy:
    API / scripts -> Services -> Templates -> Loaders
"""

from vanillatemplates.services.mount import load_and_mount, mount
from vanillatemplates.services.static_site import (
    build_site,
    expand_templates,
    render_document,
    serialize_document,
)

__all__ = [
    "build_site",
    "expand_templates",
    "load_and_mount",
    "mount",
    "render_document",
    "serialize_document",
]
