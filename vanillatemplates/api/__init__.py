"""HTTP API for rendering templates."""

from vanillatemplates.api.app import create_app

__all__ = ["create_app"]
