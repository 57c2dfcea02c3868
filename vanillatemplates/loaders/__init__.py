"""Loader layer - sources of template, data and partial text.

All loaders implement core.PartialLoader. The renderer only ever sees that
interface; which loader backs a render is decided by the caller (or by
create_default_loader() from configuration).
"""

import logging

from vanillatemplates.config import Config, get_partials_base_url, get_template_dir
from vanillatemplates.core import PartialLoader
from vanillatemplates.loaders.cached import CachedLoader
from vanillatemplates.loaders.chain import ChainLoader
from vanillatemplates.loaders.filesystem import FileSystemLoader
from vanillatemplates.loaders.memory import InMemoryLoader
from vanillatemplates.loaders.remote import HTTPLoader

logger = logging.getLogger(__name__)


def create_default_loader() -> PartialLoader | None:
    """Build the loader described by configuration.

    PARTIALS_BASE_URL selects the HTTP loader, otherwise files are read from
    TEMPLATE_DIR. With neither set there is no default loader and only
    explicitly supplied partials resolve. A positive PARTIAL_CACHE_TTL wraps
    the loader in a cache.
    """
    base_url = get_partials_base_url()
    template_dir = get_template_dir()

    loader: PartialLoader
    if base_url:
        loader = HTTPLoader(
            base_url=base_url,
            timeout=Config.HTTP_TIMEOUT,
            retry_count=Config.HTTP_RETRY_COUNT,
            retry_delay=Config.HTTP_RETRY_DELAY,
        )
    elif template_dir is not None:
        loader = FileSystemLoader(template_dir)
    else:
        logger.info("[LOADER] No TEMPLATE_DIR or PARTIALS_BASE_URL configured")
        return None

    if Config.PARTIAL_CACHE_TTL > 0:
        loader = CachedLoader(loader, ttl=Config.PARTIAL_CACHE_TTL)

    logger.debug("[LOADER] Default loader: %s", loader.name)
    return loader


__all__ = [
    "CachedLoader",
    "ChainLoader",
    "FileSystemLoader",
    "HTTPLoader",
    "InMemoryLoader",
    "create_default_loader",
]
