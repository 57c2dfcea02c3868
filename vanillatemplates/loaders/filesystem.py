"""Filesystem loader.

Reads partials relative to a base directory. File reads run in a worker
thread so a render never blocks the event loop.
"""

import asyncio
import logging
from pathlib import Path

from vanillatemplates.core import PartialLoader

logger = logging.getLogger(__name__)


class FileSystemLoader(PartialLoader):
    """Loader reading UTF-8 files under `base_dir`.

    Identifiers are paths relative to `base_dir` (a leading "./" or "/" is
    accepted). Paths resolving outside `base_dir` are rejected, as are hidden
    files and directories (.env, .git/...).
    """

    def __init__(self, base_dir: str | Path = "."):
        self._base_dir = Path(base_dir).resolve()

    @property
    def name(self) -> str:
        return "filesystem"

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve_path(self, identifier: str) -> Path:
        """Map an identifier to a file path inside base_dir.

        Raises:
            PermissionError: Path escapes base_dir or names a hidden file
        """
        path = (self._base_dir / identifier.lstrip("/")).resolve()
        if not path.is_relative_to(self._base_dir):
            raise PermissionError(f"Partial path escapes template directory: {identifier}")
        if any(part.startswith(".") for part in path.relative_to(self._base_dir).parts):
            raise PermissionError(f"Hidden files are not served as partials: {identifier}")
        return path

    async def load(self, identifier: str) -> str:
        path = self.resolve_path(identifier)
        logger.debug("[LOADER] Reading %s", path)
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
