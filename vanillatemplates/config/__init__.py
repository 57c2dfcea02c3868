"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# VERSION - Read from pyproject.toml (single source of truth)
# =============================================================================


def _get_version() -> str:
    """Read version - prefer pyproject.toml, fall back to installed metadata."""
    try:
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
                return data.get("project", {}).get("version", "0.0.0")
    except (OSError, KeyError, ValueError):
        pass

    # Installed without source tree
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("vanilla-templates")
    except (ImportError, PackageNotFoundError):
        pass

    return "0.0.0"


VERSION = _get_version()

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    return Path(raw) if raw else None


def _env_prefixes(default: str = "data-,") -> tuple[str, ...]:
    raw = os.getenv("DIRECTIVE_PREFIXES", default)
    # "data-," -> ("data-", "") - the empty entry enables bare directive names
    return tuple(dict.fromkeys(p.strip() for p in raw.split(",")))


class Config:
    """Application configuration singleton.

    All configuration values should be accessed through this class.
    Values are loaded from environment variables with sensible defaults.
    """

    # Filesystem loader root (unset = no filesystem partials)
    TEMPLATE_DIR: Path | None = _env_path("TEMPLATE_DIR")

    # HTTP loader - used instead of the filesystem when set
    PARTIALS_BASE_URL: str | None = os.getenv("PARTIALS_BASE_URL") or None
    HTTP_TIMEOUT: float = _env_float("HTTP_TIMEOUT", 10.0)
    HTTP_RETRY_COUNT: int = _env_int("HTTP_RETRY_COUNT", 3)
    HTTP_RETRY_DELAY: float = _env_float("HTTP_RETRY_DELAY", 1.0)

    # Partial cache (0 = disabled)
    PARTIAL_CACHE_TTL: int = _env_int("PARTIAL_CACHE_TTL", 300)

    # Renderer
    MAX_INCLUDE_DEPTH: int = _env_int("MAX_INCLUDE_DEPTH", 32)
    DIRECTIVE_PREFIXES: tuple[str, ...] = _env_prefixes()

    @classmethod
    def reload(cls) -> None:
        """Reload configuration from environment.

        Useful for testing or runtime config changes.
        """
        load_dotenv(_ENV_FILE, override=True)
        cls.TEMPLATE_DIR = _env_path("TEMPLATE_DIR")
        cls.PARTIALS_BASE_URL = os.getenv("PARTIALS_BASE_URL") or None
        cls.HTTP_TIMEOUT = _env_float("HTTP_TIMEOUT", 10.0)
        cls.HTTP_RETRY_COUNT = _env_int("HTTP_RETRY_COUNT", 3)
        cls.HTTP_RETRY_DELAY = _env_float("HTTP_RETRY_DELAY", 1.0)
        cls.PARTIAL_CACHE_TTL = _env_int("PARTIAL_CACHE_TTL", 300)
        cls.MAX_INCLUDE_DEPTH = _env_int("MAX_INCLUDE_DEPTH", 32)
        cls.DIRECTIVE_PREFIXES = _env_prefixes()


def get_directive_prefixes() -> tuple[str, ...]:
    """Get the attribute prefixes under which directives are recognized."""
    return Config.DIRECTIVE_PREFIXES


def get_max_include_depth() -> int:
    """Get the include nesting limit."""
    return Config.MAX_INCLUDE_DEPTH


def get_template_dir() -> Path | None:
    """Get the filesystem loader root directory, if configured."""
    return Config.TEMPLATE_DIR


def get_partials_base_url() -> str | None:
    """Get the HTTP partials base URL, if configured."""
    return Config.PARTIALS_BASE_URL
