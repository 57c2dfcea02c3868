#!/usr/bin/env python3
"""Build a static page from an HTML template and a JSON data file.

Every <template> element in the document is replaced by its rendered
content; partials are read relative to the template's directory.

Usage:
    python scripts/build_site.py src/index.html src/data.json
    python scripts/build_site.py src/index.html src/data.json --out public

Output:
    <out>/index.html (default: dist/index.html)
"""

import argparse
import asyncio
import sys

from vanillatemplates.services import build_site
from vanillatemplates.utilities.logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a template document to a static page")
    parser.add_argument("template", help="HTML document containing <template> elements")
    parser.add_argument("data", help="JSON data file")
    parser.add_argument("--out", default="dist", help="Output directory (default: dist)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Build the page, returning a process exit code."""
    args = parse_args(argv)
    setup_logging(log_level=args.log_level)

    try:
        index = asyncio.run(build_site(args.template, args.data, args.out))
    except Exception as e:
        print(f"Build failed: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {index}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
