#!/usr/bin/env python3
"""Run the render API with uvicorn.

Usage:
    python scripts/serve.py
    HOST=0.0.0.0 PORT=9000 python scripts/serve.py

Environment:
    HOST: Bind address (default: 127.0.0.1)
    PORT: Bind port (default: 8000)
    TEMPLATE_DIR / PARTIALS_BASE_URL: where include partials come from
"""

import os

import uvicorn


def main():
    uvicorn.run(
        "vanillatemplates.api.app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,  # setup_logging() owns the handlers
    )


if __name__ == "__main__":
    main()
