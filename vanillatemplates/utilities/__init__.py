"""Shared utilities (logging, caching)."""
