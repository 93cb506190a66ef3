"""Shared helpers (filesystem, YAML)."""
