"""Shared helpers (configuration)."""
