"""Incremental text and markup building with indentation-aware scopes, string helpers and text arrays."""

__version__ = "0.1.0"
__all__ = ["formatting", "textops", "stack", "array"]