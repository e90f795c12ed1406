"""String helpers, query error types and UTF-8/UTF-16/UTF-32 code-unit conversion."""

__version__ = "0.1.0"
__all__ = ["conversion", "errors", "strings", "utf16", "utf8"]