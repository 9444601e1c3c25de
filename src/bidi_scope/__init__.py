"""Visual-order hints and cursor tracking for right-to-left text runs."""

__all__ = [
    "adapters",
    "config",
    "health",
    "hint",
    "runtime",
    "text",
]

__version__ = "0.1.0"
