"""Classic algorithms and data structures as plain Python functions and classes."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "numbers",
    "structures",
    "linked",
    "graphs",
    "dp",
    "scheduling",
    "calculator",
]