"""Case conversion for identifiers and display names for Enum members."""

__version__ = "0.2.0"
__all__ = ["casing", "display"]