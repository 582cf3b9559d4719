"""Shell variables and environments, format expansion, field splitting and script detection."""

__version__ = "0.1.0"
__all__ = ["environ", "expand", "fileutil"]