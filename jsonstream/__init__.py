"""Buffered JSON writing with exact number formatting, string escaping and composable encoders."""

__version__ = "0.1.0"
__all__ = ["escape", "numbers", "stream", "native", "optional", "slices", "structs"]