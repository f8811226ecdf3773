"""C-style string helpers, stream output, line reading, printf-style formatting and line rasterizing."""

__version__ = "0.1.0"