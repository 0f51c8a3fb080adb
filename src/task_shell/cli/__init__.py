"""CLI layer: argument parsing, the interactive session, and rendering.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` never imports from ``cli``.
"""
