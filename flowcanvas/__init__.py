"""flowcanvas: convert JSON Canvas documents to and from a visual-editor graph."""

__version__ = "0.1.0"
