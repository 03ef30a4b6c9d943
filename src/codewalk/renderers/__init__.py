"""Renderers for composed documents."""

from codewalk.renderers.markdown import MarkdownRenderer, attribution
from codewalk.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "MarkdownRenderer", "attribution"]
