"""Renderers for Marksmith token streams."""

from marksmith.renderers.html import HtmlRenderer, RenderContext

__all__ = ["HtmlRenderer", "RenderContext"]
