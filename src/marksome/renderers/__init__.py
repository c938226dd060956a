"""Renderers for Marksome segment trees."""

from marksome.renderers.html import HtmlRenderer, ReferenceRenderFunction, References

__all__ = ["HtmlRenderer", "ReferenceRenderFunction", "References"]
