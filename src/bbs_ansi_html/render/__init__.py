"""Renderers for outputting ANSI art as HTML."""

from bbs_ansi_html.render.html import HtmlRenderer, render_page
from bbs_ansi_html.render.style import StyleStateMachine, apply_sgr

__all__ = ["HtmlRenderer", "render_page", "StyleStateMachine", "apply_sgr"]
