"""Render pipeline for the course platform.

Turns lesson markdown into a styled, self-contained HTML document.
"""

from courseplatform.render.markdown import (
    NO_CONTENT_FRAGMENT,
    MarkdownRenderer,
    create_parser,
    render_to_html,
)
from courseplatform.render.template import wrap_in_template

__all__ = [
    "NO_CONTENT_FRAGMENT",
    "MarkdownRenderer",
    "create_parser",
    "render_to_html",
    "wrap_in_template",
]
