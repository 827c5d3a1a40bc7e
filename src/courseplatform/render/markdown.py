"""Markdown to HTML rendering for lessons.

Uses markdown-it-py with the CommonMark grammar plus GitHub-style tables
and strikethrough. Raw HTML is passed through so lessons can use the
``success``/``warning``/``info`` callout boxes, and every heading gets an
``id`` anchor for in-page navigation.
"""

from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin

from courseplatform.logging import get_logger
from courseplatform.render.template import wrap_in_template

_logger = get_logger("render")

NO_CONTENT_FRAGMENT = "<p>No content available</p>"


def create_parser() -> MarkdownIt:
    """Build the markdown parser used for lessons."""
    return (
        MarkdownIt("commonmark", {"html": True})
        .enable(["table", "strikethrough"])
        .use(anchors_plugin, min_level=1, max_level=6)
    )


class MarkdownRenderer:
    """Render lesson markdown to a self-contained HTML document.

    Rendering is pure: no I/O, no timestamps, and the input is never
    modified, so identical markdown yields byte-identical HTML.
    """

    def __init__(self, parser: MarkdownIt | None = None) -> None:
        self._parser = parser or create_parser()

    def render_fragment(self, markdown: str) -> str:
        """Render markdown to an HTML fragment without the document wrapper."""
        return self._parser.render(markdown)

    def render_to_html(self, markdown: str | None) -> str:
        """Render markdown to a full HTML document.

        Empty or missing input returns the bare ``NO_CONTENT_FRAGMENT``
        rather than a document; use :meth:`render_document` when a full
        document is always wanted.

        Args:
            markdown: Raw lesson markdown.

        Returns:
            Complete HTML document, or the placeholder fragment.
        """
        if not markdown:
            _logger.debug("No markdown to render")
            return NO_CONTENT_FRAGMENT
        return wrap_in_template(self.render_fragment(markdown))

    def render_document(self, markdown: str | None) -> str:
        """Render markdown to a full HTML document, placeholder included."""
        if not markdown:
            return wrap_in_template(NO_CONTENT_FRAGMENT)
        return wrap_in_template(self.render_fragment(markdown))


_default_renderer: MarkdownRenderer | None = None


def render_to_html(markdown: str | None) -> str:
    """Render with a shared module-level renderer (see ``MarkdownRenderer``)."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MarkdownRenderer()
    return _default_renderer.render_to_html(markdown)
