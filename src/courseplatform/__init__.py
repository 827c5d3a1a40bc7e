"""Course platform: local course content delivery.

This package provides:
- Content catalog with layered lesson content resolution
- Durable learner progress tracking
- Markdown to HTML rendering of lessons
"""

__version__ = "0.1.0"

# Re-export the main entry points
from courseplatform.catalog import Catalog, ContentResult, Lesson, Module
from courseplatform.logging import get_logger
from courseplatform.progress import Progress, ProgressStore
from courseplatform.render import MarkdownRenderer, render_to_html

__all__ = [
    "Catalog",
    "ContentResult",
    "Lesson",
    "MarkdownRenderer",
    "Module",
    "Progress",
    "ProgressStore",
    "get_logger",
    "render_to_html",
]
