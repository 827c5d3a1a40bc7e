"""Domain models for the course catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

# Placeholder sources; any other value names the resolver that produced the text
MISSING = "missing"
ERROR = "error"


@dataclass(frozen=True)
class Lesson:
    """A single content unit with a stable id and a content reference."""

    id: str
    title: str
    module_id: str
    order: int
    content_ref: str

    def __str__(self) -> str:
        return f"Lesson {self.order}: {self.title}"


@dataclass(frozen=True)
class Module:
    """Ordered grouping of lessons."""

    id: str
    title: str
    description: str
    order: int
    lessons: tuple[Lesson, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"Module {self.order}: {self.title} ({len(self.lessons)} lessons)"


@dataclass(frozen=True)
class ContentResult:
    """Outcome of resolving a lesson's raw markdown.

    ``text`` is always displayable. ``source`` tells where it came from;
    ``missing`` and ``error`` mean ``text`` is a synthesized placeholder.
    """

    text: str
    source: str
    path: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.source not in (MISSING, ERROR)
