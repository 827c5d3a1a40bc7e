"""Shared helpers for CLI commands."""

from __future__ import annotations

import typer

from courseplatform.catalog import Catalog, Lesson
from courseplatform.progress import ProgressStore


def open_catalog() -> Catalog:
    """Build the course catalog with the default resolvers."""
    return Catalog.build()


def open_store() -> ProgressStore:
    """Open the progress store at the configured path."""
    return ProgressStore()


def require_lesson(catalog: Catalog, lesson_id: str) -> Lesson:
    """Look up a lesson or exit with an error."""
    lesson = catalog.get_lesson(lesson_id)
    if lesson is None:
        typer.echo(f"Unknown lesson: {lesson_id}", err=True)
        raise typer.Exit(1)
    return lesson


def current_or_first(catalog: Catalog, store: ProgressStore) -> Lesson | None:
    """Return the learner's current lesson, falling back to the first one."""
    current_id = store.get_current_lesson_id()
    if current_id:
        lesson = catalog.get_lesson(current_id)
        if lesson is not None:
            return lesson
    return catalog.first_lesson()


def describe(lesson: Lesson) -> str:
    return f"{lesson.id}  {lesson.title}"
