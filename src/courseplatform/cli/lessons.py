"""Lesson browsing commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from courseplatform.cli.common import (
    current_or_first,
    describe,
    open_catalog,
    open_store,
    require_lesson,
)
from courseplatform.io import write_file
from courseplatform.render import MarkdownRenderer

app = typer.Typer(
    name="lessons",
    help="Browse and read lessons",
    no_args_is_help=True,
)


@app.command("list")
def list_lessons() -> None:
    """List modules and their lessons with completion marks."""
    catalog = open_catalog()
    store = open_store()
    current_id = store.get_current_lesson_id()

    for module in catalog.get_modules():
        typer.echo(str(module))
        for lesson in module.lessons:
            mark = "x" if store.is_lesson_completed(lesson.id) else " "
            pointer = " <- current" if lesson.id == current_id else ""
            typer.echo(f"  [{mark}] {describe(lesson)}{pointer}")


@app.command("show")
def show(
    lesson_id: Annotated[
        str | None,
        typer.Argument(help="Lesson id (default: current lesson, else the first)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the HTML document to this file"),
    ] = None,
) -> None:
    """Render a lesson to HTML and make it the current lesson."""
    catalog = open_catalog()
    store = open_store()

    if lesson_id is not None:
        lesson = require_lesson(catalog, lesson_id)
    else:
        lesson = current_or_first(catalog, store)
        if lesson is None:
            typer.echo("The course has no lessons.", err=True)
            raise typer.Exit(1)

    result = catalog.resolve_lesson_content(lesson)
    if not result.ok:
        typer.echo(f"warning: lesson {lesson.id} could not be loaded ({result.source})", err=True)

    html = MarkdownRenderer().render_document(result.text)
    store.set_current_lesson(lesson.id)

    if output is None:
        typer.echo(html, nl=False)
        return
    if not write_file(output, html):
        typer.echo(f"Could not write {output}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Wrote {describe(lesson)} to {output}")


def _move(step: int) -> None:
    catalog = open_catalog()
    store = open_store()

    current_id = store.get_current_lesson_id()
    if current_id is None or catalog.get_lesson(current_id) is None:
        target = catalog.first_lesson() if step > 0 else None
    elif step > 0:
        target = catalog.next_lesson(current_id)
    else:
        target = catalog.previous_lesson(current_id)

    if target is None:
        if step > 0:
            typer.echo("You've reached the end of the available lessons!")
        else:
            typer.echo("Already at the first lesson.")
        return

    store.set_current_lesson(target.id)
    typer.echo(f"Current lesson: {describe(target)}")


@app.command("next")
def next_lesson() -> None:
    """Move to the next lesson."""
    _move(1)


@app.command("previous")
def previous_lesson() -> None:
    """Move to the previous lesson."""
    _move(-1)
