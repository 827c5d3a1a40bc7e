"""Progress tracking commands."""

from __future__ import annotations

from typing import Annotated

import typer

from courseplatform.cli.common import describe, open_catalog, open_store, require_lesson

app = typer.Typer(
    name="progress",
    help="Track course progress",
    no_args_is_help=True,
)


@app.command("status")
def status() -> None:
    """Show overall progress and the current lesson."""
    catalog = open_catalog()
    store = open_store()

    total = catalog.get_total_lesson_count()
    percent = store.get_progress_percentage(total)
    typer.echo(f"Progress: {percent:.0f}% ({store.total_completed}/{total} lessons)")

    current_id = store.get_current_lesson_id()
    lesson = catalog.get_lesson(current_id) if current_id else None
    if lesson is not None:
        typer.echo(f"Current lesson: {describe(lesson)}")
    else:
        typer.echo("Current lesson: none")


@app.command("complete")
def complete(
    lesson_id: Annotated[
        str | None,
        typer.Argument(help="Lesson id (default: current lesson)"),
    ] = None,
    advance: Annotated[
        bool,
        typer.Option("--advance", "-a", help="Move on to the next lesson"),
    ] = False,
) -> None:
    """Mark a lesson as complete."""
    catalog = open_catalog()
    store = open_store()

    if lesson_id is None:
        lesson_id = store.get_current_lesson_id()
        if lesson_id is None:
            typer.echo("No current lesson; pass a lesson id.", err=True)
            raise typer.Exit(1)
    lesson = require_lesson(catalog, lesson_id)

    store.mark_lesson_complete(lesson.id)
    typer.echo(f"Completed: {lesson.title}")

    if advance:
        upcoming = catalog.next_lesson(lesson.id)
        if upcoming is None:
            typer.echo("Congratulations! You've reached the end of the available lessons!")
        else:
            store.set_current_lesson(upcoming.id)
            typer.echo(f"Current lesson: {describe(upcoming)}")


@app.command("reset")
def reset(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Forget all progress."""
    if not yes:
        typer.confirm("Reset all course progress?", abort=True)
    store = open_store()
    store.reset()
    typer.echo("Progress reset.")
