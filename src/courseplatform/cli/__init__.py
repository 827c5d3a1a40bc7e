"""Unified CLI for the course platform.

Provides a single entry point with subcommands organized by domain:

    course lessons list             # Modules and lessons with completion marks
    course lessons show [ID]        # Render a lesson to HTML
    course lessons next             # Move to the next lesson
    course lessons previous         # Move to the previous lesson
    course progress status          # Overall progress
    course progress complete [ID]   # Mark a lesson complete
    course progress reset           # Forget all progress
"""

import typer

from courseplatform.cli import lessons, progress

app = typer.Typer(
    name="course",
    help="Course platform: read lessons and track progress",
    no_args_is_help=True,
)

app.add_typer(lessons.app)
app.add_typer(progress.app)


def main() -> None:
    """Main entry point for the course CLI."""
    app()


if __name__ == "__main__":
    main()
