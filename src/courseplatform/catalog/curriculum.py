"""Static curriculum definition.

The whole course is authored here as plain data: one entry per module, in
display order, each with its lessons in curriculum order. ``Catalog.build``
turns this into immutable ``Module``/``Lesson`` records once per process.

Lesson tuples are ``(lesson_id, title, lesson_file)``; the content reference
is ``<module-id>/<lesson_file>`` and lesson order is the position in the
list, starting at 1.
"""

from __future__ import annotations

from typing import Any

CURRICULUM: tuple[dict[str, Any], ...] = (
    {
        "id": "module-00",
        "title": "Setup & First Steps",
        "description": "Get the development environment ready and verify everything works",
        "lessons": (
            ("00-01", "Installing Flutter & Dart SDK", "lesson-01-installation.md"),
            ("00-02", "Setting Up Your Editor", "lesson-02-editor-setup.md"),
            ("00-03", "Running Your First Hello World", "lesson-03-hello-world.md"),
            ("00-04", "Using the Terminal", "lesson-04-terminal-basics.md"),
            ("00-05", "Reading Error Messages", "lesson-05-reading-errors.md"),
        ),
    },
    {
        "id": "module-01",
        "title": "The Dart Language",
        "description": "Learn programming fundamentals through interactive exercises",
        "lessons": (
            ("01-01", "What is Code?", "lesson-01-what-is-code.md"),
            ("01-02", "Storing Information (Variables)", "lesson-02-variables.md"),
            ("01-03", "Making Decisions (if/else)", "lesson-03-conditionals.md"),
            ("01-04", "Repeating Things (Loops)", "lesson-04-loops.md"),
            ("01-05", "Reusable Code (Functions)", "lesson-05-functions.md"),
            ("01-06", "Collections (Lists & Maps)", "lesson-06-collections.md"),
            ("01-07", "Classes & Objects", "lesson-07-classes.md"),
        ),
    },
    {
        "id": "module-02",
        "title": "Your First Flutter App",
        "description": "Understand the basics of how a Flutter app comes to life",
        "lessons": (
            ("02-01", "What Happens When You Run an App?", "lesson-01-main-function.md"),
            ("02-02", "Everything is a Widget", "lesson-02-widgets.md"),
            ("02-03", "Stateless Widgets", "lesson-03-stateless-widgets.md"),
            ("02-04", "Stateful Widgets", "lesson-04-stateful-widgets.md"),
            ("02-05", "Hot Reload", "lesson-05-hot-reload.md"),
            ("02-06", "Handling Taps", "lesson-06-handling-taps.md"),
            ("02-07", "Project Structure", "lesson-07-project-structure.md"),
        ),
    },
    {
        "id": "module-03",
        "title": "Layouts",
        "description": "Arrange widgets on screen with rows, columns and stacks",
        "lessons": (
            ("03-01", "Rows and Columns", "lesson-01-rows-columns.md"),
            ("03-02", "Padding, Margins and Containers", "lesson-02-containers.md"),
            ("03-03", "Scrolling Lists", "lesson-03-lists.md"),
        ),
    },
    {
        "id": "module-04",
        "title": "Capstone Project",
        "description": "Put everything together in a small complete app",
        "lessons": (("04-01", "Building a Todo App", "lesson-01-todo-app.md"),),
    },
)
