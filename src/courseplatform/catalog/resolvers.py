"""Lesson content resolvers.

A resolver maps a content reference (``<module-id>/<lesson-file>``) to the
lesson's raw markdown, or ``None`` when it does not have it. Resolvers are
tried in order and the first hit wins. A resolver may raise;
the catalog turns any exception into an error document.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib import resources
from pathlib import Path

from courseplatform.config import LESSONS_BASE_DIR, PACKAGE_NAME, get_lessons_dir

ContentResolver = Callable[[str], str | None]


def bundled_resolver(
    package: str = PACKAGE_NAME,
    base_dir: str = LESSONS_BASE_DIR,
) -> ContentResolver:
    """Resolve lessons shipped as package data under ``<package>/<base_dir>``."""

    def resolve(content_ref: str) -> str | None:
        try:
            entry = resources.files(package) / base_dir
        except ModuleNotFoundError:
            return None
        for part in content_ref.split("/"):
            entry = entry / part
        if not entry.is_file():
            return None
        return entry.read_text(encoding="utf-8")

    return resolve


def filesystem_resolver(lessons_dir: Path | str | None = None) -> ContentResolver:
    """Resolve lessons from a directory on disk.

    Args:
        lessons_dir: Directory holding ``<module-id>/<lesson-file>`` trees.
            Defaults to ``<project>/lessons``, looked up at call time so the
            project directory can change after the catalog is built.
    """

    def resolve(content_ref: str) -> str | None:
        base = Path(lessons_dir) if lessons_dir is not None else get_lessons_dir()
        path = base / content_ref
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    return resolve


def default_resolvers() -> dict[str, ContentResolver]:
    """Bundled resources first, then the project lessons directory.

    Keys name the source and are reported in ``ContentResult.source``.
    """
    return {
        "bundled": bundled_resolver(),
        "filesystem": filesystem_resolver(),
    }
