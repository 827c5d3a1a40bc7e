"""Configuration and path helpers for the course platform.

Provides canonical paths for:
- Lesson content (bundled package data and the project lessons directory)
- Learner progress storage
- Bundled JSON schemas
"""

import os
from pathlib import Path

# Directory name shared by the bundled and the filesystem lesson stores
LESSONS_BASE_DIR = "lessons"

# Progress file relative to the project directory
PROGRESS_REL_PATH = Path("data") / "progress.json"

# Package holding the bundled lessons and schemas
PACKAGE_NAME = "courseplatform"


def get_project_dir() -> Path:
    """Get the project directory.

    Uses COURSE_PROJECT_DIR if set, otherwise falls back to cwd.
    """
    env_dir = os.environ.get("COURSE_PROJECT_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.cwd()


def get_lessons_dir() -> Path:
    """Get the filesystem lessons directory (<project>/lessons/)."""
    return get_project_dir() / LESSONS_BASE_DIR


def get_progress_json_path() -> Path:
    """Get the path to progress.json.

    Uses COURSE_PROGRESS_PATH if set, otherwise <project>/data/progress.json.
    """
    env_path = os.environ.get("COURSE_PROGRESS_PATH")
    if env_path:
        return Path(env_path)
    return get_project_dir() / PROGRESS_REL_PATH


def get_schemas_dir() -> Path:
    """Get the directory of schemas bundled with the package."""
    return Path(__file__).resolve().parent / "schemas"


def get_progress_schema_path() -> Path:
    """Get the path to the progress JSON schema."""
    return get_schemas_dir() / "progress.schema.json"
