"""File helpers shared by the progress store, schema loader and CLI.

Reads degrade to a caller-supplied default. Writes land through a
sibling temp file and ``os.replace``, so a reader sees either the old
progress file or the new one, never a truncated mix.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from courseplatform.logging import get_logger

_logger = get_logger("io")


def ensure_parent_dir(path: Path | str) -> Path:
    """Create the directory that will hold ``path`` and return ``path`` as a Path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def read_file(path: Path | str, default: str | None = None) -> str | None:
    """Return the UTF-8 text of ``path``, or ``default`` if it cannot be read or decoded."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return default


def read_json(path: Path | str, default: Any = None) -> Any:
    """Parse ``path`` as JSON.

    Args:
        path: JSON document such as a bundled schema.
        default: Returned when the file is unreadable or not JSON.
    """
    text = read_file(path)
    if text is None:
        return default
    try:
        return json.loads(text)
    except ValueError:
        return default


def _replace_atomically(path: Path, content: str) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


def write_file(path: Path | str, content: str) -> bool:
    """Replace ``path`` with ``content`` in one step.

    Missing parent directories are created. Failures are logged and
    reported as ``False`` rather than raised.
    """
    path = Path(path)
    try:
        ensure_parent_dir(path)
        _replace_atomically(path, content)
    except OSError as e:
        _logger.warning("Unable to write %s: %s", path, e)
        return False
    return True


def write_json(path: Path | str, data: Any, indent: int = 2) -> bool:
    """Serialize ``data`` and write it with :func:`write_file`.

    Non-ASCII text is written as-is and the document ends with a newline.
    Returns ``False`` when ``data`` cannot be serialized or the write fails.
    """
    try:
        content = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as e:
        _logger.warning("Unable to encode %s as JSON: %s", path, e)
        return False
    return write_file(path, content)
