"""Checks persisted documents against the bundled JSON Schemas.

``validate`` reports problems as ``(False, messages)``; callers such as
the progress store decide what a failed check means.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from courseplatform.io import read_json
from courseplatform.logging import get_logger

_logger = get_logger("jsonschema")


def validate(data: Any, schema: dict[str, Any] | Path | str) -> tuple[bool, list[str]]:
    """Check ``data`` against a Draft 2020-12 schema.

    Args:
        data: Decoded JSON document, e.g. the contents of ``progress.json``.
        schema: The schema itself, or the path of a schema file.

    Returns:
        ``(True, [])`` when the document conforms, otherwise ``False`` and one
        ``<location>: <problem>`` message per violation.
    """
    if isinstance(schema, (Path, str)):
        schema_path = schema
        schema = read_json(schema_path)
        if schema is None:
            return False, [f"Could not load schema from {schema_path}"]

    try:
        problems = [_describe(error) for error in Draft202012Validator(schema).iter_errors(data)]
    except Exception as e:
        # A malformed schema surfaces here, not as a document problem
        _logger.warning("Schema check aborted: %s", e)
        return False, [f"Schema check aborted: {e}"]

    for problem in problems:
        _logger.debug("Schema violation: %s", problem)
    return not problems, problems


def _describe(error: ValidationError) -> str:
    """Render a violation as ``ids[1]: ...`` or ``$: ...`` for the document root."""
    location = ""
    for step in error.absolute_path:
        if isinstance(step, int):
            location += f"[{step}]"
        elif location:
            location += f".{step}"
        else:
            location = str(step)
    return f"{location or '$'}: {error.message}"
