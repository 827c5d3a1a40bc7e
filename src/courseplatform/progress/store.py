"""Progress store for the local learner.

Loads progress.json once at construction and rewrites it in full after
every mutation. Failures never reach the caller: an unreadable or corrupt
file starts a fresh record, a failed write is logged and the in-memory
state stays authoritative until the next successful save.
"""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from courseplatform.config import get_progress_json_path, get_progress_schema_path
from courseplatform.io import write_json
from courseplatform.jsonschema import validate
from courseplatform.logging import get_logger
from courseplatform.progress.models import IsoTimestampCodec, Progress, TimestampCodec

_logger = get_logger("progress.store")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ProgressStore:
    """Durable completion state and current lesson pointer."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        codec: TimestampCodec | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Load progress from disk.

        Args:
            path: Path to progress.json. Defaults to the project progress path.
            codec: Timestamp codec for the JSON document.
            clock: Source of mutation timestamps.
        """
        self.path = Path(path) if path is not None else get_progress_json_path()
        self.codec = codec or IsoTimestampCodec()
        self._clock = clock
        self._progress = self._load()

    @property
    def progress(self) -> Progress:
        return self._progress

    @property
    def total_completed(self) -> int:
        return self._progress.total_completed

    def _load(self) -> Progress:
        if not self.path.exists():
            _logger.info("No progress file at %s, starting fresh", self.path)
            return Progress()

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            _logger.warning("Cannot read progress file %s (%s). Starting fresh.", self.path, e)
            return Progress()

        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            return self._discard_corrupt(f"not UTF-8: {e}")
        except (json.JSONDecodeError, ValueError) as e:
            return self._discard_corrupt(f"invalid JSON: {e}")

        is_valid, errors = validate(data, get_progress_schema_path())
        if not is_valid:
            return self._discard_corrupt("; ".join(errors))

        try:
            return Progress.from_dict(data, self.codec)
        except ValueError as e:
            return self._discard_corrupt(f"bad timestamp: {e}")

    def _discard_corrupt(self, reason: str) -> Progress:
        _logger.warning("progress file %s is corrupt (%s). Starting fresh.", self.path, reason)
        # Byte copy: the file may not be UTF-8
        backup_path = self.path.with_suffix(self.path.suffix + ".bak")
        try:
            shutil.copyfile(self.path, backup_path)
        except OSError as e:
            _logger.error("Could not back up corrupt progress to %s: %s", backup_path, e)
        else:
            _logger.info("Backed up corrupt progress to %s", backup_path)
        return Progress()

    def save(self) -> bool:
        """Rewrite the progress file.

        Returns:
            True if save succeeded, False otherwise.
        """
        success = write_json(self.path, self._progress.to_dict(self.codec))
        if success:
            _logger.debug("Saved progress to %s", self.path)
        else:
            _logger.error("Failed to save progress to %s; changes are kept in memory only", self.path)
        return success

    def _touch_and_save(self) -> None:
        self._progress.updated_at = self._clock()
        self.save()

    def mark_lesson_complete(self, lesson_id: str) -> None:
        """Mark a lesson complete. Repeated calls have no further effect."""
        self._progress.mark_lesson_complete(lesson_id, self._clock())
        self._touch_and_save()

    def is_lesson_completed(self, lesson_id: str) -> bool:
        return self._progress.is_lesson_completed(lesson_id)

    def get_completion_date(self, lesson_id: str) -> datetime | None:
        return self._progress.completion_dates.get(lesson_id)

    def set_current_lesson(self, lesson_id: str | None) -> None:
        self._progress.current_lesson_id = lesson_id
        self._touch_and_save()

    def get_current_lesson_id(self) -> str | None:
        return self._progress.current_lesson_id

    def get_progress_percentage(self, total_lessons: int) -> float:
        """Percentage of ``total_lessons`` completed; 0.0 when there are none."""
        return self._progress.get_progress_percentage(total_lessons)

    def reset(self) -> None:
        """Forget all progress and persist the empty record."""
        self._progress = Progress()
        self._touch_and_save()
