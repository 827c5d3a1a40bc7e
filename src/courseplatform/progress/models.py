"""Learner progress record and its JSON encoding.

Timestamps never go through ``json`` directly: every datetime field is
passed through a ``TimestampCodec`` so the on-disk text format is fixed
and portable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol

PROGRESS_VERSION = 1

# Fixed on-disk format for every timestamp (always UTC)
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class TimestampCodec(Protocol):
    """Converts datetimes to and from their persisted text form."""

    def encode(self, value: datetime) -> str: ...

    def decode(self, text: str) -> datetime: ...


class IsoTimestampCodec:
    """ISO-8601 UTC timestamps at second precision, e.g. ``2024-05-01T09:30:00Z``."""

    def __init__(self, fmt: str = TIMESTAMP_FORMAT) -> None:
        self.fmt = fmt

    def encode(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).strftime(self.fmt)

    def decode(self, text: str) -> datetime:
        return datetime.strptime(text, self.fmt).replace(tzinfo=UTC)


@dataclass
class Progress:
    """Completed lessons and current position of the local learner."""

    completed_lessons: set[str] = field(default_factory=set)
    completion_dates: dict[str, datetime] = field(default_factory=dict)
    current_lesson_id: str | None = None
    updated_at: datetime | None = None

    @property
    def total_completed(self) -> int:
        return len(self.completed_lessons)

    def mark_lesson_complete(self, lesson_id: str, when: datetime) -> bool:
        """Add a lesson to the completed set.

        Returns:
            True if the lesson was newly completed, False if it already was.
        """
        if lesson_id in self.completed_lessons:
            return False
        self.completed_lessons.add(lesson_id)
        self.completion_dates[lesson_id] = when
        return True

    def is_lesson_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.completed_lessons

    def get_progress_percentage(self, total_lessons: int) -> float:
        if total_lessons <= 0:
            return 0.0
        return self.total_completed * 100.0 / total_lessons

    def to_dict(self, codec: TimestampCodec) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict.

        Args:
            codec: Codec used for every timestamp field.
        """
        return {
            "version": PROGRESS_VERSION,
            "completed_lessons": sorted(self.completed_lessons),
            "completion_dates": {
                lesson_id: codec.encode(when) for lesson_id, when in sorted(self.completion_dates.items())
            },
            "current_lesson_id": self.current_lesson_id,
            "updated_at": codec.encode(self.updated_at) if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], codec: TimestampCodec) -> Progress:
        """Deserialize from a dict that already passed schema validation.

        Completion dates for lessons outside ``completed_lessons`` are dropped.

        Raises:
            ValueError: If a timestamp does not match the codec's format.
        """
        updated_at = data.get("updated_at")
        completed = set(data.get("completed_lessons", []))
        return cls(
            completed_lessons=completed,
            completion_dates={
                lesson_id: codec.decode(text)
                for lesson_id, text in data.get("completion_dates", {}).items()
                if lesson_id in completed
            },
            current_lesson_id=data.get("current_lesson_id"),
            updated_at=codec.decode(updated_at) if updated_at else None,
        )
