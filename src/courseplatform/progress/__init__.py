"""Progress tracking for the course platform.

Provides the learner progress record, timestamp codecs and the JSON store.
"""

from courseplatform.progress.models import (
    TIMESTAMP_FORMAT,
    IsoTimestampCodec,
    Progress,
    TimestampCodec,
)
from courseplatform.progress.store import ProgressStore

__all__ = [
    "TIMESTAMP_FORMAT",
    "IsoTimestampCodec",
    "Progress",
    "ProgressStore",
    "TimestampCodec",
]
