"""Content catalog for the course platform.

Provides the fixed curriculum, lookup queries and lesson content resolution.
"""

from courseplatform.catalog.catalog import Catalog
from courseplatform.catalog.curriculum import CURRICULUM
from courseplatform.catalog.models import ContentResult, Lesson, Module
from courseplatform.catalog.resolvers import (
    ContentResolver,
    bundled_resolver,
    default_resolvers,
    filesystem_resolver,
)

__all__ = [
    "CURRICULUM",
    "Catalog",
    "ContentResolver",
    "ContentResult",
    "Lesson",
    "Module",
    "bundled_resolver",
    "default_resolvers",
    "filesystem_resolver",
]
