"""Course catalog: the immutable module/lesson graph and content lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from courseplatform.catalog.curriculum import CURRICULUM
from courseplatform.catalog.models import ERROR, MISSING, ContentResult, Lesson, Module
from courseplatform.catalog.resolvers import ContentResolver, default_resolvers
from courseplatform.config import LESSONS_BASE_DIR
from courseplatform.logging import get_logger

_logger = get_logger("catalog")


class Catalog:
    """Read-only view over the curriculum.

    Build it once with :meth:`build`; every query afterwards is a pure lookup.
    """

    def __init__(
        self,
        modules: Sequence[Module],
        resolvers: Mapping[str, ContentResolver] | None = None,
    ) -> None:
        _validate_modules(modules)
        self._modules = tuple(sorted(modules, key=lambda module: module.order))
        self._lessons = {lesson.id: lesson for module in self._modules for lesson in module.lessons}
        self._order = [lesson.id for module in self._modules for lesson in module.lessons]
        self._resolvers = dict(resolvers) if resolvers is not None else default_resolvers()

    @classmethod
    def build(
        cls,
        definition: Iterable[dict[str, Any]] = CURRICULUM,
        resolvers: Mapping[str, ContentResolver] | None = None,
    ) -> Catalog:
        """Construct the catalog from a declarative curriculum definition.

        Args:
            definition: Module entries in display order (see ``curriculum``).
            resolvers: Source name to resolver, in lookup order. Defaults to
                the bundled package resources followed by the project lessons
                dir.

        Raises:
            ValueError: If the definition breaks an id or ordering invariant.
        """
        modules = [_module_from_definition(order, raw) for order, raw in enumerate(definition)]
        return cls(modules, resolvers)

    def get_modules(self) -> tuple[Module, ...]:
        """Return all modules in display order."""
        return self._modules

    def get_module(self, module_id: str) -> Module | None:
        for module in self._modules:
            if module.id == module_id:
                return module
        return None

    def get_lesson(self, lesson_id: str) -> Lesson | None:
        return self._lessons.get(lesson_id)

    def get_total_lesson_count(self) -> int:
        return sum(len(module.lessons) for module in self._modules)

    def iter_lessons(self) -> Iterator[Lesson]:
        """Yield every lesson in curriculum order across modules."""
        for module in self._modules:
            yield from module.lessons

    def first_lesson(self) -> Lesson | None:
        return next(self.iter_lessons(), None)

    def next_lesson(self, lesson_id: str) -> Lesson | None:
        """Return the lesson after ``lesson_id``, crossing module boundaries."""
        return self._neighbour(lesson_id, 1)

    def previous_lesson(self, lesson_id: str) -> Lesson | None:
        """Return the lesson before ``lesson_id``, crossing module boundaries."""
        return self._neighbour(lesson_id, -1)

    def _neighbour(self, lesson_id: str, step: int) -> Lesson | None:
        if lesson_id not in self._lessons:
            return None
        index = self._order.index(lesson_id) + step
        if 0 <= index < len(self._order):
            return self._lessons[self._order[index]]
        return None

    def resolve_lesson_content(self, lesson: Lesson) -> ContentResult:
        """Resolve a lesson's markdown through the resolver chain.

        Never raises. When no resolver has the lesson a "not found" document
        is synthesized; when a resolver raises, an "error" document carrying
        the failure reason is returned instead.

        Args:
            lesson: Lesson to resolve.

        Returns:
            ContentResult whose ``text`` is always displayable markdown.
        """
        expected_path = f"{LESSONS_BASE_DIR}/{lesson.content_ref}"
        for source, resolve in self._resolvers.items():
            try:
                text = resolve(lesson.content_ref)
            except Exception as e:
                # Any resolver failure, I/O or otherwise, becomes an error document
                _logger.warning("Failed to load lesson %s from %s: %s", lesson.id, expected_path, e)
                return ContentResult(
                    text=_error_document(e),
                    source=ERROR,
                    path=expected_path,
                    error=str(e),
                )
            if text is not None:
                _logger.debug("Loaded lesson %s (%s)", lesson.id, source)
                return ContentResult(text=text, source=source, path=expected_path)

        _logger.warning("Lesson %s not found at %s", lesson.id, expected_path)
        return ContentResult(
            text=_not_found_document(lesson, expected_path),
            source=MISSING,
            path=expected_path,
        )

    def load_lesson_content(self, lesson: Lesson) -> str:
        """Return a lesson's markdown, or a placeholder document. Never raises."""
        return self.resolve_lesson_content(lesson).text


def _module_from_definition(order: int, raw: dict[str, Any]) -> Module:
    """Build a module from one curriculum entry."""
    module_id = str(raw["id"])
    lessons = tuple(
        Lesson(
            id=str(lesson_id),
            title=str(title),
            module_id=module_id,
            order=position,
            content_ref=f"{module_id}/{lesson_file}",
        )
        for position, (lesson_id, title, lesson_file) in enumerate(raw.get("lessons", ()), start=1)
    )
    return Module(
        id=module_id,
        title=str(raw["title"]),
        description=str(raw.get("description", "")),
        order=int(raw.get("order", order)),
        lessons=lessons,
    )


def _validate_modules(modules: Sequence[Module]) -> None:
    """Check id uniqueness and ordering invariants of the module graph."""
    module_ids: set[str] = set()
    for module in modules:
        if module.id in module_ids:
            raise ValueError(f"Duplicate module id: {module.id}")
        module_ids.add(module.id)

    orders = sorted(module.order for module in modules)
    if orders != list(range(len(modules))):
        raise ValueError(f"Module orders must be unique and contiguous from 0, got {orders}")

    seen: dict[str, str] = {}
    for module in modules:
        lesson_orders: set[int] = set()
        for lesson in module.lessons:
            previous = seen.get(lesson.id)
            if previous is not None:
                raise ValueError(f"Duplicate lesson id: {lesson.id} (in {previous} and {module.id})")
            seen[lesson.id] = module.id
            if lesson.order in lesson_orders:
                raise ValueError(f"Duplicate lesson order {lesson.order} in module {module.id}")
            lesson_orders.add(lesson.order)
            if lesson.module_id != module.id:
                raise ValueError(f"Lesson {lesson.id} points at module {lesson.module_id}, not {module.id}")


def _not_found_document(lesson: Lesson, expected_path: str) -> str:
    return (
        "# Lesson Not Found\n\n"
        f"The lesson content for **{lesson.title}** could not be loaded.\n\n"
        f"Expected path: `{expected_path}`\n"
    )


def _error_document(error: BaseException) -> str:
    return f"# Error Loading Lesson\n\nAn error occurred while loading this lesson:\n\n```\n{error}\n```\n"
