"""
Catalog store: the local, authoritative copy of the lessons on offer.

The remote store is not consistent about field names (a lesson's subject
may be stored as ``subject``, ``topic`` or ``name``; its seat count as
``spaces``, ``space`` or ``availability``), so every record is normalized
into a :class:`Lesson` on load. When the live fetch fails the catalog is
filled from a fixed seed so the app stays usable offline.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, Iterator, List, Optional

from store import crud
from store.connection import RemoteStoreError
from store.models import PLACEHOLDER_IMAGE, Lesson, LessonId
from utils.logger import get_logger

_logger = get_logger(__name__)

SUBJECT_KEYS = ("subject", "topic", "name")
SPACES_KEYS = ("spaces", "space", "availability")

# (id, subject, location, price); every seed lesson starts with 5 seats
SEED_LESSONS = [
    (1, "Math", "London", 100),
    (2, "English", "Oxford", 90),
    (3, "Science", "Bristol", 95),
    (4, "Music", "Leeds", 80),
    (5, "Drama", "York", 85),
    (6, "Art", "Cambridge", 75),
    (7, "History", "Manchester", 88),
    (8, "Physics", "Bath", 98),
    (9, "Chemistry", "Liverpool", 99),
    (10, "Computing", "Birmingham", 105),
]
SEED_SPACES = 5


def _first_present(raw: Dict[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _first_truthy(raw: Dict[str, Any], keys: Iterable[str]) -> Any:
    # empty strings and zero fall through to the next key
    for key in keys:
        if raw.get(key):
            return raw[key]
    return None


def _to_number(val) -> float:
    try:
        num = float(val)
    except (TypeError, ValueError):
        return 0
    return num if math.isfinite(num) else 0


def _lesson_id(raw: Dict[str, Any], index: int) -> LessonId:
    if raw.get("_id"):
        return str(raw["_id"])
    lesson_id = raw.get("id")
    if not lesson_id:
        return index
    if isinstance(lesson_id, bool) or not isinstance(lesson_id, (str, int)):
        raise ValueError(f"lesson record #{index} has an unusable id: {lesson_id!r}")
    return lesson_id


def normalize_lesson(raw: Dict[str, Any], index: int) -> Lesson:
    """
    Build a Lesson from one upstream record.

    Missing numbers default to zero, a missing image to the placeholder.
    Raises ValueError if the record is not a mapping or its id is neither
    a string nor an integer.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"lesson record #{index} is not an object: {raw!r}")

    lesson_id = _lesson_id(raw, index)

    spaces = int(_to_number(_first_present(raw, SPACES_KEYS)))
    if spaces < 0:
        _logger.warning(f"Lesson {lesson_id} reported {spaces} seats, using 0")
        spaces = 0

    return Lesson(
        id=lesson_id,
        subject=str(_first_truthy(raw, SUBJECT_KEYS) or ""),
        location=str(raw.get("location") or ""),
        price=_to_number(raw.get("price")),
        spaces=spaces,
        image=raw.get("image") or PLACEHOLDER_IMAGE,
    )


def seed_lessons() -> List[Lesson]:
    """A fresh copy of the built-in offline catalog."""
    return [
        Lesson(
            id=lesson_id,
            subject=subject,
            location=location,
            price=price,
            spaces=SEED_SPACES,
            image=f"{subject.lower()}.jpg",
        )
        for lesson_id, subject, location, price in SEED_LESSONS
    ]


class CatalogStore:
    """Lessons keyed by id, kept in the order they were loaded."""

    def __init__(self, lessons: Optional[Iterable[Lesson]] = None) -> None:
        self._lessons: Dict[LessonId, Lesson] = {}
        if lessons is not None:
            self.replace(lessons)

    def replace(self, lessons: Iterable[Lesson]) -> None:
        loaded: Dict[LessonId, Lesson] = {}
        for lesson in lessons:
            if lesson.id in loaded:
                _logger.warning(f"Duplicate lesson id {lesson.id!r} skipped")
                continue
            loaded[lesson.id] = lesson
        self._lessons = loaded

    def get(self, lesson_id: LessonId) -> Optional[Lesson]:
        return self._lessons.get(lesson_id)

    def lessons(self) -> List[Lesson]:
        return list(self._lessons.values())

    def __contains__(self, lesson_id) -> bool:
        return lesson_id in self._lessons

    def __iter__(self) -> Iterator[Lesson]:
        return iter(self._lessons.values())

    def __len__(self) -> int:
        return len(self._lessons)


async def load_catalog(catalog: CatalogStore) -> bool:
    """
    Populate the catalog from the remote store, once.

    Returns True if live data was loaded. On any fetch or parse failure the
    seed catalog is loaded instead and False is returned; there is no retry.
    """
    try:
        records = await crud.fetch_lessons()
        lessons = [normalize_lesson(raw, idx) for idx, raw in enumerate(records)]
    except (RemoteStoreError, ValueError) as exc:
        _logger.warning(f"Live catalog unavailable, using seed data: {exc}")
        catalog.replace(seed_lessons())
        return False

    catalog.replace(lessons)
    _logger.info(f"Loaded {len(catalog)} lessons from the store")
    return True
