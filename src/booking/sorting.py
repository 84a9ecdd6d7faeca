from typing import Iterable, List

from store.models import Lesson, SortSpec

SORTABLE_FIELDS = ("subject", "location", "price", "spaces")


def _sort_key(field: str):
    def key(lesson: Lesson):
        value = getattr(lesson, field)
        if isinstance(value, str):
            return value.lower()
        return value

    return key


def sorted_lessons(lessons: Iterable[Lesson], spec: SortSpec) -> List[Lesson]:
    """
    Fresh list of the lessons ordered by spec.field.

    Text compares case-insensitively. The sort is stable in both
    directions, so equal keys keep their catalog order.
    """
    if spec.field not in SORTABLE_FIELDS:
        raise ValueError(f"cannot sort lessons by {spec.field!r}")
    return sorted(lessons, key=_sort_key(spec.field), reverse=not spec.ascending)
