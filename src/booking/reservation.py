"""
Optimistic seat reservation.

Adding a lesson to the cart takes one seat off the lesson straight away;
removing the cart entry gives it back. Nothing is written to the remote
store here, that only happens at checkout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from store.models import CartItem, LessonId
from utils.logger import get_logger

if TYPE_CHECKING:
    from utils.state import SessionState

_logger = get_logger(__name__)


def reserve(state: SessionState, lesson_id: LessonId) -> bool:
    """
    Put one seat of the lesson in the cart.
    Returns False, changing nothing, if the lesson is unknown or full.
    """
    lesson = state.catalog.get(lesson_id)
    if lesson is None or lesson.spaces <= 0:
        return False

    state.cart.append(CartItem.from_lesson(lesson))
    lesson.spaces -= 1
    _logger.debug(f"Reserved {lesson.subject} ({lesson.id}), {lesson.spaces} left")
    return True


def release(state: SessionState, index: int) -> CartItem:
    """
    Remove the cart entry at index and give its seat back to the lesson,
    if the lesson is still in the catalog.
    Raises IndexError for an index outside the cart.
    """
    if not 0 <= index < len(state.cart):
        raise IndexError(f"cart index {index} out of range")

    item = state.cart.pop(index)
    lesson = state.catalog.get(item.lesson_id)
    if lesson is not None:
        lesson.spaces += 1
        _logger.debug(f"Released {item.subject} ({item.lesson_id}), {lesson.spaces} left")
    else:
        _logger.debug(f"Released {item.subject} ({item.lesson_id}), lesson gone")
    return item


def reserved_count(cart: Iterable[CartItem], lesson_id: LessonId) -> int:
    return sum(1 for item in cart if item.lesson_id == lesson_id)


def cart_total(cart: Iterable[CartItem]) -> float:
    return sum(item.price for item in cart)
