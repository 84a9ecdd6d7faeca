"""
Checkout synchronizer.

A submission runs through four stages, each of which can end it:

  1. validate the contact details and the cart
  2. create the order on the remote store
  3. reconcile inventory: push the current local seat count of every
     lesson in the cart to the store, all requests at once
  4. finalize: clear the cart and contact details

Seat counts are sent as absolute values (last write wins), which is only
correct while a single client books against the store. Nothing is rolled
back on failure: seats reserved locally stay reserved, and an order that
was created before a reconciliation failure stays created.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

from booking.catalog import CatalogStore
from booking.reservation import cart_total
from booking.validation import can_checkout
from store import crud
from store.connection import RemoteStoreError
from store.models import CartItem, ContactInfo, LessonId, Order, OrderLine
from utils.logger import get_logger

if TYPE_CHECKING:
    from utils.state import SessionState

_logger = get_logger(__name__)

VALIDATION_ERROR_MSG = "Please enter valid name and phone number."
SUBMIT_ERROR_MSG = "Could not submit order. Please try again."
SUCCESS_MSG = "Order submitted!"


class CheckoutOutcome(Enum):
    SUCCESS = "success"
    INVALID = "invalid"
    ORDER_FAILED = "order_failed"
    RECONCILE_FAILED = "reconcile_failed"


@dataclass(frozen=True)
class CheckoutResult:
    outcome: CheckoutOutcome
    order: Optional[Order] = None
    # whatever the store answered the order request with
    receipt: Any = None
    failed_lessons: Tuple[LessonId, ...] = ()

    @property
    def ok(self) -> bool:
        return self.outcome is CheckoutOutcome.SUCCESS


def build_order(contact: ContactInfo, cart: Sequence[CartItem]) -> Order:
    return Order(
        name=contact.name,
        phone=contact.phone,
        items=tuple(
            OrderLine(lesson_id=item.lesson_id, subject=item.subject, price=item.price)
            for item in cart
        ),
        total=cart_total(cart),
    )


def seat_counts(cart: Sequence[CartItem]) -> Dict[LessonId, int]:
    """How many cart entries point at each lesson."""
    return dict(Counter(item.lesson_id for item in cart))


async def reconcile_inventory(
    catalog: CatalogStore, counts: Dict[LessonId, int]
) -> List[LessonId]:
    """
    Send the local seat count of every catalog lesson named in counts.

    All updates are issued together and all of them are awaited, even after
    one has failed. Returns the ids whose update failed.
    """
    lessons = [lesson for lesson in catalog if lesson.id in counts]
    results = await asyncio.gather(
        *(crud.update_lesson_spaces(lesson.id, lesson.spaces) for lesson in lessons),
        return_exceptions=True,
    )

    failed = []
    for lesson, result in zip(lessons, results):
        if isinstance(result, RemoteStoreError):
            _logger.error(f"Seat update for lesson {lesson.id!r} failed: {result}")
            failed.append(lesson.id)
        elif isinstance(result, BaseException):
            raise result
    return failed


async def submit_order(state: SessionState) -> CheckoutResult:
    """
    Run one checkout attempt against the session and report how it ended.
    state.error_msg / state.success_msg are set to match the outcome.
    """
    if not can_checkout(state.contact, state.cart):
        state.fail(VALIDATION_ERROR_MSG)
        return CheckoutResult(CheckoutOutcome.INVALID)

    cart = list(state.cart)
    order = build_order(state.contact, cart)

    try:
        receipt = await crud.create_order(order)
    except RemoteStoreError as exc:
        _logger.error(f"Order could not be created: {exc}")
        state.fail(SUBMIT_ERROR_MSG)
        return CheckoutResult(CheckoutOutcome.ORDER_FAILED, order=order)

    _logger.info(f"Order created for {order.name} ({len(order.items)} items): {receipt}")

    failed = await reconcile_inventory(state.catalog, seat_counts(cart))
    if failed:
        # the order exists upstream but its seats are not all reflected
        state.fail(SUBMIT_ERROR_MSG)
        return CheckoutResult(
            CheckoutOutcome.RECONCILE_FAILED,
            order=order,
            receipt=receipt,
            failed_lessons=tuple(failed),
        )

    state.cart.clear()
    state.contact.clear()
    state.succeed(SUCCESS_MSG)
    _logger.info(f"Checkout complete, total {order.total}")
    return CheckoutResult(CheckoutOutcome.SUCCESS, order=order, receipt=receipt)
