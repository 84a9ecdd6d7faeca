import os
import sys

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

import unittest

from booking.catalog import CatalogStore
from booking.reservation import cart_total, release, reserve, reserved_count
from store.models import CartItem, Lesson
from utils.state import SessionState


def make_state(*lessons: Lesson) -> SessionState:
    return SessionState(catalog=CatalogStore(lessons))


class ReservationTestCase(unittest.TestCase):
    def setUp(self):
        self.state = make_state(
            Lesson(1, "Math", "London", 100, 2, "math.jpg"),
            Lesson(2, "English", "Oxford", 90, 1, "english.jpg"),
            Lesson(3, "Art", "Cambridge", 75, 0),
        )

    def test_reserve_snapshots_lesson_and_takes_a_seat(self):
        self.assertTrue(reserve(self.state, 1))

        self.assertEqual(self.state.catalog.get(1).spaces, 1)
        self.assertEqual(
            self.state.cart, [CartItem(1, "Math", "London", 100, "math.jpg")]
        )

    def test_reserve_same_lesson_twice(self):
        self.assertTrue(reserve(self.state, 1))
        self.assertTrue(reserve(self.state, 1))

        self.assertEqual(self.state.catalog.get(1).spaces, 0)
        self.assertEqual(reserved_count(self.state.cart, 1), 2)

    def test_reserve_full_lesson_is_a_no_op(self):
        self.assertFalse(reserve(self.state, 3))

        self.assertEqual(self.state.cart, [])
        self.assertEqual(self.state.catalog.get(3).spaces, 0)

    def test_reserve_unknown_lesson_is_a_no_op(self):
        self.assertFalse(reserve(self.state, 42))
        self.assertEqual(self.state.cart, [])

    def test_release_gives_the_seat_back(self):
        reserve(self.state, 1)
        reserve(self.state, 2)

        item = release(self.state, 0)

        self.assertEqual(item.lesson_id, 1)
        self.assertEqual(self.state.catalog.get(1).spaces, 2)
        self.assertEqual([i.lesson_id for i in self.state.cart], [2])

    def test_release_then_reserve_round_trip(self):
        reserve(self.state, 2)
        self.assertEqual(self.state.catalog.get(2).spaces, 0)

        release(self.state, 0)
        self.assertEqual(self.state.catalog.get(2).spaces, 1)
        reserve(self.state, 2)
        self.assertEqual(self.state.catalog.get(2).spaces, 0)
        self.assertEqual(len(self.state.cart), 1)

    def test_release_removes_only_that_position(self):
        reserve(self.state, 1)
        reserve(self.state, 2)
        reserve(self.state, 1)

        release(self.state, 1)

        self.assertEqual([i.lesson_id for i in self.state.cart], [1, 1])
        self.assertEqual(self.state.catalog.get(2).spaces, 1)
        self.assertEqual(self.state.catalog.get(1).spaces, 0)

    def test_release_for_vanished_lesson_restores_nothing(self):
        reserve(self.state, 2)
        self.state.catalog.replace([Lesson(1, "Math", "London", 100, 2)])

        item = release(self.state, 0)

        self.assertEqual(item.lesson_id, 2)
        self.assertEqual(self.state.cart, [])
        self.assertEqual(self.state.catalog.get(1).spaces, 2)
        self.assertIsNone(self.state.catalog.get(2))

    def test_release_out_of_range(self):
        reserve(self.state, 1)
        for index in (1, 5, -1):
            with self.assertRaises(IndexError):
                release(self.state, index)
        self.assertEqual(len(self.state.cart), 1)
        self.assertEqual(self.state.catalog.get(1).spaces, 1)

    def test_seats_never_negative_and_every_item_is_backed(self):
        original = {lesson.id: lesson.spaces for lesson in self.state.catalog}
        actions = [1, 1, 1, 2, 2, 3, "r0", 1, 2, "r2", "r0", 3, 1, 1, 1]

        for action in actions:
            if isinstance(action, str):
                index = int(action[1:])
                if index < len(self.state.cart):
                    release(self.state, index)
            else:
                reserve(self.state, action)

            for lesson in self.state.catalog:
                self.assertGreaterEqual(lesson.spaces, 0)
                self.assertEqual(
                    reserved_count(self.state.cart, lesson.id),
                    original[lesson.id] - lesson.spaces,
                )


class CartTotalTestCase(unittest.TestCase):
    def test_sum_of_prices(self):
        cart = [
            CartItem(1, "Math", "London", 100, "math.jpg"),
            CartItem(2, "English", "Oxford", 90, "english.jpg"),
        ]
        self.assertEqual(cart_total(cart), 190)

    def test_empty_cart(self):
        self.assertEqual(cart_total([]), 0)

    def test_follows_cart_changes(self):
        state = make_state(Lesson(1, "Math", "London", 100, 5))
        reserve(state, 1)
        reserve(state, 1)
        self.assertEqual(cart_total(state.cart), 200)
        release(state, 0)
        self.assertEqual(cart_total(state.cart), 100)


if __name__ == "__main__":
    unittest.main()
