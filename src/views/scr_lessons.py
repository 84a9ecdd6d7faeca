from dataclasses import replace
from typing import Dict

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import ScreenResume
from textual.widgets import Button, DataTable, Label, Select

from booking.reservation import cart_total, reserve, reserved_count
from booking.sorting import SORTABLE_FIELDS, sorted_lessons
from store.models import LessonId
from utils.messages import CartChangedMessage
from utils.pure import format_price
from views.base_screen import BaseScreen


class LessonsScreen(BaseScreen):
    """
    lesson list, sortable; selecting a row reserves one seat
    """

    CSS = """
    #hort-sort {
        height: auto;
    }
    #select-sort {
        width: 30;
    }
    """

    def __init__(self):
        super().__init__()
        self._row_lessons: Dict[str, LessonId] = {}

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Horizontal(id="hort-sort"):
            yield Select(
                [(f.title(), f) for f in SORTABLE_FIELDS],
                value=self.app.state.sort.field,
                allow_blank=False,
                id="select-sort",
            )
            yield Button(self._direction_label(), id="btn-sort-direction")
            yield Button("View Cart", id="btn-view-cart", variant="primary")
        yield DataTable(id="table-lessons")
        yield Label("", id="label-cart-summary")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns("Subject", "Location", "Price", "Seats", "In Cart")
        table.focus()

    def _direction_label(self) -> str:
        return "Ascending" if self.app.state.sort.ascending else "Descending"

    @on(ScreenResume)
    @on(CartChangedMessage)
    def refresh_lessons(self) -> None:
        state = self.app.state
        table = self.query_one(DataTable)
        cursor_row = table.cursor_row
        table.clear()
        self._row_lessons = {}

        for idx, lesson in enumerate(sorted_lessons(state.catalog, state.sort)):
            key = str(idx)
            self._row_lessons[key] = lesson.id
            table.add_row(
                lesson.subject,
                lesson.location,
                format_price(lesson.price),
                str(lesson.spaces) if lesson.spaces > 0 else "Full",
                str(reserved_count(state.cart, lesson.id)),
                key=key,
            )
        if table.row_count:
            table.move_cursor(row=min(cursor_row, table.row_count - 1))

        self.query_one("#label-cart-summary").update(
            f"Cart: {len(state.cart)} item(s), {format_price(cart_total(state.cart))}"
        )

    @on(DataTable.RowSelected, "#table-lessons")
    def handle_reserve(self, event: DataTable.RowSelected) -> None:
        lesson_id = self._row_lessons[event.row_key.value]
        lesson = self.app.state.catalog.get(lesson_id)
        if reserve(self.app.state, lesson_id):
            self.notify(f"Added {lesson.subject} to cart.")
        else:
            self.notify(f"No seats left for {lesson.subject}.", severity="warning")
        self.post_message(CartChangedMessage())

    @on(Select.Changed, "#select-sort")
    def handle_sort_field(self, event: Select.Changed) -> None:
        if event.value == Select.BLANK:
            return
        self.app.state.sort = replace(self.app.state.sort, field=event.value)
        self.refresh_lessons()

    @on(Button.Pressed, "#btn-sort-direction")
    def handle_sort_direction(self) -> None:
        sort = self.app.state.sort
        self.app.state.sort = replace(sort, ascending=not sort.ascending)
        self.query_one("#btn-sort-direction").label = self._direction_label()
        self.refresh_lessons()

    @on(Button.Pressed, "#btn-view-cart")
    async def handle_view_cart(self) -> None:
        await self.app.run_action("toggle_cart")
