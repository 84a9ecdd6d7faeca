from textual import on, work
from textual.app import ComposeResult
from textual.containers import Container, HorizontalGroup, Horizontal, VerticalScroll
from textual.events import ScreenResume
from textual.message import Message
from textual.widgets import Button, Label, Rule

from booking.reservation import cart_total, release
from store.models import CartItem
from utils.messages import CartChangedMessage
from utils.pure import format_price
from views.base_screen import BaseScreen
from views.modal_checkout import CheckoutModal
from views.modal_dialog import ConfirmModal


class CartItemRemoveMessage(Message):
    bubble = True

    def __init__(self, index: int) -> None:
        super().__init__()
        self.index = index


class CartItemWidget(HorizontalGroup):
    def __init__(self, index: int, item: CartItem):
        super().__init__()
        self.index = index
        self.item = item

    def compose(self):
        with Container(classes="div-item"):
            yield Label(self.item.subject, classes="label-item-subject")
            yield Label(self.item.location, classes="label-item-location")
            yield Label(format_price(self.item.price), classes="label-item-price")
        yield Button("Remove", classes="btn-item-remove", variant="warning")

    @on(Button.Pressed, ".btn-item-remove")
    def handle_remove(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(CartItemRemoveMessage(self.index))


class CartScreen(BaseScreen):
    """
    reserved seats, plus checkout
    """

    CSS = """
    .div-item {
        layout: horizontal;
        height: auto;
    }
    .div-item Label {
        width: 1fr;
    }
    #hort-buttons {
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield VerticalScroll(id="vertscroll-content")
        yield Label("Total: " + format_price(0), id="label-cart-total")
        yield Rule(line_style="dashed")
        with Horizontal(id="hort-buttons"):
            yield Button("Back to Lessons", id="btn-lessons")
            yield Button("Checkout", id="btn-checkout", variant="primary")

    @on(CartChangedMessage)
    @on(ScreenResume)
    @work(exclusive=True)  # rebuilding twice at once would mount duplicates
    async def handle_cart_change(self):
        cart = self.app.state.cart
        content = self.query_one("#vertscroll-content")
        await content.remove_children()
        await content.mount_all(
            [CartItemWidget(idx, item) for idx, item in enumerate(cart)]
        )

        if not cart:
            content.add_class("no-items")
        else:
            content.remove_class("no-items")

        self.query_one("#label-cart-total").update(
            "Total: " + format_price(cart_total(cart))
        )

    @on(CartItemRemoveMessage)
    @work()
    async def handle_remove_item(self, message: CartItemRemoveMessage):
        remove_confirmed = await self.app.push_screen_wait(
            ConfirmModal("Do you really want to remove this lesson from the cart?")
        )
        if not remove_confirmed:
            return

        try:
            item = release(self.app.state, message.index)
        except IndexError:
            # cart changed underneath the widget, just redraw
            self.post_message(CartChangedMessage())
            return
        self.post_message(CartChangedMessage())
        self.notify(f"{item.subject} removed from cart.", severity="information")

    @on(Button.Pressed, "#btn-lessons")
    async def handle_back(self) -> None:
        await self.app.run_action("toggle_cart")

    @on(Button.Pressed, "#btn-checkout")
    @work()
    async def handle_checkout(self) -> None:
        if not self.app.state.cart:
            self.app.notify("Cart is empty.", severity="warning")
            return

        await self.app.push_screen_wait(CheckoutModal())
        self.post_message(CartChangedMessage())
