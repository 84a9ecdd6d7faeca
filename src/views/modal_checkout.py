from textual import events, on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.validation import Regex
from textual.widgets import Button, Input, Label, MarkdownViewer

from booking.checkout import CheckoutOutcome, submit_order
from booking.validation import NAME_PATTERN, PHONE_PATTERN, invalid_fields
from utils.pure import order_summary_markdown


class CheckoutModal(ModalScreen[bool]):
    """
    Order summary plus contact details.
    Return True if the order went through, False otherwise.
    """

    INPUT_IDS = {"name": "#input-name", "phone": "#input-phone"}

    def __init__(self):
        super().__init__()
        # closing the modal mid-submit would cancel the running checkout
        self.submitting = False

    def compose(self) -> ComposeResult:
        with Vertical():
            yield MarkdownViewer("", show_table_of_contents=False)
            yield Label("Name")
            yield Input(
                placeholder="Jane Smith",
                id="input-name",
                validators=[Regex(NAME_PATTERN.pattern, failure_description="Letters only")],
            )
            yield Label("Phone")
            yield Input(
                placeholder="07123456789",
                id="input-phone",
                validators=[
                    Regex(PHONE_PATTERN.pattern, failure_description="At least 7 digits")
                ],
            )
            yield Label("", id="label-feedback")
            with Horizontal():
                yield Button("Go Back", id="btn-quit")
                yield Button("Place Order", id="btn-submit", variant="primary")

    async def on_mount(self):
        state = self.app.state
        header_md = "### Order Summary\n\n"
        await self.query_one(MarkdownViewer).document.update(
            header_md + order_summary_markdown(state.cart)
        )
        # contact details survive a failed attempt
        self.query_one("#input-name", Input).value = state.contact.name
        self.query_one("#input-phone", Input).value = state.contact.phone
        self.query_one("#input-name").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape" and not self.submitting:
            self.dismiss(False)

    def on_input_changed(self, message: Input.Changed) -> None:
        if message.input.id == "input-name":
            self.app.state.contact.name = message.value
        elif message.input.id == "input-phone":
            self.app.state.contact.phone = message.value

    @on(Button.Pressed, "#btn-submit")
    @work(exclusive=True)
    async def handle_submit(self):
        state = self.app.state
        buttons = [self.query_one("#btn-submit"), self.query_one("#btn-quit")]
        self.submitting = True
        for button in buttons:
            button.disabled = True
        try:
            result = await submit_order(state)
        finally:
            self.submitting = False
            for button in buttons:
                button.disabled = False

        if result.ok:
            self.app.notify(state.success_msg)
            self.dismiss(True)
            return

        self.query_one("#label-feedback").update(state.error_msg)
        self.notify(state.error_msg, severity="error")
        if result.outcome is CheckoutOutcome.INVALID:
            for field in invalid_fields(state.contact, state.cart):
                if field in self.INPUT_IDS:
                    self.query_one(self.INPUT_IDS[field]).add_class("-invalid")

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        if not self.submitting:
            self.dismiss(False)
