from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from utils.messages import QuitRequestedMessage


class ConfirmModal(ModalScreen[bool]):
    """
    Yes/No question, dismissed with True on Yes.
    Focus starts on No.
    """

    def __init__(self, question: str, yes_variant: str = "warning"):
        super().__init__()
        self.question = question
        self.yes_variant = yes_variant

    def compose(self) -> ComposeResult:
        with Container(id="div-dialog"):
            yield Label(self.question, id="caption")
            with Horizontal(id="dialog"):
                yield Button("No", id="btn-no")
                yield Button("Yes", variant=self.yes_variant, id="btn-yes")

    def on_mount(self):
        self.query_one("#btn-no").focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")


class QuitDialogModal(ConfirmModal):
    def __init__(self):
        super().__init__("Are you sure you want to quit?", yes_variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-yes":
            self.post_message(QuitRequestedMessage())
        super().on_button_pressed(event)
