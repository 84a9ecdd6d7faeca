from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from utils.logger import get_logger
from utils.messages import CatalogLoadedMessage, QuitRequestedMessage
from utils.state import SessionState
from views.scr_cart import CartScreen
from views.scr_lessons import LessonsScreen

_logger = get_logger(__name__)


class LessonShopApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
        Binding("ctrl+o", "toggle_cart", "Cart", show=True),
    ]

    MODES = {
        "lessons": LessonsScreen,
        "cart": CartScreen,
    }

    MODE_TITLES = {
        "lessons": "Lessons",
        "cart": "Cart",
    }

    state: SessionState

    def __init__(self):
        super().__init__()
        self.state = SessionState()

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        self.load_catalog()

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    async def action_toggle_cart(self):
        show_cart = self.state.toggle_cart()
        await self.switch_mode("cart" if show_cart else "lessons")

    @work(exclusive=True)
    async def load_catalog(self):
        live = await self.state.load_catalog()
        self.post_message(CatalogLoadedMessage(live))

    @on(CatalogLoadedMessage)
    async def handle_catalog_loaded(self, message: CatalogLoadedMessage):
        if not message.live:
            self.notify(
                "Could not reach the lesson server, showing the offline catalog.",
                severity="warning",
            )
        await self.switch_mode("cart" if self.state.show_cart else "lessons")

    @on(QuitRequestedMessage)
    def handle_quit(self):
        _logger.debug("Quit requested")
        self.exit()


def run():
    LessonShopApp().run()


if __name__ == "__main__":
    run()
