from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header

from views.modal_dialog import QuitDialogModal


class BaseScreen(Screen):
    """
    Inherited by all screens, contains common elements like
    header, footer and keybindings.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Quit App", show=True),
    ]

    def __init__(self):
        super().__init__()
        self.configure()

    def configure(self, header_sub_title: str = "") -> None:
        """
        set the header titles, subtitle defaults to the title of the app mode
        showing this screen
        """
        self.app.title = "Lesson Booking"
        self.sub_title = header_sub_title
        for mode, screen_cls in self.app.MODES.items():
            if isinstance(self, screen_cls):
                self.sub_title = self.app.MODE_TITLES.get(mode, header_sub_title)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer(show_command_palette=False)

    @work()
    async def action_quit(self):
        await self.app.push_screen_wait(QuitDialogModal())
