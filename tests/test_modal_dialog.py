import os
import sys

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

import unittest

from textual import on
from textual.app import App

from utils.messages import QuitRequestedMessage
from views.modal_dialog import ConfirmModal, QuitDialogModal


class DialogHostApp(App):
    def __init__(self, dialog):
        super().__init__()
        self.dialog = dialog
        self.answers = []
        self.quit_requested = False

    def on_mount(self) -> None:
        self.push_screen(self.dialog, self.answers.append)

    @on(QuitRequestedMessage)
    def handle_quit_requested(self):
        self.quit_requested = True


class ConfirmModalTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_enter_on_default_focus_answers_no(self):
        app = DialogHostApp(ConfirmModal("Remove this lesson?"))
        async with app.run_test() as pilot:
            await pilot.pause()
            self.assertEqual(app.focused.id, "btn-no")

            await pilot.press("enter")
            await pilot.pause()

            self.assertEqual(app.answers, [False])

    async def test_yes_answers_true(self):
        dialog = ConfirmModal("Remove this lesson?")
        app = DialogHostApp(dialog)
        async with app.run_test() as pilot:
            await pilot.pause()
            dialog.query_one("#btn-yes").press()
            await pilot.pause()

            self.assertEqual(app.answers, [True])
            self.assertFalse(app.quit_requested)

    async def test_quit_dialog_requests_quit_only_on_yes(self):
        dialog = QuitDialogModal()
        app = DialogHostApp(dialog)
        async with app.run_test() as pilot:
            await pilot.pause()
            dialog.query_one("#btn-yes").press()
            await pilot.pause()

            self.assertEqual(app.answers, [True])
            self.assertTrue(app.quit_requested)


if __name__ == "__main__":
    unittest.main()
