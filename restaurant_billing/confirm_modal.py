"""Yes/no question modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from restaurant_billing.parsing import parse_yes


class ConfirmModal(ModalScreen[bool]):
    """Ask a y/n question; any key other than ``y`` answers no."""

    CSS = """
    ConfirmModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 44;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #confirm-question {
        text-style: bold;
        color: white;
    }
    """

    def __init__(self, question: str) -> None:
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static(self.question, id="confirm-question")

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c", "enter"}:
            self.dismiss(False)
            event.stop()
            return

        if event.is_printable and event.character:
            self.dismiss(parse_yes(event.character))
        event.stop()
