"""Single-value entry modal screen."""

from __future__ import annotations

from typing import Any, Callable

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from restaurant_billing.parsing import Parser

CharFilter = Callable[[str], bool]


def digits_only(char: str) -> bool:
    return char.isdigit() or char == "-"


def price_chars(char: str) -> bool:
    return char.isdigit() or char == "."


def any_printable(char: str) -> bool:
    return char.isprintable()


class PromptModal(ModalScreen[Any]):
    """Prompt for one value and dismiss with it once it parses.

    A failed parse keeps the modal open and shows the parser's error. Escape
    and Ctrl+C cancel with ``None``.
    """

    CSS = """
    PromptModal {
        align: center middle;
        background: $background 60%;
    }

    #prompt-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #prompt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #prompt-text {
        color: white;
        margin-bottom: 1;
    }

    #prompt-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #prompt-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #prompt-help {
        color: #dddddd;
    }
    """

    def __init__(
        self,
        title: str,
        prompt: str,
        parser: Parser,
        accept_char: CharFilter = any_printable,
        max_length: int = 40,
    ) -> None:
        super().__init__()
        self.title_text = title
        self.prompt_text = prompt
        self.parser = parser
        self.accept_char = accept_char
        self.max_length = max_length
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="prompt-dialog"):
            yield Static(self.title_text, id="prompt-title")
            yield Static(self.prompt_text, id="prompt-text")
            yield Static(id="prompt-value")
            yield Static(id="prompt-error")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="prompt-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character and self.accept_char(event.character):
            if len(self.value) < self.max_length:
                self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()
            return

        # Keys typed into the prompt never reach the main menu.
        event.stop()

    def _confirm(self) -> None:
        result = self.parser(self.value)
        if not result.ok:
            self.error = result.error or "Invalid input."
            self._refresh_content()
            return
        self.dismiss(result.value)

    def _refresh_content(self) -> None:
        self.query_one("#prompt-value", Static).update(self.value or "")
        self.query_one("#prompt-error", Static).update(self.error or "")
