"""Interactive Textual explorer for scripture references."""

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.suggester import SuggestFromList
from textual.widgets import Header, Input, Static

from scripture_ref.commands import CommandHandler, parse_command
from scripture_ref.commands.parser import get_command_names
from scripture_ref.data.canon import CANON, CanonRegistry
from scripture_ref.data.types import Reference
from scripture_ref.formatter import format_anchor, format_reference
from scripture_ref.navigation import next_chapter, prev_chapter
from scripture_ref.parser import parse_reference


class ReferenceExplorer(App):
    """Type a reference, see how it parses, step through chapters."""

    TITLE = "Scripture Reference Explorer"

    CSS = """
    #reference-input {
        dock: top;
        margin: 1 1 0 1;
    }

    #result {
        padding: 1 2;
        height: 1fr;
    }

    #status {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("pagedown", "next_chapter", "Next chapter", show=False),
        Binding("pageup", "prev_chapter", "Prev chapter", show=False),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(self, start_reference: str = "Gen 1:1", registry: CanonRegistry = CANON) -> None:
        super().__init__()
        self.registry = registry
        self.current: Optional[Reference] = None
        self._start_reference = start_reference
        self._handler = CommandHandler(registry)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Input(
                placeholder="Reference (Rom 1:1-7) or :command",
                suggester=SuggestFromList([f":{name}" for name in get_command_names()]),
                id="reference-input",
            )
            yield Static("", id="result")
        yield Static("", id="status")

    def on_mount(self) -> None:
        self.show_reference(self._start_reference)
        self.query_one("#reference-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if value.startswith(":"):
            self.run_command(value)
        elif value:
            self.show_reference(value)

    def run_command(self, command: str) -> None:
        """Execute a :command typed into the input."""
        result = self._handler.execute(parse_command(command))
        if result.action == "quit":
            self.exit()
            return
        if result.action == "goto" and isinstance(result.data, dict):
            if "text" in result.data:
                self.show_reference(result.data["text"])
            else:
                self._set_chapter(result.data["bookId"], result.data["chapter"])
            return
        self._set_status(result.message.strip(), error=not result.success)

    def show_reference(self, text: str) -> None:
        """Parse text and display it, keeping the previous reference on failure."""
        ref = parse_reference(text, self.registry)
        if ref is None:
            self._set_status(f"Couldn't understand reference: {text}", error=True)
            return
        self.current = ref
        self._render_current()

    def _set_chapter(self, book_id: str, chapter: int) -> None:
        entry = self.registry.get(book_id)
        self.current = Reference(book_id, chapter, None, chapter, None, book_name=entry.name if entry else "")
        self._render_current()

    def _render_current(self) -> None:
        ref = self.current
        if ref is None:
            return

        text = Text()
        text.append(format_reference(ref, self.registry), style="bold")
        text.append("\n\n")
        text.append("book      ", style="dim")
        text.append(f"{ref.book_id}\n")
        text.append("chapters  ", style="dim")
        text.append(f"{ref.start_chapter}-{ref.end_chapter}\n")
        text.append("verses    ", style="dim")
        if ref.is_whole_chapter:
            text.append("whole chapter\n")
        else:
            text.append(f"{ref.start_verse}-{ref.end_verse}\n")
            text.append("anchor    ", style="dim")
            text.append(f"{format_anchor(ref)}\n")

        self.query_one("#result", Static).update(text)
        self._set_status(format_reference(ref, self.registry))

    def _set_status(self, message: str, error: bool = False) -> None:
        text = Text()
        text.append(message, style="yellow" if error else "bold")
        text.append("  ")
        text.append("PgDn/PgUp", style="bold yellow")
        text.append(" chapter", style="dim")
        text.append(" Esc", style="bold yellow")
        text.append(" quit", style="dim")
        self.query_one("#status", Static).update(text)

    def action_next_chapter(self) -> None:
        if self.current is None:
            return
        step = next_chapter(self.current.book_id, self.current.end_chapter, self.registry)
        if step is None:
            self._set_status("End of the Bible", error=True)
            return
        self._set_chapter(step.book_id, step.chapter)

    def action_prev_chapter(self) -> None:
        if self.current is None:
            return
        step = prev_chapter(self.current.book_id, self.current.start_chapter, self.registry)
        if step is None:
            self._set_status("Start of the Bible", error=True)
            return
        self._set_chapter(step.book_id, step.chapter)
