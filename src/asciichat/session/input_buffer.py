"""Editable single-line input buffer.

Hides cursor handling, the character limit, and how the input line is laid
out inside the available width. Performs no I/O.
"""

from .events import EditKey

DEFAULT_PROMPT = "> "
DEFAULT_PLACEHOLDER = "Send a message...(esc to exit)"
DEFAULT_WIDTH = 80


class InputBuffer:
    """Text typed by the user plus a cursor position.

    Insertions that would push the text past char_limit are rejected.
    Newlines are never inserted; the buffer is a single line.
    """

    def __init__(
        self,
        char_limit: int = 280,
        prompt: str = DEFAULT_PROMPT,
        placeholder: str = DEFAULT_PLACEHOLDER,
        width: int = DEFAULT_WIDTH,
    ) -> None:
        self.char_limit = char_limit
        self.prompt = prompt
        self.placeholder = placeholder
        self._width = max(width, 1)
        self._text = ""
        self._cursor = 0
        self._cursor_visible = True

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    @property
    def width(self) -> int:
        return self._width

    def handle_key(self, event: EditKey) -> None:
        """Apply a key press: insert a printable character or run an edit command."""
        self._cursor_visible = True
        key = event.key

        if key == "backspace":
            if self._cursor > 0:
                self._text = self._text[:self._cursor - 1] + self._text[self._cursor:]
                self._cursor -= 1
        elif key == "delete":
            self._text = self._text[:self._cursor] + self._text[self._cursor + 1:]
        elif key == "left":
            self._cursor = max(self._cursor - 1, 0)
        elif key == "right":
            self._cursor = min(self._cursor + 1, len(self._text))
        elif key in ("home", "ctrl+a"):
            self._cursor = 0
        elif key in ("end", "ctrl+e"):
            self._cursor = len(self._text)
        elif key == "ctrl+u":
            self._text = self._text[self._cursor:]
            self._cursor = 0
        elif key == "ctrl+k":
            self._text = self._text[:self._cursor]
        elif event.character and len(event.character) == 1 and event.character.isprintable():
            self._insert(event.character)

    def insert_text(self, text: str) -> None:
        """Insert pasted text at the cursor, truncated to the character limit.

        Line breaks are folded into single spaces.
        """
        cleaned = " ".join(text.splitlines())
        cleaned = "".join(ch for ch in cleaned if ch.isprintable())
        room = self.char_limit - len(self._text)
        if room > 0 and cleaned:
            self._insert(cleaned[:room])

    def _insert(self, text: str) -> None:
        if len(self._text) + len(text) > self.char_limit:
            return
        self._text = self._text[:self._cursor] + text + self._text[self._cursor:]
        self._cursor += len(text)

    def take_value(self) -> str:
        """Return the current contents without clearing them."""
        return self._text

    def reset(self) -> None:
        """Clear the buffer and move the cursor to the start."""
        self._text = ""
        self._cursor = 0
        self._cursor_visible = True

    def is_empty(self) -> bool:
        return self._text == ""

    def set_width(self, width: int) -> None:
        self._width = max(width, 1)

    def tick(self) -> None:
        """Toggle cursor visibility (blink)."""
        self._cursor_visible = not self._cursor_visible

    def visible_window(self) -> tuple[str, int]:
        """Get the slice of text that fits after the prompt and the cursor column in it.

        The window scrolls horizontally so the cursor always stays visible.
        """
        room = max(self._width - len(self.prompt) - 1, 1)
        start = max(self._cursor - room + 1, 0) if self._cursor >= room else 0
        return self._text[start:start + room], self._cursor - start

    def render(self) -> str:
        """Render the input line as plain text."""
        if self.is_empty():
            return f"{self.prompt}{self.placeholder}"
        visible, _ = self.visible_window()
        return f"{self.prompt}{visible}"
