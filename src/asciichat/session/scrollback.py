"""Fixed-size scrollable viewport over the transcript text."""

WELCOME_TEXT = "Ask ChatGPT to create some ascii art!\nType a message and press Enter to send."
DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 10


def wrap_line(line: str, width: int) -> list[str]:
    """Hard-wrap a line into chunks of at most width characters.

    Whitespace is preserved so ascii art keeps its shape.
    """
    if not line:
        return [""]
    return [line[i:i + width] for i in range(0, len(line), width)]


class Scrollback:
    """Scrollable text display.

    Content is replaced wholesale by set_content and wrapped lazily at
    render time, so a resize re-wraps on the next render.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        content: str = WELCOME_TEXT,
    ) -> None:
        self._width = max(width, 1)
        self._height = max(height, 1)
        self._content = content
        self._offset = 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def offset(self) -> int:
        """Index of the first visible wrapped line."""
        return self._offset

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def lines(self) -> list[str]:
        """All content lines after wrapping to the current width."""
        wrapped: list[str] = []
        for line in self._content.split("\n"):
            wrapped.extend(wrap_line(line, self._width))
        return wrapped

    def max_offset(self) -> int:
        return max(len(self.lines()) - self._height, 0)

    def set_content(self, text: str) -> None:
        self._content = text
        self._offset = min(self._offset, self.max_offset())

    def scroll_up(self, lines: int = 1) -> None:
        self._offset = max(self._offset - lines, 0)

    def scroll_down(self, lines: int = 1) -> None:
        self._offset = min(self._offset + lines, self.max_offset())

    def scroll_to_bottom(self) -> None:
        self._offset = self.max_offset()

    def at_bottom(self) -> bool:
        return self._offset >= self.max_offset()

    def resize(self, width: int, height: int) -> None:
        self._width = max(width, 1)
        self._height = max(height, 1)
        self._offset = min(self._offset, self.max_offset())

    def visible_lines(self) -> list[str]:
        return self.lines()[self._offset:self._offset + self._height]

    def render(self) -> str:
        return "\n".join(self.visible_lines())
