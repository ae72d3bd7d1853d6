"""Text formatting utilities for the TUI.

Hides how the session frame is turned into styled Rich text.
"""

from rich.text import Text

from ..session import SessionController
from ..session.transcript import ASSISTANT_LABEL, USER_LABEL
from .config import SENDER_LABEL_STYLE


def style_scrollback_line(line: str) -> Text:
    """Color the sender label at the start of a transcript line."""
    for label in (USER_LABEL, ASSISTANT_LABEL):
        if line.startswith(label):
            text = Text()
            text.append(label, style=SENDER_LABEL_STYLE)
            text.append(line[len(label):])
            return text
    return Text(line)


def render_input_line(controller: SessionController) -> Text:
    """Render the input line with prompt, cursor, and placeholder."""
    buffer = controller.input
    line = Text()
    line.append(buffer.prompt, style="bold")

    if buffer.is_empty():
        cursor_style = "reverse" if buffer.cursor_visible else ""
        placeholder = buffer.placeholder
        line.append(placeholder[:1], style=f"dim {cursor_style}".strip())
        line.append(placeholder[1:], style="dim")
        return line

    visible, column = buffer.visible_window()
    line.append(visible[:column])
    under_cursor = visible[column:column + 1] or " "
    line.append(under_cursor, style="reverse" if buffer.cursor_visible else "")
    line.append(visible[column + 1:])
    return line


def render_frame(controller: SessionController) -> Text:
    """Render scrollback, a blank separator line, and the input line."""
    frame = Text()
    for line in controller.scrollback.visible_lines():
        frame.append_text(style_scrollback_line(line))
        frame.append("\n")
    frame.append("\n")
    frame.append_text(render_input_line(controller))
    return frame
