"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- How the session frame is painted
- How the chat area reports its size
- Log rendering and level filtering
"""

from datetime import datetime

from textual import events
from textual.message import Message
from textual.widgets import RichLog, Static

from ..session import SessionController
from .config import LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import render_frame


class ChatView(Static):
    """Focusable area showing the scrollback and the input line.

    Holds no state of its own; it paints whatever the session controller
    renders and reports its content size so the session can lay out the
    scrollback.
    """

    can_focus = True

    class Resized(Message):
        """Posted when the usable area of the chat view changes."""

        def __init__(self, width: int, height: int) -> None:
            super().__init__()
            self.width = width
            self.height = height

    def on_resize(self, event: events.Resize) -> None:
        size = self.content_size
        self.post_message(self.Resized(size.width, size.height))

    def refresh_frame(self, controller: SessionController) -> None:
        """Repaint from the controller's current state."""
        self.update(render_frame(controller))


class DebugPanel(RichLog):
    """Log panel for real-time session tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def log_message(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (Session, LLM, TUI)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "Session": "green",
            "LLM": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."
        # Messages carry user and model text, which must not be parsed as markup
        message = message.replace("[", r"\[")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.ERROR)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point: route a (level, component, message) triple."""
        self.log_message(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
