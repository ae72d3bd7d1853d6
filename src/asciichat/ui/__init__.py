"""Terminal UI module for asciichat.

Provides a Textual-based TUI around the session controller.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (chat frame, log panel)
- formatting.py: Frame styling (labels, cursor, placeholder)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Chat screen and art review modal (key handling)
- app.py: Application orchestration
"""

from .app import AsciiChatApp, build_app, run_textual_tui
from .config import LogLevel
from .screens import ArtReviewScreen, ChatScreen
from .widgets import ChatView, DebugPanel

__all__ = [
    "ArtReviewScreen",
    "AsciiChatApp",
    "ChatScreen",
    "ChatView",
    "DebugPanel",
    "LogLevel",
    "build_app",
    "run_textual_tui",
]
