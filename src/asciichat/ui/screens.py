"""Screens for the TUI.

This module hides the design decisions about:
- Which keys are bound to session actions
- How toolkit events become session events
- How session commands are carried out (exit, workers, modals, notifications)
- How ascii art is presented for review
"""

from textual import events, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.screen import ModalScreen, Screen
from textual.widgets import Footer, Header, Static

from ..session import (
    CompletionFinished,
    Paste,
    QuitCommand,
    ReportErrorCommand,
    Resize,
    SessionCommand,
    SessionController,
    SessionEvent,
    ShowArtCommand,
    StartCompletionCommand,
    TimerTick,
    event_for_key,
)
from .config import CURSOR_BLINK_INTERVAL, ERROR_NOTIFY_TIMEOUT, INFO_NOTIFY_TIMEOUT, LogLevel
from .styles import ART_REVIEW_CSS
from .widgets import ChatView, DebugPanel


class CompletionReady(Message):
    """Posted by the background worker when a completion request returns."""

    def __init__(self, result: CompletionFinished) -> None:
        super().__init__()
        self.result = result


class ArtReviewScreen(ModalScreen[None]):
    """Modal that shows the ascii art extracted from the last reply."""

    CSS = ART_REVIEW_CSS

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
        Binding("enter", "close", "Close", show=False),
        Binding("q", "close", "Close", show=False),
    ]

    def __init__(self, art: str) -> None:
        super().__init__()
        self._art = art

    @property
    def art(self) -> str:
        return self._art

    def compose(self) -> ComposeResult:
        with Vertical(id="art-dialog"):
            yield Static("Ascii art", id="art-title")
            yield Static(self._art, id="art-body", markup=False)
            yield Static("esc / enter to close", id="art-hint")

    def action_close(self) -> None:
        self.dismiss(None)


class ChatScreen(Screen):
    """The chat screen: scrollback, input line, and an optional log panel.

    Every key press is turned into a session event and handed to the
    controller one at a time. In blocking mode the submit handler awaits
    the completion request, so this screen processes nothing else until
    the reply arrives.
    """

    BINDINGS = [
        Binding("escape", "session_key('escape')", "Quit", priority=True),
        Binding("ctrl+c", "session_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("enter", "session_key('enter')", "Send", priority=True),
        Binding("up", "session_key('up')", "Scroll up", priority=True),
        Binding("down", "session_key('down')", "Scroll down", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(self, controller: SessionController, log_level: str | None = None) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level

    @property
    def controller(self) -> SessionController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header()
        yield ChatView(id="chat-view")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        log_panel = self.query_one("#debug-panel", DebugPanel)
        self._controller.set_debug_callback(log_panel.route)

        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        if self._controller.gateway.offline:
            log_panel.warning("TUI", "No API key configured, replies use the example art")

        self.set_interval(CURSOR_BLINK_INTERVAL, self._blink)
        chat_view = self.query_one("#chat-view", ChatView)
        chat_view.focus()
        chat_view.refresh_frame(self._controller)

    def _refresh_view(self) -> None:
        self.query_one("#chat-view", ChatView).refresh_frame(self._controller)

    def _log(self, level: str, message: str) -> None:
        self.query_one("#debug-panel", DebugPanel).route(level, "TUI", message)

    async def send_session_event(self, event: SessionEvent) -> None:
        """Hand one event to the controller, repaint, and run the resulting command."""
        command = await self._controller.handle(event)
        self._refresh_view()
        if command is not None:
            self._run_command(command)

    def _run_command(self, command: SessionCommand) -> None:
        match command:
            case QuitCommand(final_output=final_output):
                self.app.exit(final_output)
            case StartCompletionCommand(prompt=prompt):
                self._log("info", "Waiting for reply...")
                self._complete_in_background(prompt)
            case ShowArtCommand(art=art):
                self.app.push_screen(ArtReviewScreen(art), self._on_art_closed)
            case ReportErrorCommand(message=message):
                self._log("error", message)
                self.notify(message, severity="error", timeout=ERROR_NOTIFY_TIMEOUT)

    def _on_art_closed(self, _result: None = None) -> None:
        self._controller.dismiss_art()
        self._refresh_view()

    @work(exclusive=True)
    async def _complete_in_background(self, prompt: str) -> None:
        """Run the completion request as a background async worker."""
        result = await self._controller.run_completion(prompt)
        self.post_message(CompletionReady(result))

    async def on_completion_ready(self, message: CompletionReady) -> None:
        await self.send_session_event(message.result)

    async def on_chat_view_resized(self, message: ChatView.Resized) -> None:
        await self.send_session_event(Resize(message.width, message.height))

    async def action_session_key(self, key: str) -> None:
        """Dispatch a bound key (quit, submit, scroll) to the session."""
        await self.send_session_event(event_for_key(key))

    async def on_key(self, event: events.Key) -> None:
        """Forward every other key to the session as an edit."""
        event.stop()
        event.prevent_default()
        await self.send_session_event(event_for_key(event.key, event.character))

    async def on_paste(self, event: events.Paste) -> None:
        event.stop()
        await self.send_session_event(Paste(event.text))

    async def _blink(self) -> None:
        await self.send_session_event(TimerTick())

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=INFO_NOTIFY_TIMEOUT)
