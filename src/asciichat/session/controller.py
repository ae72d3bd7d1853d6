"""Session controller.

Single dispatch point for session events. Owns the transcript, the input
buffer and the scrollback, and talks to the completion gateway. Knows
nothing about the terminal toolkit: the UI translates toolkit events into
SessionEvent values and carries out the returned commands.
"""

from collections.abc import Callable
from enum import Enum

from ..config import DEFAULT_CHAR_LIMIT, DEFAULT_MAX_TOKENS, CompletionMode
from ..errors import CompletionError
from ..llm import CompletionGateway
from .art import extract_fenced_block
from .events import (
    CompletionFinished,
    EditKey,
    Paste,
    Quit,
    QuitCommand,
    ReportErrorCommand,
    Resize,
    ScrollDown,
    ScrollUp,
    SessionCommand,
    SessionEvent,
    ShowArtCommand,
    StartCompletionCommand,
    Submit,
    TimerTick,
)
from .input_buffer import InputBuffer
from .scrollback import Scrollback
from .transcript import Speaker, Transcript

DebugCallback = Callable[[str, str, str], None]

# Rows below the scrollback: blank separator and the input line
INPUT_ROWS = 2


def _truncate(text: str, max_len: int = 50) -> str:
    return text if len(text) <= max_len else text[:max_len] + "..."


class SessionState(str, Enum):
    """Which screen the session is on."""

    COMPOSING = "composing"
    ART_REVIEW = "art_review"


class SessionController:
    """Chat session state machine.

    Events are handled strictly one at a time. In blocking mode a submit
    awaits the gateway inside handle(), so the caller's event loop handles
    nothing else until the reply arrives. In background mode a submit only
    returns a StartCompletionCommand and the reply comes back later as a
    CompletionFinished event.

    Example:
        controller = SessionController(gateway)
        command = await controller.handle(EditKey("h", "h"))
        command = await controller.handle(Submit())
    """

    def __init__(
        self,
        gateway: CompletionGateway,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        mode: CompletionMode = CompletionMode.BLOCKING,
        review_art: bool = True,
        char_limit: int = DEFAULT_CHAR_LIMIT,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._gateway = gateway
        self._max_tokens = max_tokens
        self._mode = mode
        self._review_art = review_art
        self._debug_callback = debug_callback

        self.transcript = Transcript()
        self.input = InputBuffer(char_limit=char_limit)
        self.scrollback = Scrollback()
        self.state = SessionState.COMPOSING
        self.pending_art: str | None = None
        self.last_error: str | None = None
        self.pending_prompt: str | None = None
        self.finished = False

    @property
    def mode(self) -> CompletionMode:
        return self._mode

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    @property
    def gateway(self) -> CompletionGateway:
        return self._gateway

    @property
    def busy(self) -> bool:
        """True while a background request is outstanding."""
        return self.pending_prompt is not None

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set callback for debug logging, shared with the gateway.

        Args:
            callback: Function(level, component, message) or None
        """
        self._debug_callback = callback
        self._gateway.set_debug_callback(callback)

    def _debug(self, level: str, message: str, component: str = "Session") -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def handle(self, event: SessionEvent) -> SessionCommand | None:
        """Handle one event and return the command the UI should run, if any."""
        if self.finished:
            return None

        match event:
            case Resize(width=width, height=height):
                self.scrollback.resize(width, max(height - INPUT_ROWS, 1))
                self.input.set_width(width)
                return None
            case Quit():
                return self._quit()
            case Submit():
                return await self._submit()
            case ScrollUp():
                self.scrollback.scroll_up(1)
                return None
            case ScrollDown():
                self.scrollback.scroll_down(1)
                return None
            case EditKey():
                self.input.handle_key(event)
                return None
            case Paste(text=text):
                self.input.insert_text(text)
                return None
            case TimerTick():
                self.input.tick()
                return None
            case CompletionFinished():
                return self._finish_background(event)
            case _:
                raise TypeError(f"Unknown session event: {event!r}")

    def _quit(self) -> QuitCommand:
        self.finished = True
        self._debug("info", "Quit requested")
        return QuitCommand(final_output=self.input.take_value())

    async def _submit(self) -> SessionCommand | None:
        if self.input.is_empty():
            return None

        if self.busy:
            self._debug("warning", "Request already in flight, submit ignored")
            return None

        prompt = self.input.take_value()
        self.input.reset()
        self._debug("info", f"Sending: '{_truncate(prompt)}'")

        if self._mode is CompletionMode.BACKGROUND:
            self.pending_prompt = prompt
            return StartCompletionCommand(prompt=prompt)

        try:
            text = await self._gateway.complete(prompt, self._max_tokens)
        except CompletionError as e:
            return self._record_failure(str(e))
        return self._record_success(prompt, text)

    async def run_completion(self, prompt: str) -> CompletionFinished:
        """Run the gateway call for a background request.

        Never raises CompletionError; failures are carried in the result.
        """
        try:
            text = await self._gateway.complete(prompt, self._max_tokens)
        except CompletionError as e:
            return CompletionFinished(prompt=prompt, error=str(e))
        return CompletionFinished(prompt=prompt, text=text)

    def _finish_background(self, event: CompletionFinished) -> SessionCommand | None:
        if event.prompt != self.pending_prompt:
            self._debug("warning", f"Dropping reply for unknown prompt '{_truncate(event.prompt)}'")
            return None
        self.pending_prompt = None
        if not event.ok:
            return self._record_failure(event.error or "Completion error")
        return self._record_success(event.prompt, event.text or "")

    def _record_failure(self, message: str) -> ReportErrorCommand:
        # The user's message is dropped, not recorded
        self.last_error = message
        self._debug("error", message)
        return ReportErrorCommand(message=message)

    def _record_success(self, prompt: str, text: str) -> ShowArtCommand | None:
        self.last_error = None

        self.transcript.append(Speaker.USER, prompt)
        self.scrollback.set_content(self.transcript.flatten())
        self.transcript.append(Speaker.ASSISTANT, text)
        self.scrollback.set_content(self.transcript.flatten())
        self.scrollback.scroll_to_bottom()
        self._debug("debug", f"Transcript has {len(self.transcript)} messages")

        art = extract_fenced_block(text)
        if art is None:
            return None

        self.pending_art = art
        self._debug("info", f"Ascii art found ({len(art)} chars)")
        if not self._review_art:
            return None
        self.state = SessionState.ART_REVIEW
        return ShowArtCommand(art=art)

    def dismiss_art(self) -> None:
        """Return to composing after the art review screen closes."""
        self.state = SessionState.COMPOSING

    def view(self) -> str:
        """Render the frame: scrollback, blank separator, input line."""
        return f"{self.scrollback.render()}\n\n{self.input.render()}"
