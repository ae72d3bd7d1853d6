"""Events consumed and commands produced by the session controller.

Events form a closed set: everything the terminal (or a finished background
request) can tell the session. Commands are what the session asks the UI to
do in return.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Resize:
    """The chat area changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    """Leave the session."""


@dataclass(frozen=True)
class Submit:
    """Send the current input."""


@dataclass(frozen=True)
class ScrollUp:
    """Scroll the transcript one line up."""


@dataclass(frozen=True)
class ScrollDown:
    """Scroll the transcript one line down."""


@dataclass(frozen=True)
class EditKey:
    """Any other key, forwarded to the input buffer."""

    key: str
    character: str | None = None


@dataclass(frozen=True)
class Paste:
    """Text pasted from the terminal, inserted at the cursor."""

    text: str


@dataclass(frozen=True)
class TimerTick:
    """Cursor blink timer fired."""


@dataclass(frozen=True)
class CompletionFinished:
    """A background completion request returned.

    Exactly one of text or error is set.
    """

    prompt: str
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


SessionEvent = (
    Resize | Quit | Submit | ScrollUp | ScrollDown | EditKey | Paste | TimerTick
    | CompletionFinished
)


@dataclass(frozen=True)
class QuitCommand:
    """Exit the UI, emitting final_output as the last stdout line."""

    final_output: str


@dataclass(frozen=True)
class StartCompletionCommand:
    """Run a completion request for prompt off the event loop."""

    prompt: str


@dataclass(frozen=True)
class ShowArtCommand:
    """Open the art review screen with art."""

    art: str


@dataclass(frozen=True)
class ReportErrorCommand:
    """Show a non-fatal error to the user."""

    message: str


SessionCommand = QuitCommand | StartCompletionCommand | ShowArtCommand | ReportErrorCommand
