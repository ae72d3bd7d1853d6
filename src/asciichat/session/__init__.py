"""Chat session core.

Module structure (Parnas principle - each module hides a design decision):
- events.py: Event and command types exchanged with the UI
- keymap.py: Which keys mean what
- transcript.py: Message storage and flattening
- input_buffer.py: Line editing and the character limit
- scrollback.py: Viewport wrapping and scrolling
- art.py: Fenced block extraction
- controller.py: Event dispatch (user interaction flow)
"""

from .art import FENCE, extract_fenced_block
from .controller import SessionController, SessionState
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
from .keymap import event_for_key
from .scrollback import Scrollback
from .transcript import Message, Speaker, Transcript

__all__ = [
    "CompletionFinished",
    "EditKey",
    "FENCE",
    "InputBuffer",
    "Message",
    "Paste",
    "Quit",
    "QuitCommand",
    "ReportErrorCommand",
    "Resize",
    "ScrollDown",
    "ScrollUp",
    "Scrollback",
    "SessionCommand",
    "SessionController",
    "SessionEvent",
    "SessionState",
    "ShowArtCommand",
    "Speaker",
    "StartCompletionCommand",
    "Submit",
    "TimerTick",
    "Transcript",
    "event_for_key",
    "extract_fenced_block",
]
