"""Mapping from terminal key names to session events."""

from .events import EditKey, Quit, ScrollDown, ScrollUp, SessionEvent, Submit

QUIT_KEYS = ("escape", "ctrl+c")
SUBMIT_KEY = "enter"
SCROLL_UP_KEY = "up"
SCROLL_DOWN_KEY = "down"


def event_for_key(key: str, character: str | None = None) -> SessionEvent:
    """Translate a key press into a session event.

    Keys without a dedicated meaning become EditKey events for the input buffer.
    """
    if key in QUIT_KEYS:
        return Quit()
    if key == SUBMIT_KEY:
        return Submit()
    if key == SCROLL_UP_KEY:
        return ScrollUp()
    if key == SCROLL_DOWN_KEY:
        return ScrollDown()
    return EditKey(key=key, character=character)
