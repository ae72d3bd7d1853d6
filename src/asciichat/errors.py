"""Exception types shared across asciichat modules."""


class AsciiChatError(Exception):
    """Base class for asciichat errors."""


class CompletionError(AsciiChatError):
    """Raised when the completion API request fails.

    Wraps transport and API errors from the provider so callers only need
    to handle a single exception type.
    """

    def __init__(self, message: str, prompt: str | None = None) -> None:
        super().__init__(message)
        self.prompt = prompt
