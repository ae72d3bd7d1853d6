"""Main Textual TUI application.

Wires settings, the completion gateway and the session controller into the
chat screen, and returns the final input line when the user quits.
"""

import asyncio

from textual.app import App

from ..config import Settings
from ..llm import CompletionGateway, create_gateway
from ..session import SessionController
from .screens import ChatScreen
from .styles import APP_CSS
from .themes import TERMINAL_DUSK


class AsciiChatApp(App[str]):
    """Textual TUI for asking a chat model for ascii art."""

    CSS = APP_CSS
    TITLE = "asciichat"
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        controller: SessionController,
        log_level: str | None = None,
        model_name: str = "unknown",
    ) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level
        self._model_name = model_name

    @property
    def controller(self) -> SessionController:
        return self._controller

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(TERMINAL_DUSK)
        self.theme = "terminal-dusk"

        mode = self._controller.mode.value
        self.sub_title = f"{self._model_name} | {mode} | max {self._controller.max_tokens} tokens"
        self.push_screen(ChatScreen(self._controller, log_level=self._log_level))


def build_app(settings: Settings, gateway: CompletionGateway | None = None) -> AsciiChatApp:
    """Create the app and its session controller from settings."""
    gateway = gateway or create_gateway(settings)
    controller = SessionController(
        gateway,
        max_tokens=settings.max_tokens,
        mode=settings.completion_mode,
        review_art=settings.review_art,
        char_limit=settings.char_limit,
    )
    model_name = "offline" if gateway.offline else settings.model
    return AsciiChatApp(controller, log_level=settings.log_level, model_name=model_name)


async def run_textual_tui(settings: Settings) -> str | None:
    """Run the Textual TUI.

    Args:
        settings: Resolved session settings

    Returns:
        Raw input text at the time the user quit, or None if the app
        exited another way
    """
    gateway = create_gateway(settings)
    app = build_app(settings, gateway=gateway)
    try:
        return await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        return None
    finally:
        await gateway.close()
