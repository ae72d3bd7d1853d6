"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, variables.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat frame - scrollback, separator, input
   ============================================ */
#chat-view {
    height: 1fr;
    background: $surface;
    padding: 0 1;
}

/* ============================================
   Debug Log Panel - hidden by default
   ============================================ */
#debug-panel {
    display: none;
    height: 10;
    background: $panel;
    border: round $border;
    border-title-color: $text-muted;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}
"""

ART_REVIEW_CSS = """
ArtReviewScreen {
    align: center middle;
    background: $background 70%;
}

#art-dialog {
    width: auto;
    max-width: 90%;
    height: auto;
    max-height: 90%;
    border: tall $accent;
    background: $surface;
    padding: 1 2;
}

#art-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding: 0 0 1 0;
}

#art-body {
    width: auto;
    height: auto;
    padding: 1 2;
    background: $panel;
    border: round $border;
}

#art-hint {
    width: 100%;
    text-align: center;
    color: $text-muted;
    padding: 1 0 0 0;
}
"""
