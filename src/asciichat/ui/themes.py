"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, footer)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Low-contrast dark palette that keeps ascii art readable
TERMINAL_DUSK = Theme(
    name="terminal-dusk",
    primary="#7aa2f7",      # Blue - main accent
    secondary="#bb9af7",    # Purple - sender labels
    accent="#e0af68",       # Amber - highlights
    foreground="#c0caf5",   # Light text
    background="#16161e",   # Deepest background
    success="#9ece6a",
    warning="#ff9e64",
    error="#f7768e",
    surface="#1a1b26",
    panel="#1f2335",
    dark=True,
    variables={
        "border": "#3b4261",
        "border-blurred": "#292e42",
        "scrollbar": "#292e42",
        "scrollbar-hover": "#3b4261",
        "scrollbar-active": "#7aa2f7",
        "scrollbar-background": "#1f2335",
        "footer-foreground": "#a9b1d6",
        "footer-background": "#16161e",
        "footer-key-foreground": "#e0af68",
        "footer-key-background": "#292e42",
        "text-muted": "#565f89",
    },
)
