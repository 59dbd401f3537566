"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Dark/light mode configuration

The app switches between the two themes below from the persisted
ThemeSetting.
"""

from textual.theme import Theme

from ..preferences import ThemeMode
from .config import DARK_THEME_NAME, LIGHT_THEME_NAME

# Dark palette: deep slate with blue/purple accents
RESUME_DARK = Theme(
    name=DARK_THEME_NAME,
    primary="#3b82f6",      # Blue - user bubbles, send button
    secondary="#a855f7",    # Purple - assistant accent
    accent="#60a5fa",       # Light blue - highlights
    foreground="#f3f4f6",   # Near-white text
    background="#030712",   # Page background
    success="#22c55e",
    warning="#f59e0b",
    error="#f87171",        # Error turns
    surface="#111827",      # Card surface
    panel="#1f2937",        # Header / input panel
    dark=True,
    variables={
        "block-cursor-foreground": "#030712",
        "block-cursor-background": "#60a5fa",
        "input-cursor-background": "#f3f4f6",
        "input-selection-background": "#3b82f6 30%",
        "border": "#374151",
        "border-blurred": "#1f2937",
        "scrollbar": "#1f2937",
        "scrollbar-hover": "#374151",
        "scrollbar-active": "#3b82f6",
        "footer-background": "#030712",
        "footer-key-foreground": "#60a5fa",
        "text-muted": "#9ca3af",
    },
)

# Light palette: white card on a soft blue-to-purple page
RESUME_LIGHT = Theme(
    name=LIGHT_THEME_NAME,
    primary="#3b82f6",
    secondary="#a855f7",
    accent="#2563eb",
    foreground="#111827",
    background="#eff6ff",
    success="#16a34a",
    warning="#d97706",
    error="#b91c1c",
    surface="#ffffff",
    panel="#f3f4f6",
    dark=False,
    variables={
        "block-cursor-foreground": "#ffffff",
        "block-cursor-background": "#3b82f6",
        "input-cursor-background": "#111827",
        "input-selection-background": "#3b82f6 25%",
        "border": "#d1d5db",
        "border-blurred": "#e5e7eb",
        "scrollbar": "#e5e7eb",
        "scrollbar-hover": "#d1d5db",
        "scrollbar-active": "#3b82f6",
        "footer-background": "#ffffff",
        "footer-key-foreground": "#2563eb",
        "text-muted": "#6b7280",
    },
)

ALL_THEMES = (RESUME_DARK, RESUME_LIGHT)


def theme_name_for(mode: ThemeMode) -> str:
    """Map a persisted theme mode onto a registered Textual theme name."""
    return DARK_THEME_NAME if mode == ThemeMode.DARK else LIGHT_THEME_NAME
