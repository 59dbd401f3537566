"""Main Textual TUI application.

Orchestrates the UI components and routes user interaction into the
conversation state machine. Widgets are redrawn from state snapshots.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from ..conversation import ConversationStateMachine
from ..preferences import InMemoryPreferenceStore, PreferenceStore, ThemeSetting
from ..transport import AgentTransport
from .config import APP_TITLE, FOOTNOTE, LogLevel
from .styles import APP_CSS
from .themes import ALL_THEMES, theme_name_for
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class ResumeChatApp(App):
    """Textual TUI for the resume chatbot."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+k", "reset_chat", "Reset"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        transport: AgentTransport,
        preferences: PreferenceStore | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._transport = transport
        self._theme_setting = ThemeSetting(preferences or InMemoryPreferenceStore())
        self._log_level = log_level
        self._machine = ConversationStateMachine(transport)

    @property
    def conversation(self) -> ConversationStateMachine:
        return self._machine

    @property
    def theme_setting(self) -> ThemeSetting:
        return self._theme_setting

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Static(FOOTNOTE, id="footnote")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        for theme in ALL_THEMES:
            self.register_theme(theme)
        mode = self._theme_setting.load()
        self.theme = theme_name_for(mode)

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._machine.set_debug_callback(log_panel.log_named)
        self._machine.subscribe(self._render_state)

        self.sub_title = self._transport.endpoint
        log_panel.debug("Theme", f"Loaded theme: {mode.value}")
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _render_state(self) -> None:
        snapshot = self._machine.snapshot()
        self.query_one("#chat-history", ChatHistoryWidget).render_snapshot(snapshot)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.set_text(snapshot.draft)
        input_bar.set_busy(snapshot.loading)

    def on_chat_input_bar_draft_changed(self, event: ChatInputBar.DraftChanged) -> None:
        self._machine.set_draft(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._run_submit(event.value)

    @work(group="submit")
    async def _run_submit(self, text: str) -> None:
        """Run one submit as a background async worker."""
        turn = await self._machine.submit(text)
        if turn is not None and turn.error:
            self.notify(turn.content[:80], severity="error", timeout=5)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def action_toggle_theme(self) -> None:
        """Flip dark/light and persist the choice."""
        mode = self._theme_setting.toggle()
        self.theme = theme_name_for(mode)
        self.query_one("#debug-panel", DebugPanel).info("Theme", f"Switched to {mode.value}")

    def action_reset_chat(self) -> None:
        """Clear the conversation."""
        if not self._machine.turns:
            self.notify("Nothing to reset", timeout=2)
            return
        self._machine.reset()
        self.notify("Chat cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    transport: AgentTransport,
    preferences: PreferenceStore | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        transport: Agent transport used for every question
        preferences: Store holding the theme choice (in-memory if None)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ResumeChatApp(
        transport=transport,
        preferences=preferences,
        log_level=log_level,
    )
    try:
        async with transport:
            await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
