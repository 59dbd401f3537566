"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat turn rendering and scrolling
- Empty state and loading skeleton
- Input bar and draft propagation
- Log rendering with level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, RichLog, Static, TextArea

from ..conversation import ConversationSnapshot, Turn
from .config import (
    ASSISTANT_NAME,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIME_FORMAT,
    SAMPLE_QUESTIONS,
    WELCOME_HEADING,
    WELCOME_TEXT,
    LogLevel,
)


class ClickableMessage(Vertical):
    """A chat turn container that copies its content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class EmptyState(Vertical):
    """Welcome text with sample questions, shown before the first turn."""

    def compose(self):
        yield Static(WELCOME_HEADING, classes="empty-heading")
        yield Static(WELCOME_TEXT, classes="empty-text")
        yield Static("Try asking:", classes="empty-samples-title")
        for question in SAMPLE_QUESTIONS:
            yield Static(f'"{question}"', classes="empty-sample", markup=False)


class MessageSkeleton(Vertical):
    """Placeholder for the assistant turn while a request is in flight."""

    def compose(self):
        yield Static(f"{ASSISTANT_NAME} is typing...", classes="message-header")
        yield Static("", classes="skeleton-line skeleton-wide")
        yield Static("", classes="skeleton-line skeleton-narrow")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history rendered from conversation snapshots."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered_ids: list[str] = []
        self._turns: tuple[Turn, ...] = ()
        self._empty_state: EmptyState | None = None
        self._skeleton: MessageSkeleton | None = None

    def on_mount(self) -> None:
        self._show_empty_state()

    @property
    def rendered_count(self) -> int:
        return len(self._rendered_ids)

    @property
    def showing_skeleton(self) -> bool:
        return self._skeleton is not None

    @property
    def showing_empty_state(self) -> bool:
        return self._empty_state is not None

    def render_snapshot(self, snapshot: ConversationSnapshot) -> None:
        """Bring the displayed turns in line with the snapshot.

        Turns are append-only, so only new ones are mounted; a snapshot
        that no longer starts with the rendered turns means a reset.
        """
        ids = [turn.id for turn in snapshot.turns]
        if ids[: len(self._rendered_ids)] != self._rendered_ids:
            self.clear_history()

        self._turns = snapshot.turns
        new_turns = snapshot.turns[len(self._rendered_ids):]

        if snapshot.turns:
            self._hide_empty_state()
        else:
            self._show_empty_state()

        # Skeleton always sits below the newest turn
        self._hide_skeleton()
        for turn in new_turns:
            self._render_turn(turn)
            self._rendered_ids.append(turn.id)
        if snapshot.loading and snapshot.turns:
            self._skeleton = MessageSkeleton(classes="chat-message")
            self.mount(self._skeleton)

        count = len(self._rendered_ids)
        self.border_subtitle = f"{count} messages" if count else "Conversation history"
        if new_turns or snapshot.loading:
            self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last successful assistant response."""
        for turn in reversed(self._turns):
            if not turn.is_user and not turn.error:
                return turn.content
        return None

    def clear_history(self) -> None:
        """Remove every rendered turn."""
        self._rendered_ids.clear()
        self._turns = ()
        self._skeleton = None
        self._empty_state = None
        self.remove_children()
        self.border_subtitle = "Conversation history"

    def _show_empty_state(self) -> None:
        if self._empty_state is None:
            self._empty_state = EmptyState()
            self.mount(self._empty_state)

    def _hide_empty_state(self) -> None:
        if self._empty_state is not None:
            self._empty_state.remove()
            self._empty_state = None

    def _hide_skeleton(self) -> None:
        if self._skeleton is not None:
            self._skeleton.remove()
            self._skeleton = None

    def _render_turn(self, turn: Turn) -> None:
        if turn.is_user:
            prefix = "You"
            border_class = "user-message"
        elif turn.error:
            prefix = ASSISTANT_NAME
            border_class = "assistant-message error-message"
        else:
            prefix = ASSISTANT_NAME
            border_class = "assistant-message"

        header_text = f"{prefix} · {turn.timestamp.strftime(MESSAGE_TIME_FORMAT)}"

        container = ClickableMessage(content=turn.content, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(header_text, classes="message-header", markup=False))
        container.compose_add_child(Static(turn.content, classes="message-content", markup=False))
        self.mount(container)


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class DraftChanged(Message):
        """Message sent whenever the draft text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="primary").with_tooltip(
            "Send message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        self._sync_button()

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", TextArea).text

    def set_text(self, value: str) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        if text_area.text != value:
            text_area.text = value
        self._sync_button()

    def set_busy(self, busy: bool) -> None:
        """Disable input while a request is in flight."""
        self.query_one("#chat-input", TextArea).disabled = busy
        self.set_class(busy, "-disabled")
        self._sync_button(busy)

    def _sync_button(self, busy: bool | None = None) -> None:
        if busy is None:
            busy = self.has_class("-disabled")
        self.query_one("#send-btn", Button).disabled = busy or not self.text.strip()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._sync_button()
        self.post_message(self.DraftChanged(event.text_area.text))

    def on_key(self, event) -> None:
        """Handle ctrl+j as submit.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter).
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()

    def _submit(self) -> None:
        self.post_message(self.Submitted(self.text))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for diagnostic messages with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = LogLevel(level)
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        self.display = False

    def log(
        self,
        component: str,
        message: str,
        level: LogLevel = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Component and message are escaped: they may carry server error
        text, which must never be parsed as Rich markup.
        """
        if level < self._log_level:
            return

        level = LogLevel(level)
        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        component_colors = {
            "TUI": "cyan",
            "Conversation": "bright_blue",
            "Theme": "magenta",
        }
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level.color}]{level.name:<7}[/] "
            f"[{comp_color}]\\[{escape(component)}][/] {escape(message)}"
        )

    def log_named(self, level_name: str, component: str, message: str) -> None:
        """Log using a level name ("debug", "info", "warning", "error")."""
        self.log(component, message, LogLevel.from_string(level_name))

    def debug(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
