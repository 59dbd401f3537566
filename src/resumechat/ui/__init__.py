"""Terminal UI module for resumechat.

Provides a Textual-based TUI for chatting with the resume agent.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (chat turns, empty state, skeleton, input, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes for dark and light mode
- config.py: Constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import ResumeChatApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, EmptyState, MessageSkeleton

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "EmptyState",
    "LogLevel",
    "MessageSkeleton",
    "ResumeChatApp",
    "run_textual_tui",
]
