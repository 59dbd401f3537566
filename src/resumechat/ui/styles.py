"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Colors come from the active theme, so the same rules serve both the
dark and the light palette.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Single Column Card
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Empty State - Welcome + Sample Questions
   ============================================ */
EmptyState {
    width: 100%;
    height: auto;
    align: center middle;
    padding: 2 4;
}

.empty-heading {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $primary;
    margin-bottom: 1;
}

.empty-text {
    width: 100%;
    text-align: center;
    color: $text-muted;
    margin-bottom: 1;
}

.empty-samples-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $foreground;
}

.empty-sample {
    width: 100%;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    background: transparent;
}

.user-message {
    border-right: tall $primary;
    background: $primary 12%;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }

    & .message-content {
        text-align: right;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.error-message {
    border-left: tall $error;
    background: $error 12%;

    & .message-header {
        color: $error;
    }

    & .message-content {
        color: $error;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Loading Skeleton
   ============================================ */
MessageSkeleton {
    width: 100%;
    height: auto;
    padding: 0 2;
    margin: 0 0 1 0;
    border-left: tall $secondary 40%;
}

.skeleton-line {
    height: 1;
    background: $panel;
    color: $text-muted;
    margin-bottom: 1;
}

.skeleton-wide {
    width: 75%;
}

.skeleton-narrow {
    width: 50%;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }

    &.-disabled {
        opacity: 60%;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    border: tall $primary;
    background: $primary;
    color: $surface;
    text-style: bold;

    &:hover {
        background: $primary-lighten-1;
    }
}

#footnote {
    width: 100%;
    height: 1;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}
"""
