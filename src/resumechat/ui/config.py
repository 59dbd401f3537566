"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel severity. Entries below the panel threshold are dropped."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, value: str) -> "LogLevel":
        """Parse "debug", "info", ... Unknown names mean DEBUG."""
        return cls.__members__.get(value.upper(), cls.DEBUG)

    @property
    def color(self) -> str:
        return _LEVEL_COLORS[self]


# Branding
APP_TITLE = "Resume Chatbot"
ASSISTANT_NAME = "SR"
SUBJECT_NAME = "Shreyas"

# Empty state
WELCOME_HEADING = "Welcome to Resume Chatbot"
WELCOME_TEXT = (
    f"Ask me anything about {SUBJECT_NAME}'s professional background, "
    "experience, skills, and education."
)
SAMPLE_QUESTIONS = (
    f"What is {SUBJECT_NAME}'s professional experience?",
    f"What skills does {SUBJECT_NAME} have?",
    f"What is {SUBJECT_NAME}'s education?",
)
INPUT_PLACEHOLDER = f"Ask about {SUBJECT_NAME}'s experience, skills, education..."
FOOTNOTE = f"Information retrieved from {SUBJECT_NAME}'s resume"

# Chat display
MESSAGE_TIME_FORMAT = "%H:%M"
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Theme names registered with Textual
DARK_THEME_NAME = "resume-dark"
LIGHT_THEME_NAME = "resume-light"

_LEVEL_COLORS = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}
