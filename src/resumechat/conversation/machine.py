"""Conversation state machine.

Owns the ordered list of turns, the loading flag and the draft, and
mediates between user input and the agent transport.

States:
- IDLE: no request in flight, submit is accepted
- AWAITING_RESPONSE: exactly one request in flight, submit is a no-op

The machine runs on a single event loop. The only concurrency guard is
the loading flag, which is set before the first await in submit().
"""

import contextlib
from collections.abc import Callable

from ..transport import AgentTransport, TransportError
from .models import ConversationPhase, ConversationSnapshot, Role, Turn

FALLBACK_RESPONSE = "Unable to process your question."
GENERIC_ERROR = "An error occurred. Please try again."

DebugCallback = Callable[[str, str, str], None]
Listener = Callable[[], None]


class ConversationStateMachine:
    """Client-side conversation state.

    Example:
        machine = ConversationStateMachine(transport)
        machine.subscribe(lambda: render(machine.snapshot()))
        await machine.submit("What is Shreyas's education?")
    """

    def __init__(self, transport: AgentTransport) -> None:
        self._transport = transport
        self._turns: list[Turn] = []
        self._loading = False
        self._draft = ""
        self._listeners: list[Listener] = []
        self._debug_callback: DebugCallback | None = None

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def phase(self) -> ConversationPhase:
        return ConversationPhase.AWAITING_RESPONSE if self._loading else ConversationPhase.IDLE

    def snapshot(self) -> ConversationSnapshot:
        return ConversationSnapshot(turns=self.turns, loading=self._loading, draft=self._draft)

    def subscribe(self, listener: Listener) -> None:
        """Register a callable invoked after every state change."""
        self._listeners.append(listener)

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for diagnostic logging.

        Args:
            callback: Function taking (level, component, message)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is None:
            return
        # Diagnostics never affect conversation state
        with contextlib.suppress(Exception):
            self._debug_callback(level, "Conversation", message)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()

    def _append(self, role: Role, content: str, error: bool = False) -> Turn:
        turn = Turn(role=role, content=content, error=error)
        self._turns.append(turn)
        self._notify()
        return turn

    def set_draft(self, text: str) -> None:
        """Update the uncommitted input. Always legal."""
        if text == self._draft:
            return
        self._draft = text
        self._notify()

    async def submit(self, text: str | None = None) -> Turn | None:
        """Submit a question and wait for the assistant turn.

        Uses the current draft when ``text`` is None. Empty or
        whitespace-only input, or a submit while a request is in flight,
        is a silent no-op.

        Returns:
            The appended assistant turn, or None if nothing was submitted
        """
        raw = self._draft if text is None else text
        message = raw.strip()
        if self._loading:
            self._debug("debug", "Submit ignored: request already in flight")
            return None
        if not message:
            self._debug("debug", "Submit ignored: empty input")
            return None

        self._append(Role.USER, message)
        self._draft = ""
        self._loading = True
        self._notify()
        self._debug("info", f"Sending question ({len(message)} chars) to {self._transport.endpoint}")

        try:
            answer = await self._transport.send(message)
            turn = self._append(Role.ASSISTANT, answer or FALLBACK_RESPONSE)
            self._debug("info", f"Received answer ({len(turn.content)} chars)")
        except TransportError as e:
            turn = self._append(Role.ASSISTANT, e.message, error=True)
            self._debug("warning", f"{type(e).__name__}: {e.message}")
        except Exception as e:
            turn = self._append(Role.ASSISTANT, str(e) or GENERIC_ERROR, error=True)
            self._debug("error", f"Unexpected {type(e).__name__}: {e}")
        finally:
            self._loading = False
            self._notify()

        return turn

    def reset(self) -> None:
        """Clear turns and draft.

        An in-flight request is not cancelled; its resolution is still
        appended when it arrives.
        """
        if self._loading:
            self._debug("warning", "Reset while a request is in flight; its answer will still be shown")
        self._turns.clear()
        self._draft = ""
        self._notify()
