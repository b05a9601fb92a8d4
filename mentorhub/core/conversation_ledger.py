"""
Conversation ledger.

Process-wide keyed store of chat turns, one ordered thread per session id.
Each thread has its own asyncio.Lock so concurrent requests on the same
session cannot interleave an exchange, a length cap, and an idle TTL.

History lives only as long as the process. Threads are dropped explicitly
when their session is destroyed or expires.

Dependencies: asyncio (stdlib)
System role: Ephemeral per-session chat context for the AI proxy
"""

import asyncio
import logging
import time
from collections import deque
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Literal
from uuid import UUID

logger = logging.getLogger(__name__)

EntryRole = Literal["user", "assistant"]


@dataclass(frozen=True)
class ConversationEntry:
    """One turn of a chat exchange."""

    role: EntryRole
    content: str

    def to_message(self) -> dict[str, str]:
        """Render as a chat-completions message dict."""
        return {"role": self.role, "content": self.content}


class _ThreadState:
    """Entries, lock and last-access time for one session."""

    __slots__ = ("entries", "lock", "last_access")

    def __init__(self, max_turns: int, now: float) -> None:
        self.entries: deque[ConversationEntry] = deque(maxlen=max_turns)
        self.lock = asyncio.Lock()
        self.last_access = now


class ConversationThread:
    """
    Handle on a single session's history, valid while its lock is held.

    Obtained through ConversationLedger.thread().
    """

    def __init__(self, state: _ThreadState) -> None:
        self._state = state

    def append(self, entry: ConversationEntry) -> None:
        self._state.entries.append(entry)

    def entries(self) -> list[ConversationEntry]:
        """Snapshot of the thread in insertion order."""
        return list(self._state.entries)

    def __len__(self) -> int:
        return len(self._state.entries)


class ConversationLedger:
    """
    Keyed store mapping session id to an ordered list of chat turns.

    Threads are created lazily on first use. When a thread exceeds
    ``max_turns`` the oldest entries are dropped. Threads idle for longer
    than ``idle_ttl_seconds`` are evicted on the next access to the ledger.
    """

    def __init__(
        self,
        max_turns: int = 50,
        idle_ttl_seconds: float = 100_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize an empty ledger.

        Args:
            max_turns: Entries kept per session
            idle_ttl_seconds: Idle time after which a thread is evicted
            clock: Monotonic time source, injectable for tests
        """
        if max_turns <= 0:
            raise ValueError("max_turns must be positive")
        self.max_turns = max_turns
        self.idle_ttl_seconds = idle_ttl_seconds
        self._clock = clock
        self._threads: dict[UUID, _ThreadState] = {}

    def _state_for(self, session_id: UUID) -> _ThreadState:
        self.evict_idle()
        state = self._threads.get(session_id)
        if state is None:
            state = _ThreadState(self.max_turns, self._clock())
            self._threads[session_id] = state
        return state

    @asynccontextmanager
    async def thread(self, session_id: UUID) -> AsyncIterator[ConversationThread]:
        """
        Hold the session's lock for the duration of the block.

        Usage:
            async with ledger.thread(session_id) as thread:
                thread.append(ConversationEntry("user", text))
                context = thread.entries()
        """
        state = self._state_for(session_id)
        async with state.lock:
            state.last_access = self._clock()
            try:
                yield ConversationThread(state)
            finally:
                state.last_access = self._clock()

    async def append(self, session_id: UUID, entry: ConversationEntry) -> None:
        """Append an entry to the session's thread, creating it if absent."""
        async with self.thread(session_id) as thread:
            thread.append(entry)

    async def get(self, session_id: UUID) -> list[ConversationEntry]:
        """Return the session's full ordered thread (empty if none)."""
        # Evict first so an expired thread is not re-created below
        self.evict_idle()
        if session_id not in self._threads:
            return []
        async with self.thread(session_id) as thread:
            return thread.entries()

    def discard(self, session_id: UUID) -> None:
        """Drop a session's thread; no-op when absent."""
        if self._threads.pop(session_id, None) is not None:
            logger.debug("Conversation thread discarded", extra={"session_id": str(session_id)})

    def evict_idle(self) -> int:
        """
        Evict threads idle longer than the TTL.

        Threads currently locked by an exchange are skipped.

        Returns:
            int: Number of threads evicted
        """
        cutoff = self._clock() - self.idle_ttl_seconds
        stale = [
            session_id
            for session_id, state in self._threads.items()
            if state.last_access < cutoff and not state.lock.locked()
        ]
        for session_id in stale:
            del self._threads[session_id]
        if stale:
            logger.info("Evicted idle conversation threads", extra={"count": len(stale)})
        return len(stale)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._threads

    def __len__(self) -> int:
        return len(self._threads)
