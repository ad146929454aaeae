"""
Query Facade for Quake 3 game logs

LogEngine owns the most recently ingested log and answers every read query
against it. Ingestion builds a new immutable snapshot and swaps a single
reference, so a reader sees either the whole previous log or the whole new
one.

Usage:
    from q3stats.engine import LogEngine

    engine = LogEngine()
    engine.ingest(lines)
    engine.session_statistics_by_id(0)
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass

from q3stats.parsing.classifier import (
    is_client_connect,
    is_item_pickup,
    is_kill,
    is_session_start,
)
from q3stats.parsing.segmenter import group_sessions
from q3stats.stats.aggregator import (
    calculate_aggregate_statistics,
    calculate_kills_by_cause,
    calculate_session_statistics,
)
from q3stats.stats.models import (
    AggregateStatistics,
    Session,
    SessionRanking,
    SessionStatistics,
)
from q3stats.stats.ranking import rank_scores
from q3stats.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class LogEngineError(Exception):
    """Base exception for log engine errors"""
    pass


class NotReadyError(LogEngineError):
    """Raised when a query runs before any log was ingested"""
    pass


class SessionNotFoundError(LogEngineError, LookupError):
    """Raised when a session index is outside the ingested sessions"""
    pass


@dataclass(frozen=True)
class LogSnapshot:
    lines: tuple[str, ...]
    sessions: tuple[Session, ...]


class LogEngine:
    """Holds one ingested log and serves statistics over it."""

    def __init__(self, lines: Iterable[str] | None = None):
        self._snapshot: LogSnapshot | None = None
        self._ingest_lock = threading.Lock()
        if lines is not None:
            self.ingest(lines)

    # --- Ingestion ---

    def ingest(self, lines: Iterable[str]) -> None:
        """Replace the held log with `lines`."""
        with self._ingest_lock:
            materialized = tuple(lines)
            snapshot = LogSnapshot(
                lines=materialized,
                sessions=tuple(group_sessions(materialized)),
            )
            self._snapshot = snapshot
        logger.info(f"Log processed: {len(snapshot.lines)} lines, {len(snapshot.sessions)} games")

    @property
    def is_ready(self) -> bool:
        return self._snapshot is not None

    def _current(self) -> LogSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            logger.warning("Query issued before any log was ingested")
            raise NotReadyError("No log has been ingested yet")
        return snapshot

    def _session(self, snapshot: LogSnapshot, index: int) -> Session:
        count = len(snapshot.sessions)
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < count:
            logger.warning(f"Game {index!r} requested, {count} available")
            raise SessionNotFoundError(f"Game with ID {index} not found.")
        return snapshot.sessions[index]

    # --- Line queries ---

    def all_lines(self) -> list[str]:
        return list(self._current().lines)

    def filter_by_marker(self, marker: str) -> list[str]:
        """Lines containing `marker` as a plain substring."""
        return [line for line in self._current().lines if marker in line]

    def session_starts(self) -> list[str]:
        return [line for line in self._current().lines if is_session_start(line)]

    def kills(self) -> list[str]:
        return [line for line in self._current().lines if is_kill(line)]

    def client_connections(self) -> list[str]:
        return [line for line in self._current().lines if is_client_connect(line)]

    def items_collected(self, player_id) -> list[str]:
        return [line for line in self._current().lines if is_item_pickup(line, player_id)]

    # --- Session queries ---

    def sessions_in_order(self) -> list[Session]:
        """Sessions, most recently completed first."""
        return list(self._current().sessions)

    def session_count(self) -> int:
        return len(self._current().sessions)

    def aggregate_statistics(self) -> AggregateStatistics:
        return calculate_aggregate_statistics(list(self._current().sessions))

    def session_statistics_by_id(self, index: int) -> SessionStatistics:
        """
        Statistics of one session.

        Raises:
            NotReadyError: If nothing was ingested
            SessionNotFoundError: If index is outside [0, session_count)
        """
        snapshot = self._current()
        return calculate_session_statistics(self._session(snapshot, index))

    def session_ranking_by_id(self, index: int) -> SessionRanking:
        """
        Score leaderboard and cause-attributed kills of one session.

        Raises:
            NotReadyError: If nothing was ingested
            SessionNotFoundError: If index is outside [0, session_count)
        """
        snapshot = self._current()
        session = self._session(snapshot, index)
        return SessionRanking(
            ranking=tuple(rank_scores(session)),
            kills_by_cause=tuple(calculate_kills_by_cause(session)),
        )
