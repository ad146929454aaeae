"""
Statistics Aggregator

Computes per-session kill statistics and the aggregate over all sessions.
Every function here is pure: the same lines always give the same records.
"""

import pandas as pd

from q3stats.config import TOTAL_GAMES_OFFSET
from q3stats.parsing.classifier import is_kill, mentions_world, cause_kill_event
from q3stats.stats.models import AggregateStatistics, KillEvent, Session, SessionStatistics
from q3stats.stats.ranking import rank_causes, rank_killers

STATISTICS_COLUMNS = [
    'game_id', 'total_kills', 'kills_by_world', 'kills_by_cause', 'top_cause', 'top_killer',
]


def calculate_total_kills(session: Session) -> int:
    return sum(1 for line in session if is_kill(line))


def calculate_kills_by_cause(session: Session) -> list[KillEvent]:
    kills = []
    for line in session:
        event = cause_kill_event(line)
        if event is not None:
            kills.append(event)
    return kills


def calculate_kills_by_world(session: Session) -> int:
    """Lines mentioning <world>, whether or not they are kill lines."""
    return sum(1 for line in session if mentions_world(line))


def calculate_session_statistics(session: Session) -> SessionStatistics:
    """
    Compute the kill statistics of one session.

    Args:
        session: The session's lines, InitGame to ShutdownGame

    Returns:
        SessionStatistics record
    """
    kills_by_cause = calculate_kills_by_cause(session)

    return SessionStatistics(
        total_kills=calculate_total_kills(session),
        kills_by_cause=tuple(kills_by_cause),
        kills_by_world=calculate_kills_by_world(session),
        ranking_causes=tuple(rank_causes(kills_by_cause)),
        ranking_killers=tuple(rank_killers(kills_by_cause)),
    )


def calculate_aggregate_statistics(sessions: list[Session]) -> AggregateStatistics:
    """
    Compute statistics for every session, keeping the sessions' order.

    total_games is len(sessions) + TOTAL_GAMES_OFFSET.
    """
    statistics = tuple(calculate_session_statistics(session) for session in sessions)
    return AggregateStatistics(
        total_games=len(sessions) + TOTAL_GAMES_OFFSET,
        statistics=statistics,
    )


def statistics_frame(aggregate: AggregateStatistics) -> pd.DataFrame:
    """
    Flatten aggregate statistics into one row per game.

    Args:
        aggregate: Result of calculate_aggregate_statistics

    Returns:
        DataFrame with STATISTICS_COLUMNS, game_id matching the session index
    """
    rows = []
    for game_id, stats in enumerate(aggregate.statistics):
        rows.append({
            'game_id': game_id,
            'total_kills': stats.total_kills,
            'kills_by_world': stats.kills_by_world,
            'kills_by_cause': len(stats.kills_by_cause),
            'top_cause': stats.ranking_causes[0].key if stats.ranking_causes else None,
            'top_killer': stats.ranking_killers[0].key if stats.ranking_killers else None,
        })

    return pd.DataFrame(rows, columns=STATISTICS_COLUMNS)
