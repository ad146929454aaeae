"""
Ranking Engine

Two independent rankings over a session:
- Frequency ranking: how often each cause (or killer) appears in kill events
- Score ranking: zero-sum kill score per player
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import fields

from q3stats.config import WORLD_IDENTIFIER
from q3stats.parsing.classifier import parse_kill_event
from q3stats.stats.models import KillEvent, RankingEntry, ScoreEntry

KILL_EVENT_FIELDS = frozenset(f.name for f in fields(KillEvent))


def rank_by_frequency(events: Iterable[KillEvent], selector: str) -> list[RankingEntry]:
    """
    Count events per value of one KillEvent field.

    Args:
        events: Kill events in log order
        selector: KillEvent field to group by ("cause" or "killer")

    Returns:
        Entries sorted by quantity descending; ties keep first-seen order

    Raises:
        ValueError: If selector is not a KillEvent field
    """
    if selector not in KILL_EVENT_FIELDS:
        raise ValueError(
            f"Invalid selector: '{selector}'. "
            f"Allowed values: {', '.join(sorted(KILL_EVENT_FIELDS))}"
        )

    counts: dict[str, int] = {}
    for event in events:
        key = getattr(event, selector)
        counts[key] = counts.get(key, 0) + 1

    # sorted() is stable, so equal quantities stay in insertion order
    ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
    return [RankingEntry(key=key, quantity=quantity) for key, quantity in ranked]


def rank_causes(events: Iterable[KillEvent]) -> list[RankingEntry]:
    return rank_by_frequency(events, 'cause')


def rank_killers(events: Iterable[KillEvent]) -> list[RankingEntry]:
    return rank_by_frequency(events, 'killer')


def canonical_player(name: str) -> str:
    """Last whitespace-delimited token of a player name."""
    tokens = name.split()
    return tokens[-1] if tokens else name


def tally_scores(session: Iterable[str]) -> dict[str, int]:
    """
    Raw zero-sum score per logged name, in first-seen order.

    A kill of <world> only rewards the killer; any other kill moves one
    point from the killed player to the killer.
    """
    scores: dict[str, int] = {}

    for line in session:
        event = parse_kill_event(line)
        if event is None:
            continue

        scores.setdefault(event.killer, 0)
        scores.setdefault(event.killed, 0)

        scores[event.killer] += 1
        if event.killed != WORLD_IDENTIFIER:
            scores[event.killed] -= 1

    return scores


def rank_scores(session: Iterable[str]) -> list[ScoreEntry]:
    """
    Leaderboard for one session.

    <world> is removed, then names are collapsed to their last token, so
    two logged names ending in the same word share one score.

    Returns:
        Entries sorted by score descending; ties keep first-seen order
    """
    scores = tally_scores(session)
    scores.pop(WORLD_IDENTIFIER, None)

    merged: defaultdict[str, int] = defaultdict(int)
    for name, score in scores.items():
        merged[canonical_player(name)] += score

    ranked = sorted(merged.items(), key=lambda x: x[1], reverse=True)
    return [ScoreEntry(player=player, score=score) for player, score in ranked]
