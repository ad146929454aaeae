"""
Line Classifier

Membership tests for single log lines and structured extraction of kill
events. Every test is a plain substring check against the markers in
q3stats.config; only kill extraction looks at the line's structure.

Kill line layout:
    21:42 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
"""

from q3stats.config import (
    INIT_GAME_IDENTIFIER,
    SHUTDOWN_GAME_IDENTIFIER,
    KILL_LOG_IDENTIFIER,
    CLIENT_CONNECT_IDENTIFIER,
    ITEM_IDENTIFIER,
    WORLD_IDENTIFIER,
    KILL_TOKEN,
    FIELD_SEPARATOR,
    KILLED_SEPARATOR,
    CAUSE_SEPARATOR,
)
from q3stats.stats.models import KillEvent
from q3stats.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class MalformedLineError(ValueError):
    """Raised when a line carries the Kill: token but not the kill grammar"""
    pass


def is_session_start(line: str) -> bool:
    return INIT_GAME_IDENTIFIER in line


def is_session_end(line: str) -> bool:
    return SHUTDOWN_GAME_IDENTIFIER in line


def is_kill(line: str) -> bool:
    """Counting test only: matches `Kill` anywhere, with or without the `Kill:` token."""
    return KILL_LOG_IDENTIFIER in line


def is_client_connect(line: str) -> bool:
    return CLIENT_CONNECT_IDENTIFIER in line


def is_item_pickup(line: str, player_id) -> bool:
    return f"{ITEM_IDENTIFIER} {player_id}" in line


def mentions_world(line: str) -> bool:
    return WORLD_IDENTIFIER in line


def has_kill_token(line: str) -> bool:
    """True when `Kill:` is one of the line's single-space separated tokens."""
    return KILL_TOKEN in line.split(' ')


def split_kill_fields(line: str) -> tuple[str, str, str]:
    """
    Split a kill line into (killer, killed, cause), all trimmed.

    The last colon-delimited segment is split on " killed " and then on
    " by "; only the first two pieces of each split are used.

    Raises:
        MalformedLineError: If either separator is missing
    """
    segment = line.split(FIELD_SEPARATOR)[-1]

    killer_part = segment.split(KILLED_SEPARATOR)
    if len(killer_part) < 2:
        raise MalformedLineError(f"Missing {KILLED_SEPARATOR.strip()!r} in kill line: {line!r}")
    killer, rest = killer_part[0], killer_part[1]

    killed_part = rest.split(CAUSE_SEPARATOR)
    if len(killed_part) < 2:
        raise MalformedLineError(f"Missing {CAUSE_SEPARATOR.strip()!r} in kill line: {line!r}")
    killed, cause = killed_part[0], killed_part[1]

    return killer.strip(), killed.strip(), cause.strip()


def parse_kill_event(line: str) -> KillEvent | None:
    """
    Extract a KillEvent from a line.

    Returns:
        The event, or None when the line has no `Kill:` token or is malformed
    """
    if not has_kill_token(line):
        return None

    try:
        killer, killed, cause = split_kill_fields(line)
    except MalformedLineError as e:
        logger.debug(f"Skipping kill line: {e}")
        return None

    return KillEvent(killer=killer, killed=killed, cause=cause)


def cause_kill_event(line: str) -> KillEvent | None:
    """Like parse_kill_event, but drops kills whose cause starts with <world>."""
    event = parse_kill_event(line)
    if event is None or event.cause.startswith(WORLD_IDENTIFIER):
        return None
    return event
