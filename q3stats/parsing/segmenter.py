"""
Session Segmenter

Splits the flat line sequence of a log into game sessions, delimited by
InitGame (inclusive) and ShutdownGame (inclusive).
"""

from collections.abc import Iterable

from q3stats.parsing.classifier import is_session_start, is_session_end
from q3stats.stats.models import Session


def group_sessions(lines: Iterable[str]) -> list[Session]:
    """
    Group log lines into sessions, most recent session first.

    A start line resets the current buffer; every line is appended to it;
    an end line snapshots it. The buffer survives an end line, so a second
    ShutdownGame without a new InitGame emits the grown buffer again.
    A trailing session with no end line is never emitted.

    Args:
        lines: Log lines in file order

    Returns:
        List of sessions in reverse completion order
    """
    sessions: list[Session] = []
    current: list[str] = []

    for line in lines:
        if is_session_start(line):
            current = []

        current.append(line)

        if is_session_end(line):
            sessions.append(tuple(current))

    sessions.reverse()
    return sessions
