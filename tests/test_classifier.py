"""
Tests for line classification and kill extraction.
"""

import pytest

from q3stats.parsing.classifier import (
    MalformedLineError,
    cause_kill_event,
    has_kill_token,
    is_client_connect,
    is_item_pickup,
    is_kill,
    is_session_end,
    is_session_start,
    mentions_world,
    parse_kill_event,
    split_kill_fields,
)
from q3stats.stats.models import KillEvent

PLAYER_KILL = "22:06 Kill: 2 3 7: Isgalamido killed Mocinha by MOD_ROCKET_SPLASH"
WORLD_KILL = "20:54 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT"


class TestMarkers:
    """Tests for substring membership tests."""

    def test_session_start(self):
        assert is_session_start(r"  0:00 InitGame: \sv_floodProtect\1")
        assert not is_session_start("20:37 ShutdownGame:")

    def test_session_end(self):
        assert is_session_end("20:37 ShutdownGame:")
        assert not is_session_end(r"  0:00 InitGame: \sv_floodProtect\1")

    def test_kill_matches_substring_anywhere(self):
        assert is_kill(PLAYER_KILL)
        assert is_kill("1:00 say: Killer instinct")
        assert not is_kill("1:00 say: kill")

    def test_client_connect(self):
        assert is_client_connect(" 20:38 ClientConnect: 2")
        assert not is_client_connect(" 20:38 ClientUserinfoChanged: 2 n\\Isgalamido")

    def test_item_pickup_interpolates_player(self):
        line = " 20:42 Item: 2 item_armor_body"
        assert is_item_pickup(line, 2)
        assert is_item_pickup(line, "2")
        assert not is_item_pickup(line, 3)

    def test_mentions_world(self):
        assert mentions_world(WORLD_KILL)
        assert not mentions_world(PLAYER_KILL)


class TestKillToken:
    """Tests for has_kill_token."""

    def test_present(self):
        assert has_kill_token(PLAYER_KILL)

    def test_substring_is_not_token(self):
        assert not has_kill_token("1:00 say: Killer instinct")
        assert not has_kill_token("1:00 XKill: 1 2 3: a killed b by c")


class TestSplitKillFields:
    """Tests for split_kill_fields."""

    def test_player_kill(self):
        assert split_kill_fields(PLAYER_KILL) == ("Isgalamido", "Mocinha", "MOD_ROCKET_SPLASH")

    def test_names_with_spaces(self):
        line = "2:11 Kill: 2 4 6: Dono da Bola killed Zeh by MOD_ROCKET"
        assert split_kill_fields(line) == ("Dono da Bola", "Zeh", "MOD_ROCKET")

    def test_missing_killed_raises(self):
        with pytest.raises(MalformedLineError):
            split_kill_fields("1:00 Kill: 1 2 3: garbage")

    def test_missing_by_raises(self):
        with pytest.raises(MalformedLineError):
            split_kill_fields("1:00 Kill: 1 2 3: A killed B")

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            split_kill_fields("1:00 Kill: 1 2 3: A killed B")


class TestParseKillEvent:
    """Tests for parse_kill_event and cause_kill_event."""

    def test_player_kill(self):
        assert parse_kill_event(PLAYER_KILL) == KillEvent("Isgalamido", "Mocinha", "MOD_ROCKET_SPLASH")

    def test_world_kill_is_parsed(self):
        assert parse_kill_event(WORLD_KILL) == KillEvent("<world>", "Isgalamido", "MOD_TRIGGER_HURT")

    def test_line_without_token(self):
        assert parse_kill_event("1:00 say: Killer instinct") is None

    def test_malformed_line_returns_none(self):
        assert parse_kill_event("1:00 Kill: 1 2 3: A killed B") is None
        assert parse_kill_event("1:00 Kill: 1 2 3: garbage") is None

    def test_world_cause_filtered(self):
        line = "1:00 Kill: 2 2 1: PlayerA killed PlayerA by <world>"
        assert parse_kill_event(line) == KillEvent("PlayerA", "PlayerA", "<world>")
        assert cause_kill_event(line) is None

    def test_cause_kill_keeps_player_cause(self):
        assert cause_kill_event(PLAYER_KILL) == KillEvent("Isgalamido", "Mocinha", "MOD_ROCKET_SPLASH")

    def test_world_killer_not_filtered(self):
        # Only the cause is checked against <world>
        assert cause_kill_event(WORLD_KILL) == KillEvent("<world>", "Isgalamido", "MOD_TRIGGER_HURT")
