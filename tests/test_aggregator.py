"""
Tests for session and aggregate statistics.
"""

import pandas as pd

from q3stats.stats.aggregator import (
    STATISTICS_COLUMNS,
    calculate_aggregate_statistics,
    calculate_kills_by_world,
    calculate_session_statistics,
    calculate_total_kills,
    statistics_frame,
)
from q3stats.stats.models import AggregateStatistics, KillEvent, RankingEntry

INIT = "0:00 InitGame: \\sv_hostname\\Code Miner Server"
END = "20:37 ShutdownGame:"


class TestSessionStatistics:
    """Tests for calculate_session_statistics."""

    def test_single_player_kill(self):
        session = (INIT, "1:00 Kill: 2 3 7: PlayerA killed PlayerB by MOD_ROCKET", END)
        stats = calculate_session_statistics(session)

        assert stats.total_kills == 1
        assert stats.kills_by_cause == (KillEvent("PlayerA", "PlayerB", "MOD_ROCKET"),)
        assert stats.kills_by_world == 0
        assert stats.ranking_causes == (RankingEntry("MOD_ROCKET", 1),)
        assert stats.ranking_killers == (RankingEntry("PlayerA", 1),)

    def test_world_cause_counted_but_not_listed(self):
        session = (INIT, "1:00 Kill: 2 2 1: PlayerA killed PlayerA by <world>", END)
        stats = calculate_session_statistics(session)

        assert stats.total_kills == 1
        assert stats.kills_by_world == 1
        assert stats.kills_by_cause == ()
        assert stats.ranking_causes == ()

    def test_world_killer_is_listed_and_counted(self):
        session = (INIT, "1:00 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT", END)
        stats = calculate_session_statistics(session)

        assert stats.kills_by_world == 1
        assert stats.kills_by_cause == (KillEvent("<world>", "Isgalamido", "MOD_TRIGGER_HURT"),)

    def test_kill_substring_counts_without_event(self):
        session = (INIT, "1:00 say: Kill them all", "1:01 Kill: 1 2 3: broken", END)
        stats = calculate_session_statistics(session)

        assert stats.total_kills == 2
        assert stats.kills_by_cause == ()

    def test_world_lines_counted_independently_of_kills(self):
        session = (INIT, "1:00 say: <world> is lava", END)
        assert calculate_kills_by_world(session) == 1
        assert calculate_total_kills(session) == 0

    def test_rankings_order(self):
        session = (
            INIT,
            "1:00 Kill: 2 3 7: A killed B by MOD_SHOTGUN",
            "1:01 Kill: 3 2 6: B killed A by MOD_ROCKET",
            "1:02 Kill: 3 2 6: B killed A by MOD_ROCKET",
            END,
        )
        stats = calculate_session_statistics(session)

        assert stats.ranking_causes == (RankingEntry("MOD_ROCKET", 2), RankingEntry("MOD_SHOTGUN", 1))
        assert stats.ranking_killers == (RankingEntry("B", 2), RankingEntry("A", 1))

    def test_as_dict_uses_api_keys(self):
        session = (INIT, "1:00 Kill: 2 3 7: PlayerA killed PlayerB by MOD_ROCKET", END)
        assert calculate_session_statistics(session).as_dict() == {
            'totalKills': 1,
            'killsByCause': [{'killer': 'PlayerA', 'killed': 'PlayerB', 'cause': 'MOD_ROCKET'}],
            'killsByWorld': 0,
            'rankingCauses': [{'key': 'MOD_ROCKET', 'quantity': 1}],
            'rankingKillers': [{'key': 'PlayerA', 'quantity': 1}],
        }


class TestAggregateStatistics:
    """Tests for calculate_aggregate_statistics."""

    def test_total_games_is_session_count_plus_one(self):
        assert calculate_aggregate_statistics([]).total_games == 1
        assert calculate_aggregate_statistics([(INIT, END), (INIT, END)]).total_games == 3

    def test_statistics_follow_session_order(self):
        sessions = [
            (INIT, "1:00 Kill: 2 3 7: A killed B by MOD_ROCKET", END),
            (INIT, END),
        ]
        aggregate = calculate_aggregate_statistics(sessions)
        assert [stats.total_kills for stats in aggregate.statistics] == [1, 0]

    def test_default_statistics_is_empty_tuple(self):
        aggregate = AggregateStatistics(total_games=1)
        assert aggregate.statistics == ()
        assert aggregate.as_dict() == {'totalGames': 1, 'statistics': []}

class TestStatisticsFrame:
    """Tests for statistics_frame."""

    def test_empty(self):
        df = statistics_frame(calculate_aggregate_statistics([]))
        assert df.empty
        assert list(df.columns) == STATISTICS_COLUMNS

    def test_one_row_per_game(self):
        sessions = [
            (INIT, "1:00 Kill: 2 3 7: A killed B by MOD_ROCKET", END),
            (INIT, END),
        ]
        df = statistics_frame(calculate_aggregate_statistics(sessions))

        assert len(df) == 2
        assert df['game_id'].tolist() == [0, 1]
        assert df['total_kills'].tolist() == [1, 0]
        assert df.loc[0, 'top_cause'] == "MOD_ROCKET"
        assert df.loc[0, 'top_killer'] == "A"
        assert pd.isna(df.loc[1, 'top_cause'])
