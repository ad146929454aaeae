"""
Result records for game statistics.

Every record is a frozen dataclass built fresh from the currently ingested
log. `as_dict()` gives the camelCase shape served by the HTTP layer.
"""

from dataclasses import dataclass

Session = tuple[str, ...]


@dataclass(frozen=True)
class KillEvent:
    """One structured kill: `killer killed killed by cause`."""
    killer: str
    killed: str
    cause: str

    def as_dict(self) -> dict:
        return {'killer': self.killer, 'killed': self.killed, 'cause': self.cause}


@dataclass(frozen=True)
class RankingEntry:
    key: str
    quantity: int

    def as_dict(self) -> dict:
        return {'key': self.key, 'quantity': self.quantity}


@dataclass(frozen=True)
class ScoreEntry:
    player: str
    score: int

    def as_dict(self) -> dict:
        return {'player': self.player, 'score': self.score}


@dataclass(frozen=True)
class SessionStatistics:
    """
    Kill statistics for one game session.

    kills_by_world counts raw lines mentioning <world>, while kills_by_cause
    holds parsed events without world causes, so the two are not additive.
    """
    total_kills: int
    kills_by_cause: tuple[KillEvent, ...] = ()
    kills_by_world: int = 0
    ranking_causes: tuple[RankingEntry, ...] = ()
    ranking_killers: tuple[RankingEntry, ...] = ()

    def as_dict(self) -> dict:
        return {
            'totalKills': self.total_kills,
            'killsByCause': [kill.as_dict() for kill in self.kills_by_cause],
            'killsByWorld': self.kills_by_world,
            'rankingCauses': [entry.as_dict() for entry in self.ranking_causes],
            'rankingKillers': [entry.as_dict() for entry in self.ranking_killers],
        }


@dataclass(frozen=True)
class SessionRanking:
    ranking: tuple[ScoreEntry, ...]
    kills_by_cause: tuple[KillEvent, ...]

    def as_dict(self) -> dict:
        return {
            'ranking': [entry.as_dict() for entry in self.ranking],
            'killsByCause': [kill.as_dict() for kill in self.kills_by_cause],
        }


@dataclass(frozen=True)
class AggregateStatistics:
    total_games: int
    statistics: tuple[SessionStatistics, ...] = ()

    def as_dict(self) -> dict:
        return {
            'totalGames': self.total_games,
            'statistics': [stats.as_dict() for stats in self.statistics],
        }
