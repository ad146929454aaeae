"""
Game Statistics

Modules:
- models: Frozen result records
- aggregator: Per-game and aggregate kill statistics
- ranking: Frequency and score rankings
"""


def __getattr__(name):
    """Lazy imports to avoid circular imports with q3stats.parsing."""
    if name == "calculate_session_statistics":
        from q3stats.stats.aggregator import calculate_session_statistics
        return calculate_session_statistics
    if name == "calculate_aggregate_statistics":
        from q3stats.stats.aggregator import calculate_aggregate_statistics
        return calculate_aggregate_statistics
    if name == "rank_scores":
        from q3stats.stats.ranking import rank_scores
        return rank_scores
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
