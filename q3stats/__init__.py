"""
Quake 3 Log Statistics - Core Package

This package contains the core modules for:
- Line classification and session grouping (q3stats.parsing)
- Kill statistics and rankings (q3stats.stats)
- The query facade over an ingested log (q3stats.engine)
- Log file ingestion (q3stats.ingestion)
"""

__version__ = "1.0.0"


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "LogEngine":
        from q3stats.engine import LogEngine
        return LogEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
