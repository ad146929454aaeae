"""
Data Ingestion

Modules:
- log_file: Read a server log from disk into a LogEngine
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "ingest_log_file":
        from q3stats.ingestion.log_file import ingest_log_file
        return ingest_log_file
    if name == "run_report":
        from q3stats.ingestion.log_file import main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
