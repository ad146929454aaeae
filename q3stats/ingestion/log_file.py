"""
Game Log File Ingestion

Reads a Quake 3 server log from disk, hands its lines to a LogEngine, and
reports per-game statistics. Optionally exports the statistics to CSV.

Usage:
    python -m q3stats.ingestion.log_file [path/to/games.log] [--export]
    OR
    python q3stats/ingestion/log_file.py [path/to/games.log] [--export]

    Programmatic usage:
        from q3stats.ingestion.log_file import ingest_log_file
        ingest_log_file(engine, "games.log")
"""

import sys
from pathlib import Path

# Enable both `python q3stats/ingestion/log_file.py` and `python -m q3stats.ingestion.log_file` execution modes.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import argparse
from datetime import datetime

from q3stats.config import (
    DEFAULT_LOG_FILE,
    LINE_SEPARATOR,
    LOG_ENCODING,
    MAX_LOG_SIZE,
    OUTPUT_FOLDER,
    STATISTICS_PATTERN,
)
from q3stats.engine import LogEngine, LogEngineError
from q3stats.stats.aggregator import statistics_frame
from q3stats.stats.models import AggregateStatistics
from q3stats.utils import (
    setup_logging,
    cleanup_old_files,
    atomic_write_csv,
    validate_input_size,
)

# --- Module Logger ---
logger = setup_logging(__name__)


class LogFileError(LogEngineError):
    """Raised when a log file cannot be read"""
    pass


def read_log_file(path: Path | str) -> list[str]:
    """
    Read a log file and split it into lines.

    Lines are split on "\\n" only, so a trailing newline yields a final
    empty line. Bytes that are not valid UTF-8 become U+FFFD.

    Args:
        path: Path to the server log

    Returns:
        List of lines in file order

    Raises:
        LogFileError: If the file is missing or cannot be opened
        ValueError: If the file exceeds MAX_LOG_SIZE
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=LOG_ENCODING, errors="replace")
    except OSError as e:
        logger.error(f"Error reading log file {path}: {e}")
        raise LogFileError(f"Could not read log file {path}: {e}") from e

    validate_input_size(text, MAX_LOG_SIZE)
    return text.split(LINE_SEPARATOR)


def ingest_log_file(engine: LogEngine, path: Path | str) -> int:
    """
    Load a log file into the engine.

    Returns:
        Number of lines ingested
    """
    lines = read_log_file(path)
    engine.ingest(lines)
    logger.info(f"Ingested {len(lines)} lines from {path}")
    return len(lines)


def export_statistics(aggregate: AggregateStatistics, output_folder: Path = OUTPUT_FOLDER) -> Path:
    """
    Export per-game statistics to a timestamped CSV, removing older exports.

    Returns:
        Path to the written CSV
    """
    df = statistics_frame(aggregate)
    stamp = datetime.now().strftime('%Y%m%d%H%M%S')
    output_csv = output_folder / STATISTICS_PATTERN.replace('*', stamp)

    atomic_write_csv(df, output_csv, index=False)
    cleanup_old_files(STATISTICS_PATTERN, keep_file=output_csv, folder=output_folder)
    logger.info(f"Exported statistics: {output_csv}")
    return output_csv


def log_summary(engine: LogEngine) -> AggregateStatistics:
    """Log totals and one line per game; return the aggregate."""
    aggregate = engine.aggregate_statistics()
    df = statistics_frame(aggregate)

    logger.info("Summary:")
    logger.info(f"  Games parsed: {engine.session_count()}")
    logger.info(f"  Total games reported: {aggregate.total_games}")
    logger.info(f"  Total kills: {df['total_kills'].sum()}")
    logger.info(f"  Kills by world: {df['kills_by_world'].sum()}")
    if not df.empty:
        logger.info("\n" + df.to_string(index=False))

    return aggregate


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for log ingestion and reporting."""
    parser = argparse.ArgumentParser(description="Quake 3 game log statistics")
    parser.add_argument("log_file", nargs="?", default=str(DEFAULT_LOG_FILE),
                        help="Path to the server log (default: %(default)s)")
    parser.add_argument("--export", action="store_true",
                        help=f"Write per-game statistics to {OUTPUT_FOLDER}")
    args = parser.parse_args(argv)

    logger.info("=" * 60)
    logger.info("Quake 3 Log Statistics")
    logger.info("=" * 60)

    engine = LogEngine()
    try:
        ingest_log_file(engine, args.log_file)
    except LogFileError as e:
        logger.error(f"INGESTION ERROR: {e}")
        return 1
    except ValueError as e:
        logger.error(f"INPUT ERROR: {e}")
        return 1

    aggregate = log_summary(engine)

    if args.export:
        export_statistics(aggregate)

    logger.info("=" * 60)
    logger.info("Processing complete")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
