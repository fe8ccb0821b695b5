import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from elasticsearch import Elasticsearch

from es_log_demo.config import DemoConfig
from es_log_demo.connection import create_client
from es_log_demo.errors import LogDemoError
from es_log_demo.index_setup import IndexInitializer
from es_log_demo.models import LogRecord
from es_log_demo.query_runner import AppLogQuery


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Set up logging with a console handler and an optional file handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of a log file that receives every record, if given

    Returns:
        Configured root logger
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logger = logging.getLogger()
    logger.handlers.clear()

    level = getattr(logging, log_level.upper(), logging.INFO)
    # File handler records DEBUG whatever the console level
    logger.setLevel(logging.DEBUG if log_file is not None else level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        logger.addHandler(file_handler)

    # Console gets the level asked for; results go to stdout via print
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger


def run(config: DemoConfig, es: Optional[Elasticsearch] = None) -> List[LogRecord]:
    """Connect, make sure the index is there, then print the app's logs."""
    if es is None:
        es = create_client(config)

    IndexInitializer(es, config).ensure_index()
    return AppLogQuery(es, config).run()


def main(argv: Optional[List[str]] = None):
    """Parse arguments and run the demo. Any demo error ends the process with status 1."""
    parser = argparse.ArgumentParser(
        description="Seed an Elasticsearch index with demo logs and query them back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  ES_HOST      Elasticsearch URL (default: http://localhost:9200)
  ES_API_KEY   API key, if the cluster requires one
  LOG_LEVEL    Default logging level (default: INFO)
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write all logs, DEBUG included, to this file",
    )
    args = parser.parse_args(argv)

    config = DemoConfig.from_env()
    logger = setup_logging(args.log_level or config.log_level, args.log_file)

    try:
        run(config)
    except LogDemoError as e:
        logger.error(f"Demo run failed: {str(e)}", exc_info=True)
        print(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
