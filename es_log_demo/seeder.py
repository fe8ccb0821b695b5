import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from elasticsearch import Elasticsearch

from es_log_demo.config import DemoConfig
from es_log_demo.connection import CLIENT_ERRORS
from es_log_demo.errors import InsertError
from es_log_demo.models import LogRecord

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogSeeder:
    """Writes the synthetic log records for the configured application."""

    def __init__(
        self,
        es: Elasticsearch,
        config: DemoConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.es = es
        self.config = config
        self.clock = clock or utc_now

    def seed(self) -> List[LogRecord]:
        """
        Index ``seed_count`` records one at a time.

        Each record is timestamped right before its own write. The first
        failed write stops the loop; records already written are left in
        place.

        Returns:
            The records that were written, in insertion order

        Raises:
            InsertError: if any write fails
        """
        inserted: List[LogRecord] = []

        for i in range(self.config.seed_count):
            record = LogRecord(
                app=self.config.app_name,
                message=f"message {i}",
                time=self.clock(),
            )

            try:
                self.es.index(
                    index=self.config.index_name,
                    document=record.to_document(),
                    refresh=self.config.refresh,
                )
            except CLIENT_ERRORS as e:
                logger.error(f"Error indexing record {i + 1} into {self.config.index_name}: {str(e)}")
                raise InsertError(
                    f"Failed to index record {i + 1} of {self.config.seed_count} "
                    f"('{record.message}') into '{self.config.index_name}': {str(e)}",
                    position=i + 1,
                    inserted=len(inserted),
                ) from e

            logger.debug(f"Indexed '{record.message}' at {record.time.isoformat()}")
            inserted.append(record)

        logger.info(f"Inserted {len(inserted)} log records into {self.config.index_name}")
        return inserted
