import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from elasticsearch import Elasticsearch
from pydantic import ValidationError

from es_log_demo.config import DemoConfig
from es_log_demo.connection import CLIENT_ERRORS
from es_log_demo.errors import DecodeError, SearchError
from es_log_demo.models import LogRecord

logger = logging.getLogger(__name__)


class AppLogQuery:
    """Looks up the log records of the configured application, oldest first."""

    def __init__(self, es: Elasticsearch, config: DemoConfig):
        self.es = es
        self.config = config

    def build_query(self) -> Dict[str, Any]:
        """
        Build the search request: an exact match on ``app`` sorted by ``time``.

        No size is set, so only the service's default result window comes back.
        """
        return {
            "query": {"term": {"app": self.config.app_name}},
            "sort": [{"time": {"order": "asc"}}],
        }

    def find_logs(self) -> List[LogRecord]:
        """
        Run the search and decode every hit.

        Returns:
            Matching records in the order returned by the service

        Raises:
            SearchError: if the search request fails
            DecodeError: if a hit does not match the LogRecord shape
        """
        request = self.build_query()

        try:
            response = self.es.search(
                index=self.config.index_name,
                query=request["query"],
                sort=request["sort"],
            )
        except CLIENT_ERRORS as e:
            logger.error(f"Error executing search query on {self.config.index_name}: {str(e)}")
            raise SearchError(
                f"Failed to search index '{self.config.index_name}': {str(e)}"
            ) from e

        hits = response["hits"]["hits"]
        logger.info(f"Search on {self.config.index_name} returned {len(hits)} hits")
        return [self._decode_hit(hit) for hit in hits]

    def _decode_hit(self, hit: Dict[str, Any]) -> LogRecord:
        source = hit.get("_source")
        if source is None:
            raise DecodeError(f"Hit {hit.get('_id')} has no _source", hit=hit)

        try:
            return LogRecord.model_validate(source)
        except ValidationError as e:
            raise DecodeError(
                f"Hit {hit.get('_id')} is not a valid log record: {str(e)}", hit=hit
            ) from e

    @staticmethod
    def print_logs(records: List[LogRecord], out: Optional[TextIO] = None):
        out = out or sys.stdout
        print("Logs found:", file=out)
        for record in records:
            print(f"time: {record.time.isoformat()} message: {record.message}", file=out)

    def run(self, out: Optional[TextIO] = None) -> List[LogRecord]:
        records = self.find_logs()
        self.print_logs(records, out)
        return records
