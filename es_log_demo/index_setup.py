import logging
from typing import Optional

from elasticsearch import Elasticsearch

from es_log_demo.config import DemoConfig
from es_log_demo.connection import CLIENT_ERRORS
from es_log_demo.errors import AcknowledgmentError, CreateIndexError, ExistenceCheckError
from es_log_demo.seeder import LogSeeder

logger = logging.getLogger(__name__)


class IndexInitializer:
    """Creates the log index on first use and seeds it once."""

    def __init__(
        self,
        es: Elasticsearch,
        config: DemoConfig,
        seeder: Optional[LogSeeder] = None,
    ):
        self.es = es
        self.config = config
        self.seeder = seeder or LogSeeder(es, config)

    def index_exists(self) -> bool:
        try:
            return bool(self.es.indices.exists(index=self.config.index_name))
        except CLIENT_ERRORS as e:
            raise ExistenceCheckError(
                f"Failed to check whether index '{self.config.index_name}' exists: {str(e)}"
            ) from e

    def ensure_index(self) -> bool:
        """
        Create and seed the index unless it already exists.

        An existing index is left untouched: its mapping is not updated and
        it is not seeded again, even when empty.

        Returns:
            True if the index was created by this call, False if it already existed

        Raises:
            ExistenceCheckError: if the existence check fails
            CreateIndexError: if the create request fails
            AcknowledgmentError: if the create request is not acknowledged
            InsertError: if seeding fails
        """
        index_name = self.config.index_name

        if self.index_exists():
            logger.info(f"Index {index_name} already exists, skipping creation")
            return False

        try:
            response = self.es.indices.create(
                index=index_name, mappings=self.config.index_mapping
            )
        except CLIENT_ERRORS as e:
            raise CreateIndexError(
                f"Failed to create index '{index_name}': {str(e)}"
            ) from e

        if not response["acknowledged"]:
            logger.warning(f"Creation of index {index_name} was not acknowledged")
            raise AcknowledgmentError(index_name)

        logger.info(f"Created index {index_name}")
        self.seeder.seed()
        return True
