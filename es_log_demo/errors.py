from typing import Any, Dict, Optional


class LogDemoError(Exception):
    """Base class for every error raised by the demo."""


class ServiceConnectionError(LogDemoError):
    """The Elasticsearch client could not be constructed."""


class ServiceError(LogDemoError):
    """A request to Elasticsearch failed. The client exception is the __cause__."""


class ExistenceCheckError(ServiceError):
    pass


class CreateIndexError(ServiceError):
    pass


class AcknowledgmentError(LogDemoError):
    """
    Index creation returned without acknowledgment.

    The index may or may not exist on the cluster afterwards.
    """

    def __init__(self, index_name: str):
        self.index_name = index_name
        super().__init__(
            f"CreateIndex for index '{index_name}' was not acknowledged. "
            "Check that timeout value is correct."
        )


class InsertError(ServiceError):
    """Indexing a seed record failed; earlier records stay in the index."""

    def __init__(self, message: str, position: int, inserted: int):
        self.position = position
        self.inserted = inserted
        super().__init__(message)


class SearchError(ServiceError):
    pass


class DecodeError(LogDemoError):
    """A search hit could not be turned into a LogRecord."""

    def __init__(self, message: str, hit: Optional[Dict[str, Any]] = None):
        self.hit = hit
        super().__init__(message)
