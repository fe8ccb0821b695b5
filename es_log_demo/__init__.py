# Elasticsearch log demo

from es_log_demo.config import DemoConfig
from es_log_demo.connection import create_client
from es_log_demo.errors import (
    AcknowledgmentError,
    CreateIndexError,
    DecodeError,
    ExistenceCheckError,
    InsertError,
    LogDemoError,
    SearchError,
    ServiceConnectionError,
    ServiceError,
)
from es_log_demo.index_setup import IndexInitializer
from es_log_demo.models import LogRecord
from es_log_demo.query_runner import AppLogQuery
from es_log_demo.seeder import LogSeeder

__all__ = [
    "DemoConfig",
    "create_client",
    "LogRecord",
    "IndexInitializer",
    "LogSeeder",
    "AppLogQuery",
    "LogDemoError",
    "ServiceConnectionError",
    "ServiceError",
    "ExistenceCheckError",
    "CreateIndexError",
    "AcknowledgmentError",
    "InsertError",
    "SearchError",
    "DecodeError",
]
