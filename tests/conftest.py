"""Pytest fixtures for es_log_demo tests.

FakeElasticsearch keeps indices in memory and implements only the client
calls the demo makes, with hooks for injecting failures.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone

import pytest
from elasticsearch import ConnectionError as ESConnectionError
from faker import Faker

from es_log_demo.config import DemoConfig
from es_log_demo.models import LogRecord


class FakeIndices:
    """Stand-in for ``Elasticsearch.indices``."""

    def __init__(self, client: "FakeElasticsearch"):
        self.client = client
        self.acknowledge = True
        self.fail_exists = False
        self.fail_create = False
        self.create_calls = []

    def exists(self, index):
        if self.fail_exists:
            raise ESConnectionError("connection refused")
        return index in self.client.store

    def create(self, index, mappings=None):
        self.create_calls.append({"index": index, "mappings": copy.deepcopy(mappings)})
        if self.fail_create:
            raise ESConnectionError("connection reset")
        # The index exists afterwards even when the request is not acknowledged
        self.client.store[index] = {"mappings": copy.deepcopy(mappings or {}), "docs": []}
        return {"acknowledged": self.acknowledge, "index": index}

    def get_mapping(self, index):
        return {index: {"mappings": copy.deepcopy(self.client.store[index]["mappings"])}}


class FakeElasticsearch:
    """In-memory double of the Elasticsearch client."""

    def __init__(self):
        self.store = {}
        self.indices = FakeIndices(self)
        self.fail_on_write = None
        self.fail_search = False
        self.write_calls = []
        self.search_calls = []
        self.raw_hits = None

    def index(self, index, document, refresh=None):
        self.write_calls.append({"index": index, "document": document, "refresh": refresh})
        if self.fail_on_write == len(self.write_calls):
            raise ESConnectionError("node unavailable")
        target = self.store.setdefault(index, {"mappings": {}, "docs": []})
        target["docs"].append(copy.deepcopy(document))
        return {"result": "created", "_id": str(len(target["docs"]))}

    def search(self, index, query=None, sort=None):
        self.search_calls.append({"index": index, "query": query, "sort": sort})
        if self.fail_search:
            raise ESConnectionError("search timed out")

        if self.raw_hits is not None:
            hits = self.raw_hits
        else:
            (field, value), = query["term"].items()
            docs = [d for d in self.store[index]["docs"] if d.get(field) == value]
            for clause in reversed(sort or []):
                (sort_field, options), = clause.items()
                docs.sort(
                    key=lambda d: d[sort_field],
                    reverse=options.get("order") == "desc",
                )
            hits = [{"_id": str(i), "_source": d} for i, d in enumerate(docs)]

        return {"hits": {"total": {"value": len(hits)}, "hits": hits}}

    def docs(self, index):
        return self.store.get(index, {"docs": []})["docs"]


class TickingClock:
    """Clock that moves forward one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def config():
    return DemoConfig()


@pytest.fixture
def fake_es():
    return FakeElasticsearch()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def foreign_records():
    """Log records from applications other than the demo app."""
    fake = Faker()
    Faker.seed(1234)
    start = datetime(2024, 5, 1, 11, 0, 0, tzinfo=timezone.utc)
    return [
        LogRecord(
            app=f"{fake.word().capitalize()}Service",
            message=fake.sentence(),
            time=start + timedelta(minutes=i),
        )
        for i in range(5)
    ]
