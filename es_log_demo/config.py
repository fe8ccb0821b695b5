import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_ES_HOST = "http://localhost:9200"


@dataclass(frozen=True)
class DemoConfig:
    """Settings shared by every step of the demo run."""

    es_host: str = DEFAULT_ES_HOST
    es_api_key: Optional[str] = None
    index_name: str = "applications"
    doc_category: str = "log"
    app_name: str = "myApp"
    seed_count: int = 10
    refresh: Optional[str] = "wait_for"
    log_level: str = "INFO"

    @property
    def index_mapping(self) -> Dict[str, Any]:
        """
        Mapping document sent with the create-index request.

        The document category is kept in ``_meta`` so the mapped
        properties stay limited to app, message and time. It tags the
        index as a whole; the documents themselves carry no category field.
        """
        return {
            "_meta": {"document_category": self.doc_category},
            "properties": {
                "app": {"type": "text", "index": False},
                "message": {"type": "text", "index": False},
                "time": {"type": "date"},
            },
        }

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """
        Build a config from environment variables (and a .env file if present).

        Returns:
            DemoConfig with ES_HOST, ES_API_KEY and LOG_LEVEL applied
        """
        load_dotenv()

        return cls(
            es_host=os.getenv("ES_HOST", DEFAULT_ES_HOST),
            es_api_key=os.getenv("ES_API_KEY") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
