from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field


class LogRecord(BaseModel):
    """A single application log line stored in the index."""

    app: str = Field(min_length=1, description="Name of the emitting application")
    message: str = Field(min_length=1, description="Log message text")
    time: datetime = Field(description="Moment the record was created")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
