"""Cached response envelope."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """Decoded JSON body stamped with origin and client timestamps.

    This is both the value stored in a cache engine and the value returned
    by the fetch pipeline before domain mapping.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    body: Any = Field(description="Decoded JSON payload")
    last_modified_at: int = Field(
        default=0,
        ge=0,
        description="Origin Last-Modified as epoch seconds, 0 when not supplied",
    )
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the client captured this response",
    )

    def age_seconds(self, now: datetime) -> float:
        """Get seconds elapsed since the envelope was fetched."""
        return (now - self.fetched_at).total_seconds()


CacheEntry = ResponseEnvelope
