"""
Probe result models.

A probe produces one of two outcomes: ``ProbeUp`` when the target answered
with any HTTP response, or ``ProbeDown`` when no response could be obtained.
``ProbeResult`` is the flat JSON shape returned to MCP clients; it is built
from an outcome so that the UP fields and the DOWN fields are never mixed.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProbeStatus(str, Enum):
    UP = "UP"
    DOWN = "DOWN"


class ProbeUp(BaseModel):
    """The target responded. Any status code counts, 4xx and 5xx included."""
    model_config = ConfigDict(frozen=True)

    status_code: int
    latency_ms: int = Field(ge=0)


class ProbeDown(BaseModel):
    """No response was received."""
    model_config = ConfigDict(frozen=True)

    error_message: str = Field(min_length=1)


ProbeOutcome = Union[ProbeUp, ProbeDown]


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with an explicit +00:00 offset."""
    return datetime.now(timezone.utc).isoformat()


class ProbeResult(BaseModel):
    """
    Serialized form of a probe outcome.

    Field names and order are fixed. Fields that do not apply to the
    status are emitted as JSON null rather than omitted.
    """
    status: ProbeStatus
    http_status_code: Optional[int] = None
    latency_ms: Optional[int] = None
    timestamp: str
    error_details: Optional[str] = None

    @model_validator(mode="after")
    def _check_exclusive_fields(self) -> "ProbeResult":
        up_fields = (self.http_status_code, self.latency_ms)
        if self.status is ProbeStatus.UP:
            if None in up_fields or self.error_details is not None:
                raise ValueError(
                    "UP results need http_status_code and latency_ms and no error_details"
                )
        else:
            if up_fields != (None, None) or not self.error_details:
                raise ValueError(
                    "DOWN results need error_details and no http_status_code or latency_ms"
                )
        return self

    @classmethod
    def from_outcome(
        cls, outcome: ProbeOutcome, timestamp: Optional[str] = None
    ) -> "ProbeResult":
        """
        Project a probe outcome into the result shape.

        Args:
            outcome:   The ProbeUp or ProbeDown produced by the probe.
            timestamp: ISO-8601 UTC timestamp; defaults to the current time.

        Returns:
            ProbeResult: The populated result.
        """
        if timestamp is None:
            timestamp = utc_now_iso()

        if isinstance(outcome, ProbeUp):
            return cls(
                status=ProbeStatus.UP,
                http_status_code=outcome.status_code,
                latency_ms=outcome.latency_ms,
                timestamp=timestamp,
            )

        return cls(
            status=ProbeStatus.DOWN,
            timestamp=timestamp,
            error_details=outcome.error_message,
        )

    def to_json(self) -> str:
        return self.model_dump_json()
