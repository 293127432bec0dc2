"""Snapshot of one successfully decoded ``/v1/cluster`` document.

Frozen value object created fresh on every scrape and discarded once its
values have been emitted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StatusSnapshot(BaseModel):
    """Cluster-wide counters reported by the Presto coordinator."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, strict=True)

    running_queries: float = Field(0.0, alias="runningQueries")
    blocked_queries: float = Field(0.0, alias="blockedQueries")
    queued_queries: float = Field(0.0, alias="queuedQueries")
    active_workers: float = Field(0.0, alias="activeWorkers")
    running_drivers: float = Field(0.0, alias="runningDrivers")
    reserved_memory: float = Field(0.0, alias="reservedMemory")
    total_input_rows: float = Field(0.0, alias="totalInputRows")
    total_input_bytes: float = Field(0.0, alias="totalInputBytes")
    total_cpu_time_secs: float = Field(0.0, alias="totalCpuTimeSecs")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero(cls, value: Any) -> Any:
        # Explicit JSON nulls leave the field at zero.
        return 0.0 if value is None else value

    @classmethod
    def from_json(cls, body: bytes | str) -> "StatusSnapshot":
        """Decode a JSON document into a snapshot.

        Raises:
            pydantic.ValidationError: If the body is not a JSON object or a
                known field is not numeric.
        """
        return cls.model_validate_json(body)

    def value_of(self, field: str) -> float:
        """Return the value of the named snapshot field."""
        return getattr(self, field)
