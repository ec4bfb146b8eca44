"""Workout input models supplied by the workout store.

Readings use 0 to mean "not recorded". Analyzers filter those out; negative
readings are rejected here at the boundary. Datetimes are stored as aware
UTC values; naive inputs are read as UTC.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ErrorCode, InvalidWorkoutDataError


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _first_error_field(error: ValidationError) -> Optional[str]:
    errors = error.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


class Sample(BaseModel):
    """A single measurement instant during a run."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    timestamp: datetime
    pace: float = Field(default=0.0, ge=0, description="Seconds per km, 0 = absent")
    heart_rate: float = Field(default=0.0, ge=0, description="Beats per minute, 0 = absent")
    cadence: float = Field(default=0.0, ge=0, description="Steps per minute, 0 = absent")
    distance: float = Field(default=0.0, ge=0, description="Cumulative distance in km")

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Normalize to UTC."""
        return to_utc(v)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sample":
        """Validate a raw sample record.

        Raises:
            InvalidWorkoutDataError: If the record is malformed.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidWorkoutDataError(
                "Invalid sample record",
                field=_first_error_field(e),
                details={"errors": [err["msg"] for err in e.errors()]},
                code=ErrorCode.SAMPLE_VALIDATION_ERROR,
            ) from e


class Workout(BaseModel):
    """A completed run: time-ascending samples plus workout-level aggregates."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: Optional[str] = None
    date: datetime
    duration: float = Field(default=0.0, ge=0, description="Duration in seconds")
    distance: float = Field(default=0.0, ge=0, description="Distance in km")
    average_heart_rate: float = Field(default=0.0, ge=0)
    average_pace: float = Field(default=0.0, ge=0, description="Seconds per km")
    average_cadence: float = Field(default=0.0, ge=0)
    data_points: Tuple[Sample, ...] = ()

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        """Normalize to UTC."""
        return to_utc(v)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workout":
        """Validate a raw workout record (camelCase or snake_case keys).

        Raises:
            InvalidWorkoutDataError: If the record is malformed.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidWorkoutDataError(
                "Invalid workout record",
                field=_first_error_field(e),
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e

    @property
    def paces(self) -> List[float]:
        """Raw pace readings in sample order (may contain 0)."""
        return [s.pace for s in self.data_points]

    @property
    def heart_rates(self) -> List[float]:
        """Raw heart-rate readings in sample order (may contain 0)."""
        return [s.heart_rate for s in self.data_points]

    @property
    def cadences(self) -> List[float]:
        """Raw cadence readings in sample order (may contain 0)."""
        return [s.cadence for s in self.data_points]
