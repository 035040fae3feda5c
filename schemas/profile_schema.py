"""Schemas for users and their onboarding health profile.

`HealthProfileRequest` mirrors what the onboarding form sends and is stored
as-is. `HealthProfile` is the normalized, read-only view handed to the
services: dates are parsed, cycle length is an int and every list exists.
Malformed values are defaulted rather than rejected.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.base import CamelModel

DEFAULT_CYCLE_LENGTH = 28


def _to_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _to_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(v) for v in value if v is not None and str(v).strip()]


def parse_profile_date(value: Any) -> Optional[date]:
    """Parse a YYYY-MM-DD (or ISO datetime) value; None when unparsable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def parse_cycle_length(value: Any) -> int:
    """Coerce a cycle length to a positive int, defaulting to 28."""
    try:
        length = int(float(str(value).strip()))
    except (TypeError, ValueError):
        return DEFAULT_CYCLE_LENGTH
    return length if length > 0 else DEFAULT_CYCLE_LENGTH


class UserCreateRequest(CamelModel):
    """Payload for registering a user."""

    name: str = Field(..., min_length=1, examples=["Maya"])
    email: Optional[str] = Field(None, examples=["maya@example.com"])


class UserResponse(CamelModel):
    id: int
    name: str
    email: Optional[str] = None
    created_at: str


class HealthProfileRequest(CamelModel):
    """Onboarding answers as submitted by the client."""

    age: Optional[str] = Field(None, examples=["29"])
    height: Optional[str] = None
    weight: Optional[str] = None
    diet: Optional[str] = Field(None, examples=["vegetarian"])
    symptoms: List[str] = Field(default_factory=list, examples=[["Painful periods", "Mood swings"]])
    goals: List[str] = Field(default_factory=list, examples=[["Hormone balance"]])
    lifestyle: Dict[str, Any] = Field(default_factory=dict)
    medical_conditions: List[str] = Field(default_factory=list, examples=[["PCOS"]])
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    last_period_date: Optional[str] = Field(None, examples=["2026-10-09"])
    cycle_length: Optional[str] = Field(None, examples=["28"])
    period_length: Optional[str] = None
    irregular_periods: bool = False
    stress_level: Optional[str] = Field(None, examples=["High"])
    sleep_hours: Optional[str] = Field(None, examples=["6-7"])
    exercise_level: Optional[str] = None
    water_intake: Optional[str] = None

    @field_validator(
        "age", "height", "weight", "diet", "last_period_date", "cycle_length",
        "period_length", "stress_level", "sleep_hours", "exercise_level",
        "water_intake", mode="before",
    )
    @classmethod
    def _stringify(cls, value):
        return _to_text(value)

    @field_validator("symptoms", "goals", "medical_conditions", "medications", "allergies", mode="before")
    @classmethod
    def _listify(cls, value):
        return _to_list(value)

    @field_validator("lifestyle", mode="before")
    @classmethod
    def _dictify(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("irregular_periods", mode="before")
    @classmethod
    def _boolify(cls, value):
        return bool(value) if value is not None else False


class HealthProfile(BaseModel):
    """Normalized, immutable profile consumed by the nutrition services."""

    model_config = ConfigDict(frozen=True)

    age: Optional[str] = None
    diet: Optional[str] = None
    symptoms: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    lifestyle: Dict[str, Any] = Field(default_factory=dict)
    medical_conditions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    last_period_date: Optional[date] = None
    cycle_length: int = DEFAULT_CYCLE_LENGTH
    irregular_periods: bool = False
    stress_level: Optional[str] = None
    sleep_hours: Optional[str] = None
    exercise_level: Optional[str] = None
    water_intake: Optional[str] = None

    @field_validator("age", "diet", "stress_level", "sleep_hours", "exercise_level", "water_intake", mode="before")
    @classmethod
    def _stringify(cls, value):
        return _to_text(value)

    @field_validator("symptoms", "goals", "medical_conditions", "allergies", mode="before")
    @classmethod
    def _listify(cls, value):
        return _to_list(value)

    @field_validator("lifestyle", mode="before")
    @classmethod
    def _dictify(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("last_period_date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_profile_date(value)

    @field_validator("cycle_length", mode="before")
    @classmethod
    def _parse_cycle_length(cls, value):
        return parse_cycle_length(value)

    @field_validator("irregular_periods", mode="before")
    @classmethod
    def _boolify(cls, value):
        return bool(value) if value is not None else False

    @classmethod
    def from_request(cls, payload: HealthProfileRequest) -> "HealthProfile":
        return cls.model_validate(payload.model_dump())


class HealthProfileResponse(CamelModel):
    """Stored profile plus what the services derive from it today."""

    user_id: int
    profile: HealthProfileRequest
    detected_conditions: List[str]
    current_phase: str
    completed_at: Optional[str] = None
