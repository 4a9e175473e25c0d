# models.py
"""
Data model of the dashboard.

Two layers live here:
- pydantic schemas for the OpenWeatherMap payloads, applied at the network
  boundary so a missing or mistyped field fails the lookup instead of
  leaking into the page;
- plain dataclasses for what the dashboard shows (conditions, forecast
  entries and the ``QueryResult`` variants).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


# === Provider payloads ===

class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ConditionPayload(_Payload):
    main: StrictStr


class MainPayload(_Payload):
    temp: StrictFloat
    humidity: StrictInt


class WindPayload(_Payload):
    speed: StrictFloat


class CurrentPayload(_Payload):
    """Body of ``/weather`` once the ``cod`` envelope has been checked."""

    name: StrictStr
    weather: List[ConditionPayload] = Field(min_length=1)
    main: MainPayload
    wind: WindPayload


class SampleMainPayload(_Payload):
    temp: StrictFloat


class ForecastSamplePayload(_Payload):
    dt_txt: StrictStr
    main: SampleMainPayload
    weather: List[ConditionPayload] = Field(min_length=1)


class ForecastPayload(_Payload):
    """Body of ``/forecast``: 3-hour samples over 5 days."""

    list: List[ForecastSamplePayload]


# === Dashboard model ===

@dataclass(frozen=True)
class CurrentConditions:
    name: str
    condition: str
    temperature: float
    humidity: int
    wind_speed: float

    @classmethod
    def from_payload(cls, payload: CurrentPayload) -> "CurrentConditions":
        return cls(
            name=payload.name,
            condition=payload.weather[0].main,
            temperature=payload.main.temp,
            humidity=payload.main.humidity,
            wind_speed=payload.wind.speed,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Provider-shaped dict, the form the snapshot is stored in."""
        return {
            "cod": 200,
            "name": self.name,
            "weather": [{"main": self.condition}],
            "main": {"temp": self.temperature, "humidity": self.humidity},
            "wind": {"speed": self.wind_speed},
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "condition": self.condition,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
        }


@dataclass(frozen=True)
class ForecastEntry:
    timestamp: str
    temperature: float
    condition: str

    @classmethod
    def from_payload(cls, sample: ForecastSamplePayload) -> "ForecastEntry":
        return cls(
            timestamp=sample.dt_txt,
            temperature=sample.main.temp,
            condition=sample.weather[0].main,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "temperature": self.temperature,
            "condition": self.condition,
        }


# === QueryResult variants ===

@dataclass(frozen=True)
class Idle:
    """Nothing searched yet, or the search box was cleared."""

    status = "idle"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class Pending:
    status = "pending"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class Found:
    conditions: CurrentConditions
    forecast: Tuple[ForecastEntry, ...] = field(default_factory=tuple)

    status = "found"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "conditions": self.conditions.to_dict(),
            "forecast": [entry.to_dict() for entry in self.forecast],
        }


@dataclass(frozen=True)
class NotFound:
    status = "not_found"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}
