# tests/conftest.py
import threading
from datetime import datetime, timedelta

import pytest

from errors import PlaceNotFound, ProviderError
from last_query import LastQueryStore
from models import CurrentConditions, ForecastEntry


def cairo_payload():
    return {
        "cod": 200,
        "name": "Cairo",
        "main": {"temp": 28.4, "humidity": 40},
        "weather": [{"main": "Clear"}],
        "wind": {"speed": 3.1},
    }


def forecast_payload(days=5, start="2026-10-18 00:00:00"):
    """Provider-shaped forecast: 8 samples per day, 3 hours apart."""
    first = datetime.strptime(start, "%Y-%m-%d %H:%M:%S")
    samples = []
    for i in range(days * 8):
        stamp = first + timedelta(hours=3 * i)
        samples.append({
            "dt_txt": stamp.strftime("%Y-%m-%d %H:%M:%S"),
            "main": {"temp": 20.0 + i / 10},
            "weather": [{"main": "Clouds" if stamp.hour == 12 else "Clear"}],
        })
    return {"cod": "200", "cnt": len(samples), "list": samples}


def make_conditions(name="Cairo", temperature=28.4):
    return CurrentConditions(name=name, condition="Clear", temperature=temperature, humidity=40, wind_speed=3.1)


def make_samples(days=5):
    return [
        ForecastEntry(timestamp=s["dt_txt"], temperature=s["main"]["temp"], condition=s["weather"][0]["main"])
        for s in forecast_payload(days)["list"]
    ]


class FakeClient:
    """Stands in for OpenWeatherClient; counts calls per endpoint."""

    def __init__(self, known=("Cairo",), forecast_error=False):
        self.known = set(known)
        self.forecast_error = forecast_error
        self.current_calls = []
        self.forecast_calls = []
        self.gates = {}

    def hold(self, place):
        """Blocks ``current(place)`` until the returned gate's ``release`` is set."""
        gate = (threading.Event(), threading.Event())
        self.gates[place] = gate
        return gate

    def current(self, place):
        self.current_calls.append(place)
        if place in self.gates:
            started, release = self.gates[place]
            started.set()
            release.wait(5)
        if place not in self.known:
            raise PlaceNotFound(place, "404")
        return make_conditions(name=place)

    def forecast(self, place):
        self.forecast_calls.append(place)
        if self.forecast_error:
            raise ProviderError("connection reset")
        return make_samples()


@pytest.fixture
def store(tmp_path):
    return LastQueryStore(tmp_path / "last_query.db")


@pytest.fixture
def client():
    return FakeClient()
