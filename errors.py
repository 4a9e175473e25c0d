# errors.py
"""Failures raised by the weather client.

Every lookup failure ends up as a ``NotFound`` result for the user; the
subclasses only exist so the logs say what actually went wrong.
"""


class WeatherError(Exception):
    """Base class for a failed lookup."""


class ProviderError(WeatherError):
    """Network failure, transport error or a body that is not JSON."""


class PlaceNotFound(WeatherError):
    """The provider answered with a ``cod`` other than 200."""

    def __init__(self, place, code):
        super().__init__(f"{place!r} not found (cod={code})")
        self.place = place
        self.code = code


class PayloadError(WeatherError):
    """The response did not match the expected schema."""
