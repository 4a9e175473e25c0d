# state.py
import logging
import threading
from dataclasses import dataclass
from typing import Union

from models import Found, Idle, NotFound, Pending

logger = logging.getLogger("state")

QueryResult = Union[Idle, Pending, Found, NotFound]


@dataclass(frozen=True)
class DashboardState:
    result: QueryResult
    searched: bool = False
    generation: int = 0

    def to_dict(self):
        data = self.result.to_dict()
        data["searched"] = self.searched
        data["generation"] = self.generation
        return data


class ResultState:
    """
    Holds the one observable ``QueryResult`` of the dashboard.

    Every request takes a generation from ``begin()``; ``settle()`` only
    publishes a result whose generation is still the latest, so an older
    fetch finishing late cannot overwrite a newer one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = DashboardState(result=Idle())

    @property
    def current(self) -> DashboardState:
        with self._lock:
            return self._state

    def begin(self, keep_result: bool = False) -> int:
        """Starts a request: new generation, ``Pending`` unless ``keep_result``."""
        with self._lock:
            generation = self._state.generation + 1
            result = self._state.result if keep_result else Pending()
            self._state = DashboardState(result=result, searched=self._state.searched, generation=generation)
            return generation

    def settle(self, generation: int, result: QueryResult) -> bool:
        with self._lock:
            if generation != self._state.generation:
                logger.debug("Dropping result of generation %s (latest is %s)", generation, self._state.generation)
                return False
            self._state = DashboardState(result=result, searched=True, generation=generation)
            return True

    def show(self, result: QueryResult):
        """Displays ``result`` without starting a request (cached snapshot)."""
        with self._lock:
            self._state = DashboardState(result=result, searched=True, generation=self._state.generation)

    def clear(self):
        """Back to the initial placeholder; outstanding requests are superseded."""
        with self._lock:
            self._state = DashboardState(result=Idle(), searched=False, generation=self._state.generation + 1)
