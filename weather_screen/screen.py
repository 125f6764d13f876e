import logging

from . import services
from .config import DEFAULT_CITY
from .errors import LookupFailure
from .state import (
    Action,
    CityChanged,
    DayClosed,
    DaySelected,
    LookupFailed,
    LookupStarted,
    LookupSucceeded,
    ScreenState,
    reduce,
)

logger = logging.getLogger(__name__)


class ScreenSession:
    """Holds the state of one weather screen and runs lookups against it."""

    def __init__(self, city: str = DEFAULT_CITY):
        self.state = ScreenState(city=city)

    @property
    def started(self) -> bool:
        return self.state.generation > 0

    def dispatch(self, action: Action) -> ScreenState:
        self.state = reduce(self.state, action)
        return self.state

    async def search(self, city: str) -> ScreenState:
        """Look up a new city. Blank input leaves the screen untouched."""
        if not city.strip():
            return self.state
        self.dispatch(CityChanged(city=city))
        return await self._run_lookup(refreshing=False)

    async def refresh(self) -> ScreenState:
        """Re-issue the lookup for the city currently entered."""
        return await self._run_lookup(refreshing=True)

    async def ensure_started(self) -> ScreenState:
        if not self.started:
            return await self._run_lookup(refreshing=False)
        return self.state

    def select_day(self, index: int) -> ScreenState:
        return self.dispatch(DaySelected(index=index))

    def close_day(self) -> ScreenState:
        return self.dispatch(DayClosed())

    async def _run_lookup(self, refreshing: bool) -> ScreenState:
        self.dispatch(LookupStarted(refreshing=refreshing))
        generation = self.state.generation
        city = self.state.city.strip()
        try:
            current, forecast = await services.lookup(city)
        except LookupFailure as e:
            logger.warning(f"Lookup for {city!r} failed: {e}")
            return self.dispatch(LookupFailed(generation=generation))
        except BaseException:
            # cancelled or interrupted: leave the screen out of its loading state
            self.dispatch(LookupFailed(generation=generation))
            raise
        return self.dispatch(
            LookupSucceeded(generation=generation, current=current, forecast=forecast)
        )
