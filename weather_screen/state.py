"""
Screen state for the weather lookup screen.

All changes go through reduce(): each action produces a new ScreenState.
A lookup moves the state from loading to either success (both results) or
failure (both results cleared) in a single step.
"""

import logging
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_CITY, LOOKUP_FAILED_MESSAGE
from .grouping import DayBucket, daily_summary, group_by_day
from .models import CurrentConditions, ForecastResult

logger = logging.getLogger(__name__)


class ScreenState(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = DEFAULT_CITY
    current: Optional[CurrentConditions] = None
    forecast: Optional[ForecastResult] = None
    selected_day: Optional[int] = None
    loading: bool = False
    refreshing: bool = False
    error: str = ""
    generation: int = 0

    @property
    def days(self) -> List[DayBucket]:
        if self.forecast is None:
            return []
        return group_by_day(self.forecast.samples)

    @property
    def selected_bucket(self) -> Optional[DayBucket]:
        if self.selected_day is None:
            return None
        return daily_summary(self.days)[self.selected_day]


# ---------------------------- Actions ---------------------------------

class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class CityChanged(_Action):
    city: str


class LookupStarted(_Action):
    refreshing: bool = False


class LookupSucceeded(_Action):
    generation: int
    current: CurrentConditions
    forecast: ForecastResult


class LookupFailed(_Action):
    generation: int


class DaySelected(_Action):
    index: int


class DayClosed(_Action):
    pass


Action = Union[CityChanged, LookupStarted, LookupSucceeded, LookupFailed, DaySelected, DayClosed]


# ---------------------------- Reducer ---------------------------------

def reduce(state: ScreenState, action: Action) -> ScreenState:
    if isinstance(action, CityChanged):
        return state.model_copy(update={"city": action.city})

    if isinstance(action, LookupStarted):
        return state.model_copy(update={
            "loading": True,
            "refreshing": action.refreshing,
            "generation": state.generation + 1,
        })

    if isinstance(action, (LookupSucceeded, LookupFailed)):
        if action.generation != state.generation:
            # a newer lookup was started after this one
            logger.debug(f"Discarding stale lookup {action.generation} (latest {state.generation})")
            return state

        if isinstance(action, LookupSucceeded):
            return state.model_copy(update={
                "current": action.current,
                "forecast": action.forecast,
                "error": "",
                "selected_day": None,
                "loading": False,
                "refreshing": False,
            })
        return state.model_copy(update={
            "current": None,
            "forecast": None,
            "error": LOOKUP_FAILED_MESSAGE,
            "selected_day": None,
            "loading": False,
            "refreshing": False,
        })

    if isinstance(action, DaySelected):
        if not 0 <= action.index < len(daily_summary(state.days)):
            return state
        return state.model_copy(update={"selected_day": action.index})

    if isinstance(action, DayClosed):
        return state.model_copy(update={"selected_day": None})

    raise TypeError(f"Unknown action: {action!r}")
