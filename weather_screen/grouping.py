import math
from typing import Dict, Iterable, List, Sequence, Tuple

from .config import DAILY_SUMMARY_DAYS, HOURLY_DETAIL_SAMPLES
from .models import ForecastSample


DayBucket = List[ForecastSample]


def group_by_day(samples: Iterable[ForecastSample]) -> List[DayBucket]:
    """
    Split a time-ordered run of forecast samples into one bucket per calendar date.

    Buckets come out in the order their date first appears, and samples keep
    their input order inside a bucket.
    """
    grouped: Dict[str, DayBucket] = {}
    for sample in samples:
        grouped.setdefault(sample.date_key, []).append(sample)
    return list(grouped.values())


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def min_max_temp(bucket: Sequence[ForecastSample]) -> Tuple[int, int]:
    """Lowest and highest temperature of a day, rounded to whole degrees."""
    if not bucket:
        raise ValueError("Cannot compute min/max of an empty day")
    temps = [s.temp for s in bucket]
    return round_half_up(min(temps)), round_half_up(max(temps))


def daily_summary(buckets: Sequence[DayBucket]) -> List[DayBucket]:
    return list(buckets[:DAILY_SUMMARY_DAYS])


def hourly_detail(bucket: Sequence[ForecastSample]) -> List[ForecastSample]:
    return list(bucket[:HOURLY_DETAIL_SAMPLES])
