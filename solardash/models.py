"""Data models for dashboard records and chart payloads."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple

SECONDS_PER_DAY = 24 * 3600


class FilterSelector(Enum):
    """Trailing time window applied to fetched records."""
    LAST_7_DAYS = "last-7-days"
    LAST_30_DAYS = "last-30-days"
    LAST_90_DAYS = "last-90-days"
    LAST_180_DAYS = "last-180-days"
    LAST_365_DAYS = "last-365-days"
    LIFETIME = "lifetime"

    @property
    def window_seconds(self):
        """Window length in seconds, or None for lifetime."""
        return _WINDOW_DAYS[self] * SECONDS_PER_DAY if self in _WINDOW_DAYS else None

    @property
    def label(self):
        return _SELECTOR_LABELS[self]


_WINDOW_DAYS = {
    FilterSelector.LAST_7_DAYS: 7,
    FilterSelector.LAST_30_DAYS: 30,
    FilterSelector.LAST_90_DAYS: 90,
    FilterSelector.LAST_180_DAYS: 180,
    FilterSelector.LAST_365_DAYS: 365,
}

_SELECTOR_LABELS = {
    FilterSelector.LAST_7_DAYS: "Last 7 Days",
    FilterSelector.LAST_30_DAYS: "Last 30 Days",
    FilterSelector.LAST_90_DAYS: "Last 90 Days",
    FilterSelector.LAST_180_DAYS: "Last 180 Days",
    FilterSelector.LAST_365_DAYS: "Last 1 Year",
    FilterSelector.LIFETIME: "Lifetime",
}

DEFAULT_FILTER = FilterSelector.LAST_7_DAYS


class SeriesKey(Enum):
    """Consumption measurements. Declaration order is the display priority."""
    LOAD = "load"
    SOLAR = "solar"
    GRID = "grid"

    @property
    def color(self):
        return _SERIES_COLORS[self]

    @property
    def title(self):
        return f"{self.value.title()} (kW)"


_SERIES_COLORS = {
    SeriesKey.LOAD: "rgba(255, 99, 132, 0.5)",
    SeriesKey.SOLAR: "rgba(255, 206, 86, 0.5)",
    SeriesKey.GRID: "rgba(75, 192, 192, 0.5)",
}

ENERGY_COLOR = "rgba(53, 162, 235, 0.5)"

# A SeriesSelection is a frozenset of SeriesKey members.
ALL_SERIES = frozenset(SeriesKey)


@dataclass(frozen=True)
class TimedRecord:
    """A single reading as returned by the remote API."""
    time: float
    values: Mapping[str, float] = field(default_factory=dict)

    def __getitem__(self, key):
        return self.values.get(key)


@dataclass(frozen=True)
class Dataset:
    name: str
    values: Tuple[Optional[float], ...]
    color: str

    def as_dict(self):
        return {
            "label": self.name,
            "data": list(self.values),
            "backgroundColor": self.color,
        }


@dataclass(frozen=True)
class ChartPayload:
    """Renderer-ready chart data: labels plus one or more datasets."""
    labels: Tuple = ()
    datasets: Tuple[Dataset, ...] = ()

    def as_dict(self):
        """Return the payload in the shape consumed by the presentation layer."""
        return {
            "labels": list(self.labels),
            "datasets": [dataset.as_dict() for dataset in self.datasets],
        }


class FetchError(Exception):
    """Base class for failures fetching remote records."""


class NetworkError(FetchError):
    """The request failed or returned a non-200 status."""


class ParseError(FetchError):
    """The response body was not a JSON array of records."""


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single fetch. `error` is None on success."""
    records: Tuple[TimedRecord, ...] = ()
    error: Optional[FetchError] = None

    @property
    def ok(self):
        return self.error is None
