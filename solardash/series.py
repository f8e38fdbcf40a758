"""Builders that reshape filtered records into chart payloads."""

from .models import (
    ENERGY_COLOR,
    ChartPayload,
    Dataset,
    FilterSelector,
    SeriesKey,
)
from .utils import filter_by_time, format_date_label, format_time_label


def build_series(records, label_fn, value_key, dataset_name, color):
    """Build a single-dataset payload from already filtered records.

    Args:
        records: Filtered sequence of TimedRecord
        label_fn: Maps a record timestamp to a display label
        value_key: Measurement to plot
        dataset_name: Legend name of the dataset
        color: Bar colour

    Returns:
        ChartPayload: One dataset, one label per record
    """
    labels = tuple(label_fn(record.time) for record in records)
    values = tuple(record[value_key] for record in records)
    return ChartPayload(labels=labels, datasets=(Dataset(dataset_name, values, color),))


def build_multi_series(records, selection, now, selector=FilterSelector.LIFETIME):
    """Build a payload with one dataset per selected consumption series.

    Records are filtered by the selector first. Labels are positions
    (1..N) rather than timestamps. Datasets follow the SeriesKey priority
    order (load, solar, grid) whatever order the selection was made in.

    Args:
        records: Sequence of TimedRecord
        selection: Iterable of SeriesKey to show
        now: Current Unix timestamp in seconds
        selector: FilterSelector to apply before building

    Returns:
        ChartPayload: Zero or more datasets sharing the same labels
    """
    filtered = filter_by_time(records, selector, now)
    selected = frozenset(selection)
    labels = tuple(range(1, len(filtered) + 1))
    datasets = tuple(
        Dataset(key.title, tuple(record[key.value] for record in filtered), key.color)
        for key in SeriesKey
        if key in selected
    )
    return ChartPayload(labels=labels, datasets=datasets)


def build_energy_chart(records, selector, now):
    """Energy pipeline: date labels, one Energy dataset."""
    filtered = filter_by_time(records, selector, now)
    return build_series(filtered, format_date_label, "energy", "Energy", ENERGY_COLOR)


def build_load_chart(records, selector, now):
    """Minimal consumption pipeline: time labels, one Load dataset."""
    filtered = filter_by_time(records, selector, now)
    return build_series(filtered, format_time_label, SeriesKey.LOAD.value, "Load", SeriesKey.LOAD.color)
