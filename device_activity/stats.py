"""Hourly bucketing and median profiles"""

import numpy as np
import pandas as pd

from .config import HOURS_PER_DAY


def count_hourly_activity(hours):
    """Number of events in each of the 24 hours of the day"""
    counts = np.bincount(np.asarray(list(hours), dtype=np.int64), minlength=HOURS_PER_DAY)
    if counts.size > HOURS_PER_DAY:
        raise ValueError(f"Hour out of range: {counts.size - 1}")
    return counts.tolist()


def median(samples):
    """
    Integer median of a collection of counts

    Even-sized collections take the floor of the mean of the two central
    values, so [1, 2] gives 1. An empty collection gives 0.
    """
    ordered = sorted(samples)
    if not ordered:
        return 0
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) // 2
    return ordered[mid]


def calculate_hourly_medians(hourly_samples):
    """Collapse hour -> per-file counts into a 24-length median profile"""
    return [median(hourly_samples.get(hour, ())) for hour in range(HOURS_PER_DAY)]


def activity_table(activity):
    """
    Hourly counts for every label of a comparative dataset

    Args:
        activity: mapping label -> sequence of hours

    Returns:
        DataFrame indexed by label with one column per hour (0-23)
    """
    rows = {label: count_hourly_activity(hours) for label, hours in activity.items()}
    table = pd.DataFrame.from_dict(
        rows, orient="index", columns=list(range(HOURS_PER_DAY)), dtype="int64"
    )
    table.index.name = "label"
    table.columns.name = "hour"
    return table


def median_table(medians, device):
    """Median profile as a one-column DataFrame indexed by hour"""
    table = pd.DataFrame({device: list(medians)}, index=range(HOURS_PER_DAY))
    table.index.name = "hour"
    return table
