"""Accumulation strategies for device activity events"""

from abc import ABC, abstractmethod

from .config import HOURS_PER_DAY


def _check_hour(hour):
    if not 0 <= hour < HOURS_PER_DAY:
        raise ValueError(f"Hour out of range: {hour}")


class ActivityRecorder(ABC):
    """Receives one (device, hour) event per matched address"""

    @abstractmethod
    def record(self, device: str, hour: int) -> None:
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass


class DeviceHoursRecorder(ActivityRecorder):
    """Keeps the ordered hours of activity for each device"""

    def __init__(self):
        self._activity = {}
        self._hours = []

    def record(self, device, hour):
        _check_hour(hour)
        self._activity.setdefault(device, []).append(hour)
        self._hours.append(hour)

    def is_empty(self):
        return not self._hours

    @property
    def activity(self):
        """Device -> hours, devices sorted by name"""
        return {device: list(self._activity[device]) for device in sorted(self._activity)}

    @property
    def hours(self):
        """Every recorded hour in arrival order, whatever the device"""
        return list(self._hours)


class HourlyCountRecorder(ActivityRecorder):
    """Counts events per hour of day irrespective of the device"""

    def __init__(self):
        self._counts = [0] * HOURS_PER_DAY

    def record(self, device, hour):
        _check_hour(hour)
        self._counts[hour] += 1

    def is_empty(self):
        return not any(self._counts)

    @property
    def counts(self):
        return list(self._counts)
