"""Per-device hour-of-day activity from packet captures"""

from .analysis import ActivityAnalyzer, check_single_device, list_capture_files
from .directory import AddressDirectory, load_address_directory
from .errors import (
    CorruptRecordError,
    DeviceActivityError,
    InvalidSelectionError,
    UnreadableInputError,
    UnwritableOutputError,
)
from .stats import calculate_hourly_medians, count_hourly_activity

__version__ = "0.1.0"
