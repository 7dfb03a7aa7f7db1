"""Exceptions raised while building device activity statistics"""


class DeviceActivityError(Exception):
    """Base class for every fatal analysis error"""


class UnreadableInputError(DeviceActivityError):
    """The address table or a capture file cannot be opened or parsed"""


class CorruptRecordError(DeviceActivityError):
    """A capture record carries a timestamp that is not a valid instant"""


class InvalidSelectionError(DeviceActivityError):
    """The selected devices do not fit the requested analysis mode"""


class UnwritableOutputError(DeviceActivityError):
    """The chart or the exported table cannot be written"""
