"""Capture file reading and link-layer frame decoding"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from scapy.error import Scapy_Exception
from scapy.layers.l2 import Dot3, Ether
from scapy.utils import PcapReader, str2mac

from .config import ETHER_HEADER_LEN
from .errors import CorruptRecordError, UnreadableInputError

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CapturedFrame:
    """Hour of arrival plus both hardware addresses of one frame"""
    hour: int
    source: str
    destination: str


def hour_of_day(timestamp) -> int:
    """Hour (0-23, UTC) of a capture timestamp in seconds since epoch"""
    try:
        return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).hour
    except (OverflowError, OSError, ValueError) as e:
        raise CorruptRecordError(f"Invalid timestamp {timestamp}: {e}") from e


def decode_frame(timestamp, payload: bytes):
    """
    Decode a raw Ethernet frame

    Returns:
        CapturedFrame, or None when the payload is too short to hold an
        Ethernet header
    """
    hour = hour_of_day(timestamp)

    if len(payload) < ETHER_HEADER_LEN:
        return None

    return CapturedFrame(
        hour=hour,
        source=str2mac(payload[6:12]),
        destination=str2mac(payload[0:6]),
    )


def decode_packet(packet):
    """Decode a packet read by scapy; anything but Ethernet is skipped"""
    if not isinstance(packet, (Ether, Dot3)):
        # timestamps are validated for every record, decodable or not
        hour_of_day(packet.time)
        return None
    return decode_frame(packet.time, bytes(packet))


def read_capture(path):
    """Yield every packet of a pcap/pcapng file in on-disk order"""
    try:
        reader = PcapReader(str(path))
    except (OSError, Scapy_Exception) as e:
        raise UnreadableInputError(f"Impossible to read the capture file {path}: {e}") from e

    with reader:
        log.debug("Reading capture %s (linktype %s)", path, getattr(reader, "linktype", "?"))
        try:
            yield from reader
        except Scapy_Exception as e:
            raise UnreadableInputError(f"Malformed capture file {path}: {e}") from e
