"""
Device activity analysis

Drives capture files through the frame decoder and the address directory,
recording at which hour of the day each known device sent or received
traffic. Single files give a per-device view; folders of daily captures
give either a per-day view or the samples for a median daily profile.
"""

import logging
from pathlib import Path

from .capture import decode_packet, read_capture
from .config import CAPTURE_EXTENSIONS
from .errors import InvalidSelectionError, UnreadableInputError
from .recorder import DeviceHoursRecorder, HourlyCountRecorder

log = logging.getLogger(__name__)


def check_single_device(selected_devices):
    """Folder analysis follows exactly one device"""
    if len(selected_devices or []) != 1:
        raise InvalidSelectionError(
            "For folder analysis, please select exactly one device "
            f"({len(selected_devices or [])} selected)"
        )


def list_capture_files(folder):
    """Capture files directly inside ``folder``, sorted by name"""
    folder = Path(folder)
    if not folder.is_dir():
        raise UnreadableInputError(f"Failed to read directory {folder}")

    try:
        entries = sorted(folder.iterdir())
    except OSError as e:
        raise UnreadableInputError(f"Failed to read directory {folder}: {e}") from e

    return [
        path for path in entries
        if path.is_file() and path.suffix.lower() in CAPTURE_EXTENSIONS
    ]


class ActivityAnalyzer:
    """Hour-of-day activity of the devices listed in an address directory"""

    def __init__(self, directory):
        self.directory = directory

    def analyze_capture(self, pcap_file, recorder):
        """Feed every matched address of one capture into ``recorder``"""
        frames = 0
        matched = 0

        for packet in read_capture(pcap_file):
            frame = decode_packet(packet)
            if frame is None:
                continue
            frames += 1

            for role, mac in (("sent", frame.source), ("received", frame.destination)):
                device = self.directory.lookup(mac)
                if device is None:
                    continue
                recorder.record(device, frame.hour)
                matched += 1
                log.debug("Device '%s' %s data at hour %d", device, role, frame.hour)

        log.debug("%s: %d frames, %d device events", pcap_file, frames, matched)
        return recorder

    def analyze_pcap(self, pcap_file):
        """
        Analyze a single capture file for device activity

        Returns:
            dict: device -> hours of activity, devices sorted by name
        """
        log.info("Analyzing PCAP file: %s", pcap_file)
        recorder = self.analyze_capture(pcap_file, DeviceHoursRecorder())
        return recorder.activity

    def analyze_folder(self, folder):
        """
        Analyze every capture of a folder, one entry per day

        Each file is a day labelled by its base name. Files sharing a label
        (day1.pcap and day1.pcapng) are merged into one day. Files without
        any activity are left out.

        Returns:
            dict: day label -> hours of activity, labels sorted
        """
        log.info("Analyzing PCAP files in folder: %s", folder)
        daily_activity = {}

        for pcap_file in list_capture_files(folder):
            recorder = self.analyze_capture(pcap_file, DeviceHoursRecorder())
            if recorder.is_empty():
                log.info("  %s: no activity", pcap_file.name)
                continue
            if pcap_file.stem in daily_activity:
                log.warning("  %s: day '%s' already seen, merging", pcap_file.name, pcap_file.stem)
            daily_activity.setdefault(pcap_file.stem, []).extend(recorder.hours)
            log.info("  %s: %d events", pcap_file.name, len(recorder.hours))

        log.info("Finished analyzing folder.")
        return dict(sorted(daily_activity.items()))

    def analyze_folder_median(self, folder):
        """
        Collect per-file hourly counts for a median daily profile

        Every file contributes one count to each hour, 0 included.

        Returns:
            dict: hour -> list of counts, one per capture file
        """
        log.info("Analyzing PCAP files in folder for median: %s", folder)
        hourly_samples = {}

        for pcap_file in list_capture_files(folder):
            recorder = self.analyze_capture(pcap_file, HourlyCountRecorder())
            for hour, count in enumerate(recorder.counts):
                hourly_samples.setdefault(hour, []).append(count)
            log.info("  %s: %d events", pcap_file.name, sum(recorder.counts))

        log.info("Finished analyzing folder for median.")
        return hourly_samples
