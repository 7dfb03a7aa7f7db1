"""
Hardware address directory

Maps normalized MAC addresses to the human readable device names listed
in the address table. The directory is built once per run and shared,
read-only, by every capture analysis.
"""

import logging
import os
import zipfile
from collections.abc import Mapping

import pandas as pd

from .config import ADDRESS_COLUMN, DEVICE_COLUMN, EXCEL_EXTENSIONS
from .errors import UnreadableInputError

log = logging.getLogger(__name__)


def normalize_mac(mac):
    """Lowercase colon-separated form used for every lookup"""
    return str(mac).strip().lower().replace("-", ":")


class AddressDirectory(Mapping):
    """Immutable MAC address -> device name mapping"""

    def __init__(self, entries=()):
        mapping = {}
        for mac, device in entries:
            mac = normalize_mac(mac)
            previous = mapping.get(mac)
            if previous is not None and previous != device:
                log.warning(
                    "Address %s listed for both '%s' and '%s', keeping '%s'",
                    mac, previous, device, device,
                )
            mapping[mac] = device
        self._mapping = mapping

    def __getitem__(self, mac):
        return self._mapping[normalize_mac(mac)]

    def __iter__(self):
        return iter(self._mapping)

    def __len__(self):
        return len(self._mapping)

    def __repr__(self):
        return f"AddressDirectory({len(self)} addresses, {len(self.devices)} devices)"

    def lookup(self, mac):
        """Device name for ``mac`` or None when the address is unknown"""
        return self._mapping.get(normalize_mac(mac))

    @property
    def devices(self):
        return sorted(set(self._mapping.values()))

    def restrict(self, devices):
        """New directory holding only the addresses of ``devices``"""
        wanted = set(devices)
        return AddressDirectory(
            (mac, device) for mac, device in self._mapping.items() if device in wanted
        )


def read_address_table(path):
    """Read the address table into a DataFrame (header row dropped)"""
    ext = os.path.splitext(str(path))[1].lower()
    try:
        if ext in EXCEL_EXTENSIONS:
            table = pd.read_excel(path, sheet_name=0, header=0, dtype=str)
        else:
            table = pd.read_csv(path, header=0, dtype=str)
    except (OSError, ValueError, ImportError, zipfile.BadZipFile) as e:
        raise UnreadableInputError(f"Impossible to read the address table {path}: {e}") from e

    if table.shape[1] <= max(DEVICE_COLUMN, ADDRESS_COLUMN):
        raise UnreadableInputError(
            f"Address table {path} needs at least {ADDRESS_COLUMN + 1} columns, "
            f"found {table.shape[1]}"
        )
    return table


def load_address_directory(path, selected_devices=None):
    """
    Load MAC addresses from a spreadsheet

    Column 2 holds the device name and column 3 its MAC address. Rows with
    either cell empty are skipped. When ``selected_devices`` is given only
    those devices are kept.

    Returns:
        AddressDirectory
    """
    log.debug("Reading address table: %s", path)
    table = read_address_table(path)

    rows = table.iloc[:, [DEVICE_COLUMN, ADDRESS_COLUMN]].dropna()

    entries = []
    for device, mac in rows.itertuples(index=False, name=None):
        device = device.strip()
        mac = normalize_mac(mac)
        if not device or not mac:
            continue
        entries.append((mac, device))

    directory = AddressDirectory(entries)
    if selected_devices:
        directory = directory.restrict(selected_devices)
    for mac, device in directory.items():
        log.debug("Loaded device: %s -> %s", device, mac)
    log.info("Loaded MAC addresses for %d devices", len(directory))
    return directory
