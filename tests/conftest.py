import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from device_activity.directory import AddressDirectory

from .helpers import LAPTOP, PHONE


@pytest.fixture
def directory():
    return AddressDirectory([(LAPTOP, "laptop"), (PHONE, "phone")])


@pytest.fixture
def address_table(tmp_path):
    """Spreadsheet in the layout the loader expects"""
    path = tmp_path / "devices.xlsx"
    pd.DataFrame({
        "Owner": ["alice", "bob", "carol"],
        "Device": ["laptop", "phone", "tv"],
        "MAC": ["AA:BB:CC:00:00:01", "aa:bb:cc:00:00:02", "AA:BB:CC:00:00:03"],
    }).to_excel(path, index=False)
    return path
