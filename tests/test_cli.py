from unittest import mock

import pandas as pd
import pytest

from device_activity import cli

from .helpers import BROADCAST, LAPTOP, PHONE, STRANGER, at_hour, frame, write_capture


@pytest.fixture
def capture_folder(tmp_path):
    folder = tmp_path / "captures"
    folder.mkdir()
    write_capture(folder / "monday.pcap", [
        frame(PHONE, BROADCAST, at_hour(8)),
        frame(PHONE, BROADCAST, at_hour(8, minute=5)),
        frame(LAPTOP, PHONE, at_hour(18)),
    ])
    write_capture(folder / "tuesday.pcap", [
        frame(PHONE, STRANGER, at_hour(8)),
        frame(LAPTOP, STRANGER, at_hour(10)),
    ])
    write_capture(folder / "wednesday.pcap", [frame(LAPTOP, STRANGER, at_hour(9))])
    return folder


class TestSingleFile:

    def test_chart_and_export(self, tmp_path, address_table, capsys):
        pcap = write_capture(tmp_path / "day.pcap", [
            frame(LAPTOP, PHONE, at_hour(7)),
            frame(STRANGER, PHONE, at_hour(7)),
        ])
        output = tmp_path / "out.png"
        export = tmp_path / "out.csv"

        status = cli.main([
            "-d", str(address_table), "-p", str(pcap), "-o", str(output),
            "--export", str(export), "-v", "0",
        ])

        assert status == 0
        assert output.exists()
        assert f"Graph saved to {output}" in capsys.readouterr().out
        table = pd.read_csv(export, index_col=0)
        assert list(table.index) == ["laptop", "phone"]
        assert table.loc["phone", "7"] == 2

    def test_unwritable_export(self, tmp_path, address_table):
        pcap = write_capture(tmp_path / "day.pcap", [frame(LAPTOP, PHONE, at_hour(7))])
        status = cli.main([
            "-d", str(address_table), "-p", str(pcap), "-o", str(tmp_path / "out.png"),
            "--export", str(tmp_path / "missing" / "out.csv"),
        ])
        assert status == 1

    def test_unwritable_chart(self, tmp_path, address_table):
        pcap = write_capture(tmp_path / "day.pcap", [frame(LAPTOP, PHONE, at_hour(7))])
        status = cli.main([
            "-d", str(address_table), "-p", str(pcap), "-o", str(tmp_path / "missing" / "out.png"),
        ])
        assert status == 1

    def test_median_rejected_for_single_file(self, tmp_path, address_table):
        with pytest.raises(SystemExit) as exc:
            cli.main(["-d", str(address_table), "-p", "x.pcap", "-o", "x.png", "--median"])
        assert exc.value.code == 2

    def test_file_and_folder_are_exclusive(self, address_table):
        with pytest.raises(SystemExit):
            cli.main(["-d", str(address_table), "-p", "x.pcap", "-P", "dir", "-o", "x.png"])

    def test_unreadable_capture(self, tmp_path, address_table):
        pcap = tmp_path / "day.pcap"
        pcap.write_bytes(b"garbage garbage garbage")
        output = tmp_path / "out.png"
        status = cli.main(["-d", str(address_table), "-p", str(pcap), "-o", str(output)])
        assert status == 1
        assert not output.exists()


class TestFolder:

    def test_daily_comparison(self, tmp_path, address_table, capture_folder):
        output = tmp_path / "daily.png"
        export = tmp_path / "daily.csv"
        status = cli.main([
            "-d", str(address_table), "-P", str(capture_folder), "-o", str(output),
            "-s", "phone", "--export", str(export),
        ])

        assert status == 0
        table = pd.read_csv(export, index_col=0)
        assert list(table.index) == ["monday", "tuesday"]
        assert table.loc["monday", "8"] == 2
        assert table.loc["monday", "18"] == 1
        assert table.loc["tuesday", "8"] == 1

    def test_median_profile(self, tmp_path, address_table, capture_folder):
        output = tmp_path / "median.png"
        export = tmp_path / "median.csv"
        status = cli.main([
            "-d", str(address_table), "-P", str(capture_folder), "-o", str(output),
            "-s", "phone", "--median", "--export", str(export),
        ])

        assert status == 0
        assert output.exists()
        medians = pd.read_csv(export, index_col=0)["phone"].tolist()
        # hour 8 samples are [2, 1, 0], hour 18 samples are [1, 0, 0]
        assert medians[8] == 1
        assert medians[18] == 0
        assert sum(medians) == 1

    @pytest.mark.parametrize("selection", [[], ["-s", "phone", "-s", "laptop"]])
    def test_selection_checked_before_any_io(self, tmp_path, selection, capsys):
        with mock.patch.object(cli, "load_address_directory") as load, \
                mock.patch("device_activity.analysis.read_capture") as read:
            status = cli.main([
                "-d", str(tmp_path / "missing.xlsx"), "-P", str(tmp_path / "missing"),
                "-o", str(tmp_path / "out.png"), "--median", *selection,
            ])

        assert status == 2
        load.assert_not_called()
        read.assert_not_called()
        assert "exactly one device" in capsys.readouterr().err

    def test_missing_folder(self, tmp_path, address_table):
        status = cli.main([
            "-d", str(address_table), "-P", str(tmp_path / "missing"),
            "-o", str(tmp_path / "out.png"), "-s", "phone",
        ])
        assert status == 1
