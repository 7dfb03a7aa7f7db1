#!/usr/bin/env python3

"""
Device activity over the hours of the day

Reads the MAC addresses of known devices from a spreadsheet, looks for
them in one capture file or a folder of daily captures, and draws how
active each device (or each day) was per hour. In folder mode the daily
profiles of one device can also be collapsed into a median day.
"""

import argparse
import logging
import sys

from .analysis import ActivityAnalyzer, check_single_device
from .config import (
    LOG_LEVELS,
    TITLE_DAILY_ACTIVITY,
    TITLE_DEVICE_ACTIVITY,
    TITLE_MEDIAN_ACTIVITY,
)
from .directory import load_address_directory
from .errors import DeviceActivityError, InvalidSelectionError, UnwritableOutputError
from .plot import plot_device_activity, plot_device_activity_median
from .stats import activity_table, calculate_hourly_medians, median_table

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="device-activity",
        description="Analyze device activity in a PCAP file or folder",
    )
    parser.add_argument("--device-file", "-d", required=True,
                        help="Excel (or CSV) file listing devices and their MAC addresses")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--pcap-file", "-p",
                        help="PCAP file to analyze for device activity")
    source.add_argument("--pcap-folder", "-P",
                        help="Folder of daily PCAP files to analyze for a single device's activity")

    parser.add_argument("--output-file", "-o", required=True,
                        help="Output file for the generated graph")
    parser.add_argument("--median", action="store_true",
                        help="Graph the median day instead of comparing days (folder mode only)")
    parser.add_argument("--verbose", "-v", type=int, default=1, choices=sorted(LOG_LEVELS),
                        help="Verbosity level (default: 1)")
    parser.add_argument("--selected-device", "-s", action="append", default=[],
                        help="Device to analyze (can be repeated)")
    parser.add_argument("--export", metavar="CSV",
                        help="Also write the hourly counts behind the graph to a CSV file")
    return parser


def configure_logging(verbose):
    logging.basicConfig(level=LOG_LEVELS[verbose], format="%(message)s")
    logging.getLogger("scapy.runtime").setLevel(logging.ERROR)


def run(args):
    """Run one analysis; raises DeviceActivityError on failure"""
    if args.pcap_folder:
        check_single_device(args.selected_device)

    log.info("Starting analysis...")
    directory = load_address_directory(args.device_file, args.selected_device)
    analyzer = ActivityAnalyzer(directory)

    if args.pcap_file:
        activity = analyzer.analyze_pcap(args.pcap_file)
        table = activity_table(activity)
        plot_device_activity(activity, args.output_file, TITLE_DEVICE_ACTIVITY)
    elif args.median:
        hourly_samples = analyzer.analyze_folder_median(args.pcap_folder)
        medians = calculate_hourly_medians(hourly_samples)
        table = median_table(medians, args.selected_device[0])
        plot_device_activity_median(
            medians, args.output_file, TITLE_MEDIAN_ACTIVITY, args.selected_device[0]
        )
    else:
        daily_activity = analyzer.analyze_folder(args.pcap_folder)
        table = activity_table(daily_activity)
        plot_device_activity(daily_activity, args.output_file, TITLE_DAILY_ACTIVITY)

    if args.export:
        try:
            table.to_csv(args.export)
        except OSError as e:
            raise UnwritableOutputError(f"Impossible to write {args.export}: {e}") from e
        log.info("Hourly counts exported to %s", args.export)

    return table


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.median and args.pcap_file:
        parser.error("--median can only be used with --pcap-folder")

    configure_logging(args.verbose)

    try:
        run(args)
    except InvalidSelectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except DeviceActivityError as e:
        log.error("Analysis failed: %s", e)
        return 1

    print(f"Graph saved to {args.output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
