import logging

HOURS_PER_DAY = 24

# Capture files picked up in folder mode
CAPTURE_EXTENSIONS = (".pcap", ".pcapng")

# dst (6) + src (6) + ethertype (2)
ETHER_HEADER_LEN = 14

# Address table layout (0-based, after the header row)
DEVICE_COLUMN = 1
ADDRESS_COLUMN = 2
EXCEL_EXTENSIONS = (".xlsx", ".xlsm", ".xls")

# Chart output
FIGURE_SIZE = (12.8, 7.2)
FIGURE_DPI = 100
Y_AXIS_STEP = 10

TITLE_DEVICE_ACTIVITY = "Device Activity"
TITLE_DAILY_ACTIVITY = "Daily Device Activity"
TITLE_MEDIAN_ACTIVITY = "Median Daily Device Activity"

LOG_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}
