"""Synthetic captures for the tests"""

from scapy.layers.inet import IP, UDP
from scapy.layers.l2 import Ether
from scapy.utils import wrpcap, wrpcapng

# 2024-01-01 00:00:00 UTC
DAY_START = 1704067200

LAPTOP = "aa:bb:cc:00:00:01"
PHONE = "aa:bb:cc:00:00:02"
STRANGER = "de:ad:be:ef:00:99"
BROADCAST = "ff:ff:ff:ff:ff:ff"


def at_hour(hour, minute=0, day=0):
    return DAY_START + day * 86400 + hour * 3600 + minute * 60


def frame(src, dst, timestamp):
    pkt = Ether(src=src, dst=dst) / IP(dst="192.0.2.1") / UDP(dport=53)
    pkt.time = timestamp
    return pkt


def write_capture(path, packets, **kwargs):
    wrpcap(str(path), packets, **kwargs)
    return path


def write_capture_ng(path, packets):
    wrpcapng(str(path), packets)
    return path
