"""
Tests for device_activity

Test coverage:
- Frame decoding and hour-of-day derivation
- Address table loading and case-insensitive lookups
- Per-device and per-hour accumulation
- Single file and folder aggregation (comparative and median)
- Median reduction and hourly bucketing
- Chart rendering and the command line
"""
