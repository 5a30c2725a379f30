"""
Centralized datetime utilities for Hive Feed Setup.

Every timestamp the tool writes goes through this module so tests can
pin the clock by monkeypatching ``local_now``.

Backup names and the generated-file header use local time, matching what
an operator sees from ``date`` on the same host. Error records use UTC.
"""

from datetime import datetime, timezone
from typing import Optional

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
HEADER_TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def local_now() -> datetime:
    """
    Get current local datetime (timezone-aware).

    Returns:
        Current datetime in the host's local timezone
    """
    return datetime.now().astimezone()


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def format_iso(dt: datetime) -> str:
    """
    Format datetime as ISO string with 'Z' suffix for UTC values.

    Example: "2024-01-15T10:30:45.123456Z"
    """
    return dt.isoformat().replace('+00:00', 'Z')


def backup_timestamp(dt: Optional[datetime] = None) -> str:
    """
    Second-resolution stamp used in backup file names.

    Example: "20240115_103045"
    """
    return (dt or local_now()).strftime(BACKUP_TIMESTAMP_FORMAT)


def header_timestamp(dt: Optional[datetime] = None) -> str:
    """Human readable stamp for the generated-file header."""
    return (dt or local_now()).strftime(HEADER_TIMESTAMP_FORMAT)
