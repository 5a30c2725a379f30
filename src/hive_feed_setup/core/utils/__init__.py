"""Shared helpers for Hive Feed Setup."""

from .datetime_utils import local_now, utc_now, format_iso, backup_timestamp, header_timestamp

__all__ = ["local_now", "utc_now", "format_iso", "backup_timestamp", "header_timestamp"]
