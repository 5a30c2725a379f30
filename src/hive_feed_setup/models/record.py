"""
Configuration record written to the store and consumed by the feed-price bot.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import ConfigDict, Field, field_validator

from hive_feed_setup.core.validators import (
    is_single_line,
    is_valid_account,
    is_valid_signing_key,
    mask_signing_key,
)
from hive_feed_setup.models.base import FeedSetupBaseModel

DEFAULT_RPC_NODES = (
    "https://api.hive.blog",
    "https://api.deathwing.me",
    "https://api.openhive.network",
)

_DURATION_PATTERN = re.compile(
    r"^(?P<amount>\d+)\s*(?P<unit>m|min|mins|minute|minutes|h|hr|hrs|hour|hours|d|day|days)$",
    re.IGNORECASE | re.ASCII,
)
_UNIT_MINUTES = {"m": 1, "h": 60, "d": 1440}


class FeedInterval(str, Enum):
    """Feed publish intervals understood by the bot runtime, in menu order."""

    THREE_MINUTES = "3min"
    TEN_MINUTES = "10min"
    THIRTY_MINUTES = "30min"
    ONE_HOUR = "1hour"
    SIX_HOURS = "6hour"

    @property
    def minutes(self) -> int:
        return _INTERVAL_MINUTES[self]

    @property
    def label(self) -> str:
        return _INTERVAL_LABELS[self][0]

    @property
    def description(self) -> str:
        return _INTERVAL_LABELS[self][1]

    @property
    def menu_choice(self) -> str:
        """1-based menu number as typed by the operator"""
        return str(list(FeedInterval).index(self) + 1)

    @classmethod
    def default(cls) -> "FeedInterval":
        return cls.TEN_MINUTES

    @classmethod
    def from_menu_choice(cls, choice: str) -> Optional["FeedInterval"]:
        """Menu number ("1".."5") to interval, None when out of range"""
        # Exact menu strings only: "01" or non-ASCII digits are not menu entries
        return {member.menu_choice: member for member in cls}.get(choice.strip())

    @classmethod
    def closest(cls, raw: Optional[str]) -> "FeedInterval":
        """
        Map a stored interval value to a menu entry.

        Exact values map to themselves. Legacy spellings such as "15m",
        "2 hours" or "1d" map to the entry with the nearest duration.
        Anything else maps to the default (10min).
        """
        if not raw:
            return cls.default()

        value = raw.strip()
        for member in cls:
            if member.value == value:
                return member

        match = _DURATION_PATTERN.match(value)
        if not match:
            return cls.default()

        minutes = int(match.group("amount")) * _UNIT_MINUTES[match.group("unit")[0].lower()]
        if minutes <= 0:
            return cls.default()

        # Ties resolve to the shorter interval (menu order)
        return min(cls, key=lambda member: abs(member.minutes - minutes))


_INTERVAL_MINUTES = {
    FeedInterval.THREE_MINUTES: 3,
    FeedInterval.TEN_MINUTES: 10,
    FeedInterval.THIRTY_MINUTES: 30,
    FeedInterval.ONE_HOUR: 60,
    FeedInterval.SIX_HOURS: 360,
}

_INTERVAL_LABELS = {
    FeedInterval.THREE_MINUTES: ("Every 3 minutes", "frequent updates, more resources"),
    FeedInterval.TEN_MINUTES: ("Every 10 minutes", "recommended for most witnesses"),
    FeedInterval.THIRTY_MINUTES: ("Every 30 minutes", "balanced"),
    FeedInterval.ONE_HOUR: ("Every 1 hour", "conservative"),
    FeedInterval.SIX_HOURS: ("Every 6 hours", "minimal updates"),
}


def parse_rpc_nodes(text: Optional[str]) -> List[str]:
    """Split the comma-separated form, keeping order and dropping empty entries"""
    if not text:
        return []
    return [node.strip() for node in text.split(",") if node.strip()]


def join_rpc_nodes(nodes: Iterable[str]) -> str:
    return ",".join(nodes)


class ConfigurationRecord(FeedSetupBaseModel):
    """
    Complete, validated configuration.

    Immutable: a new record is built for every run of the wizard and the
    previous one is superseded as a whole.

    feed_interval and rpc_nodes are plain text on purpose: the quick path
    trusts caller-supplied values for those two fields.
    """

    model_config = ConfigDict(frozen=True)

    witness_account: str
    signing_key: str = Field(repr=False)
    feed_interval: str = FeedInterval.TEN_MINUTES.value
    rpc_nodes: List[str] = Field(default_factory=lambda: list(DEFAULT_RPC_NODES), min_length=1)

    @field_validator("witness_account")
    @classmethod
    def _check_account(cls, value: str) -> str:
        if not is_valid_account(value):
            raise ValueError(f"invalid Hive account name: {value!r}")
        return value

    @field_validator("signing_key")
    @classmethod
    def _check_signing_key(cls, value: str) -> str:
        if not is_valid_signing_key(value):
            raise ValueError("signing key must be a 51 character WIF key starting with 5")
        return value

    @field_validator("feed_interval", mode="before")
    @classmethod
    def _coerce_interval(cls, value):
        if isinstance(value, FeedInterval):
            return value.value
        if isinstance(value, str) and not value.strip():
            raise ValueError("feed interval must not be empty")
        if isinstance(value, str) and not is_single_line(value):
            raise ValueError("feed interval must be a single line")
        return value

    @field_validator("rpc_nodes", mode="before")
    @classmethod
    def _coerce_nodes(cls, value):
        if isinstance(value, str):
            return parse_rpc_nodes(value)
        return value

    @field_validator("rpc_nodes")
    @classmethod
    def _check_nodes(cls, value: List[str]) -> List[str]:
        for node in value:
            if not is_single_line(node):
                raise ValueError(f"RPC node must be a single line: {node!r}")
        return value

    @property
    def masked_key(self) -> str:
        return mask_signing_key(self.signing_key)

    @property
    def rpc_nodes_text(self) -> str:
        return join_rpc_nodes(self.rpc_nodes)


class PartialConfigurationRecord(FeedSetupBaseModel):
    """
    Values found in an existing store, used only as defaults.

    Never validated: a value that would no longer pass is still offered,
    and the operator decides whether to keep it.
    """

    model_config = ConfigDict(frozen=True)

    witness_account: Optional[str] = None
    signing_key: Optional[str] = Field(default=None, repr=False)
    feed_interval: Optional[str] = None
    rpc_nodes: Optional[List[str]] = None

    @property
    def is_empty(self) -> bool:
        return not any((self.witness_account, self.signing_key, self.feed_interval, self.rpc_nodes))

    @property
    def interval_default(self) -> FeedInterval:
        """Menu entry pre-selected for the interval prompt"""
        return FeedInterval.closest(self.feed_interval)

    @property
    def masked_key(self) -> str:
        return mask_signing_key(self.signing_key or "")

    @property
    def rpc_nodes_text(self) -> str:
        return join_rpc_nodes(self.rpc_nodes or [])

    @classmethod
    def from_record(cls, record: ConfigurationRecord) -> "PartialConfigurationRecord":
        return cls(
            witness_account=record.witness_account,
            signing_key=record.signing_key,
            feed_interval=record.feed_interval,
            rpc_nodes=list(record.rpc_nodes),
        )
