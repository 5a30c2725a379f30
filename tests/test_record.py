"""Tests for the configuration record models."""

import pydantic
import pytest

from hive_feed_setup.models.record import (
    DEFAULT_RPC_NODES,
    ConfigurationRecord,
    FeedInterval,
    PartialConfigurationRecord,
    join_rpc_nodes,
    parse_rpc_nodes,
)

from conftest import KEY_A


def test_interval_menu_order():
    assert [interval.menu_choice for interval in FeedInterval] == ["1", "2", "3", "4", "5"]
    assert [interval.value for interval in FeedInterval] == [
        "3min",
        "10min",
        "30min",
        "1hour",
        "6hour",
    ]


@pytest.mark.parametrize(
    "choice, expected",
    [
        ("1", FeedInterval.THREE_MINUTES),
        ("2", FeedInterval.TEN_MINUTES),
        ("3", FeedInterval.THIRTY_MINUTES),
        ("4", FeedInterval.ONE_HOUR),
        (" 5 ", FeedInterval.SIX_HOURS),
    ],
)
def test_interval_from_menu_choice(choice, expected):
    assert FeedInterval.from_menu_choice(choice) is expected


@pytest.mark.parametrize(
    "choice",
    # superscript two and Arabic-Indic one are digits to str.isdigit
    ["0", "6", "-1", "a", "10min", "", "1.0", "01", "\u00b2", "\u0661"],
)
def test_interval_from_menu_choice_out_of_range(choice):
    assert FeedInterval.from_menu_choice(choice) is None


@pytest.mark.parametrize(
    "stored, expected",
    [
        ("3min", FeedInterval.THREE_MINUTES),
        ("6hour", FeedInterval.SIX_HOURS),
        ("5min", FeedInterval.THREE_MINUTES),
        ("15m", FeedInterval.TEN_MINUTES),
        ("45 minutes", FeedInterval.THIRTY_MINUTES),
        ("2h", FeedInterval.ONE_HOUR),
        ("4hours", FeedInterval.SIX_HOURS),
        ("1d", FeedInterval.SIX_HOURS),
        ("1HOUR", FeedInterval.ONE_HOUR),
        ("", FeedInterval.TEN_MINUTES),
        (None, FeedInterval.TEN_MINUTES),
        ("weekly", FeedInterval.TEN_MINUTES),
        ("0min", FeedInterval.TEN_MINUTES),
        ("\u00b2min", FeedInterval.TEN_MINUTES),
    ],
)
def test_interval_closest_maps_legacy_values(stored, expected):
    assert FeedInterval.closest(stored) is expected


def test_interval_closest_tie_prefers_shorter():
    # 20 minutes is equally far from 10min and 30min
    assert FeedInterval.closest("20min") is FeedInterval.TEN_MINUTES


def test_parse_rpc_nodes_keeps_order_and_drops_blanks():
    assert parse_rpc_nodes(" https://b , https://a,,") == ["https://b", "https://a"]
    assert parse_rpc_nodes("") == []
    assert parse_rpc_nodes(None) == []
    assert join_rpc_nodes(["https://b", "https://a"]) == "https://b,https://a"


def test_record_defaults():
    record = ConfigurationRecord(witness_account="alice", signing_key=KEY_A)

    assert record.feed_interval == "10min"
    assert record.rpc_nodes == list(DEFAULT_RPC_NODES)
    assert record.masked_key == "5Hue...vyTJ"


def test_record_accepts_interval_enum_and_node_text():
    record = ConfigurationRecord(
        witness_account="alice",
        signing_key=KEY_A,
        feed_interval=FeedInterval.ONE_HOUR,
        rpc_nodes="https://a, https://b",
    )

    assert record.feed_interval == "1hour"
    assert record.rpc_nodes == ["https://a", "https://b"]
    assert record.rpc_nodes_text == "https://a,https://b"


@pytest.mark.parametrize(
    "fields",
    [
        {"witness_account": "Alice", "signing_key": KEY_A},
        {"witness_account": "alice", "signing_key": "5Jnotakey"},
        {"witness_account": "alice", "signing_key": KEY_A, "rpc_nodes": []},
        {"witness_account": "alice", "signing_key": KEY_A, "feed_interval": "  "},
        {"witness_account": "alice", "signing_key": KEY_A, "extra": "field"},
        {"witness_account": "alice", "signing_key": KEY_A, "feed_interval": "10min\nX=1"},
        {"witness_account": "alice", "signing_key": KEY_A, "rpc_nodes": ["https://a\rX=1"]},
    ],
)
def test_record_rejects_invalid_fields(fields):
    with pytest.raises(pydantic.ValidationError):
        ConfigurationRecord(**fields)


def test_record_is_immutable(record):
    with pytest.raises(pydantic.ValidationError):
        record.witness_account = "bob"


def test_record_repr_hides_signing_key(record):
    assert KEY_A not in repr(record)


def test_record_trusts_free_text_interval():
    record = ConfigurationRecord(witness_account="alice", signing_key=KEY_A, feed_interval="2min")
    assert record.feed_interval == "2min"


def test_partial_record_defaults():
    partial = PartialConfigurationRecord()

    assert partial.is_empty
    assert partial.interval_default is FeedInterval.TEN_MINUTES
    assert partial.masked_key == ""
    assert partial.rpc_nodes_text == ""


def test_partial_record_keeps_invalid_values(record):
    partial = PartialConfigurationRecord(witness_account="Not Valid", signing_key="abc")

    assert partial.witness_account == "Not Valid"
    assert partial.signing_key == "abc"
    assert not partial.is_empty


def test_partial_from_record(record):
    partial = PartialConfigurationRecord.from_record(record)

    assert partial.witness_account == "alice"
    assert partial.signing_key == KEY_A
    assert partial.interval_default is FeedInterval.THIRTY_MINUTES
    assert partial.rpc_nodes == record.rpc_nodes
