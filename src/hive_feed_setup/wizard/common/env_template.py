#!/usr/bin/env python3
"""
Template of the .env store read by the feed-price bot.

render_env() is the only place that knows the on-disk layout.
Key order: account, signing key, RPC nodes, feed interval.
"""

from datetime import datetime
from typing import Optional

from hive_feed_setup.core.utils.datetime_utils import header_timestamp
from hive_feed_setup.models.record import ConfigurationRecord, FeedInterval

ACCOUNT_KEY = "HIVE_WITNESS_ACCOUNT"
SIGNING_KEY_KEY = "HIVE_SIGNING_PRIVATE_KEY"
RPC_NODES_KEY = "HIVE_RPC_NODES"
FEED_INTERVAL_KEY = "FEED_INTERVAL"

RECOGNIZED_KEYS = (ACCOUNT_KEY, SIGNING_KEY_KEY, RPC_NODES_KEY, FEED_INTERVAL_KEY)

SECTION_RULE = "# " + "=" * 76


def _section(title: str) -> str:
    return f"{SECTION_RULE}\n# {title}\n{SECTION_RULE}"


def render_env(
    record: ConfigurationRecord,
    generated_by: str = "setup wizard",
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Render a configuration record as the commented KEY=value file.

    Args:
        record: Validated configuration
        generated_by: Name of the path that produced the file
        generated_at: Header timestamp (defaults to now)

    Returns:
        Complete file content, newline terminated
    """
    intervals = ", ".join(interval.value for interval in FeedInterval)

    return f"""# Hive Feed Price Tool - Environment Variables
# Generated by {generated_by} on {header_timestamp(generated_at)}

{_section("REQUIRED CONFIGURATION")}

# Witness account name (without @)
{ACCOUNT_KEY}={record.witness_account}

# Witness signature key (WIF format)
{SIGNING_KEY_KEY}={record.signing_key}

{_section("NETWORK CONFIGURATION")}

# Comma-separated list of Hive RPC nodes (with automatic failover)
{RPC_NODES_KEY}={record.rpc_nodes_text}

{_section("FEED PUBLISHING CONFIGURATION")}

# Feed publish interval
# Available options: {intervals}
{FEED_INTERVAL_KEY}={record.feed_interval}
"""
