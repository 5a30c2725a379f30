"""
Non-interactive setup: build the record from positional arguments.

    hive-feed-setup --quick <account> <private_key> [interval] [nodes]

Account and key are required and checked. Interval and nodes are taken
as given, provided each fits on one line.
"""

from typing import Optional, Sequence

from hive_feed_setup.core.exceptions import MissingRequiredInput, ValidationError
from hive_feed_setup.core.logging import logger
from hive_feed_setup.core.validators import (
    is_single_line,
    is_valid_account,
    is_valid_signing_key,
    normalize_account,
)
from hive_feed_setup.models.record import (
    DEFAULT_RPC_NODES,
    ConfigurationRecord,
    FeedInterval,
    parse_rpc_nodes,
)
from hive_feed_setup.wizard.common.ui import print_field, print_success
from hive_feed_setup.wizard.store import EnvStore, WriteResult

QUICK_USAGE = "Usage: hive-feed-setup --quick <account> <private_key> [interval] [nodes]"


def _arg(args: Sequence[str], index: int) -> Optional[str]:
    if index < len(args) and args[index].strip():
        return args[index].strip()
    return None


def build_quick_record(args: Sequence[str]) -> ConfigurationRecord:
    """
    Build a record from --quick arguments.

    Raises:
        MissingRequiredInput: account or key absent
        ValidationError: account or key malformed, a line break in interval
            or nodes, or nodes text without any node
    """
    raw_account = _arg(args, 0)
    if raw_account is None:
        raise MissingRequiredInput("witness_account", "Witness account is required.")

    key = _arg(args, 1)
    if key is None:
        raise MissingRequiredInput("signing_key", "Private key is required.")

    account = normalize_account(raw_account)
    if not is_valid_account(account):
        raise ValidationError(
            "witness_account",
            f"Invalid account name: {account!r}. Must be 3-16 lowercase characters "
            "(letters, numbers, dots, dashes).",
            value=account,
        )

    if not is_valid_signing_key(key):
        raise ValidationError(
            "signing_key",
            "Invalid key format. Must be WIF format (starts with 5, 51 characters).",
        )

    if len(args) > 4:
        logger.warning("Ignoring extra quick setup arguments", extra_count=len(args) - 4)

    interval = _arg(args, 2) or FeedInterval.default().value
    nodes_text = _arg(args, 3)

    # Taken as given, but a line break would inject extra lines into the store
    if not is_single_line(interval):
        raise ValidationError("feed_interval", "Invalid interval: must be a single line.")
    if nodes_text is not None and not is_single_line(nodes_text):
        raise ValidationError("rpc_nodes", "Invalid RPC nodes: must be a single line.")

    if nodes_text is None:
        nodes = list(DEFAULT_RPC_NODES)
    else:
        nodes = parse_rpc_nodes(nodes_text)
        if not nodes:
            raise ValidationError("rpc_nodes", "No RPC nodes given.", value=nodes_text)

    return ConfigurationRecord(
        witness_account=account,
        signing_key=key,
        feed_interval=interval,
        rpc_nodes=nodes,
    )


class QuickSetup:
    """Runs the non-interactive path against a store"""

    def __init__(self, store: EnvStore):
        self.store = store

    def run(self, args: Sequence[str]) -> WriteResult:
        record = build_quick_record(args)
        result = self.store.write(record, generated_by="quick setup")

        logger.info("Quick setup complete", path=str(result.path), account=record.witness_account)
        if result.backup_path:
            print_success(f"Backed up existing {self.store.path.name} to {result.backup_path}")
        print_success(f"Quick setup complete. Configuration saved to {result.path}")
        print_field("Witness Account", record.witness_account)
        print_field("Private Key", record.masked_key)
        print_field("Feed Interval", record.feed_interval)
        print_field("RPC Nodes", record.rpc_nodes_text)
        return result
