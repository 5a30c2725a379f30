"""
Hive Feed Setup models.
Exports the records handled by the wizard.
"""

from .base import FeedSetupBaseModel

from hive_feed_setup.models.record import (
    DEFAULT_RPC_NODES,
    FeedInterval,
    ConfigurationRecord,
    PartialConfigurationRecord,
    parse_rpc_nodes,
    join_rpc_nodes,
)

__all__ = [
    "FeedSetupBaseModel",
    "DEFAULT_RPC_NODES",
    "FeedInterval",
    "ConfigurationRecord",
    "PartialConfigurationRecord",
    "parse_rpc_nodes",
    "join_rpc_nodes",
]
