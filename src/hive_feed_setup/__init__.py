"""
Hive Feed Setup - configuration wizard for the Hive witness feed-price bot.

Collects the witness account, signing key, feed interval and RPC nodes,
validates them and writes the .env file the bot runtime reads.
"""

from hive_feed_setup._version import __version__, __version_info__

__author__ = "Hive Feed Price contributors"
__license__ = "MIT"

# Core components
from hive_feed_setup.core import (
    logger,
    Settings,
    FeedSetupError,
    ValidationError,
    MissingRequiredInput,
    UnknownOption,
    ConfigurationError,
    SetupCancelled,
    is_valid_account,
    is_valid_signing_key,
)

# Models
from hive_feed_setup.models import (
    DEFAULT_RPC_NODES,
    FeedInterval,
    ConfigurationRecord,
    PartialConfigurationRecord,
)

# Wizard
from hive_feed_setup.wizard import (
    EnvStore,
    InteractiveSetup,
    QuickSetup,
    WalletStateHook,
    build_quick_record,
    render_env,
    run_machine,
    transition,
)

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",
    # Core
    "logger",
    "Settings",
    # Exceptions
    "FeedSetupError",
    "ValidationError",
    "MissingRequiredInput",
    "UnknownOption",
    "ConfigurationError",
    "SetupCancelled",
    # Validators
    "is_valid_account",
    "is_valid_signing_key",
    # Models
    "DEFAULT_RPC_NODES",
    "FeedInterval",
    "ConfigurationRecord",
    "PartialConfigurationRecord",
    # Wizard
    "EnvStore",
    "InteractiveSetup",
    "QuickSetup",
    "WalletStateHook",
    "build_quick_record",
    "render_env",
    "run_machine",
    "transition",
]
