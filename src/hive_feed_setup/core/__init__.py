"""
Hive Feed Setup core module.

Exports the fundamental components: settings, errors, logging, validators.
"""

# Configuration
from hive_feed_setup.core.settings import Settings

# Exceptions and errors
from hive_feed_setup.core.exceptions import (
    FeedSetupError,
    ValidationError,
    MissingRequiredInput,
    UnknownOption,
    ConfigurationError,
    SetupCancelled,
)

# Logging
from hive_feed_setup.core.logging import (
    ComponentLogger,
    SensitiveDataMasker,
    logger,  # Pre-configured global logger
)

# Validation
from hive_feed_setup.core.validators import (
    is_single_line,
    is_valid_account,
    is_valid_signing_key,
    normalize_account,
    mask_signing_key,
)

__all__ = [
    "Settings",
    "FeedSetupError",
    "ValidationError",
    "MissingRequiredInput",
    "UnknownOption",
    "ConfigurationError",
    "SetupCancelled",
    "ComponentLogger",
    "SensitiveDataMasker",
    "logger",
    "is_single_line",
    "is_valid_account",
    "is_valid_signing_key",
    "normalize_account",
    "mask_signing_key",
]
