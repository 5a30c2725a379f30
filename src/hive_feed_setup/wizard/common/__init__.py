"""
Shared helpers of the setup wizard: terminal output, validators, file template.
"""

from .ui import (
    console,
    print_header,
    print_success,
    print_error,
    print_warning,
    print_info,
    print_line,
    print_field,
)

from hive_feed_setup.core.validators import (
    is_valid_account,
    is_valid_signing_key,
    normalize_account,
    mask_signing_key,
)

from .env_template import (
    ACCOUNT_KEY,
    SIGNING_KEY_KEY,
    RPC_NODES_KEY,
    FEED_INTERVAL_KEY,
    RECOGNIZED_KEYS,
    render_env,
)

__all__ = [
    "console",
    "print_header",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_line",
    "print_field",
    "is_valid_account",
    "is_valid_signing_key",
    "normalize_account",
    "mask_signing_key",
    "ACCOUNT_KEY",
    "SIGNING_KEY_KEY",
    "RPC_NODES_KEY",
    "FEED_INTERVAL_KEY",
    "RECOGNIZED_KEYS",
    "render_env",
]
