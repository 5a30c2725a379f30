"""
Runtime settings of the setup tool itself.

Simple configuration:
1. Default values
2. Environment variables

These settings decide where the tool reads and writes; they are never
written into the store.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from hive_feed_setup.core.logging import logger

DEFAULT_ENV_FILE = ".env"
DEFAULT_WALLET_DIR = "storage_root-node/.beekeeper"

ENV_FILE_VAR = "HIVE_FEED_ENV_FILE"
WALLET_DIR_VAR = "HIVE_FEED_WALLET_DIR"
LOG_FILE_VAR = "HIVE_FEED_SETUP_LOG"
DEBUG_VAR = "HIVE_FEED_SETUP_DEBUG"


@dataclass(frozen=True)
class Settings:
    """Resolved tool settings."""

    env_file: Path
    wallet_dir: Path
    log_file: Optional[Path] = None
    debug_mode: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        A relative wallet directory is resolved against the store's directory,
        since the bot runtime keeps both side by side.
        """
        env = os.environ if environ is None else environ

        env_file = Path(env.get(ENV_FILE_VAR) or DEFAULT_ENV_FILE)

        wallet_dir = Path(env.get(WALLET_DIR_VAR) or DEFAULT_WALLET_DIR)
        if not wallet_dir.is_absolute():
            wallet_dir = env_file.parent / wallet_dir

        log_value = env.get(LOG_FILE_VAR)
        log_file = Path(log_value) if log_value else None

        debug_mode = env.get(DEBUG_VAR, "false").lower() == "true"

        settings = cls(
            env_file=env_file,
            wallet_dir=wallet_dir,
            log_file=log_file,
            debug_mode=debug_mode,
        )
        logger.debug(
            "Settings resolved",
            env_file=str(settings.env_file),
            wallet_dir=str(settings.wallet_dir),
            debug_mode=settings.debug_mode,
        )
        return settings
