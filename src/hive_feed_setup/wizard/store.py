"""
.env configuration store: reads prior values, backs up and replaces the file.

The store is never patched field by field. It is read once for defaults and
then regenerated as a whole.
"""

import os
import shutil
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from hive_feed_setup.core.exceptions import ConfigurationError
from hive_feed_setup.core.logging import logger
from hive_feed_setup.core.utils.datetime_utils import backup_timestamp, local_now
from hive_feed_setup.models.record import (
    ConfigurationRecord,
    PartialConfigurationRecord,
    parse_rpc_nodes,
)
from hive_feed_setup.wizard.common.env_template import (
    ACCOUNT_KEY,
    FEED_INTERVAL_KEY,
    RECOGNIZED_KEYS,
    RPC_NODES_KEY,
    SIGNING_KEY_KEY,
    render_env,
)

STORE_FILE_MODE = 0o600


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a store write"""

    path: Path
    backup_path: Optional[Path] = None


class EnvStore:
    """The persisted configuration read by the bot runtime"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load_existing(self) -> Optional[PartialConfigurationRecord]:
        """
        Load the recognized keys of the current store, if any.

        Unknown keys, comments and lines that are not assignments are ignored.
        Missing or blank keys come back as None. Nothing is validated.

        Returns:
            The prior values, or None when no store exists

        Raises:
            ConfigurationError: The file exists but cannot be read
        """
        if not self.exists():
            return None

        try:
            values = dotenv_values(self.path, interpolate=False, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read configuration store", path=str(self.path), error=str(e))
            raise ConfigurationError(
                f"Failed to read {self.path}: {e}", context={"path": str(self.path)}, cause=e
            ) from e

        def _value(key: str) -> Optional[str]:
            raw = values.get(key)
            if raw is None:
                return None
            raw = raw.strip()
            return raw or None

        nodes_text = _value(RPC_NODES_KEY)
        existing = PartialConfigurationRecord(
            witness_account=_value(ACCOUNT_KEY),
            signing_key=_value(SIGNING_KEY_KEY),
            feed_interval=_value(FEED_INTERVAL_KEY),
            rpc_nodes=parse_rpc_nodes(nodes_text) or None,
        )

        logger.info(
            "Loaded existing configuration",
            path=str(self.path),
            keys_found=[key for key in RECOGNIZED_KEYS if _value(key) is not None],
        )
        return existing

    def backup_path(self, now: Optional[datetime] = None) -> Path:
        """
        Next free backup name: <store>.backup.<YYYYMMDD_HHMMSS>

        Two backups within the same second get a counter suffix (.1, .2, ...)
        instead of overwriting the earlier one.
        """
        base = self.path.with_name(f"{self.path.name}.backup.{backup_timestamp(now)}")
        candidate = base
        counter = 0
        while candidate.exists():
            counter += 1
            candidate = base.with_name(f"{base.name}.{counter}")
        return candidate

    def backup(self, now: Optional[datetime] = None) -> Optional[Path]:
        """Copy the current store aside. Returns None when there is nothing to back up."""
        if not self.exists():
            return None

        backup_path = self.backup_path(now)
        try:
            shutil.copy2(self.path, backup_path)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to back up {self.path}: {e}",
                context={"path": str(self.path), "backup": str(backup_path)},
                cause=e,
            ) from e

        logger.info("Backed up existing configuration", path=str(self.path), backup=str(backup_path))
        return backup_path

    def write(self, record: ConfigurationRecord, generated_by: str = "setup wizard") -> WriteResult:
        """
        Back up the current store and replace it with the rendered record.

        The new content goes to a temporary file in the same directory which
        is then renamed over the store, so readers see either the old file or
        the complete new one.
        """
        now = local_now()
        content = render_env(record, generated_by=generated_by, generated_at=now)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to create {self.path.parent}: {e}", cause=e
            ) from e

        backup_path = self.backup(now)

        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, STORE_FILE_MODE)
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise ConfigurationError(
                f"Failed to save configuration: {e}", context={"path": str(self.path)}, cause=e
            ) from e

        logger.info(
            "Configuration written",
            path=str(self.path),
            backup=str(backup_path) if backup_path else None,
            generated_by=generated_by,
            account=record.witness_account,
            feed_interval=record.feed_interval,
        )
        return WriteResult(path=self.path, backup_path=backup_path)
