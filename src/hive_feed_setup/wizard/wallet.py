"""
Post-write hook: invalidate the runtime's wallet state after a key change.

The bot runtime imports the signing key into an encrypted wallet directory
on first start. When the key in the store changes, that wallet still holds
the old key and must be rebuilt, so the wizard offers to remove it.
"""

import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from hive_feed_setup.core.logging import logger
from hive_feed_setup.wizard.common.ui import print_info, print_success, print_warning


@dataclass(frozen=True)
class KeyChangeEvent:
    """Signing key before and after a successful write"""

    previous_key: Optional[str]
    new_key: str

    @property
    def key_changed(self) -> bool:
        # No prior key means a fresh setup, not a change
        return bool(self.previous_key) and self.previous_key != self.new_key


class WalletResetOutcome(str, Enum):
    UNCHANGED = "unchanged"
    DECLINED = "declined"
    CLEANED = "cleaned"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class WalletStateHook:
    """Removes the wallet-state directory when the signing key changed"""

    def __init__(self, wallet_dir: Path):
        self.wallet_dir = Path(wallet_dir)

    def handle(self, event: KeyChangeEvent, confirm: Callable[[], bool]) -> WalletResetOutcome:
        """
        React to a committed write.

        Args:
            event: Prior and new signing key
            confirm: Asks the operator whether to clean now (True = yes)

        Returns:
            What happened to the wallet directory
        """
        if not event.key_changed:
            return WalletResetOutcome.UNCHANGED

        print_warning("Private key changed! The Beekeeper wallet needs to be cleaned.")
        if not confirm():
            print_info(f"Wallet kept. Remove {self.wallet_dir} before starting the bot.")
            logger.info("Wallet cleanup declined", wallet_dir=str(self.wallet_dir))
            return WalletResetOutcome.DECLINED

        if not self.wallet_dir.is_dir():
            print_info("No wallet found to clean")
            return WalletResetOutcome.NOT_FOUND

        try:
            shutil.rmtree(self.wallet_dir)
        except OSError as e:
            print_warning(f"Could not remove {self.wallet_dir}: {e}")
            logger.error("Wallet cleanup failed", wallet_dir=str(self.wallet_dir), error=str(e))
            return WalletResetOutcome.FAILED

        print_success("Wallet cleaned")
        logger.info("Wallet state removed after key change", wallet_dir=str(self.wallet_dir))
        return WalletResetOutcome.CLEANED
