"""
Interactive setup wizard.

Drives the prompt state machine on the terminal, shows the summary, writes
the store and runs the wallet hook when the signing key changed.
"""

from typing import Any, Callable, Dict, Optional

import click

from hive_feed_setup.core.exceptions import SetupCancelled
from hive_feed_setup.core.logging import logger
from hive_feed_setup.core.validators import mask_signing_key
from hive_feed_setup.models.record import (
    DEFAULT_RPC_NODES,
    ConfigurationRecord,
    FeedInterval,
    PartialConfigurationRecord,
    join_rpc_nodes,
)
from hive_feed_setup.wizard.common.ui import (
    print_error,
    print_field,
    print_header,
    print_info,
    print_line,
    print_success,
    print_warning,
)
from hive_feed_setup.wizard.machine import SetupState, transition
from hive_feed_setup.wizard.store import EnvStore, WriteResult
from hive_feed_setup.wizard.wallet import KeyChangeEvent, WalletStateHook

PromptFunc = Callable[[str, bool], str]


def click_prompt(text: str, hide_input: bool = False) -> str:
    """
    Read one line. Blank input comes back as "".

    Ctrl+C and end of input raise click.Abort, which ends the run
    before anything is written.
    """
    return click.prompt(text, default="", show_default=False, hide_input=hide_input)


def _declined(answer: str) -> bool:
    return answer.strip()[:1] in ("n", "N")


class InteractiveSetup:
    """Main wizard class that orchestrates the interactive flow"""

    def __init__(
        self,
        store: EnvStore,
        wallet_hook: WalletStateHook,
        prompt: Optional[PromptFunc] = None,
    ):
        self.store = store
        self.wallet_hook = wallet_hook
        self.prompt = prompt or click_prompt

    def run(self) -> bool:
        """
        Run the complete wizard

        Returns:
            True if the configuration was saved, False if the operator cancelled
        """
        print_header("Hive Feed Price - Interactive Setup")
        print_info("This wizard will help you configure your Hive witness feed price bot.")
        print_info("Press Enter to keep existing values (shown in brackets).")

        existing = self.store.load_existing()
        if existing is not None:
            print_info(f"Found existing {self.store.path.name} file. Current values will be shown.")
        defaults = existing or PartialConfigurationRecord()

        # Snapshot taken before any prompt, compared after the write
        previous_key = defaults.signing_key

        try:
            record = self.collect(defaults)
        except SetupCancelled:
            print_warning("Configuration cancelled. No changes made.")
            logger.info("Interactive setup cancelled", path=str(self.store.path))
            return False

        print_header("Saving Configuration")
        result = self.store.write(record, generated_by="setup wizard")
        self._report_write(result)

        self.wallet_hook.handle(
            KeyChangeEvent(previous_key=previous_key, new_key=record.signing_key),
            confirm=self._confirm_wallet_clean,
        )

        self._show_completion()
        return True

    def collect(self, existing: PartialConfigurationRecord) -> ConfigurationRecord:
        """
        Ask for every field in order until the operator confirms.

        Raises:
            SetupCancelled: The operator answered no at the confirmation
        """
        state = SetupState.ACCOUNT
        values: Dict[str, Any] = {}
        shown: Optional[SetupState] = None

        while not state.is_terminal:
            if state is not shown:
                self._show_section(state, existing, values)
                shown = state

            raw = self.prompt(self._prompt_text(state, existing), state is SetupState.SIGNING_KEY)
            step = transition(state, raw, existing)

            if step.error is not None:
                print_error(step.error.message)
                continue

            values.update(step.patch)
            if step.notice:
                print_success(step.notice)
            state = step.state

        if state is SetupState.CANCELLED:
            raise SetupCancelled()

        return ConfigurationRecord(**values)

    def _show_section(
        self, state: SetupState, existing: PartialConfigurationRecord, values: Dict[str, Any]
    ):
        """Print the header and help text of a step, once per step"""
        if state is SetupState.ACCOUNT:
            print_header("Witness Account")

        elif state is SetupState.SIGNING_KEY:
            print_header("Private Signing Key")
            print_warning("This is your witness ACTIVE or OWNER key (WIF format, starts with 5...)")
            print_warning("It will be stored encrypted by Beekeeper.")

        elif state is SetupState.INTERVAL:
            print_header("Feed Publish Interval")
            print_info("How often should the bot publish your feed price?")
            print_line()
            for interval in FeedInterval:
                print_line(
                    f"  {interval.menu_choice}) {interval.label:<18} ({interval.description})"
                )
            print_line()

        elif state is SetupState.RPC_NODES:
            print_header("RPC Nodes (Optional)")
            print_info("Configure Hive RPC nodes for API calls.")
            hosts = ", ".join(node.split("://", 1)[-1] for node in DEFAULT_RPC_NODES)
            print_info(f"Leave empty to use defaults: {hosts}")

        elif state is SetupState.CONFIRM:
            self._show_summary(values)

    def _prompt_text(self, state: SetupState, existing: PartialConfigurationRecord) -> str:
        if state is SetupState.ACCOUNT:
            if existing.witness_account:
                return f"Enter your Hive witness account [{existing.witness_account}]"
            return "Enter your Hive witness account"

        if state is SetupState.SIGNING_KEY:
            if existing.signing_key:
                return f"Enter your private key [keep: {existing.masked_key}]"
            return "Enter your private key"

        if state is SetupState.INTERVAL:
            return f"Select interval [1-5, default: {existing.interval_default.menu_choice}]"

        if state is SetupState.RPC_NODES:
            if existing.rpc_nodes:
                return f"RPC nodes [{existing.rpc_nodes_text}]"
            return "RPC nodes (comma-separated, or press Enter for defaults)"

        return "Save this configuration? [Y/n]"

    def _show_summary(self, values: Dict[str, Any]):
        """Show configuration summary, key masked"""
        print_header("Configuration Summary")
        print_field("Witness Account", values.get("witness_account", ""))
        print_field("Private Key", mask_signing_key(values.get("signing_key", "")))
        print_field("Feed Interval", values.get("feed_interval", ""))
        print_field("RPC Nodes", join_rpc_nodes(values.get("rpc_nodes", [])))
        print_line()

    def _report_write(self, result: WriteResult):
        if result.backup_path:
            print_info(f"Backed up existing {self.store.path.name} to {result.backup_path}")
        print_success(f"Configuration saved to {result.path}")

    def _confirm_wallet_clean(self) -> bool:
        return not _declined(self.prompt("Clean wallet now? [Y/n]", False))

    def _show_completion(self):
        """Show next steps for the bot runtime"""
        print_header("Setup Complete!")
        print_info("You can now start the bot with:")
        print_line("  ./run.sh start")
        print_line()
        print_info("Other commands:")
        print_line("  ./run.sh status   - Check status")
        print_line("  ./run.sh logs     - View logs")
        print_line("  ./run.sh stop     - Stop the bot")
