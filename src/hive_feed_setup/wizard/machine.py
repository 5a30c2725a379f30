"""
Prompt sequence of the interactive wizard as a pure state machine.

transition(state, raw_input, existing) decides the next state and which
field to set, without touching the terminal. The interactive driver only
reads lines, prints what the transition reports and loops.

Order: ACCOUNT -> SIGNING_KEY -> INTERVAL -> RPC_NODES -> CONFIRM -> SAVE
CONFIRM may also end in CANCELLED. A rejected input keeps the current
state; there is no retry limit.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from hive_feed_setup.core.exceptions import (
    FeedSetupError,
    MissingRequiredInput,
    ValidationError,
)
from hive_feed_setup.core.validators import (
    is_valid_account,
    is_valid_signing_key,
    normalize_account,
)
from hive_feed_setup.models.record import (
    DEFAULT_RPC_NODES,
    ConfigurationRecord,
    FeedInterval,
    PartialConfigurationRecord,
    parse_rpc_nodes,
)


class SetupState(str, Enum):
    """States of the interactive wizard"""

    ACCOUNT = "account"
    SIGNING_KEY = "signing_key"
    INTERVAL = "interval"
    RPC_NODES = "rpc_nodes"
    CONFIRM = "confirm"
    SAVE = "save"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SetupState.SAVE, SetupState.CANCELLED)


@dataclass(frozen=True)
class Transition:
    """Result of feeding one input line to a state"""

    state: SetupState
    patch: Dict[str, Any] = field(default_factory=dict)
    error: Optional[FeedSetupError] = None
    notice: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.error is None


def _stay(state: SetupState, error: FeedSetupError) -> Transition:
    return Transition(state=state, error=error)


def _account(raw: str, existing: PartialConfigurationRecord) -> Transition:
    value = raw.strip()
    if not value:
        if existing.witness_account and not is_valid_account(existing.witness_account):
            return _stay(
                SetupState.ACCOUNT,
                ValidationError(
                    "witness_account",
                    f"Existing account {existing.witness_account!r} is not a valid account name. "
                    "Please enter it again.",
                    value=existing.witness_account,
                ),
            )
        if existing.witness_account:
            return Transition(
                state=SetupState.SIGNING_KEY,
                patch={"witness_account": existing.witness_account},
                notice=f"Using existing account: {existing.witness_account}",
            )
        return _stay(
            SetupState.ACCOUNT,
            MissingRequiredInput("witness_account", "Witness account is required."),
        )

    account = normalize_account(value)
    if not is_valid_account(account):
        return _stay(
            SetupState.ACCOUNT,
            ValidationError(
                "witness_account",
                "Invalid account name. Must be 3-16 lowercase characters "
                "(letters, numbers, dots, dashes).",
                value=account,
            ),
        )
    return Transition(
        state=SetupState.SIGNING_KEY,
        patch={"witness_account": account},
        notice=f"Account set: {account}",
    )


def _signing_key(raw: str, existing: PartialConfigurationRecord) -> Transition:
    value = raw.strip()
    if not value:
        if existing.signing_key and not is_valid_signing_key(existing.signing_key):
            return _stay(
                SetupState.SIGNING_KEY,
                ValidationError(
                    "signing_key",
                    "Existing key is not in WIF format (starts with 5, 51 characters). "
                    "Please enter it again.",
                ),
            )
        if existing.signing_key:
            return Transition(
                state=SetupState.INTERVAL,
                patch={"signing_key": existing.signing_key},
                notice="Using existing key",
            )
        return _stay(
            SetupState.SIGNING_KEY,
            MissingRequiredInput("signing_key", "Private key is required."),
        )

    # The rejected key is not kept in the error context
    if not is_valid_signing_key(value):
        return _stay(
            SetupState.SIGNING_KEY,
            ValidationError(
                "signing_key",
                "Invalid key format. Must be WIF format (starts with 5, 51 characters).",
            ),
        )
    return Transition(
        state=SetupState.INTERVAL,
        patch={"signing_key": value},
        notice="Key validated and set",
    )


def _interval(raw: str, existing: PartialConfigurationRecord) -> Transition:
    choice = raw.strip() or existing.interval_default.menu_choice

    interval = FeedInterval.from_menu_choice(choice)
    if interval is None:
        return _stay(
            SetupState.INTERVAL,
            ValidationError("feed_interval", "Invalid choice. Please select 1-5.", value=choice),
        )
    return Transition(
        state=SetupState.RPC_NODES,
        patch={"feed_interval": interval.value},
        notice=f"Selected: {interval.label}",
    )


def _rpc_nodes(raw: str, existing: PartialConfigurationRecord) -> Transition:
    nodes = parse_rpc_nodes(raw)
    if raw.strip() and not nodes:
        # Only separators typed: not the same as pressing Enter
        return _stay(
            SetupState.RPC_NODES,
            ValidationError(
                "rpc_nodes",
                "No RPC nodes given. Enter comma-separated URLs, or press Enter for defaults.",
                value=raw.strip(),
            ),
        )
    if nodes:
        return Transition(
            state=SetupState.CONFIRM, patch={"rpc_nodes": nodes}, notice="Custom nodes set"
        )
    if existing.rpc_nodes:
        return Transition(
            state=SetupState.CONFIRM,
            patch={"rpc_nodes": list(existing.rpc_nodes)},
            notice="Using existing nodes",
        )
    return Transition(
        state=SetupState.CONFIRM,
        patch={"rpc_nodes": list(DEFAULT_RPC_NODES)},
        notice="Using default nodes",
    )


def _confirm(raw: str, existing: PartialConfigurationRecord) -> Transition:
    if raw.strip()[:1] in ("n", "N"):
        return Transition(state=SetupState.CANCELLED)
    return Transition(state=SetupState.SAVE)


_HANDLERS: Dict[SetupState, Callable[[str, PartialConfigurationRecord], Transition]] = {
    SetupState.ACCOUNT: _account,
    SetupState.SIGNING_KEY: _signing_key,
    SetupState.INTERVAL: _interval,
    SetupState.RPC_NODES: _rpc_nodes,
    SetupState.CONFIRM: _confirm,
}


def transition(
    state: SetupState,
    raw: str,
    existing: Optional[PartialConfigurationRecord] = None,
) -> Transition:
    """
    Feed one line of operator input to the current state.

    Args:
        state: Current, non-terminal state
        raw: The line as typed (blank means "use the default")
        existing: Prior values offered as defaults

    Returns:
        The next state plus either a field patch or the error to report
    """
    if state.is_terminal:
        raise ValueError(f"No transition out of terminal state {state.value}")
    return _HANDLERS[state](raw, existing or PartialConfigurationRecord())


@dataclass
class MachineRun:
    """Outcome of driving the machine over a sequence of inputs"""

    state: SetupState = SetupState.ACCOUNT
    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[FeedSetupError] = field(default_factory=list)

    def record(self) -> ConfigurationRecord:
        if self.state is not SetupState.SAVE:
            raise ValueError(f"Wizard did not reach save (state: {self.state.value})")
        return ConfigurationRecord(**self.values)


def run_machine(
    inputs: Iterable[str],
    existing: Optional[PartialConfigurationRecord] = None,
) -> MachineRun:
    """
    Drive the machine with scripted input lines until it reaches a terminal
    state or the inputs run out.
    """
    run = MachineRun()
    for raw in inputs:
        if run.state.is_terminal:
            break
        step = transition(run.state, raw, existing)
        if step.error is not None:
            run.errors.append(step.error)
            continue
        run.values.update(step.patch)
        run.state = step.state
    return run
