"""
Hive Feed Setup wizard module

Interactive and quick setup paths, the .env store and the wallet hook.
"""

from .common import (
    print_header,
    print_success,
    print_error,
    print_warning,
    print_info,
    render_env,
)

from .store import EnvStore, WriteResult

from .machine import (
    SetupState,
    Transition,
    MachineRun,
    transition,
    run_machine,
)

from .wallet import KeyChangeEvent, WalletResetOutcome, WalletStateHook

from .quick import QUICK_USAGE, QuickSetup, build_quick_record

from .interactive import InteractiveSetup, click_prompt

__all__ = [
    # UI utilities
    "print_header",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    # Store
    "render_env",
    "EnvStore",
    "WriteResult",
    # State machine
    "SetupState",
    "Transition",
    "MachineRun",
    "transition",
    "run_machine",
    # Wallet hook
    "KeyChangeEvent",
    "WalletResetOutcome",
    "WalletStateHook",
    # Setup paths
    "QUICK_USAGE",
    "QuickSetup",
    "build_quick_record",
    "InteractiveSetup",
    "click_prompt",
]
