#!/usr/bin/env python3
"""
Hive Feed Setup CLI - Command Line Interface
Creates or updates the .env configuration of the Hive witness feed-price bot

    hive-feed-setup                       interactive wizard
    hive-feed-setup --quick <account> <key> [interval] [nodes]
    hive-feed-setup --help | -h
"""

import sys
import traceback
from typing import Sequence

import click

from hive_feed_setup.core.exceptions import FeedSetupError, UnknownOption
from hive_feed_setup.core.logging import ComponentLogger, logger
from hive_feed_setup.core.settings import (
    ENV_FILE_VAR,
    LOG_FILE_VAR,
    WALLET_DIR_VAR,
    DEBUG_VAR,
    Settings,
)
from hive_feed_setup.models.record import FeedInterval
from hive_feed_setup.wizard.common.ui import print_error, print_info
from hive_feed_setup.wizard.interactive import InteractiveSetup
from hive_feed_setup.wizard.quick import QUICK_USAGE, QuickSetup
from hive_feed_setup.wizard.store import EnvStore
from hive_feed_setup.wizard.wallet import WalletStateHook

PROG_NAME = "hive-feed-setup"

HELP_OPTIONS = ("--help", "-h")
QUICK_OPTION = "--quick"


def usage_text() -> str:
    intervals = ", ".join(interval.value for interval in FeedInterval)
    return f"""Usage: {PROG_NAME} [options]

Options:
  (no args)     Interactive setup wizard
  --quick       Quick setup: {PROG_NAME} --quick <account> <key> [interval] [nodes]
  --help, -h    Show this help

Intervals: {intervals}

Environment:
  {ENV_FILE_VAR:<22} Configuration file to write (default: .env)
  {WALLET_DIR_VAR:<22} Wallet directory cleaned after a key change
  {LOG_FILE_VAR:<22} Write a log file
  {DEBUG_VAR:<22} Set to 'true' for debug output"""


def _fail(error: FeedSetupError, show_usage: bool = False):
    print_error(error.message)
    for suggestion in error.suggestions:
        print_info(suggestion)
    if show_usage:
        click.echo(QUICK_USAGE if error.code != "UnknownOption" else usage_text())
    logger.error("Setup failed", code=error.code, reason=error.message, context=error.context)
    sys.exit(1)


def run_interactive(settings: Settings):
    store = EnvStore(settings.env_file)
    wallet_hook = WalletStateHook(settings.wallet_dir)
    InteractiveSetup(store, wallet_hook).run()


def run_quick(settings: Settings, args: Sequence[str]):
    QuickSetup(EnvStore(settings.env_file)).run(args)


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args):
    """
    Hive Feed Price - setup wizard

    Collects and validates the witness account, signing key, feed interval
    and RPC nodes, then writes them to the .env file read by the bot.
    """
    if args and args[0] in HELP_OPTIONS:
        click.echo(usage_text())
        return

    settings = Settings.from_env()
    ComponentLogger.configure(settings.log_file, debug_mode=settings.debug_mode)

    try:
        if not args:
            # Cancellation is not an error: exit 0 either way
            run_interactive(settings)
        elif args[0] == QUICK_OPTION:
            run_quick(settings, args[1:])
        else:
            raise UnknownOption(args[0])

    except UnknownOption as e:
        _fail(e, show_usage=True)

    except FeedSetupError as e:
        _fail(e, show_usage=bool(args) and args[0] == QUICK_OPTION and e.is_recoverable())

    except click.exceptions.Abort:
        # Ctrl+C or end of input while waiting at a prompt; nothing was written
        logger.warning("Setup interrupted")
        raise

    except Exception as e:
        print_error(f"Setup error: {e}")
        logger.error("Unexpected setup error", error=str(e), include_trace=True)
        if settings.debug_mode:
            traceback.print_exc()
        sys.exit(1)


def main():
    """Console script entry point"""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
