#!/usr/bin/env python3
"""
UI utilities for the Hive Feed Setup wizard
"""

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(highlight=False, soft_wrap=True, emoji=False, stderr=True)

SEPARATOR = "━" * 40


def print_header(text):
    """Print a section header"""
    console.print(f"\n[bold]▌ {escape(text)}[/bold]\n{SEPARATOR}")


def print_success(text):
    """Print success message"""
    console.print(f"[green]✔[/green] {escape(text)}")


def print_error(text):
    """Print error message to stderr"""
    err_console.print(f"[red]✘[/red] {escape(text)}")


def print_warning(text):
    """Print warning message"""
    console.print(f"[yellow]⚠[/yellow] {escape(text)}")


def print_info(text):
    """Print info message"""
    console.print(f"[blue]ℹ[/blue] {escape(text)}")


def print_line(text=""):
    """Print plain text, no markup"""
    console.print(escape(text))


def print_field(label, value, width=18):
    """Print one aligned 'label: value' summary row"""
    console.print(f"  {escape(label + ':'):<{width}}{escape(value)}")
