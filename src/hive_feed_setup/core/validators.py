#!/usr/bin/env python3
"""
Input validation utilities for Hive Feed Setup

Pure predicates, no I/O. Callers decide how to report a rejected value.
"""

import re

# Hive account names: lowercase letter first, then letters, digits, dots or dashes,
# ending in a letter or digit. Length 3-16.
ACCOUNT_PATTERN = re.compile(r"^[a-z][a-z0-9.-]{1,14}[a-z0-9]$")

# Base58 alphabet: digits 1-9, uppercase without I/O, lowercase without l
BASE58_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# WIF private key: 51 chars, "5" + one of H/J/K + 49 base58 chars
SIGNING_KEY_PATTERN = re.compile(rf"^5[HJK][{BASE58_CHARS}]{{49}}$")

MASK_EDGE = 4


def is_valid_account(account: str) -> bool:
    """Validate Hive witness account name format"""
    if not isinstance(account, str):
        return False
    if not ACCOUNT_PATTERN.fullmatch(account):
        return False
    return ".." not in account and "--" not in account


def is_valid_signing_key(key: str) -> bool:
    """Validate WIF signing key shape (no checksum verification)"""
    if not isinstance(key, str):
        return False
    return bool(SIGNING_KEY_PATTERN.fullmatch(key))


def normalize_account(raw: str) -> str:
    """Strip surrounding whitespace and a single leading '@'"""
    value = raw.strip()
    if value.startswith("@"):
        value = value[1:]
    return value


def mask_signing_key(key: str) -> str:
    """
    Mask a secret for display: first 4 and last 4 characters joined by an ellipsis.

    Values too short to mask safely are fully hidden.
    """
    if not key:
        return ""
    if len(key) <= MASK_EDGE * 2:
        return "*" * len(key)
    return f"{key[:MASK_EDGE]}...{key[-MASK_EDGE:]}"


def is_single_line(value: str) -> bool:
    """True when the value holds no line break, so it fits one KEY=value line"""
    return isinstance(value, str) and "\n" not in value and "\r" not in value
