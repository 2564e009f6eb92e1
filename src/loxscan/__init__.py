# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""loxscan: a lexical scanner for the Lox scripting language."""

from loxscan.scanner import ScanError, ScanErrorKind, Scanner, Token, TokenKind, render_token, scan

__version__ = "0.1.0"

__all__ = [
    "ScanError",
    "ScanErrorKind",
    "Scanner",
    "Token",
    "TokenKind",
    "render_token",
    "scan",
]
