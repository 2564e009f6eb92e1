# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokens, scan errors and the scanner for Lox source text."""

from loxscan.scanner.errors import ScanError, ScanErrorKind
from loxscan.scanner.scanner import Scanner, scan
from loxscan.scanner.tokens import KEYWORDS, LITERAL_KINDS, Token, TokenKind, render_token

__all__ = [
    "KEYWORDS",
    "LITERAL_KINDS",
    "ScanError",
    "ScanErrorKind",
    "Scanner",
    "Token",
    "TokenKind",
    "render_token",
    "scan",
]
