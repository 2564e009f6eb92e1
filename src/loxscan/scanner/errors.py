# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recoverable lexical errors reported by the Lox scanner."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class ScanErrorKind(enum.Enum):
    """Categories of lexical defects."""

    UNKNOWN_TOKEN = "unknown token"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_NUMBER = "invalid number"


@dataclass(frozen=True)
class ScanError:
    """A lexical defect found during a scan.

    Scan errors are returned to the caller alongside the tokens; they are
    never raised.

    Attributes:
        kind: The category of the defect.
        line: 1-based line number where the defect occurred. For unterminated
            strings this is the line of the opening quote.
        offset: 0-based index of the offending character or literal start.
        text: The offending character, or the text consumed by the literal.
    """

    kind: ScanErrorKind
    line: int
    offset: int
    text: str = ""

    @property
    def message(self) -> str:
        """A human-readable description of the defect."""
        if self.kind == ScanErrorKind.UNKNOWN_TOKEN:
            return f"Unexpected character: {self.text!r}"
        if self.kind == ScanErrorKind.UNTERMINATED_STRING:
            return "Unterminated string literal"
        return f"Invalid number literal: {self.text!r} has no digits after the decimal point"

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"
