# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds and token records produced by the Lox scanner."""

import enum
import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the Lox scanner.

    Kinds with a fixed spelling use that spelling as their value.
    """

    # Punctuation
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character operators
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # End of input
    EOF = "EOF"


LITERAL_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER})

KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "fun": TokenKind.FUN,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        kind: The kind of token.
        lexeme: The exact source text of the token (empty for EOF).
        line: 1-based line number on which the token's first character appears.
        offset: 0-based index of the token's first character in the source.
        literal: The carried value of literal tokens: the name of an
            identifier, the unquoted text of a string, or the 32-bit value of
            a number. None for every other kind.
    """

    kind: TokenKind
    lexeme: str
    line: int
    offset: int
    literal: str | float | None = None


def to_float32(value: float) -> float:
    """Round a Python float to the nearest 32-bit float.

    Values beyond the 32-bit range saturate to a signed infinity.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float32(text: str) -> float:
    """Parse an unsigned decimal literal to the nearest 32-bit float.

    The exact decimal value is rounded once, ties to even. Values at or
    beyond the 32-bit overflow threshold become infinity.
    """
    exact = Fraction(text)
    if exact >= _FLOAT32_OVERFLOW:
        return math.inf

    candidate = to_float32(float(exact))
    if math.isinf(candidate):
        candidate = _FLOAT32_MAX
    if Fraction(candidate) == exact:
        return candidate

    bits = _float32_bits(candidate)
    neighbour = _float32_from_bits(bits + 1 if Fraction(candidate) < exact else bits - 1)
    if math.isinf(neighbour):
        return candidate
    candidate_distance = abs(Fraction(candidate) - exact)
    neighbour_distance = abs(Fraction(neighbour) - exact)
    if neighbour_distance < candidate_distance:
        return neighbour
    if neighbour_distance == candidate_distance and _float32_bits(neighbour) % 2 == 0:
        return neighbour
    return candidate


def render_token(token: Token) -> str:
    """Render a token back to source text.

    Fixed-spelling kinds render to their spelling, identifiers to their name,
    strings to their value in double quotes and numbers to their shortest
    positional decimal form. EOF renders to the empty string.
    """
    if token.kind == TokenKind.EOF:
        return ""
    if token.kind == TokenKind.IDENTIFIER:
        return str(token.literal)
    if token.kind == TokenKind.STRING:
        return f'"{token.literal}"'
    if token.kind == TokenKind.NUMBER:
        return _render_number(float(token.literal or 0.0))
    return token.kind.value


# ################
# Implementation
# ################

_FLOAT32_MAX = struct.unpack("<f", struct.pack("<I", 0x7F7FFFFF))[0]

# Halfway between the largest float32 and the next power of two.
_FLOAT32_OVERFLOW = Fraction(_FLOAT32_MAX) + Fraction(2) ** 103


def _float32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _render_number(value: float) -> str:
    """Format a 32-bit value positionally with as few significant digits as round-trip."""
    if math.isinf(value) or math.isnan(value):
        return str(value)
    if value < 0:
        return "-" + _render_number(-value)
    if value.is_integer():
        return str(int(value))
    for precision in range(1, 10):
        text = format(Decimal(f"{value:.{precision}g}"), "f")
        if parse_float32(text) == value:
            return text
    return format(Decimal(repr(value)), "f")
