# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a sequence of tokens and a list of recoverable
lexical errors in a single forward pass.
"""

from loxscan.scanner.errors import ScanError, ScanErrorKind
from loxscan.scanner.tokens import KEYWORDS, Token, TokenKind, parse_float32

# ###############
# Public Interface
# ###############


def scan(source: str) -> tuple[list[Token], list[ScanError]]:
    """Scan Lox source text into tokens.

    Comments and whitespace are consumed and not included in the output.
    Lexical defects do not stop the scan; they are collected and returned
    in source order.

    Args:
        source: The full text to scan.

    Returns:
        A tuple of the token list, which always ends with a single EOF
        token, and the list of scan errors, which is empty for well-formed
        input.
    """
    return Scanner(source).scan()


class Scanner:
    """Single-use scanner over one source text.

    Each instance owns its cursor, line counter and error list. Calling
    scan() more than once returns the results of the first pass.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._start = 0
        self._current = 0
        self._line = 1
        self._tokens: list[Token] = []
        self._errors: list[ScanError] = []
        self._done = False

    def scan(self) -> tuple[list[Token], list[ScanError]]:
        """Run the scanner and return all tokens, including EOF, and all errors."""
        if not self._done:
            while not self._at_end():
                self._start = self._current
                self._scan_token()
            self._tokens.append(Token(TokenKind.EOF, "", self._line, len(self._source)))
            self._done = True
        return self._tokens, self._errors

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self) -> str:
        """Return the character at the cursor, or '' at end of input."""
        if self._current < len(self._source):
            return self._source[self._current]
        return ""

    def _peek_next(self) -> str:
        """Return the character one past the cursor, or '' at end of input."""
        if self._current + 1 < len(self._source):
            return self._source[self._current + 1]
        return ""

    def _advance(self) -> str:
        """Consume the character at the cursor and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the character at the cursor only if it equals expected."""
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _add_token(self, kind: TokenKind, literal: str | float | None = None, line: int | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(
            Token(kind, lexeme, self._line if line is None else line, self._start, literal)
        )

    def _add_error(self, kind: ScanErrorKind, text: str, line: int | None = None) -> None:
        self._errors.append(ScanError(kind, self._line if line is None else line, self._start, text))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Classify the character at the cursor and dispatch to a recognizer."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenKind.SLASH)
        elif ch in _EQUAL_SUFFIX_TOKENS:
            single, double = _EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(double if self._match("=") else single)
        elif ch in " \r\t":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier_or_keyword()
        else:
            self._add_error(ScanErrorKind.UNKNOWN_TOKEN, ch)

    def _skip_line_comment(self) -> None:
        """Consume a comment up to, but not including, the terminating newline."""
        while not self._at_end() and self._peek() != "\n":
            self._current += 1

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal. Backslashes are literal characters."""
        start_line = self._line
        newlines = 0
        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\n":
                newlines += 1
            self._current += 1
        self._line += newlines

        if self._at_end():
            text = self._source[self._start : self._current]
            self._add_error(ScanErrorKind.UNTERMINATED_STRING, text, line=start_line)
            return

        self._current += 1  # closing "
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenKind.STRING, value, line=start_line)

    def _scan_number(self) -> None:
        """Scan an integer or decimal literal as a 32-bit float.

        A fractional part requires at least one digit after the '.'. A '.'
        without a following digit is reported as an invalid number and left
        for the next token.
        """
        while _is_digit(self._peek()):
            self._current += 1

        if self._peek() == ".":
            if _is_digit(self._peek_next()):
                self._current += 1  # consume the '.'
                while _is_digit(self._peek()):
                    self._current += 1
            else:
                text = self._source[self._start : self._current + 1]
                self._add_error(ScanErrorKind.INVALID_NUMBER, text)

        value = parse_float32(self._source[self._start : self._current])
        self._add_token(TokenKind.NUMBER, value)

    def _scan_identifier_or_keyword(self) -> None:
        """Scan an identifier and map it to a keyword kind if applicable."""
        while _is_alnum(self._peek()):
            self._current += 1
        text = self._source[self._start : self._current]
        kind = KEYWORDS.get(text)
        if kind is None:
            self._add_token(TokenKind.IDENTIFIER, text)
        else:
            self._add_token(kind)


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

_EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()
