# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for token rendering and 32-bit number handling."""

import math

import pytest

from loxscan.scanner import LITERAL_KINDS, Token, TokenKind, render_token, scan
from loxscan.scanner.tokens import parse_float32, to_float32

_FIXED_KINDS = [kind for kind in TokenKind if kind not in LITERAL_KINDS and kind != TokenKind.EOF]


def _single(source: str) -> Token:
    """Scan source and return its only non-EOF token."""
    tokens, errors = scan(source)
    assert errors == []
    assert len(tokens) == 2
    return tokens[0]


# ###############
# Rendering
# ###############


class TestRenderFixedKinds:
    @pytest.mark.parametrize("kind", _FIXED_KINDS, ids=lambda kind: kind.name)
    def test_render_then_rescan_gives_same_kind(self, kind: TokenKind) -> None:
        text = render_token(Token(kind, kind.value, 1, 0))
        assert _single(text).kind == kind

    @pytest.mark.parametrize("kind", _FIXED_KINDS, ids=lambda kind: kind.name)
    def test_render_matches_lexeme(self, kind: TokenKind) -> None:
        token = _single(kind.value)
        assert render_token(token) == token.lexeme

    def test_eof_renders_to_empty_text(self) -> None:
        tokens, _ = scan("")
        assert render_token(tokens[0]) == ""


class TestRenderLiterals:
    def test_identifier_renders_to_name(self) -> None:
        assert render_token(_single("counter")) == "counter"

    def test_string_renders_quoted(self) -> None:
        assert render_token(_single('"hello world"')) == '"hello world"'

    def test_integral_number_renders_without_fraction(self) -> None:
        assert render_token(_single("2")) == "2"
        assert render_token(_single("2.0")) == "2"

    def test_fractional_number_renders_shortest_form(self) -> None:
        assert render_token(_single("0.1")) == "0.1"
        assert render_token(_single("12.5")) == "12.5"

    def test_rendered_number_rescans_to_same_value(self) -> None:
        token = _single("3.14159")
        assert _single(render_token(token)).literal == token.literal

    def test_small_fraction_renders_positionally(self) -> None:
        token = _single("0.00001")
        assert render_token(token) == "0.00001"
        assert _single(render_token(token)).literal == token.literal

    def test_negative_number_renders_with_sign(self) -> None:
        assert render_token(Token(TokenKind.NUMBER, "", 1, 0, -2.5)) == "-2.5"

    def test_infinite_number_renders_as_inf(self) -> None:
        assert render_token(_single("9" * 60)) == "inf"


# ###############
# 32-bit Conversion
# ###############


class TestToFloat32:
    def test_exact_values_are_unchanged(self) -> None:
        assert to_float32(0.5) == 0.5
        assert to_float32(1234.0) == 1234.0

    def test_inexact_value_is_rounded(self) -> None:
        assert to_float32(0.1) == pytest.approx(0.10000000149011612)

    def test_overflow_saturates(self) -> None:
        assert to_float32(1e60) == math.inf
        assert to_float32(-1e60) == -math.inf

    def test_infinity_passes_through(self) -> None:
        assert to_float32(math.inf) == math.inf


class TestParseFloat32:
    def test_integer_text(self) -> None:
        assert parse_float32("1234") == 1234.0

    def test_leading_zeros(self) -> None:
        assert parse_float32("0007.5") == 7.5

    def test_rounds_exact_decimal_once(self) -> None:
        # Rounding through a 64-bit float first would land on the tie and give 1.0.
        assert parse_float32("1.0000000596046447753906250001") == 1 + 2**-23

    def test_tie_rounds_to_even_mantissa(self) -> None:
        assert parse_float32("1.000000178813934326171875") == 1 + 2**-22

    def test_below_overflow_threshold_is_largest_float32(self) -> None:
        largest = 2**128 - 2**104
        assert parse_float32(str(2**128 - 2**103 - 1)) == float(largest)

    def test_overflow_threshold_is_infinity(self) -> None:
        assert parse_float32(str(2**128 - 2**103)) == math.inf

    def test_tiny_value_rounds_to_smallest_subnormal(self) -> None:
        assert parse_float32("0." + "0" * 44 + "1") == 2**-149

    def test_below_half_smallest_subnormal_is_zero(self) -> None:
        assert parse_float32("0." + "0" * 45 + "1") == 0.0
