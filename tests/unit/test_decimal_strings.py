"""
Тесты для Decimal Strings — bignum арифметика над десятичными строками

Проверяемые инварианты:
1. halve/subtract_one: один проход, ведущие нули удаляются
2. double/add_one: итоговый перенос вставляет ведущую '1'
3. halving_trace: нет двух SUBTRACT подряд, порядок от LSB к MSB
4. Магнитуды длиннее 64 бит обрабатываются без потерь
"""

import pytest

from src.core.math import (
    DOUBLE_TABLE,
    HALVE_TABLE,
    Operation,
    add_one,
    double,
    halve,
    halving_trace,
    is_even,
    subtract_one,
    to_digits,
    trim_leading_zeros,
)


def _apply(fn, text: str) -> str:
    digits = list(text)
    fn(digits)
    return "".join(digits)


# =============================================================================
# ТЕСТЫ: Lookup tables
# =============================================================================


class TestLookupTables:
    """Таблицы переносов покрывают все (digit, carry)."""

    def test_tables_complete(self):
        assert len(HALVE_TABLE) == 20
        assert len(DOUBLE_TABLE) == 20

    def test_halve_table_entries(self):
        assert HALVE_TABLE[("9", False)] == ("4", True)
        assert HALVE_TABLE[("9", True)] == ("9", True)
        assert HALVE_TABLE[("8", True)] == ("9", False)
        assert HALVE_TABLE[("0", True)] == ("5", False)
        assert HALVE_TABLE[("1", False)] == ("0", True)

    def test_double_table_entries(self):
        assert DOUBLE_TABLE[("9", False)] == ("8", True)
        assert DOUBLE_TABLE[("9", True)] == ("9", True)
        assert DOUBLE_TABLE[("4", True)] == ("9", False)
        assert DOUBLE_TABLE[("5", False)] == ("0", True)
        assert DOUBLE_TABLE[("0", True)] == ("1", False)


# =============================================================================
# ТЕСТЫ: Halve-and-track-parity
# =============================================================================


class TestHalveAndSubtract:
    """Тесты is_even, halve, subtract_one."""

    def test_is_even_by_last_digit(self):
        assert is_even(list("1234"))
        assert is_even(list("10"))
        assert not is_even(list("1235"))
        assert not is_even([])

    @pytest.mark.parametrize(
        "before, after",
        [
            ("5000", "2500"),
            ("10", "5"),
            ("2", "1"),
            ("18", "9"),
            ("1000000", "500000"),
            ("98765432109876543210", "49382716054938271605"),
        ],
    )
    def test_halve(self, before, after):
        assert _apply(halve, before) == after

    def test_halve_to_zero_is_empty(self):
        """0 / 2 → пустая строка (ноль)."""
        assert _apply(halve, "0") == ""

    @pytest.mark.parametrize(
        "before, after",
        [
            ("7", "6"),
            ("10", "9"),
            ("1000", "999"),
            ("2001", "2000"),
            ("1", ""),
        ],
    )
    def test_subtract_one(self, before, after):
        assert _apply(subtract_one, before) == after

    def test_non_digit_rejected(self):
        with pytest.raises(ValueError, match="Not a decimal digit"):
            halve(list("1a"))
        with pytest.raises(ValueError, match="Not a decimal digit"):
            subtract_one(list("x"))


class TestHalvingTrace:
    """Тесты halving_trace."""

    def test_trace_of_six(self):
        ops = halving_trace("6")
        assert ops == [
            Operation.DIVIDE,
            Operation.SUBTRACT,
            Operation.DIVIDE,
            Operation.SUBTRACT,
        ]

    def test_trace_of_zero_is_empty(self):
        assert halving_trace("0") == []
        assert halving_trace("") == []

    def test_input_not_mutated(self):
        digits = list("4088")
        halving_trace(digits)
        assert digits == list("4088")

    def test_no_consecutive_subtracts(self):
        """Нечётное минус один всегда чётное."""
        ops = halving_trace("123456789012345678901234567890")
        for prev, nxt in zip(ops, ops[1:]):
            assert not (prev == Operation.SUBTRACT and nxt == Operation.SUBTRACT)

    def test_trace_length_matches_bit_length(self):
        """DIVIDE на каждый бит, кроме самого старшего."""
        ops = halving_trace("1023")  # 10 бит
        assert ops.count(Operation.DIVIDE) == 9
        assert ops.count(Operation.SUBTRACT) == 10


# =============================================================================
# ТЕСТЫ: Double-and-add
# =============================================================================


class TestDoubleAndAdd:
    """Тесты double и add_one."""

    @pytest.mark.parametrize(
        "before, after",
        [
            ("1", "2"),
            ("5", "10"),
            ("49", "98"),
            ("500", "1000"),
            ("99999999999999999999", "199999999999999999998"),
        ],
    )
    def test_double(self, before, after):
        assert _apply(double, before) == after

    def test_double_empty_stays_empty(self):
        assert _apply(double, "") == ""

    @pytest.mark.parametrize(
        "before, after",
        [
            ("", "1"),
            ("0", "1"),
            ("8", "9"),
            ("9", "10"),
            ("1299", "1300"),
            ("999", "1000"),
        ],
    )
    def test_add_one(self, before, after):
        assert _apply(add_one, before) == after

    def test_double_and_add_accumulates_binary(self):
        """Аккумуляция 11111101000₂ = 2024."""
        acc: list[str] = []
        for c in "11111101000":
            double(acc)
            if c == "1":
                add_one(acc)
        assert "".join(acc) == "2024"


class TestHelpers:
    def test_to_digits(self):
        assert to_digits("0123") == ["0", "1", "2", "3"]
        with pytest.raises(ValueError):
            to_digits("12a")

    def test_trim_leading_zeros(self):
        assert _apply(trim_leading_zeros, "000120") == "120"
        assert _apply(trim_leading_zeros, "000") == ""
