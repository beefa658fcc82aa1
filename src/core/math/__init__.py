"""
Core math modules для radix-конвертера

Bignum арифметика над строками десятичных цифр без fixed-width целых.
"""

# Decimal Strings (halve-and-track-parity, double-and-add)
from src.core.math.decimal_strings import (
    # Constants
    DECIMAL_DIGITS,
    DOUBLE_TABLE,
    HALVE_TABLE,
    # Types
    Operation,
    # Halve-and-track-parity
    halve,
    halving_trace,
    is_even,
    subtract_one,
    # Double-and-add
    add_one,
    double,
    # Utilities
    to_digits,
    trim_leading_zeros,
)

__all__ = [
    # Decimal Strings — Constants
    "DECIMAL_DIGITS",
    "DOUBLE_TABLE",
    "HALVE_TABLE",
    # Decimal Strings — Types
    "Operation",
    # Decimal Strings — Halve-and-track-parity
    "halve",
    "halving_trace",
    "is_even",
    "subtract_one",
    # Decimal Strings — Double-and-add
    "add_one",
    "double",
    # Decimal Strings — Utilities
    "to_digits",
    "trim_leading_zeros",
]
