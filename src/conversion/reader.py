"""
Reader — Декодер токена в BitSequence

Порядок обработки токена:
1. Снятие ведущего '-'
2. Разрешение основания (INTERPRET: префикс 0b/0x/0o, hex-буквы, иначе decimal)
3. Снятие канонического префикса для фиксированного основания
4. Проверка знака (unsigned режим, '-' только для decimal)
5. Раскрытие цифр в биты (decimal — через halving_trace)
6. Нормализация до минимальной магнитуды
7. Выравнивание по политике ширины (или WidthOverflowError)
8. Two's complement negation для отрицательного decimal

Все ошибки — подклассы ConversionError.
"""

import logging
from typing import Final

from src.core.domain import (
    BitSequence,
    LengthKind,
    ReadMode,
    WriteLength,
    WriteMode,
    negate,
)
from src.core.math import DECIMAL_DIGITS, Operation, halving_trace
from src.conversion.errors import (
    NON_DECIMAL_NEGATIVE_MESSAGE,
    UNSIGNED_NEGATIVE_MESSAGE,
    InvalidCharacterError,
    SignPolicyViolation,
    WidthOverflowError,
)

_log = logging.getLogger(__name__)


# =============================================================================
# ALPHABETS & PREFIXES
# =============================================================================

NEGATIVE_SIGN: Final[str] = "-"

# Канонические префиксы фиксированных оснований (decimal без префикса)
READ_PREFIXES: Final[dict[ReadMode, str]] = {
    ReadMode.BINARY: "0b",
    ReadMode.HEX: "0x",
    ReadMode.OCTAL: "0o",
}

# Порядок проверки префиксов в режиме INTERPRET
INTERPRET_PREFIX_ORDER: Final[tuple[tuple[str, ReadMode], ...]] = (
    ("0b", ReadMode.BINARY),
    ("0x", ReadMode.HEX),
    ("0o", ReadMode.OCTAL),
)

HEX_LETTERS: Final[frozenset[str]] = frozenset("abcdefABCDEF")

# Имена оснований в сообщениях об ошибках
BASE_NAMES: Final[dict[ReadMode, str]] = {
    ReadMode.BINARY: "binary",
    ReadMode.OCTAL: "octal",
    ReadMode.HEX: "hexadecimal",
    ReadMode.DECIMAL: "decimal",
}


def _bit_pattern(value: int, width: int) -> tuple[bool, ...]:
    return tuple(bool((value >> shift) & 1) for shift in reversed(range(width)))


# Фиксированные битовые шаблоны цифр, MSB first
BINARY_DIGIT_BITS: Final[dict[str, tuple[bool, ...]]] = {
    "0": (False,),
    "1": (True,),
}

OCTAL_DIGIT_BITS: Final[dict[str, tuple[bool, ...]]] = {
    d: _bit_pattern(i, 3) for i, d in enumerate("01234567")
}

HEX_DIGIT_BITS: Final[dict[str, tuple[bool, ...]]] = {
    **{d: _bit_pattern(i, 4) for i, d in enumerate("0123456789ABCDEF")},
    **{d: _bit_pattern(i + 10, 4) for i, d in enumerate("abcdef")},
}

_DIGIT_TABLES: Final[dict[ReadMode, dict[str, tuple[bool, ...]]]] = {
    ReadMode.BINARY: BINARY_DIGIT_BITS,
    ReadMode.OCTAL: OCTAL_DIGIT_BITS,
    ReadMode.HEX: HEX_DIGIT_BITS,
}


# =============================================================================
# PREFIX / SIGN HANDLING
# =============================================================================


def strip_sign(token: str) -> tuple[bool, str]:
    """
    Снятие одного ведущего '-'.

    Returns:
        (negative, остаток токена)
    """
    if token.startswith(NEGATIVE_SIGN):
        return True, token[len(NEGATIVE_SIGN):]
    return False, token


def resolve_base(text: str, read_mode: ReadMode) -> tuple[ReadMode, str]:
    """
    Разрешение основания и снятие префикса.

    INTERPRET: 0b → binary, 0x → hex, 0o → octal (в этом порядке);
    иначе наличие a-f/A-F → hex; иначе decimal.
    Фиксированное основание: снимается его канонический префикс, если есть.

    Args:
        text: Токен без знака
        read_mode: Настроенный режим чтения

    Returns:
        (разрешённое основание, цифры без префикса)

    Raises:
        ValueError: Для неизвестного режима чтения
    """
    if read_mode == ReadMode.INTERPRET:
        for prefix, mode in INTERPRET_PREFIX_ORDER:
            if text.startswith(prefix):
                return mode, text[len(prefix):]
        if any(c in HEX_LETTERS for c in text):
            return ReadMode.HEX, text
        return ReadMode.DECIMAL, text

    if read_mode in READ_PREFIXES:
        prefix = READ_PREFIXES[read_mode]
        if text.startswith(prefix):
            return read_mode, text[len(prefix):]
        return read_mode, text

    if read_mode == ReadMode.DECIMAL:
        return read_mode, text

    raise ValueError(f"Unsupported read mode: {read_mode!r}")


def check_sign_policy(negative: bool, base: ReadMode, signed_mode: bool) -> None:
    """
    Raises:
        SignPolicyViolation: '-' в unsigned режиме или на не-decimal основании
    """
    if not negative:
        return
    if not signed_mode:
        raise SignPolicyViolation(UNSIGNED_NEGATIVE_MESSAGE)
    if base != ReadMode.DECIMAL:
        raise SignPolicyViolation(NON_DECIMAL_NEGATIVE_MESSAGE)


# =============================================================================
# DIGIT EXPANSION
# =============================================================================


def expand_digits(digits: str, base: ReadMode) -> BitSequence:
    """
    Раскрытие цифр фиксированного шаблона (binary 1, octal 3, hex 4 бита на цифру).

    Raises:
        InvalidCharacterError: Первый символ вне алфавита основания
    """
    table = _DIGIT_TABLES.get(base)
    if table is None:
        raise ValueError(f"No digit table for read mode: {base!r}")

    bits = BitSequence()
    for c in digits:
        pattern = table.get(c)
        if pattern is None:
            raise InvalidCharacterError(c, BASE_NAMES[base])
        for bit in pattern:
            bits.append(bit)
    return bits


def decimal_to_bits(digits: str) -> BitSequence:
    """
    Десятичная строка → биты через halve-and-track-parity.

    Операции halving_trace (от LSB к MSB) проигрываются в обратном порядке:
    DIVIDE дописывает 0, SUBTRACT заменяет последний дописанный бит на 1.

    Raises:
        InvalidCharacterError: Если любой символ — не ASCII-цифра
    """
    for c in digits:
        if c not in DECIMAL_DIGITS:
            raise InvalidCharacterError(c, BASE_NAMES[ReadMode.DECIMAL])

    bits = BitSequence()
    for op in reversed(halving_trace(digits)):
        if op == Operation.DIVIDE:
            bits.append(False)
        elif op == Operation.SUBTRACT:
            bits.pop()
            bits.append(True)
        else:
            raise ValueError(f"Unsupported operation: {op!r}")
    return bits


# =============================================================================
# WIDTH POLICY
# =============================================================================


def _next_multiple_of(value: int, step: int) -> int:
    return -(-value // step) * step


def target_length(minimal_length: int, write_mode: WriteMode, write_length: WriteLength) -> int:
    """
    Требуемая длина последовательности в битах.

    - UNFIXED: до кратного группы выходной цифры (hex 4, octal 3, иначе 1)
    - ROUND_UP: до кратного 8 (binary/hex), 6 (octal), 1 (decimal)
    - FIXED(n): decimal — минимальная длина; octal n*6; binary/hex n*8

    Args:
        minimal_length: Длина нормализованной последовательности
        write_mode: Выходное основание
        write_length: Политика ширины

    Returns:
        Целевая длина в битах
    """
    if write_length.kind == LengthKind.UNFIXED:
        step = {
            WriteMode.HEX: 4,
            WriteMode.OCTAL: 3,
            WriteMode.BINARY: 1,
            WriteMode.DECIMAL: 1,
        }.get(write_mode)
        if step is None:
            raise ValueError(f"Unsupported write mode: {write_mode!r}")
        return _next_multiple_of(minimal_length, step)

    if write_length.kind == LengthKind.ROUND_UP:
        step = {
            WriteMode.BINARY: 8,
            WriteMode.HEX: 8,
            WriteMode.OCTAL: 6,
            WriteMode.DECIMAL: 1,
        }.get(write_mode)
        if step is None:
            raise ValueError(f"Unsupported write mode: {write_mode!r}")
        return _next_multiple_of(minimal_length, step)

    if write_length.kind == LengthKind.FIXED:
        if write_mode == WriteMode.DECIMAL:
            return minimal_length
        if write_mode == WriteMode.OCTAL:
            return write_length.length * 6
        if write_mode in (WriteMode.BINARY, WriteMode.HEX):
            return write_length.length * 8
        raise ValueError(f"Unsupported write mode: {write_mode!r}")

    raise ValueError(f"Unsupported write length: {write_length!r}")


# =============================================================================
# READ
# =============================================================================


def read(
    token: str,
    read_mode: ReadMode,
    write_mode: WriteMode,
    write_length: WriteLength,
    signed_mode: bool,
) -> BitSequence:
    """
    Декодирование токена в BitSequence.

    Args:
        token: Входной токен (например, "-42", "0xff", "1010")
        read_mode: Основание входа или INTERPRET
        write_mode: Основание выхода (определяет гранулярность ширины)
        write_length: Политика ширины
        signed_mode: Two's complement режим

    Returns:
        BitSequence целевой длины (two's complement для отрицательного decimal)

    Raises:
        SignPolicyViolation: Недопустимый '-'
        InvalidCharacterError: Символ вне алфавита основания
        WidthOverflowError: Магнитуда не помещается в FIXED ширину
    """
    negative, unsigned_text = strip_sign(token)
    base, digits = resolve_base(unsigned_text, read_mode)
    _log.debug("token %r resolved as %s (negative=%s)", token, base.value, negative)

    check_sign_policy(negative, base, signed_mode)

    if base == ReadMode.DECIMAL:
        bits = decimal_to_bits(digits)
    else:
        bits = expand_digits(digits, base)

    bits.trim_leading_zeros()

    length = target_length(len(bits), write_mode, write_length)
    if len(bits) > length:
        raise WidthOverflowError(required_bits=len(bits), available_bits=length)
    bits.pad_to(length)
    _log.debug("token %r padded to %d bits", token, length)

    if negative and base == ReadMode.DECIMAL:
        negate(bits)

    return bits
