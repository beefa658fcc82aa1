"""
Writer — Энкодер BitSequence в строку

- Префикс 0b/0o/0x (decimal без префикса)
- Пустая последовательность → "0"
- Decimal: double-and-add по битам от MSB к LSB; в signed режиме при
  установленном sign bit выводится '-' и последовательность негируется на месте
- Binary/octal/hex: чанки по 1/3/4 бита, алфавит 0-9A-F (или a-f)
- Разделитель групп отсчитывается от младшей цифры: 3 для decimal,
  2 для octal/hex, 8 для binary

Ошибок нет: декодер уже гарантировал представимую магнитуду.
"""

from typing import Final, Optional

from src.core.domain import BitSequence, WriteMode, negate
from src.core.math import add_one, double


# =============================================================================
# CONSTANTS
# =============================================================================

WRITE_PREFIXES: Final[dict[WriteMode, str]] = {
    WriteMode.BINARY: "0b",
    WriteMode.OCTAL: "0o",
    WriteMode.HEX: "0x",
    WriteMode.DECIMAL: "",
}

DIGIT_ALPHABET_UPPER: Final[str] = "0123456789ABCDEF"
DIGIT_ALPHABET_LOWER: Final[str] = "0123456789abcdef"

# Бит на выходную цифру
BITS_PER_DIGIT: Final[dict[WriteMode, int]] = {
    WriteMode.BINARY: 1,
    WriteMode.OCTAL: 3,
    WriteMode.HEX: 4,
}

# Цифр в группе между разделителями
DIGITS_PER_GROUP: Final[dict[WriteMode, int]] = {
    WriteMode.BINARY: 8,
    WriteMode.OCTAL: 2,
    WriteMode.HEX: 2,
    WriteMode.DECIMAL: 3,
}


# =============================================================================
# DECIMAL
# =============================================================================


def _group_digits(chars: list[str], group: int, separator: Optional[str]) -> str:
    """Вставка разделителя каждые group символов, считая от младшего."""
    if not separator:
        return "".join(chars)

    out: list[str] = []
    chars_in_group = (group - len(chars) % group) % group
    for i, c in enumerate(chars):
        out.append(c)
        chars_in_group += 1
        if chars_in_group == group and i < len(chars) - 1:
            out.append(separator)
            chars_in_group = 0
    return "".join(out)


def write_decimal(bits: BitSequence, separator: Optional[str], signed_mode: bool) -> str:
    """
    Десятичная запись через double-and-add.

    Args:
        bits: Непустая последовательность (мутируется при negation)
        separator: Разделитель тысяч или None
        signed_mode: Интерпретировать sign bit как знак

    Returns:
        Десятичная строка (с '-' для отрицательного значения)
    """
    sign = ""
    if signed_mode and bits.sign_bit:
        sign = "-"
        negate(bits)

    accumulator: list[str] = []
    for bit in bits:
        double(accumulator)
        if bit:
            add_one(accumulator)

    if not accumulator:
        # непустая последовательность из одних нулей
        accumulator = ["0"]

    return sign + _group_digits(accumulator, DIGITS_PER_GROUP[WriteMode.DECIMAL], separator)


# =============================================================================
# BINARY / OCTAL / HEX
# =============================================================================


def write_power_of_two(
    bits: BitSequence,
    write_mode: WriteMode,
    separator: Optional[str],
    uppercase: bool = True,
) -> str:
    """
    Запись в основании 2/8/16 чанками фиксированной ширины от MSB.

    Короткий хвостовой чанк (при корректном padding не возникает) прекращает вывод.
    """
    width = BITS_PER_DIGIT.get(write_mode)
    if width is None:
        raise ValueError(f"Unsupported write mode: {write_mode!r}")
    alphabet = DIGIT_ALPHABET_UPPER if uppercase else DIGIT_ALPHABET_LOWER

    chars: list[str] = []
    total = len(bits)
    for start in range(0, total - width + 1, width):
        index = 0
        for offset in range(width):
            index = (index << 1) | bits[start + offset]
        chars.append(alphabet[index])

    return _group_digits(chars, DIGITS_PER_GROUP[write_mode], separator)


# =============================================================================
# WRITE
# =============================================================================


def write(
    bits: BitSequence,
    write_mode: WriteMode,
    separator: Optional[str],
    signed_mode: bool,
    write_prefix: bool,
    uppercase: bool = True,
) -> str:
    """
    Кодирование BitSequence в строку выходного основания.

    Args:
        bits: Последовательность (может быть мутирована: decimal negation)
        write_mode: Выходное основание
        separator: Разрешённый разделитель групп или None
        signed_mode: Two's complement режим (влияет только на decimal)
        write_prefix: Выводить префикс 0b/0o/0x
        uppercase: Регистр hex-цифр

    Returns:
        Отформатированная строка
    """
    if write_mode not in WRITE_PREFIXES:
        raise ValueError(f"Unsupported write mode: {write_mode!r}")

    prefix = WRITE_PREFIXES[write_mode] if write_prefix else ""

    if bits.is_empty:
        return prefix + "0"

    if write_mode == WriteMode.DECIMAL:
        return prefix + write_decimal(bits, separator, signed_mode)

    return prefix + write_power_of_two(bits, write_mode, separator, uppercase)
