"""
Decimal Strings — Bignum арифметика над строками десятичных цифр

Строка цифр — list[str] из ASCII-цифр, старшая цифра первой.
Пустой список обозначает ноль.

Два независимых алгоритма:
- Halve-and-track-parity (декодирование decimal → биты):
  is_even / halve / subtract_one + halving_trace
- Double-and-add (кодирование биты → decimal):
  double / add_one

Все операции in place, за один проход O(n) по цифрам, через lookup-таблицы
(digit, carry) → (digit, carry). Ведущие нули удаляются после каждого
halve/subtract_one, так что длина всегда отражает истинную магнитуду.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого int() для всей строки: только поцифровые переносы
2. Между вызовами не хранится никакого состояния, кроме самого списка цифр
3. Не-цифровой символ → ValueError (декодер валидирует вход заранее)
"""

from enum import Enum
from typing import Final, Iterable

DECIMAL_DIGITS: Final[str] = "0123456789"

EVEN_DIGITS: Final[frozenset[str]] = frozenset("02468")


# =============================================================================
# LOOKUP TABLES
# =============================================================================

# halve: (digit, carry_in) → (digit_out, carry_out)
# carry_in означает "10" от предыдущей (старшей) цифры
HALVE_TABLE: Final[dict[tuple[str, bool], tuple[str, bool]]] = {
    (d, carry): (DECIMAL_DIGITS[(int(d) + 10 * carry) // 2], (int(d) + 10 * carry) % 2 == 1)
    for d in DECIMAL_DIGITS
    for carry in (False, True)
}

# double: (digit, carry_in) → (digit_out, carry_out)
# carry_in приходит от предыдущей (младшей) цифры
DOUBLE_TABLE: Final[dict[tuple[str, bool], tuple[str, bool]]] = {
    (d, carry): (DECIMAL_DIGITS[(2 * int(d) + carry) % 10], 2 * int(d) + carry >= 10)
    for d in DECIMAL_DIGITS
    for carry in (False, True)
}

# subtract_one: digit → digit - 1 (mod 10); '0' → '9' означает заём
DECREMENT_TABLE: Final[dict[str, str]] = {
    d: DECIMAL_DIGITS[(i - 1) % 10] for i, d in enumerate(DECIMAL_DIGITS)
}

# add_one: digit → digit + 1 (mod 10); '9' → '0' означает перенос
INCREMENT_TABLE: Final[dict[str, str]] = {
    d: DECIMAL_DIGITS[(i + 1) % 10] for i, d in enumerate(DECIMAL_DIGITS)
}


class Operation(str, Enum):
    """Шаг редукции десятичной строки к нулю"""

    DIVIDE = "divide"
    SUBTRACT = "subtract"


# =============================================================================
# HELPERS
# =============================================================================


def to_digits(text: str) -> list[str]:
    """
    Строка → список цифр.

    Raises:
        ValueError: Если встречен не-ASCII-цифровой символ
    """
    digits = list(text)
    for c in digits:
        if c not in DECIMAL_DIGITS:
            raise ValueError(f"Not a decimal digit: {c!r}")
    return digits


def trim_leading_zeros(digits: list[str]) -> None:
    """Удаление ведущих '0' (in place). Ноль становится пустым списком."""
    first_nonzero = next((i for i, c in enumerate(digits) if c != "0"), len(digits))
    del digits[:first_nonzero]


def _lookup(table: dict, key, digit: str):
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"Not a decimal digit: {digit!r}") from None


# =============================================================================
# HALVE-AND-TRACK-PARITY
# =============================================================================


def is_even(digits: list[str]) -> bool:
    """
    Чётность по последней цифре.

    Пустая строка (ноль) возвращает False; halving_trace останавливается
    раньше, чем строка становится пустой.
    """
    return bool(digits) and digits[-1] in EVEN_DIGITS


def halve(digits: list[str]) -> None:
    """
    Деление на 2 (in place): один проход слева направо.

    Предполагается чётное значение; для нечётного остаток теряется.

    Examples:
        >>> d = list("5000")
        >>> halve(d)
        >>> "".join(d)
        '2500'
    """
    carry = False
    for i, c in enumerate(digits):
        digits[i], carry = _lookup(HALVE_TABLE, (c, carry), c)
    trim_leading_zeros(digits)


def subtract_one(digits: list[str]) -> None:
    """
    Вычитание 1 (in place): справа налево, заём через хвостовые '0' → '9'.

    Examples:
        >>> d = list("1000")
        >>> subtract_one(d)
        >>> "".join(d)
        '999'
    """
    for i in reversed(range(len(digits))):
        c = digits[i]
        digits[i] = _lookup(DECREMENT_TABLE, c, c)
        if digits[i] != "9":
            break
    trim_leading_zeros(digits)


def halving_trace(digits: Iterable[str]) -> list[Operation]:
    """
    Редукция десятичной строки к нулю.

    Пока строка не пуста: чётная → halve (DIVIDE), нечётная → subtract_one
    (SUBTRACT). Два SUBTRACT подряд невозможны: нечётное минус один — чётное.

    Args:
        digits: Десятичные цифры (не мутируются)

    Returns:
        Операции от младшего бита к старшему

    Examples:
        >>> [op.value for op in halving_trace("6")]
        ['divide', 'subtract', 'divide', 'subtract']
    """
    work = list(digits)
    trim_leading_zeros(work)
    ops: list[Operation] = []
    while work:
        if is_even(work):
            halve(work)
            ops.append(Operation.DIVIDE)
        else:
            subtract_one(work)
            ops.append(Operation.SUBTRACT)
    return ops


# =============================================================================
# DOUBLE-AND-ADD
# =============================================================================


def double(digits: list[str]) -> None:
    """
    Умножение на 2 (in place): справа налево; итоговый перенос → ведущая '1'.

    Удвоение пустого аккумулятора (ноль) оставляет его пустым.
    """
    carry = False
    for i in reversed(range(len(digits))):
        c = digits[i]
        digits[i], carry = _lookup(DOUBLE_TABLE, (c, carry), c)
    if carry:
        digits.insert(0, "1")


def add_one(digits: list[str]) -> None:
    """
    Прибавление 1 (in place): справа налево с переносом через '9' → '0'.

    Examples:
        >>> d = list("999")
        >>> add_one(d)
        >>> "".join(d)
        '1000'
        >>> d = []
        >>> add_one(d)
        >>> d
        ['1']
    """
    for i in reversed(range(len(digits))):
        c = digits[i]
        digits[i] = _lookup(INCREMENT_TABLE, c, c)
        if digits[i] != "0":
            return
    digits.insert(0, "1")
