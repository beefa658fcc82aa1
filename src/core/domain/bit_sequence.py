"""
BitSequence — Битовое представление магнитуды

Упорядоченная последовательность булевых цифр, индекс 0 — старший бит (MSB).
Пустая последовательность обозначает ноль.

Последовательность принадлежит одной конверсии: создаётся декодером,
может быть мутирована на месте (two's complement negation) и затем
потребляется энкодером. Между токенами не переиспользуется.

ИНВАРИАНТЫ:
1. Нет неявного padding, кроме запрошенного вызывающим кодом (pad_to)
2. Пустая последовательность == ноль
3. negate() всегда успешен, включая пустую последовательность
"""

from typing import Iterable, Iterator, Optional


class BitSequence:
    """
    Mutable последовательность бит, MSB first.

    Examples:
        >>> bits = BitSequence.from_bit_string("0101")
        >>> bits.trim_leading_zeros()
        >>> bits.to_bit_string()
        '101'
        >>> bits.negate()
        >>> bits.to_bit_string()
        '011'
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Optional[Iterable[bool]] = None):
        self._bits: list[bool] = [bool(b) for b in bits] if bits is not None else []

    @classmethod
    def from_bit_string(cls, text: str) -> "BitSequence":
        """
        Построение из строки вида "0101".

        Raises:
            ValueError: Если строка содержит символы кроме '0' и '1'
        """
        bits = []
        for c in text:
            if c == "0":
                bits.append(False)
            elif c == "1":
                bits.append(True)
            else:
                raise ValueError(f"Invalid bit character: {c!r}")
        return cls(bits)

    def to_bit_string(self) -> str:
        return "".join("1" if b else "0" for b in self._bits)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __getitem__(self, index: int) -> bool:
        return self._bits[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"BitSequence('{self.to_bit_string()}')"

    @property
    def is_empty(self) -> bool:
        return not self._bits

    @property
    def sign_bit(self) -> bool:
        """Старший бит (two's complement sign bit). False для пустой последовательности."""
        return bool(self._bits) and self._bits[0]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def append(self, bit: bool) -> None:
        """Добавить бит в младшую позицию (LSB)."""
        self._bits.append(bool(bit))

    def pop(self) -> Optional[bool]:
        """Удалить и вернуть младший бит; None если последовательность пуста."""
        if not self._bits:
            return None
        return self._bits.pop()

    def trim_leading_zeros(self) -> None:
        """Нормализация до минимальной магнитуды (удаление ведущих False)."""
        first_set = next((i for i, b in enumerate(self._bits) if b), len(self._bits))
        del self._bits[:first_set]

    def pad_to(self, length: int) -> None:
        """
        Left-pad нулями до заданной длины.

        Если последовательность уже не короче length, ничего не делает.
        """
        missing = length - len(self._bits)
        if missing > 0:
            self._bits[:0] = [False] * missing

    def negate(self) -> None:
        """Умножение на -1 в two's complement (in place). См. negate()."""
        negate(self)


def negate(seq: BitSequence) -> None:
    """
    Two's complement negation на месте.

    1. Инверсия каждого бита
    2. "+1": проход от LSB, каждый бит инвертируется, пока какой-то
       бит не перейдёт из False в True

    Args:
        seq: Последовательность для мутации

    Examples:
        >>> bits = BitSequence.from_bit_string("00000001")
        >>> negate(bits)
        >>> bits.to_bit_string()
        '11111111'
    """
    bits = seq._bits
    for i in range(len(bits)):
        bits[i] = not bits[i]

    for i in reversed(range(len(bits))):
        bits[i] = not bits[i]
        if bits[i]:
            break
