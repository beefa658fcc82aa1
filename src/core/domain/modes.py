"""
Modes — Режимы чтения/записи и политики ширины и разделителей

Immutable Pydantic модели для tagged-union политик:
- WriteLength: UNFIXED / ROUND_UP / FIXED(n)
- WriteSeparator: SEPARATOR(text) / RUNTIME_DETERMINE / NONE

Dispatch по каждому enum заканчивается явным ValueError для неизвестного
значения (exhaustiveness check).
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ReadMode(str, Enum):
    """Основание входного токена. INTERPRET — автоопределение по префиксу."""

    BINARY = "binary"
    DECIMAL = "decimal"
    HEX = "hex"
    OCTAL = "octal"
    INTERPRET = "interpret"


class WriteMode(str, Enum):
    """Основание выходной строки. Регистр hex задаётся отдельным флагом uppercase."""

    BINARY = "binary"
    DECIMAL = "decimal"
    HEX = "hex"
    OCTAL = "octal"


class LengthKind(str, Enum):
    """Вариант политики ширины"""

    UNFIXED = "unfixed"
    ROUND_UP = "round_up"
    FIXED = "fixed"


class SeparatorKind(str, Enum):
    """Вариант политики разделителя групп цифр"""

    SEPARATOR = "separator"
    RUNTIME_DETERMINE = "runtime_determine"
    NONE = "none"


# =============================================================================
# DEFAULTS
# =============================================================================

# Разделитель по умолчанию для десятичного вывода (группы по 3 цифры)
DEFAULT_DECIMAL_SEPARATOR: Final[str] = ","

# Разделитель по умолчанию для binary/octal/hex
DEFAULT_DIGIT_SEPARATOR: Final[str] = " "


# =============================================================================
# WIDTH POLICY
# =============================================================================


class WriteLength(BaseModel):
    """
    Политика ширины вывода.

    - UNFIXED: минимальная длина, выровненная по группе выходного основания
    - ROUND_UP: выравнивание до "красивой" границы (байт, 6-битный байт для octal)
    - FIXED(n): ровно n байт (n*8 бит, для octal n*6); для decimal игнорируется
    """

    kind: LengthKind = Field(LengthKind.UNFIXED, description="Вариант политики")
    length: int | None = Field(
        None, ge=0, description="Ширина в байтах (только для FIXED)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_length_matches_kind(self) -> "WriteLength":
        """length обязателен для FIXED и запрещён для остальных вариантов"""
        if self.kind == LengthKind.FIXED and self.length is None:
            raise ValueError("FIXED write length requires a byte count")
        if self.kind != LengthKind.FIXED and self.length is not None:
            raise ValueError(f"{self.kind.value} write length takes no byte count")
        return self

    @classmethod
    def unfixed(cls) -> "WriteLength":
        return cls(kind=LengthKind.UNFIXED)

    @classmethod
    def round_up(cls) -> "WriteLength":
        return cls(kind=LengthKind.ROUND_UP)

    @classmethod
    def fixed(cls, length: int) -> "WriteLength":
        return cls(kind=LengthKind.FIXED, length=length)


# =============================================================================
# SEPARATOR POLICY
# =============================================================================


class WriteSeparator(BaseModel):
    """
    Политика разделителя групп цифр.

    RUNTIME_DETERMINE откладывает выбор до первой конверсии: decimal → ",",
    остальные основания → " ".
    """

    kind: SeparatorKind = Field(SeparatorKind.NONE, description="Вариант политики")
    text: str | None = Field(None, description="Строка разделителя (только для SEPARATOR)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_text_matches_kind(self) -> "WriteSeparator":
        if self.kind == SeparatorKind.SEPARATOR:
            if not self.text:
                raise ValueError("Empty separator")
        elif self.text is not None:
            raise ValueError(f"{self.kind.value} separator takes no text")
        return self

    @classmethod
    def explicit(cls, text: str) -> "WriteSeparator":
        return cls(kind=SeparatorKind.SEPARATOR, text=text)

    @classmethod
    def deferred(cls) -> "WriteSeparator":
        return cls(kind=SeparatorKind.RUNTIME_DETERMINE)

    @classmethod
    def none(cls) -> "WriteSeparator":
        return cls(kind=SeparatorKind.NONE)

    @property
    def is_deferred(self) -> bool:
        return self.kind == SeparatorKind.RUNTIME_DETERMINE

    def resolve(self, write_mode: WriteMode) -> "WriteSeparator":
        """
        Разрешение отложенного разделителя для выходного основания.

        Args:
            write_mode: Выходное основание

        Returns:
            self для SEPARATOR/NONE, иначе явный SEPARATOR по умолчанию
        """
        if not self.is_deferred:
            return self

        if write_mode == WriteMode.DECIMAL:
            return WriteSeparator.explicit(DEFAULT_DECIMAL_SEPARATOR)
        if write_mode in (WriteMode.BINARY, WriteMode.OCTAL, WriteMode.HEX):
            return WriteSeparator.explicit(DEFAULT_DIGIT_SEPARATOR)
        raise ValueError(f"Unsupported write mode: {write_mode!r}")

    def as_text(self) -> str | None:
        """
        Строка разделителя для энкодера.

        Raises:
            ValueError: Если политика ещё не разрешена (RUNTIME_DETERMINE)
        """
        if self.kind == SeparatorKind.SEPARATOR:
            return self.text
        if self.kind == SeparatorKind.NONE:
            return None
        raise ValueError("Deferred separator must be resolved before writing")
