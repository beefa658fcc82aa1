"""
Conversion errors — таксономия ошибок декодирования

Все ошибки обнаруживаются декодером и не восстанавливаются для данного токена:
оркестратор возвращает первую из них без частичного вывода.
Энкодер ошибок не имеет.

Тексты сообщений — часть публичного контракта и воспроизводятся дословно.
"""

from typing import Final


# =============================================================================
# MESSAGES
# =============================================================================

UNSIGNED_NEGATIVE_MESSAGE: Final[str] = "Negative numbers not allowed in unsigned mode"

NON_DECIMAL_NEGATIVE_MESSAGE: Final[str] = "- operator is only allowed with decimal numbers"

WIDTH_OVERFLOW_MESSAGE: Final[str] = "Number unrepresentable in fixed width"

INVALID_CHARACTER_TEMPLATE: Final[str] = "Character {character} not allowed in {base_name} numbers"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(Exception):
    """Базовая ошибка конверсии токена."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SignPolicyViolation(ConversionError):
    """
    Знак '-' недопустим для данного токена:
    - unsigned режим
    - основание не decimal (отрицательные литералы пишутся только в decimal)
    """
    pass


class InvalidCharacterError(ConversionError):
    """Символ вне алфавита разрешённого основания."""

    def __init__(self, character: str, base_name: str):
        super().__init__(
            INVALID_CHARACTER_TEMPLATE.format(character=character, base_name=base_name)
        )
        self.character = character
        self.base_name = base_name


class WidthOverflowError(ConversionError):
    """Минимальная магнитуда не помещается в фиксированную ширину."""

    def __init__(self, required_bits: int = 0, available_bits: int = 0):
        super().__init__(WIDTH_OVERFLOW_MESSAGE)
        self.required_bits = required_bits
        self.available_bits = available_bits
