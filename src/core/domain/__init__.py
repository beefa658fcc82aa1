"""
Domain models and value objects.

Contains the bit-sequence data model, read/write modes, width and separator
policies, and the conversion configuration record.
"""

from src.core.domain.bit_sequence import BitSequence, negate
from src.core.domain.config import ConversionConfig
from src.core.domain.modes import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_DIGIT_SEPARATOR,
    LengthKind,
    ReadMode,
    SeparatorKind,
    WriteLength,
    WriteMode,
    WriteSeparator,
)

__all__ = [
    # Bit sequence
    "BitSequence",
    "negate",
    # Modes
    "ReadMode",
    "WriteMode",
    "LengthKind",
    "SeparatorKind",
    "WriteLength",
    "WriteSeparator",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_DIGIT_SEPARATOR",
    # Configuration
    "ConversionConfig",
]
