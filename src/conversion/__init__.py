"""Conversion — движок radix-конверсии.

- reader: токен → BitSequence (знак, префиксы, основание, ширина)
- writer: BitSequence → строка (знак, префикс, разделители, регистр)
- converter: оркестратор read → write
"""

from .converter import ConversionResult, RadixConverter, convert
from .errors import (
    ConversionError,
    InvalidCharacterError,
    SignPolicyViolation,
    WidthOverflowError,
)
from .reader import read
from .writer import write

__all__ = [
    # Orchestrator
    "convert",
    "ConversionResult",
    "RadixConverter",
    # Stages
    "read",
    "write",
    # Errors
    "ConversionError",
    "InvalidCharacterError",
    "SignPolicyViolation",
    "WidthOverflowError",
]
