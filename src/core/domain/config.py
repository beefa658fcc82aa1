"""
ConversionConfig — Запись конфигурации конвертера

Pydantic модель, которую внешний слой (CLI, stdin loop) собирает один раз
и передаёт движку вместе с каждым токеном.
Полная совместимость с JSON Schema (contracts/schema/conversion_config.json).

Модель НЕ frozen: единственная мутация — разрешение отложенного разделителя
(RUNTIME_DETERMINE → SEPARATOR) при первой конверсии, после чего все
последующие токены используют уже разрешённый разделитель.
Значения по умолчанию совпадают с дефолтами утилиты hex.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from src.core.contracts import (
    CONVERSION_CONFIG_SCHEMA_VERSION,
    validate_conversion_config,
)
from src.core.domain.modes import ReadMode, WriteLength, WriteMode, WriteSeparator


class ConversionConfig(BaseModel):
    """
    Конфигурация конверсии.

    Все поля валидируются и при присваивании (validate_assignment).
    """

    read_mode: ReadMode = Field(ReadMode.INTERPRET, description="Основание входа")
    write_mode: WriteMode = Field(WriteMode.HEX, description="Основание выхода")
    uppercase: bool = Field(True, description="Верхний регистр hex-цифр")
    write_length: WriteLength = Field(
        default_factory=WriteLength.unfixed, description="Политика ширины"
    )
    separator: WriteSeparator = Field(
        default_factory=WriteSeparator.none, description="Политика разделителя групп"
    )
    signed_mode: bool = Field(False, description="Two's complement режим")
    write_prefix: bool = Field(True, description="Префикс 0b/0o/0x на выходе")

    model_config = {"validate_assignment": True}

    def resolve_separator(self) -> bool:
        """
        Разрешение отложенного разделителя на месте.

        Returns:
            True если разделитель был разрешён этим вызовом
        """
        if not self.separator.is_deferred:
            return False
        self.separator = self.separator.resolve(self.write_mode)
        return True

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "ConversionConfig":
        """
        Построение конфигурации из dict, прошедшего JSON Schema валидацию.

        Args:
            data: conversion_config данные

        Returns:
            ConversionConfig

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту
            pydantic.ValidationError: Если данные нарушают инварианты модели
        """
        validate_conversion_config(data)
        fields = {k: v for k, v in data.items() if k != "schema_version"}
        return cls.model_validate(fields)

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в conversion_config dict (JSON-совместимый)."""
        data = self.model_dump(mode="json")
        data["schema_version"] = CONVERSION_CONFIG_SCHEMA_VERSION
        return data
