"""
Converter — Оркестратор конверсии токена

convert(token, config):
1. Разрешение отложенного разделителя (один раз, мутирует config.separator)
2. read() → BitSequence
3. write() → строка

Ошибка декодера возвращается в ConversionResult без изменений и без
частичного вывода. Ошибка одного токена не влияет на следующие.

RadixConverter хранит caller-held конфигурацию и обрабатывает
последовательности токенов (convert_many).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from src.core.domain import ConversionConfig
from src.conversion.errors import ConversionError
from src.conversion.reader import read
from src.conversion.writer import write

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Результат конверсии одного токена."""

    token: str
    ok: bool

    # Отформатированная строка (ok=True)
    value: Optional[str] = None

    # Сообщение и класс ошибки декодера (ok=False)
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def unwrap(self) -> str:
        """
        Returns:
            value для успешной конверсии

        Raises:
            ConversionError: С исходным сообщением для неуспешной конверсии
        """
        if not self.ok:
            raise ConversionError(self.error or "")
        return self.value


def convert(token: str, config: ConversionConfig) -> ConversionResult:
    """
    Конверсия одного токена по конфигурации.

    Args:
        token: Входной токен
        config: Конфигурация (separator может быть разрешён на месте)

    Returns:
        ConversionResult с value или с сообщением первой ошибки
    """
    if config.resolve_separator():
        _log.debug(
            "deferred separator resolved to %r for %s output",
            config.separator.text,
            config.write_mode.value,
        )

    try:
        bits = read(
            token,
            config.read_mode,
            config.write_mode,
            config.write_length,
            config.signed_mode,
        )
    except ConversionError as e:
        _log.debug("token %r rejected: %s", token, e.message)
        return ConversionResult(
            token=token,
            ok=False,
            error=e.message,
            error_kind=type(e).__name__,
        )

    value = write(
        bits,
        config.write_mode,
        config.separator.as_text(),
        config.signed_mode,
        config.write_prefix,
        config.uppercase,
    )
    return ConversionResult(token=token, ok=True, value=value)


class RadixConverter:
    """
    Конвертер с конфигурацией, общей для последовательности токенов.

    Конфигурация читается при каждом токене; единственная мутация —
    разрешение отложенного разделителя при первой конверсии.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config if config is not None else ConversionConfig()

    def convert(self, token: str) -> ConversionResult:
        """Конверсия одного токена (окружающие пробелы отбрасываются)."""
        return convert(token.strip(), self.config)

    def convert_many(
        self,
        tokens: Iterable[str],
        stop_on_error: bool = True,
    ) -> list[ConversionResult]:
        """
        Конверсия последовательности токенов по порядку.

        Args:
            tokens: Токены (например, строки stdin)
            stop_on_error: Остановиться после первой ошибки (она включается
                последним элементом результата)

        Returns:
            Результаты в порядке входа
        """
        results: list[ConversionResult] = []
        for token in tokens:
            result = self.convert(token)
            results.append(result)
            if not result.ok and stop_on_error:
                _log.debug("stopping after failed token %r", result.token)
                break
        return results
