from __future__ import annotations

from typing import Any, List, Sequence


class TemperatureError(Exception):
    """Базовая ошибка пакета temperature."""


class InvalidNumberError(TemperatureError, ValueError):
    """Измеренное значение не является числом (NaN или не приводится к float)."""

    def __init__(self, parameter: str, value: Any):
        self.parameter = parameter
        self.value = value
        super().__init__(f"`{value}` (parameter `{parameter}`) is not a number!")


class UnsupportedUnitError(TemperatureError, ValueError):
    """Строка не совпала ни с одним кодом/именем/символом единицы."""

    def __init__(self, parameter: str, value: Any, accepted: Sequence[str]):
        self.parameter = parameter
        self.value = value
        self.accepted: List[str] = list(accepted)
        super().__init__(
            f"`{value}` (parameter `{parameter}`) is not a supported temperature unit! "
            f"Only accept these values: {', '.join(self.accepted)}"
        )
