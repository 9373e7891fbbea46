from __future__ import annotations

import math
from typing import Any, Dict, List

from logger_config import get_logger

from .errors import InvalidNumberError
from .unit_types import TemperatureUnitsInputs, UnitMeta
from .units import (
    DEFAULT_UNIT,
    SI_UNIT,
    UNITS,
    list_unit_metas,
    resolve_unit_input,
    resolve_unit_meta,
)

log = get_logger("Temperature")


def _to_number(parameter: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidNumberError(parameter, value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidNumberError(parameter, value) from None
    if math.isnan(number):
        raise InvalidNumberError(parameter, value)
    return number


def format_number(value: float) -> str:
    """Кратчайшая round-trip запись числа; у целых без хвоста '.0' (25.0 -> '25')."""
    if value == 0:
        value = 0.0  # -0.0 -> '0'
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Temperature:
    """
    Значение температуры во всех поддерживаемых единицах.

    Таблица заполняется один раз в конструкторе:
      1) исходная единица <- value,
      2) K <- to_si(value) (если исходная не K),
      3) остальные <- from_si(K).
    Дальше объект только отвечает на запросы из таблицы.
    """

    __slots__ = ("_table",)

    def __init__(self, from_value: float, from_unit: TemperatureUnitsInputs = DEFAULT_UNIT):
        value = _to_number("from_value", from_value)
        unit = resolve_unit_input("from_unit", from_unit)

        table: Dict[str, float] = {unit.symbol_ascii: value}
        if unit.symbol_ascii != SI_UNIT:
            table[SI_UNIT] = unit.to_si(value)
        value_si = table[SI_UNIT]
        for other in UNITS:
            if other.symbol_ascii not in table:
                table[other.symbol_ascii] = other.from_si(value_si)

        # порядок ключей — порядок объявления единиц
        object.__setattr__(self, "_table", {u.symbol_ascii: table[u.symbol_ascii] for u in UNITS})
        log.debug(f"Temperature: {value} {unit.symbol_ascii} -> {value_si} K")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def to_object(self) -> Dict[str, float]:
        """Копия таблицы {код: значение} по всем единицам."""
        return dict(self._table)

    def to_string(self, to_unit: TemperatureUnitsInputs = DEFAULT_UNIT) -> str:
        unit = resolve_unit_input("to_unit", to_unit)
        return f"{format_number(self._table[unit.symbol_ascii])} {unit.symbol}"

    def to_value(self, to_unit: TemperatureUnitsInputs = DEFAULT_UNIT) -> float:
        return self._table[resolve_unit_input("to_unit", to_unit).symbol_ascii]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._table[SI_UNIT]!r}, {SI_UNIT!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._table == other._table

    def __hash__(self) -> int:
        return hash(tuple(self._table.items()))

    @staticmethod
    def unit(unit: TemperatureUnitsInputs = DEFAULT_UNIT) -> UnitMeta:
        return resolve_unit_meta(resolve_unit_input("unit", unit).symbol_ascii)

    @staticmethod
    def units() -> List[UnitMeta]:
        return list_unit_metas()


def convert_temperature(
    from_value: float,
    from_unit: TemperatureUnitsInputs = DEFAULT_UNIT,
    to_unit: TemperatureUnitsInputs = DEFAULT_UNIT,
) -> float:
    """Перевод температуры между единицами. Бросает InvalidNumberError / UnsupportedUnitError."""
    return Temperature(from_value, from_unit).to_value(to_unit)
