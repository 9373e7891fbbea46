from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

# ASCII-коды единиц — внутренний ключ таблицы значений
TemperatureUnitsSymbolASCII = Literal["C", "De", "F", "K", "N", "R", "Re", "Ro"]

TemperatureUnitsNames = Literal[
    "Celsius",
    "Delisle",
    "Fahrenheit",
    "Kelvin",
    "Newton",
    "Rankine",
    "Reaumur",
    "Réaumur",
    "Roemer",
    "Romer",
    "Rømer",
]

TemperatureUnitsSymbols = Literal["°C", "°De", "°F", "°N", "°R", "°Ré", "°Rø", "D", "K", "r", "Ra"]

# Любой допустимый вход: код, имя или символ
TemperatureUnitsInputs = Union[TemperatureUnitsSymbolASCII, TemperatureUnitsNames, TemperatureUnitsSymbols]


@dataclass
class UnitMeta:
    """
    Метаданные единицы температуры.
    - is_si_unit: единица СИ (только Кельвин)
    - names: имена, стандартное — первое
    - symbol_ascii: ASCII-код единицы
    - symbols: символы, стандартный — первый
    Запись — изменяемая копия: правки не затрагивают реестр.
    Сравнивается по значению, не хешируется.
    """
    is_si_unit: bool
    names: List[str]
    symbol_ascii: str
    symbols: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isSIUnit": self.is_si_unit,
            "names": list(self.names),
            "symbolASCII": self.symbol_ascii,
            "symbols": list(self.symbols),
        }
