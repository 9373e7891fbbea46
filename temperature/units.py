"""Реестр единиц температуры.

Покрытие: C, De, F, K, N, R, Re, Ro (Цельсий, Делиль, Фаренгейт, Кельвин,
Ньютон, Ранкин, Реомюр, Рёмер).

Принципы:
- Неизменяемая таблица единиц в фиксированном порядке объявления.
- Любая единица переводится через Кельвин (СИ): to_si / from_si.
- Алиас (код, имя или символ) сравнивается строго, без нормализации
  регистра/диакритики: "Rømer" и "°Ré" хранятся как есть.
- Неизвестная единица -> UnsupportedUnitError со списком всех допустимых алиасов.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from logger_config import get_logger

from .errors import UnsupportedUnitError
from .unit_types import UnitMeta

log = get_logger("TemperatureUnits")


class UnitCode(str, Enum):
    CELSIUS = "C"
    DELISLE = "De"
    FAHRENHEIT = "F"
    KELVIN = "K"
    NEWTON = "N"
    RANKINE = "R"
    REAUMUR = "Re"
    ROMER = "Ro"


SI_UNIT = UnitCode.KELVIN.value
DEFAULT_UNIT = SI_UNIT

# Точка плавления льда / кипения воды, K
_T0 = 273.15
_T100 = 373.15


@dataclass(frozen=True)
class UnitInfo:
    symbol_ascii: str
    names: Tuple[str, ...]
    symbols: Tuple[str, ...]
    to_si: Callable[[float], float]
    from_si: Callable[[float], float]

    @property
    def is_si_unit(self) -> bool:
        return self.symbol_ascii == SI_UNIT

    @property
    def symbol(self) -> str:
        """Стандартный символ (первый)."""
        return self.symbols[0]

    def aliases(self) -> Tuple[str, ...]:
        return (*self.names, self.symbol_ascii, *self.symbols)


# --- формулы перевода --------------------------------------------------------
# Пара (в K, из K) для каждой единицы; все преобразования аффинные.

_CONVERSIONS: Dict[UnitCode, Tuple[Callable[[float], float], Callable[[float], float]]] = {
    UnitCode.CELSIUS: (
        lambda v: v + _T0,
        lambda k: k - _T0,
    ),
    UnitCode.DELISLE: (
        lambda v: _T100 - v / 1.5,
        lambda k: (_T100 - k) * 1.5,
    ),
    # через точку льда: 0 °C -> ровно 32 °F
    UnitCode.FAHRENHEIT: (
        lambda v: (v - 32) / 1.8 + _T0,
        lambda k: (k - _T0) * 1.8 + 32,
    ),
    UnitCode.KELVIN: (
        lambda v: v,
        lambda k: k,
    ),
    UnitCode.NEWTON: (
        lambda v: v / 0.33 + _T0,
        lambda k: (k - _T0) * 0.33,
    ),
    UnitCode.RANKINE: (
        lambda v: v / 1.8,
        lambda k: k * 1.8,
    ),
    UnitCode.REAUMUR: (
        lambda v: v * 1.25 + _T0,
        lambda k: (k - _T0) * 0.8,
    ),
    UnitCode.ROMER: (
        lambda v: (v - 7.5) / 0.525 + _T0,
        lambda k: (k - _T0) * 0.525 + 7.5,
    ),
}

# имена и символы: стандартные — первыми
_ALIASES: Dict[UnitCode, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    UnitCode.CELSIUS:    (("Celsius",), ("°C",)),
    UnitCode.DELISLE:    (("Delisle",), ("°De", "D")),
    UnitCode.FAHRENHEIT: (("Fahrenheit",), ("°F",)),
    UnitCode.KELVIN:     (("Kelvin",), ("K",)),
    UnitCode.NEWTON:     (("Newton",), ("°N",)),
    UnitCode.RANKINE:    (("Rankine",), ("°R", "Ra")),
    UnitCode.REAUMUR:    (("Réaumur", "Reaumur"), ("°Ré", "r")),
    UnitCode.ROMER:      (("Rømer", "Roemer", "Romer"), ("°Rø",)),
}


def _build_units() -> Tuple[UnitInfo, ...]:
    units = []
    for code in UnitCode:
        names, symbols = _ALIASES[code]
        to_si, from_si = _CONVERSIONS[code]
        units.append(UnitInfo(
            symbol_ascii=code.value,
            names=names,
            symbols=symbols,
            to_si=to_si,
            from_si=from_si,
        ))
    return tuple(units)


def _build_index(units: Tuple[UnitInfo, ...]) -> Dict[str, UnitInfo]:
    index: Dict[str, UnitInfo] = {}
    for unit in units:
        for alias in unit.aliases():
            known = index.get(alias)
            if known is not None and known is not unit:
                raise ValueError(
                    f"Alias '{alias}' is ambiguous: {known.symbol_ascii} and {unit.symbol_ascii}"
                )
            # первое совпадение выигрывает
            index.setdefault(alias, unit)
    log.debug(f"Temperature unit index built: {len(units)} units, {len(index)} aliases")
    return index


UNITS: Tuple[UnitInfo, ...] = _build_units()
_ALIAS_INDEX: Dict[str, UnitInfo] = _build_index(UNITS)


# --- публичные операции ------------------------------------------------------

def all_aliases() -> List[str]:
    """Все допустимые алиасы без повторов, отсортированные; собираются из таблицы."""
    return sorted({alias for unit in UNITS for alias in unit.aliases()})


def resolve_unit_input(parameter_name: str, value: Any) -> UnitInfo:
    """
    Ищет единицу по коду, имени или символу (строгое равенство строк).
    parameter_name нужен только для текста ошибки.
    """
    if isinstance(value, UnitCode):
        value = value.value
    unit = _ALIAS_INDEX.get(value) if isinstance(value, str) else None
    if unit is None:
        log.debug(f"Unsupported temperature unit {value!r} for parameter '{parameter_name}'")
        raise UnsupportedUnitError(parameter_name, value, all_aliases())
    return unit


def get_unit(symbol_ascii: str) -> UnitInfo:
    for unit in UNITS:
        if unit.symbol_ascii == symbol_ascii:
            return unit
    raise KeyError(f"Unknown temperature unit code '{symbol_ascii}'. "
                   f"Known: {', '.join(u.symbol_ascii for u in UNITS)}")


def resolve_unit_meta(symbol_ascii: str) -> UnitMeta:
    """Метаданные по каноническому коду (без разрешения алиасов)."""
    unit = get_unit(symbol_ascii)
    return UnitMeta(
        is_si_unit=unit.is_si_unit,
        names=list(unit.names),
        symbol_ascii=unit.symbol_ascii,
        symbols=list(unit.symbols),
    )


def list_unit_metas() -> List[UnitMeta]:
    return [resolve_unit_meta(unit.symbol_ascii) for unit in UNITS]


def all_codes() -> List[str]:
    return [unit.symbol_ascii for unit in UNITS]
