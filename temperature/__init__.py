from .converter import Temperature, convert_temperature
from .errors import InvalidNumberError, TemperatureError, UnsupportedUnitError
from .unit_types import (
    TemperatureUnitsInputs,
    TemperatureUnitsNames,
    TemperatureUnitsSymbolASCII,
    TemperatureUnitsSymbols,
    UnitMeta,
)
from .units import DEFAULT_UNIT, SI_UNIT, UnitCode

__all__ = [
    "Temperature",
    "convert_temperature",
    "TemperatureError",
    "InvalidNumberError",
    "UnsupportedUnitError",
    "TemperatureUnitsInputs",
    "TemperatureUnitsNames",
    "TemperatureUnitsSymbolASCII",
    "TemperatureUnitsSymbols",
    "UnitMeta",
    "UnitCode",
    "DEFAULT_UNIT",
    "SI_UNIT",
]
