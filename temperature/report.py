from __future__ import annotations

from prettytable import PrettyTable

from .converter import Temperature, format_number
from .units import all_codes


def units_table() -> PrettyTable:
    """Таблица всех единиц в порядке объявления."""
    table = PrettyTable()
    table.field_names = ["Code", "Names", "Symbols", "SI"]
    for meta in Temperature.units():
        table.add_row([
            meta.symbol_ascii,
            ", ".join(meta.names),
            ", ".join(meta.symbols),
            "yes" if meta.is_si_unit else "",
        ])
    return table


def snapshot_table(temperature: Temperature) -> PrettyTable:
    """Значение во всех единицах; числа без округления."""
    values = temperature.to_object()
    table = PrettyTable()
    table.field_names = ["Code", "Value", "String"]
    for code in all_codes():
        table.add_row([code, format_number(values[code]), temperature.to_string(code)])
    return table
