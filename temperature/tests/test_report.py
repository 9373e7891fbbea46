# file: temperature/tests/test_report.py
from temperature import Temperature
from temperature.report import snapshot_table, units_table


def test_units_table():
    table = units_table()
    assert table.field_names == ["Code", "Names", "Symbols", "SI"]
    assert len(table.rows) == 8
    assert table.rows[3] == ["K", "Kelvin", "K", "yes"]
    assert table.rows[7] == ["Ro", "Rømer, Roemer, Romer", "°Rø", ""]
    assert "°Ré, r" in table.get_string()


def test_snapshot_table():
    table = snapshot_table(Temperature(25, "C"))
    assert [row[0] for row in table.rows] == ["C", "De", "F", "K", "N", "R", "Re", "Ro"]
    assert table.rows[0] == ["C", "25", "25 °C"]
    assert table.rows[3] == ["K", "298.15", "298.15 K"]
