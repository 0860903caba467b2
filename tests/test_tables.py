import pandas as pd

from convertit.schema import TableColumns
from convertit.tables import conversion_table, save_conversion_table
from convertit.units import ScaleFactor, Unit

COLUMNS = TableColumns()


def test_table_covers_whole_category(unit, registry):
    table = conversion_table(unit("celsius"), "100")
    temperature_ids = [u.id for u in registry.units_in_category("temperature")]

    assert list(table.columns) == [
        COLUMNS.unit_id,
        COLUMNS.unit_name,
        COLUMNS.abbreviation,
        COLUMNS.result,
    ]
    assert table[COLUMNS.unit_id].tolist() == temperature_ids

    results = table.set_index(COLUMNS.unit_id)[COLUMNS.result]
    assert results["celsius"] == "100"
    assert results["fahrenheit"] == "212"
    assert results["kelvin"] == "373.15"


def test_table_keeps_error_strings(unit):
    table = conversion_table(unit("base-binary"), "102")
    assert set(table[COLUMNS.result]) == {"Error: Invalid number for base"}


def test_unknown_category_gives_empty_table():
    stray = Unit("parsec", "astronomy", "Parsec", payload=ScaleFactor(3.0857e16))
    table = conversion_table(stray, "1")
    assert table.empty
    assert COLUMNS.result in table.columns


def test_save_conversion_table(unit, tmp_path):
    table = conversion_table(unit("kilometer"), "1")
    path = save_conversion_table(table, str(tmp_path / "out"), "km.csv")

    saved = pd.read_csv(path, dtype=str, keep_default_na=False)
    assert path.endswith("km.csv")
    assert saved[COLUMNS.unit_id].tolist() == table[COLUMNS.unit_id].tolist()
    assert saved[COLUMNS.result].tolist() == table[COLUMNS.result].tolist()
