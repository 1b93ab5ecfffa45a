"""
tests/holidays/test_holidays.py

Covers:
  - Construction from dicts, (date, name) pairs and BankHoliday values
  - Validation of malformed reference data
  - Exact-date and range lookups
  - Read-only mapping behaviour
  - Loading tables from JSON
  - The bundled UK table
"""

import datetime as dt
import json

import pytest

from railcal.holidays import (
    UK_BANK_HOLIDAYS,
    BankHoliday,
    HolidayTable,
    HolidayTableError,
    default_table,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def small():
    return HolidayTable({
        2024: [
            {"date": "2024-12-26", "name": "Boxing Day"},
            {"date": "2024-12-25", "name": "Christmas Day"},
        ],
        2025: [("2025-01-01", "New Year's Day")],
    })


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_entries_sorted_by_date(self, small):
        assert [h.name for h in small[2024]] == ["Christmas Day", "Boxing Day"]

    def test_entries_are_bank_holidays(self, small):
        assert small[2025] == (BankHoliday(dt.date(2025, 1, 1), "New Year's Day"),)

    def test_accepts_date_objects(self):
        table = HolidayTable({2024: [BankHoliday(dt.date(2024, 5, 6), "Early May Bank Holiday")]})
        assert table.lookup(dt.date(2024, 5, 6)) == "Early May Bank Holiday"

    def test_string_year_keys(self):
        table = HolidayTable({"2024": [{"date": "2024-12-25", "name": "Christmas Day"}]})
        assert table.years == (2024,)

    def test_empty_table(self):
        table = HolidayTable()
        assert len(table) == 0
        assert table.lookup(dt.date(2024, 12, 25)) is None

    def test_wrong_year_key_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({2025: [{"date": "2024-12-25", "name": "Christmas Day"}]})

    def test_missing_field_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({2024: [{"date": "2024-12-25"}]})

    def test_bad_iso_date_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({2024: [{"date": "25/12/2024", "name": "Christmas Day"}]})

    def test_empty_name_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({2024: [{"date": "2024-12-25", "name": ""}]})

    def test_unrecognised_entry_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({2024: ["2024-12-25"]})

    def test_non_integer_year_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({"twenty": []})

    def test_duplicate_date_raises(self):
        with pytest.raises(HolidayTableError):
            HolidayTable({2024: [
                {"date": "2024-12-25", "name": "Christmas Day"},
                {"date": "2024-12-25", "name": "Christmas"},
            ]})

    def test_table_error_is_value_error(self):
        with pytest.raises(ValueError):
            HolidayTable({2024: [{"date": "nope", "name": "x"}]})


# ── Lookups ───────────────────────────────────────────────────────────────────

class TestLookups:

    def test_exact_date(self, small):
        assert small.lookup(dt.date(2024, 12, 25)) == "Christmas Day"
        assert small.lookup(dt.date(2024, 12, 24)) is None

    def test_missing_year_is_none(self, small):
        assert small.lookup(dt.date(2030, 12, 25)) is None

    def test_in_range_inclusive_and_across_years(self, small):
        found = small.in_range(dt.date(2024, 12, 26), dt.date(2025, 1, 1))
        assert [h.date for h in found] == [dt.date(2024, 12, 26), dt.date(2025, 1, 1)]

    def test_in_range_empty(self, small):
        assert small.in_range(dt.date(2024, 4, 1), dt.date(2024, 12, 24)) == []

    def test_years(self, small):
        assert small.years == (2024, 2025)


# ── Immutability ──────────────────────────────────────────────────────────────

class TestReadOnly:

    def test_no_item_assignment(self, small):
        with pytest.raises(TypeError):
            small[2030] = ()

    def test_entries_are_tuples(self, small):
        assert isinstance(small[2024], tuple)

    def test_source_mutation_does_not_leak(self):
        source = {2024: [{"date": "2024-12-25", "name": "Christmas Day"}]}
        table = HolidayTable(source)
        source[2024].append({"date": "2024-12-26", "name": "Boxing Day"})
        assert table.lookup(dt.date(2024, 12, 26)) is None


# ── JSON loading ──────────────────────────────────────────────────────────────

class TestFromJson:

    def test_load(self, tmp_path):
        path = tmp_path / "holidays.json"
        path.write_text(json.dumps({
            "2026": [{"date": "2026-12-25", "name": "Christmas Day"}],
        }))
        table = HolidayTable.from_json(path)
        assert table.lookup(dt.date(2026, 12, 25)) == "Christmas Day"

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "holidays.json"
        path.write_text("{not json")
        with pytest.raises(HolidayTableError):
            HolidayTable.from_json(path)

    def test_top_level_list_raises(self, tmp_path):
        path = tmp_path / "holidays.json"
        path.write_text("[]")
        with pytest.raises(HolidayTableError):
            HolidayTable.from_json(str(path))


# ── Bundled data ──────────────────────────────────────────────────────────────

class TestDefaultTable:

    def test_cached(self):
        assert default_table() is default_table()

    def test_covers_bundled_years(self):
        assert default_table().years == tuple(sorted(UK_BANK_HOLIDAYS))

    def test_known_holidays(self):
        table = default_table()
        assert table.lookup(dt.date(2024, 12, 25)) == "Christmas Day"
        assert table.lookup(dt.date(2023, 5, 8)) == "Coronation Bank Holiday"
        assert table.lookup(dt.date(2027, 12, 27)) == "Christmas Day (substitute)"

    def test_every_year_has_christmas(self):
        table = default_table()
        for year in table:
            assert any("Christmas" in h.name for h in table[year])

    def test_repr(self):
        assert repr(default_table()).startswith("HolidayTable(years=[2023")
