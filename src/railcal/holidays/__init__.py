# src/railcal/holidays/__init__.py
"""
railcal.holidays
~~~~~~~~~~~~~~~~

Immutable bank holiday reference data.  A HolidayTable maps calendar years to
pre-resolved ``BankHoliday(date, name)`` entries and answers exact-date
lookups.  Years missing from the table have no holidays rather than raising.

Basic usage::

    import datetime as dt
    from railcal.holidays import default_table

    table = default_table()
    table.lookup(dt.date(2024, 12, 25))      # → "Christmas Day"

Supplying updated data::

    from railcal.holidays import HolidayTable

    table = HolidayTable.from_json("bank-holidays.json")

Public API
----------
HolidayTable       Read-only year → holidays mapping.
BankHoliday        ``(date, name)`` record.
HolidayTableError  Raised for malformed reference data.
UK_BANK_HOLIDAYS   The bundled England & Wales data.
default_table      Cached HolidayTable over UK_BANK_HOLIDAYS.
"""

from __future__ import annotations

from railcal.holidays._data import UK_BANK_HOLIDAYS
from railcal.holidays.holidays import (
    BankHoliday,
    HolidayTable,
    HolidayTableError,
    default_table,
)

__all__ = [
    "BankHoliday",
    "HolidayTable",
    "HolidayTableError",
    "UK_BANK_HOLIDAYS",
    "default_table",
]
