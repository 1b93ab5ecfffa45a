from __future__ import annotations

import datetime as dt
import json
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple, Sequence

import structlog

from ._data import UK_BANK_HOLIDAYS

logger = structlog.get_logger(__name__)


class HolidayTableError(ValueError):
    """Raised when holiday reference data is malformed."""


class BankHoliday(NamedTuple):
    date: dt.date
    name: str


def _coerce_entry(year: int, entry: Any) -> BankHoliday:
    if isinstance(entry, Mapping):
        try:
            raw_date, name = entry["date"], entry["name"]
        except KeyError as exc:
            raise HolidayTableError(
                f"Holiday entry for {year} is missing field {exc.args[0]!r}."
            ) from None
    elif isinstance(entry, Sequence) and not isinstance(entry, str) and len(entry) == 2:
        raw_date, name = entry
    else:
        raise HolidayTableError(f"Unrecognised holiday entry for {year}: {entry!r}.")

    if isinstance(raw_date, str):
        try:
            day = dt.date.fromisoformat(raw_date)
        except ValueError:
            raise HolidayTableError(
                f"Holiday date must be ISO 8601 (YYYY-MM-DD); got {raw_date!r}."
            ) from None
    elif isinstance(raw_date, dt.datetime):
        day = raw_date.date()
    elif isinstance(raw_date, dt.date):
        day = raw_date
    else:
        raise HolidayTableError(f"Holiday date has unsupported type {type(raw_date).__name__}.")

    if not isinstance(name, str) or not name:
        raise HolidayTableError(f"Holiday on {day.isoformat()} needs a non-empty name.")
    if day.year != year:
        raise HolidayTableError(
            f"Holiday {name!r} on {day.isoformat()} is filed under year {year}."
        )
    return BankHoliday(day, name)


class HolidayTable(Mapping[int, tuple[BankHoliday, ...]]):
    """
    Read-only bank holiday reference data keyed by calendar year.

    Entries are pre-resolved dates; nothing here computes moving holidays.
    A year that is absent from the table simply has no holidays.
    """

    def __init__(self, holidays: Mapping[int, Sequence[Any]] | None = None) -> None:
        table: dict[int, tuple[BankHoliday, ...]] = {}
        by_date: dict[dt.date, str] = {}
        for key, entries in (holidays or {}).items():
            try:
                year = int(key)
            except (TypeError, ValueError):
                raise HolidayTableError(f"Holiday year key must be an integer; got {key!r}.") from None
            parsed = sorted((_coerce_entry(year, e) for e in entries), key=lambda h: h.date)
            for h in parsed:
                if h.date in by_date:
                    raise HolidayTableError(f"Duplicate holiday on {h.date.isoformat()}.")
                by_date[h.date] = h.name
            table[year] = tuple(parsed)

        self._table: Mapping[int, tuple[BankHoliday, ...]] = MappingProxyType(dict(sorted(table.items())))
        self._by_date: Mapping[dt.date, str] = MappingProxyType(by_date)

    @classmethod
    def from_json(cls, path: str | Path) -> HolidayTable:
        """Load a table shaped like ``{"2024": [{"date": ..., "name": ...}, ...]}``."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise HolidayTableError(f"{path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise HolidayTableError(f"{path} must contain a JSON object keyed by year.")
        table = cls(data)
        logger.info("holiday table loaded", path=str(path), years=list(table.years))
        return table

    # ── Mapping protocol ─────────────────────────────────────────────────

    def __getitem__(self, year: int) -> tuple[BankHoliday, ...]:
        return self._table[year]

    def __iter__(self) -> Iterator[int]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    # ── lookups ──────────────────────────────────────────────────────────

    def lookup(self, day: dt.date) -> str | None:
        return self._by_date.get(day)

    def in_range(self, start: dt.date, end: dt.date) -> list[BankHoliday]:
        """Holidays with ``start <= date <= end``, ascending."""
        found: list[BankHoliday] = []
        for year in range(start.year, end.year + 1):
            found.extend(h for h in self._table.get(year, ()) if start <= h.date <= end)
        return found

    @property
    def years(self) -> tuple[int, ...]:
        return tuple(self._table)

    def __repr__(self) -> str:
        n = sum(len(v) for v in self._table.values())
        return f"HolidayTable(years={list(self._table)}, holidays={n})"


@lru_cache(maxsize=1)
def default_table() -> HolidayTable:
    return HolidayTable(UK_BANK_HOLIDAYS)
