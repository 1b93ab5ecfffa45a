# src/railcal/calendar/__init__.py
"""
railcal.calendar
~~~~~~~~~~~~~~~~

UK railway calendar arithmetic.  The railway year runs 1 April to 31 March;
rail weeks run Saturday to Friday, with week 1 starting on the first Saturday
on or after 1 April.  Four weeks make a period, and the final period of a
53-week year absorbs the extra week.

Basic usage::

    import datetime as dt
    from railcal.calendar import RailwayCalendar

    cal = RailwayCalendar()
    cal.week1_start(2024)                          # → date(2024, 4, 6)
    info = cal.week_info(dt.date(2024, 4, 6))      # week 1, period 1, Saturday
    cal.date_to_railway_calendar(dt.date(2024, 4, 6)).formatted
    # → "Railway Year 2024, Week 1, Saturday"

NumPy arrays are accepted by ``locate``::

    import numpy as np
    days = np.arange("2024-03-28", "2024-04-10", dtype="datetime64[D]")
    years, weeks, periods, dows = cal.locate(days)

Public API
----------
RailwayCalendar         The main class.
CalendarError           Base exception for all calendar-related errors.
InvalidInputError       Wrong argument type (also a TypeError).
CalendarInvariantError  Impossible arithmetic result (also an AssertionError).
"""

from __future__ import annotations

from railcal.calendar._exceptions import (
    CalendarError,
    CalendarInvariantError,
    InvalidInputError,
)
from railcal.calendar.calendar import (
    DAY_NAMES,
    PERIODS_PER_YEAR,
    HolidayInYear,
    PeriodBounds,
    PeriodEnd,
    RailwayCalendar,
    RailwayDate,
    RailwayYearInfo,
    WeekBounds,
    WeekInfo,
    first_saturday_on_or_after,
)

__all__ = [
    "DAY_NAMES",
    "PERIODS_PER_YEAR",
    "CalendarError",
    "CalendarInvariantError",
    "HolidayInYear",
    "InvalidInputError",
    "PeriodBounds",
    "PeriodEnd",
    "RailwayCalendar",
    "RailwayDate",
    "RailwayYearInfo",
    "WeekBounds",
    "WeekInfo",
    "first_saturday_on_or_after",
]
