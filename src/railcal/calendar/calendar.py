import datetime as dt
from typing import NamedTuple, Optional, Union

import numpy as np

from railcal.holidays import HolidayTable, default_table
from ._exceptions import CalendarError, CalendarInvariantError, InvalidInputError

DateLike = Union[dt.date, "np.datetime64"]

SATURDAY: int = 5                      # datetime.date.weekday()
DAYS_PER_WEEK: int = 7
WEEKS_PER_PERIOD: int = 4
PERIODS_PER_YEAR: int = 13
DAY_NAMES: tuple[str, ...] = (
    "Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
)


class WeekInfo(NamedTuple):
    railway_year: int
    week: int
    period: int
    day_of_week: int                   # 0 = Saturday .. 6 = Friday
    week_start: dt.date
    week_end: dt.date


class WeekBounds(NamedTuple):
    start: dt.date
    end: dt.date


class PeriodBounds(NamedTuple):
    start: dt.date
    end: dt.date
    start_week: int
    end_week: int


class PeriodEnd(NamedTuple):
    period: int
    end_date: dt.date
    end_week: int


class RailwayDate(NamedTuple):
    railway_year: int
    week: int
    period: int
    day_of_week: int
    day_name: str
    gregorian_date: dt.date
    formatted: str


class RailwayYearInfo(NamedTuple):
    railway_year: int
    start_date: dt.date
    end_date: dt.date
    week1_start: dt.date
    total_weeks: int
    is_53_week_year: bool
    days_before_week1: int


class HolidayInYear(NamedTuple):
    date: dt.date
    name: str
    rail_info: WeekInfo


# ── input coercion ───────────────────────────────────────────────────────────

def _as_date(value: object, arg: str = "date") -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidInputError(f"{arg} must not be NaT.")
        day = value.astype("datetime64[D]").item()
        if isinstance(day, dt.date):
            return day
        raise InvalidInputError(f"{arg} is outside the supported date range; got {value!r}.")
    raise InvalidInputError(f"{arg} must be a date; got {type(value).__name__}.")


def _as_int(value: object, arg: str) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{arg} must be an integer; got {type(value).__name__}.")
    return int(value)


def _shift(day: dt.date, days: int) -> dt.date:
    try:
        return day + dt.timedelta(days=days)
    except OverflowError:
        raise CalendarError(
            f"{day.isoformat()} shifted by {days} days leaves the supported date range."
        ) from None


def first_saturday_on_or_after(day: dt.date) -> dt.date:
    day = _as_date(day)
    return _shift(day, (SATURDAY - day.weekday()) % DAYS_PER_WEEK)


# ── vectorised helpers ───────────────────────────────────────────────────────

def _week1_start_array(years: np.ndarray) -> np.ndarray:
    april = (years - 1970).astype("datetime64[Y]").astype("datetime64[M]") + np.timedelta64(3, "M")
    april = april.astype("datetime64[D]")
    # 1970-01-01 was a Thursday (weekday 3).
    weekday = (april.astype(np.int64) + 3) % DAYS_PER_WEEK
    return april + ((SATURDAY - weekday) % DAYS_PER_WEEK).astype("timedelta64[D]")


def _as_datetime64(dates: object) -> np.ndarray:
    raw = np.asarray(dates)
    if raw.dtype.kind not in ("M", "U", "S", "O"):
        raise InvalidInputError(f"dates must be date-like; got dtype {raw.dtype}.")
    if raw.dtype.kind == "O":
        bad = [v for v in raw.ravel() if not isinstance(v, (dt.date, np.datetime64, str))]
        if bad:
            raise InvalidInputError(f"dates must be date-like; got {type(bad[0]).__name__}.")
    try:
        out = raw.astype("datetime64[D]")
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"dates could not be read as calendar days: {exc}") from None
    if np.isnat(out).any():
        raise InvalidInputError("dates must not contain NaT.")
    return out


class RailwayCalendar:
    """
    UK railway calendar over a read-only bank holiday table.

    The railway year Y runs 1 April Y to 31 March Y+1.  Rail weeks run
    Saturday to Friday; week 1 starts on the first Saturday on or after
    1 April, and every 4 weeks form a period.  Week 1 is the anchor for all
    derived values.
    """

    def __init__(self, holidays: Optional[HolidayTable] = None) -> None:
        if holidays is not None and not isinstance(holidays, HolidayTable):
            raise InvalidInputError(
                f"holidays must be a HolidayTable; got {type(holidays).__name__}."
            )
        self._holidays: HolidayTable = holidays if holidays is not None else default_table()

    # ── year boundaries ──────────────────────────────────────────────────

    def week1_start(self, railway_year: int) -> dt.date:
        year = _as_int(railway_year, "railway_year")
        if not dt.MINYEAR <= year < dt.MAXYEAR:
            raise CalendarError(f"Railway year {year} is outside the supported range.")
        return first_saturday_on_or_after(dt.date(year, 4, 1))

    def railway_year_of(self, date: DateLike) -> int:
        """Railway year whose rail weeks contain ``date``."""
        day = _as_date(date)
        year = day.year
        if day < self.week1_start(year):
            year -= 1
        return year

    def railway_year_start(self, date: DateLike) -> dt.date:
        day = _as_date(date)
        april = dt.date(day.year, 4, 1)
        return april if day >= april else dt.date(day.year - 1, 4, 1)

    def railway_year_end(self, date: DateLike) -> dt.date:
        start = self.railway_year_start(date)
        return dt.date(start.year + 1, 3, 31)

    def weeks_in_railway_year(self, railway_year: int) -> int:
        year = _as_int(railway_year, "railway_year")
        days = (self.week1_start(year + 1) - self.week1_start(year)).days
        weeks = days // DAYS_PER_WEEK
        if weeks not in (52, 53):
            raise CalendarInvariantError(
                f"Railway year {year} has {weeks} weeks; expected 52 or 53."
            )
        return weeks

    def railway_year_info(self, railway_year: int) -> RailwayYearInfo:
        year = _as_int(railway_year, "railway_year")
        start = dt.date(year, 4, 1)
        week1 = self.week1_start(year)
        total = self.weeks_in_railway_year(year)
        return RailwayYearInfo(
            railway_year=year,
            start_date=start,
            end_date=self.railway_year_end(start),
            week1_start=week1,
            total_weeks=total,
            is_53_week_year=total == 53,
            days_before_week1=(week1 - start).days,
        )

    # ── weeks and periods ────────────────────────────────────────────────

    def week_info(self, date: DateLike) -> WeekInfo:
        day = _as_date(date)
        year = self.railway_year_of(day)
        elapsed = (day - self.week1_start(year)).days
        week = elapsed // DAYS_PER_WEEK + 1
        return WeekInfo(
            railway_year=year,
            week=week,
            period=min((week + WEEKS_PER_PERIOD - 1) // WEEKS_PER_PERIOD, PERIODS_PER_YEAR),
            day_of_week=elapsed % DAYS_PER_WEEK,
            week_start=self.week_start_date(year, week),
            week_end=self.week_end_date(year, week),
        )

    def week_start_date(self, railway_year: int, week: int) -> dt.date:
        # Weeks beyond the year's range extrapolate.
        week = _as_int(week, "week")
        return _shift(self.week1_start(railway_year), (week - 1) * DAYS_PER_WEEK)

    def week_end_date(self, railway_year: int, week: int) -> dt.date:
        return _shift(self.week_start_date(railway_year, week), DAYS_PER_WEEK - 1)

    def week_start_end(self, railway_year: int, week: int) -> WeekBounds:
        return WeekBounds(
            self.week_start_date(railway_year, week),
            self.week_end_date(railway_year, week),
        )

    def period_start_end(self, railway_year: int, period: int) -> PeriodBounds:
        """
        Bounds of ``period`` (1..13).  The final period absorbs week 53, so
        it spans weeks 49-53 in a 53-week year.
        """
        period = _as_int(period, "period")
        if not 1 <= period <= PERIODS_PER_YEAR:
            raise CalendarError(f"Period must be in 1..{PERIODS_PER_YEAR}; got {period}.")
        start_week = (period - 1) * WEEKS_PER_PERIOD + 1
        end_week = (
            self.weeks_in_railway_year(railway_year)
            if period == PERIODS_PER_YEAR
            else period * WEEKS_PER_PERIOD
        )
        return PeriodBounds(
            start=self.week_start_date(railway_year, start_week),
            end=self.week_end_date(railway_year, end_week),
            start_week=start_week,
            end_week=end_week,
        )

    def period_end_dates(self, railway_year: int) -> list[PeriodEnd]:
        ends = []
        for period in range(1, PERIODS_PER_YEAR + 1):
            bounds = self.period_start_end(railway_year, period)
            ends.append(PeriodEnd(period, bounds.end, bounds.end_week))
        return ends

    # ── conversions ──────────────────────────────────────────────────────

    def date_to_railway_calendar(self, date: DateLike) -> RailwayDate:
        day = _as_date(date)
        info = self.week_info(day)
        day_name = DAY_NAMES[info.day_of_week]
        return RailwayDate(
            railway_year=info.railway_year,
            week=info.week,
            period=info.period,
            day_of_week=info.day_of_week,
            day_name=day_name,
            gregorian_date=day,
            formatted=f"Railway Year {info.railway_year}, Week {info.week}, {day_name}",
        )

    def locate(self, dates):
        """
        Vectorised ``(railway_year, week, period, day_of_week)`` lookup.

        Accepts a scalar or any array-like of dates, ``datetime64`` values or
        ISO strings.  Scalars give Python ints, arrays give int64 arrays of
        the input's shape.
        """
        scalar = np.ndim(dates) == 0
        d = _as_datetime64(dates)
        shape = d.shape
        d = np.atleast_1d(d).ravel()

        years = d.astype("datetime64[Y]").astype(np.int64) + 1970
        week1 = _week1_start_array(years)
        before = d < week1
        years = years - before
        week1 = np.where(before, _week1_start_array(years), week1)

        elapsed = (d - week1).astype(np.int64)
        week = elapsed // DAYS_PER_WEEK + 1
        # Week 53 belongs to the final period.
        period = np.minimum((week + WEEKS_PER_PERIOD - 1) // WEEKS_PER_PERIOD, PERIODS_PER_YEAR)
        day_of_week = elapsed % DAYS_PER_WEEK

        if scalar:
            return int(years[0]), int(week[0]), int(period[0]), int(day_of_week[0])
        return tuple(a.reshape(shape) for a in (years, week, period, day_of_week))

    # ── holidays ─────────────────────────────────────────────────────────

    def bank_holiday(self, date: DateLike) -> Optional[str]:
        return self._holidays.lookup(_as_date(date))

    def bank_holidays_in_railway_year(self, railway_year: int) -> list[HolidayInYear]:
        year = _as_int(railway_year, "railway_year")
        start = self.railway_year_start(dt.date(year, 4, 1))
        end = self.railway_year_end(start)
        found = [
            HolidayInYear(h.date, h.name, self.week_info(h.date))
            for h in self._holidays.in_range(start, end)
        ]
        return sorted(found, key=lambda h: h.date)

    @staticmethod
    def is_weekend(date: DateLike) -> bool:
        return _as_date(date).weekday() >= SATURDAY

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> HolidayTable:
        return self._holidays

    def __repr__(self) -> str:
        return f"RailwayCalendar(holidays={self._holidays!r})"
