"""UK railway calendar: railway years, rail weeks, periods and bank holidays."""

from railcal.calendar import CalendarError, RailwayCalendar
from railcal.holidays import HolidayTable

__all__ = ["CalendarError", "HolidayTable", "RailwayCalendar"]
__version__ = "0.1.0"
