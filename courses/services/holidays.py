# courses/services/holidays.py
"""
Working-day arithmetic for course schedules.

A working day is a calendar day that is neither a Saturday/Sunday nor a
public holiday. Public holidays come from a Nager.Date compatible API and
are cached per country and year in the ``holidays`` cache alias.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import requests
from django.conf import settings
from django.core.cache import caches
from django.utils import timezone

from core.exceptions import InvalidInput

logger = logging.getLogger(__name__)

# about twenty years of working days
MAX_WORKING_DAYS = 5000


class HolidayLookupError(Exception):
    """Public holidays for a year could not be fetched."""


# =====================================================
# VALUE OBJECTS
# =====================================================

@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
    type: str = "public"

    def as_dict(self):
        return {
            "date": self.date.isoformat(),
            "name": self.name,
            "type": self.type,
        }


@dataclass
class DateCalculation:
    start_date: date
    end_date: date
    total_calendar_days: int
    working_days: int
    holidays_skipped: list = field(default_factory=list)
    weekends_skipped: int = 0
    warnings: list = field(default_factory=list)

    def as_dict(self):
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "total_calendar_days": self.total_calendar_days,
            "working_days": self.working_days,
            "holidays_skipped": [h.as_dict() for h in self.holidays_skipped],
            "weekends_skipped": self.weekends_skipped,
            "warnings": list(self.warnings),
        }


def as_date(value):
    """Truncate datetimes to their calendar date."""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    return value


# =====================================================
# PROVIDER
# =====================================================

class NagerHolidayProvider:
    """
    Fetches public holidays from GET {base_url}/PublicHolidays/{year}/{country}.
    """

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.HOLIDAY_API_URL).rstrip("/")
        self.timeout = timeout or settings.HOLIDAY_API_TIMEOUT
        self.session = session or requests.Session()

    def fetch(self, year, country_code):
        url = f"{self.base_url}/PublicHolidays/{year}/{country_code}"

        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise HolidayLookupError(
                f"Could not fetch holidays for {country_code} {year}: {exc}"
            ) from exc

        if not isinstance(payload, list):
            raise HolidayLookupError(
                f"Unexpected holiday payload for {country_code} {year}"
            )

        holidays = []
        for entry in payload:
            try:
                holidays.append(self.parse_entry(entry))
            except (KeyError, TypeError, ValueError) as exc:
                raise HolidayLookupError(
                    f"Malformed holiday entry for {country_code} {year}: {entry!r}"
                ) from exc

        return holidays

    @staticmethod
    def parse_entry(entry):
        types = entry.get("types") or []
        holiday_type = types[0] if types else entry.get("type") or "public"

        return Holiday(
            date=date.fromisoformat(entry["date"]),
            name=entry.get("name") or entry.get("localName") or "",
            type=str(holiday_type).lower(),
        )


# =====================================================
# CACHE
# =====================================================

class HolidayCache:
    """
    Year-keyed store of holiday lists.

    Past years never expire; the current and future years are kept for
    ``ttl`` seconds so late corrections from the source are picked up.
    """

    def __init__(self, backend=None, ttl=None):
        self.backend = backend if backend is not None else caches["holidays"]
        self.ttl = ttl if ttl is not None else settings.HOLIDAY_CACHE_TTL

    @staticmethod
    def key(country_code, year):
        return f"holidays:{country_code.upper()}:{year}"

    def get(self, country_code, year):
        return self.backend.get(self.key(country_code, year))

    def set(self, country_code, year, holidays):
        timeout = None if year < timezone.localdate().year else self.ttl
        self.backend.set(self.key(country_code, year), list(holidays), timeout=timeout)

    def clear(self, country_code, year):
        self.backend.delete(self.key(country_code, year))


# =====================================================
# CALCULATOR
# =====================================================

class HolidayCalculator:

    def __init__(self, provider=None, cache=None, country_code=None):
        self.provider = provider or NagerHolidayProvider()
        self.cache = cache or HolidayCache()
        self.country_code = country_code or settings.HOLIDAY_COUNTRY_CODE

    # -------------------------------------------------
    # HOLIDAY LOOKUP
    # -------------------------------------------------
    def holidays_for_year(self, year):
        cached = self.cache.get(self.country_code, year)
        if cached is not None:
            logger.debug("Holiday cache hit for %s %s", self.country_code, year)
            return cached

        logger.debug("Holiday cache miss for %s %s", self.country_code, year)
        holidays = self.provider.fetch(year, self.country_code)
        self.cache.set(self.country_code, year, holidays)
        return holidays

    def _lookup_for(self, start_year):
        """
        Returns a date -> Holiday | None function. The start year and the
        following one are loaded up front, later years on demand.
        """
        index = {}
        loaded = set()

        def load(year):
            for holiday in self.holidays_for_year(year):
                index.setdefault(holiday.date, holiday)
            loaded.add(year)

        load(start_year)
        load(start_year + 1)

        def lookup(day):
            if day.year not in loaded:
                load(day.year)
            return index.get(day)

        return lookup

    @staticmethod
    def _no_holidays(day):
        return None

    @staticmethod
    def is_weekend(day):
        return as_date(day).weekday() >= 5

    def is_holiday(self, day):
        day = as_date(day)
        try:
            holidays = self.holidays_for_year(day.year)
        except HolidayLookupError as exc:
            logger.warning("Holiday check without holiday data: %s", exc)
            return False
        return any(h.date == day for h in holidays)

    def is_working_day(self, day):
        return not self.is_weekend(day) and not self.is_holiday(day)

    # -------------------------------------------------
    # END DATE
    # -------------------------------------------------
    def calculate_end_date(self, start_date, working_days):
        """
        Walks forward from the day after ``start_date`` until
        ``working_days`` working days have elapsed.

        Holiday lookup failures never propagate: the walk is redone
        with weekends only and a warning is attached to the result.
        """
        start_date = as_date(start_date)
        working_days = int(working_days)

        if working_days < 0:
            raise InvalidInput("Working days must not be negative.")
        if working_days > MAX_WORKING_DAYS:
            raise InvalidInput(f"Working days must not exceed {MAX_WORKING_DAYS}.")

        try:
            lookup = self._lookup_for(start_date.year)
            return self._walk(start_date, working_days, lookup)
        except HolidayLookupError as exc:
            logger.warning(
                "Falling back to weekend-only end date for %s (+%s): %s",
                start_date, working_days, exc,
            )
            result = self._walk(start_date, working_days, self._no_holidays)
            result.warnings.append(
                "Public holidays could not be loaded; only weekends were skipped."
            )
            return result

    @staticmethod
    def _walk(start_date, working_days, lookup):
        current = start_date
        counted = 0
        weekends_skipped = 0
        holidays_skipped = []

        while counted < working_days:
            try:
                current += timedelta(days=1)
            except OverflowError:
                raise InvalidInput("The end date would fall past the last supported date.")

            if current.weekday() >= 5:
                weekends_skipped += 1
                continue

            holiday = lookup(current)
            if holiday is not None:
                holidays_skipped.append(holiday)
                continue

            counted += 1

        return DateCalculation(
            start_date=start_date,
            end_date=current,
            total_calendar_days=(current - start_date).days,
            working_days=working_days,
            holidays_skipped=holidays_skipped,
            weekends_skipped=weekends_skipped,
        )

    # -------------------------------------------------
    # COUNTING
    # -------------------------------------------------
    def count_working_days(self, start_date, end_date):
        """Working days in (start_date, end_date]."""
        start_date = as_date(start_date)
        end_date = as_date(end_date)

        if end_date <= start_date:
            return 0

        try:
            lookup = self._lookup_for(start_date.year)
            return self._count(start_date, end_date, lookup)
        except HolidayLookupError as exc:
            logger.warning("Counting working days without holidays: %s", exc)
            return self._count(start_date, end_date, self._no_holidays)

    @staticmethod
    def _count(start_date, end_date, lookup):
        count = 0
        current = start_date
        while current < end_date:
            current += timedelta(days=1)
            if current.weekday() < 5 and lookup(current) is None:
                count += 1
        return count


_default_calculator = None


def get_holiday_calculator():
    """Process-wide calculator backed by the ``holidays`` cache alias."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = HolidayCalculator()
    return _default_calculator
