"""
Working-day arithmetic.

Contract:
- A working day is neither Saturday/Sunday nor a public holiday.
- The end date is reached after exactly N working days, counted from the
  day after the start date.
- A failing holiday source degrades to weekend-only counting with a warning.
"""
from datetime import date, datetime, timedelta
from unittest import mock

import requests
from django.core.cache import caches
from django.test import SimpleTestCase
from django.utils import timezone

from core.exceptions import InvalidInput
from courses.services.holidays import (
    Holiday,
    HolidayCache,
    HolidayLookupError,
    MAX_WORKING_DAYS,
    NagerHolidayProvider,
)
from tests.helpers import GERMAN_HOLIDAYS, FakeHolidayProvider, make_calculator


class TestCalculateEndDate(SimpleTestCase):
    def setUp(self):
        self.provider = FakeHolidayProvider()
        self.calc = make_calculator(self.provider)

    def test_friday_plus_one_lands_on_monday(self):
        result = self.calc.calculate_end_date(date(2025, 3, 7), 1)

        self.assertEqual(result.end_date, date(2025, 3, 10))
        self.assertEqual(result.weekends_skipped, 2)
        self.assertEqual(result.holidays_skipped, [])
        self.assertEqual(result.total_calendar_days, 3)
        self.assertEqual(result.warnings, [])

    def test_day_before_holiday_skips_holiday_and_weekend(self):
        # Good Friday 2025-04-18, weekend, Easter Monday 2025-04-21
        result = self.calc.calculate_end_date(date(2025, 4, 17), 1)

        self.assertEqual(result.end_date, date(2025, 4, 22))
        self.assertEqual(
            [h.date for h in result.holidays_skipped],
            [date(2025, 4, 18), date(2025, 4, 21)],
        )
        self.assertEqual(result.weekends_skipped, 2)

    def test_holiday_on_friday_rolls_to_monday(self):
        result = self.calc.calculate_end_date(date(2025, 10, 2), 1)
        self.assertEqual(result.end_date, date(2025, 10, 6))

    def test_crosses_year_boundary(self):
        result = self.calc.calculate_end_date(date(2025, 12, 22), 10)

        self.assertEqual(result.end_date, date(2026, 1, 8))
        self.assertEqual(
            [h.name for h in result.holidays_skipped],
            ["Christmas Day", "St. Stephen's Day", "New Year's Day"],
        )

    def test_zero_working_days_returns_start(self):
        result = self.calc.calculate_end_date(date(2025, 3, 7), 0)
        self.assertEqual(result.end_date, date(2025, 3, 7))
        self.assertEqual(result.total_calendar_days, 0)

    def test_negative_working_days_rejected(self):
        with self.assertRaises(InvalidInput):
            self.calc.calculate_end_date(date(2025, 3, 7), -1)

    def test_working_days_above_the_cap_rejected(self):
        with self.assertRaises(InvalidInput):
            self.calc.calculate_end_date(date(2025, 3, 7), MAX_WORKING_DAYS + 1)
        self.assertEqual(self.provider.calls, [])

    def test_walk_past_the_last_date_rejected(self):
        with self.assertRaises(InvalidInput):
            self.calc.calculate_end_date(date(9999, 12, 20), 30)

    def test_datetime_start_is_truncated(self):
        result = self.calc.calculate_end_date(datetime(2025, 3, 7, 15, 30), 1)
        self.assertEqual(result.start_date, date(2025, 3, 7))
        self.assertEqual(result.end_date, date(2025, 3, 10))

    def test_as_dict_is_json_friendly(self):
        data = self.calc.calculate_end_date(date(2025, 4, 17), 1).as_dict()

        self.assertEqual(data["end_date"], "2025-04-22")
        self.assertEqual(data["holidays_skipped"][0]["date"], "2025-04-18")
        self.assertEqual(data["holidays_skipped"][0]["name"], "Good Friday")


class TestEndDateProperties(SimpleTestCase):
    """Properties checked over a spread of start dates and durations."""

    def setUp(self):
        self.calc = make_calculator()
        self.holidays = {h.date for year in GERMAN_HOLIDAYS.values() for h in year}

    def _starts(self):
        first = date(2025, 3, 24)
        return [first + timedelta(days=offset) for offset in range(0, 60, 3)]

    def test_end_date_is_never_weekend_or_holiday(self):
        for start in self._starts():
            for days in (1, 3, 7, 20):
                end = self.calc.calculate_end_date(start, days).end_date
                self.assertLess(end.weekday(), 5, (start, days))
                self.assertNotIn(end, self.holidays, (start, days))

    def test_counting_back_reproduces_working_days(self):
        for start in self._starts():
            for days in (1, 3, 7, 20):
                end = self.calc.calculate_end_date(start, days).end_date
                self.assertEqual(self.calc.count_working_days(start, end), days, (start, days))

    def test_count_working_days_empty_range(self):
        self.assertEqual(self.calc.count_working_days(date(2025, 3, 7), date(2025, 3, 7)), 0)
        self.assertEqual(self.calc.count_working_days(date(2025, 3, 7), date(2025, 3, 1)), 0)


class TestHolidayFallback(SimpleTestCase):
    def test_failed_lookup_falls_back_to_weekends_only(self):
        calc = make_calculator(FakeHolidayProvider(fail=True))

        with self.assertLogs("courses.services.holidays", level="WARNING"):
            result = calc.calculate_end_date(date(2025, 4, 17), 1)

        # Good Friday is not known, so it counts as a working day
        self.assertEqual(result.end_date, date(2025, 4, 18))
        self.assertEqual(result.holidays_skipped, [])
        self.assertEqual(len(result.warnings), 1)
        self.assertIn("only weekends", result.warnings[0])

    def test_is_holiday_without_data_is_false(self):
        calc = make_calculator(FakeHolidayProvider(fail=True))
        with self.assertLogs("courses.services.holidays", level="WARNING"):
            self.assertFalse(calc.is_holiday(date(2025, 12, 25)))

    def test_is_working_day(self):
        calc = make_calculator()
        self.assertTrue(calc.is_working_day(date(2025, 3, 7)))
        self.assertFalse(calc.is_working_day(date(2025, 3, 8)))
        self.assertFalse(calc.is_working_day(date(2025, 12, 25)))


class TestHolidayCache(SimpleTestCase):
    def test_second_calculation_does_not_refetch(self):
        provider = FakeHolidayProvider()
        calc = make_calculator(provider)

        calc.calculate_end_date(date(2025, 3, 7), 5)
        self.assertEqual(provider.calls, [(2025, "DE"), (2026, "DE")])

        calc.calculate_end_date(date(2025, 6, 2), 5)
        self.assertEqual(len(provider.calls), 2)

    def test_years_beyond_the_next_load_on_demand(self):
        provider = FakeHolidayProvider()
        calc = make_calculator(provider)

        result = calc.calculate_end_date(date(2024, 6, 3), 500)

        self.assertEqual(result.end_date.year, 2026)
        self.assertIn((2026, "DE"), provider.calls)

    def test_past_years_never_expire(self):
        backend = mock.Mock()
        cache = HolidayCache(backend=backend, ttl=60)

        cache.set("DE", 2000, [])
        backend.set.assert_called_with("holidays:DE:2000", [], timeout=None)

        this_year = timezone.localdate().year
        cache.set("de", this_year, [])
        backend.set.assert_called_with(f"holidays:DE:{this_year}", [], timeout=60)

    def test_holidays_survive_the_cache_round_trip(self):
        caches["holidays"].clear()
        cache = HolidayCache(backend=caches["holidays"], ttl=60)
        holidays = [Holiday(date(2025, 1, 1), "New Year's Day")]

        cache.set("DE", 2025, holidays)
        self.assertEqual(cache.get("DE", 2025), holidays)

        cache.clear("DE", 2025)
        self.assertIsNone(cache.get("DE", 2025))


class TestNagerHolidayProvider(SimpleTestCase):
    def _provider(self, payload=None, error=None):
        session = mock.Mock()
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value.json.return_value = payload
            session.get.return_value.raise_for_status.return_value = None
        provider = NagerHolidayProvider(
            base_url="https://holidays.example/api/v3/",
            timeout=5,
            session=session,
        )
        return provider, session

    def test_parses_entries(self):
        provider, session = self._provider([
            {"date": "2025-01-01", "localName": "Neujahr", "name": "New Year's Day", "types": ["Public"]},
            {"date": "2025-03-08", "localName": "Frauentag", "name": "", "types": []},
        ])

        holidays = provider.fetch(2025, "DE")

        session.get.assert_called_once_with(
            "https://holidays.example/api/v3/PublicHolidays/2025/DE",
            timeout=5,
        )
        self.assertEqual(holidays[0], Holiday(date(2025, 1, 1), "New Year's Day", "public"))
        self.assertEqual(holidays[1].name, "Frauentag")
        self.assertEqual(holidays[1].type, "public")

    def test_network_error_raises_lookup_error(self):
        provider, _ = self._provider(error=requests.ConnectionError("boom"))
        with self.assertRaises(HolidayLookupError):
            provider.fetch(2025, "DE")

    def test_unexpected_payload_raises_lookup_error(self):
        provider, _ = self._provider({"status": 404})
        with self.assertRaises(HolidayLookupError):
            provider.fetch(2025, "DE")

    def test_malformed_entry_raises_lookup_error(self):
        provider, _ = self._provider([{"name": "No date"}])
        with self.assertRaises(HolidayLookupError):
            provider.fetch(2025, "DE")
