"""
Shared fixtures for the console test-suite: a fake holiday source and
small record builders.
"""
from datetime import date

from django.contrib.auth import get_user_model
from django.core.cache import caches

from accounts.models import Role, UserProfile
from courses.models import Course, CourseOffering, DeliveryMode
from courses.services.holidays import (
    Holiday,
    HolidayCache,
    HolidayCalculator,
    HolidayLookupError,
)
from students.models import Student
from trainers.models import Trainer

GERMAN_HOLIDAYS = {
    2024: [
        Holiday(date(2024, 10, 3), "German Unity Day"),
        Holiday(date(2024, 12, 25), "Christmas Day"),
        Holiday(date(2024, 12, 26), "St. Stephen's Day"),
    ],
    2025: [
        Holiday(date(2025, 1, 1), "New Year's Day"),
        Holiday(date(2025, 4, 18), "Good Friday"),
        Holiday(date(2025, 4, 21), "Easter Monday"),
        Holiday(date(2025, 5, 1), "Labour Day"),
        Holiday(date(2025, 10, 3), "German Unity Day"),
        Holiday(date(2025, 12, 25), "Christmas Day"),
        Holiday(date(2025, 12, 26), "St. Stephen's Day"),
    ],
    2026: [
        Holiday(date(2026, 1, 1), "New Year's Day"),
        Holiday(date(2026, 4, 3), "Good Friday"),
        Holiday(date(2026, 4, 6), "Easter Monday"),
    ],
}


class FakeHolidayProvider:
    """In-memory stand-in for NagerHolidayProvider that records its calls."""

    def __init__(self, holidays=None, fail=False):
        self.holidays = GERMAN_HOLIDAYS if holidays is None else holidays
        self.fail = fail
        self.calls = []

    def fetch(self, year, country_code):
        self.calls.append((year, country_code))
        if self.fail:
            raise HolidayLookupError(f"holiday source down for {year}")
        return list(self.holidays.get(year, []))


def make_calculator(provider=None):
    caches["holidays"].clear()
    return HolidayCalculator(
        provider=provider or FakeHolidayProvider(),
        cache=HolidayCache(backend=caches["holidays"]),
        country_code="DE",
    )


# =========================
# RECORD BUILDERS
# =========================

def make_offering(duration_days=5, course_title="German B1", mode_name="Online full time"):
    course = Course.objects.create(title=course_title)
    mode, _ = DeliveryMode.objects.get_or_create(
        name=mode_name,
        defaults={
            "delivery_method": DeliveryMode.METHOD_ONLINE,
            "delivery_type": DeliveryMode.TYPE_FULL_TIME,
        },
    )
    return CourseOffering.objects.create(
        course=course,
        delivery_mode=mode,
        duration_days=duration_days,
    )


def make_student(email="anna@example.com", **kwargs):
    fields = {
        "first_name": "Anna",
        "last_name": "Schmidt",
        "email": email,
        "nationality": "DE",
    }
    fields.update(kwargs)
    return Student.objects.create(**fields)


def make_trainer(email="lukas@example.com", **kwargs):
    fields = {
        "first_name": "Lukas",
        "last_name": "Weber",
        "email": email,
        "experience_level": Trainer.LEVEL_SENIOR,
    }
    fields.update(kwargs)
    return Trainer.objects.create(**fields)


def make_console_user(email="admin@example.com", role_name=Role.ADMIN, password="s3cret-pass"):
    User = get_user_model()
    role, _ = Role.objects.get_or_create(name=role_name)
    user = User.objects.create_user(
        username=email,
        email=email,
        password=password,
        first_name="Console",
        last_name="User",
    )
    UserProfile.objects.create(user=user, role=role)
    return user
