from unittest import mock

import pytest
from django.core.cache import caches

from tests.helpers import FakeHolidayProvider, make_calculator


@pytest.fixture(autouse=True)
def offline_holidays():
    """Every test runs against the in-memory holiday source."""
    calculator = make_calculator(FakeHolidayProvider())
    with mock.patch("courses.services.holidays._default_calculator", calculator):
        yield calculator
    caches["holidays"].clear()
