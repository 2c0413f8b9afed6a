# courses/services/scheduling.py
"""
Schedule writes. end_date and status are always derived here, never
taken from the caller.
"""
import logging

from courses.models import CourseSchedule
from courses.services.holidays import get_holiday_calculator, as_date
from courses.services.schedule_status import derive_status, refresh_schedule_statuses
from core.exceptions import InvalidInput

logger = logging.getLogger(__name__)

_UNCHANGED = object()


def preview_end_date(course_offering, start_date, calculator=None):
    calculator = calculator or get_holiday_calculator()
    return calculator.calculate_end_date(start_date, course_offering.duration_days)


def apply_dates(schedule, calculator=None):
    calculation = preview_end_date(
        schedule.course_offering,
        schedule.start_date,
        calculator=calculator,
    )
    schedule.end_date = calculation.end_date
    schedule.status = derive_status(schedule.start_date, schedule.end_date)
    return calculation


# -------------------------------------------------
# CREATE
# -------------------------------------------------
def create_schedule(*, course_offering, start_date, instructor=None, calculator=None):
    """
    Returns (schedule, DateCalculation). The calculation carries the
    skipped holidays and any fallback warning for display.
    """
    if not course_offering.is_active:
        raise InvalidInput("This course offering is not active.")

    schedule = CourseSchedule(
        course=course_offering.course,
        course_offering=course_offering,
        start_date=as_date(start_date),
        instructor=instructor,
    )
    calculation = apply_dates(schedule, calculator)
    schedule.save()

    logger.info(
        "Scheduled %s from %s to %s (%s working days, %s holidays skipped)",
        course_offering, schedule.start_date, schedule.end_date,
        calculation.working_days, len(calculation.holidays_skipped),
    )
    return schedule, calculation


# -------------------------------------------------
# UPDATE
# -------------------------------------------------
def update_schedule(
    schedule,
    *,
    start_date=None,
    course_offering=None,
    instructor=_UNCHANGED,
    calculator=None,
):
    """
    Returns (schedule, DateCalculation | None). Dates are recomputed only
    when the start date or the offering changes.
    """
    dates_changed = False

    if start_date is not None and as_date(start_date) != schedule.start_date:
        schedule.start_date = as_date(start_date)
        dates_changed = True

    if course_offering is not None and course_offering.pk != schedule.course_offering_id:
        schedule.course_offering = course_offering
        schedule.course = course_offering.course
        dates_changed = True

    if instructor is not _UNCHANGED:
        schedule.instructor = instructor

    calculation = None
    if dates_changed:
        calculation = apply_dates(schedule, calculator)
    else:
        schedule.status = derive_status(schedule.start_date, schedule.end_date)

    schedule.save()
    return schedule, calculation


def recompute_schedule(schedule, calculator=None):
    calculation = apply_dates(schedule, calculator)
    schedule.save(update_fields=["end_date", "status", "updated_at"])
    return calculation


def recompute_offering_schedules(course_offering, calculator=None):
    """Re-derive dates for every schedule of an offering. Returns the count."""
    count = 0
    for schedule in course_offering.schedules.select_related("course_offering"):
        recompute_schedule(schedule, calculator)
        count += 1

    if count:
        logger.info(
            "Recomputed %s schedule(s) after %s changed to %s working days",
            count, course_offering, course_offering.duration_days,
        )
    return count


# -------------------------------------------------
# DUPLICATE / DELETE
# -------------------------------------------------
def duplicate_schedule(schedule, *, start_date, calculator=None):
    return create_schedule(
        course_offering=schedule.course_offering,
        start_date=start_date,
        instructor=schedule.instructor,
        calculator=calculator,
    )


def delete_schedule(schedule):
    logger.info("Deleting schedule %s", schedule.pk)
    schedule.delete()


# -------------------------------------------------
# READ
# -------------------------------------------------
def list_schedules(status=None):
    """Statuses are refreshed on read; there is no background job."""
    if status and status not in dict(CourseSchedule.STATUS_CHOICES):
        raise InvalidInput(f"Unknown schedule status: {status}")

    refresh_schedule_statuses()

    qs = CourseSchedule.objects.select_related(
        "course",
        "course_offering__delivery_mode",
        "instructor",
    )
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("start_date")
