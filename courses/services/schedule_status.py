import logging

from django.utils import timezone

from courses.models import CourseSchedule
from courses.services.holidays import as_date

logger = logging.getLogger(__name__)


def derive_status(start_date, end_date, now=None):
    """
    upcoming if now < start, completed if now > end, else ongoing.
    Compared at day granularity.
    """
    today = as_date(now) if now is not None else timezone.localdate()
    start = as_date(start_date)
    end = as_date(end_date)

    if today < start:
        return CourseSchedule.STATUS_UPCOMING
    if today > end:
        return CourseSchedule.STATUS_COMPLETED
    return CourseSchedule.STATUS_ONGOING


def refresh_schedule_statuses(queryset=None, now=None):
    """
    Re-derives status for every schedule in ``queryset`` (default: all)
    and writes only the rows that changed. Returns the number updated.
    """
    if queryset is None:
        queryset = CourseSchedule.objects.all()

    updated = 0
    for schedule in queryset.only("id", "start_date", "end_date", "status"):
        status = derive_status(schedule.start_date, schedule.end_date, now)
        if status == schedule.status:
            continue

        CourseSchedule.objects.filter(pk=schedule.pk).update(
            status=status,
            updated_at=timezone.now(),
        )
        updated += 1

    if updated:
        logger.info("Refreshed status on %s course schedule(s)", updated)

    return updated
