import logging

from django.db import transaction

from courses.models import Course, CourseOffering

logger = logging.getLogger(__name__)

COURSE_FIELDS = ("title", "description", "measure_number", "curriculum_file")
OFFERING_FIELDS = (
    "measure_number",
    "duration_days",
    "units",
    "unit_fee",
    "fee",
    "is_active",
)


def _save_offering(course, data):
    """
    Upsert one offering keyed by delivery mode. Saving goes through the
    model so a changed duration recomputes its schedules (courses.signals).
    """
    offering = CourseOffering.objects.filter(
        course=course,
        delivery_mode=data["delivery_mode"],
    ).first()

    if offering is None:
        offering = CourseOffering(course=course, delivery_mode=data["delivery_mode"])

    for field in OFFERING_FIELDS:
        if field in data:
            setattr(offering, field, data[field])

    offering.save()
    return offering


@transaction.atomic
def create_course(*, data, offerings=()):
    course = Course(**{k: v for k, v in data.items() if k in COURSE_FIELDS})
    course.save()

    for offering_data in offerings:
        _save_offering(course, offering_data)

    logger.info("Created course %s with %s offering(s)", course.pk, len(offerings))
    return course


@transaction.atomic
def update_course(course, *, data, offerings=None):
    """
    ``offerings=None`` leaves offerings untouched. A list replaces the set:
    offerings missing from it are deleted, or deactivated when they
    already have schedules.
    """
    for field in COURSE_FIELDS:
        if field in data:
            setattr(course, field, data[field])
    course.save()

    if offerings is None:
        return course

    kept_ids = [_save_offering(course, offering_data).pk for offering_data in offerings]

    for stale in course.offerings.exclude(pk__in=kept_ids):
        if stale.schedules.exists():
            stale.is_active = False
            stale.save(update_fields=["is_active", "updated_at"])
        else:
            stale.delete()

    return course


def delete_course(course):
    logger.info("Deleting course %s (%s)", course.pk, course.title)
    if course.curriculum_file:
        course.curriculum_file.delete(save=False)
    course.delete()
