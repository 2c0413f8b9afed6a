import logging

from django.db import transaction

from core.exceptions import InvalidInput
from courses.models import CourseSchedule
from students.models import Student, ScheduleEnrollment

logger = logging.getLogger(__name__)


@transaction.atomic
def enroll_students(schedule, student_ids):
    """
    Enroll students in a schedule. Already-enrolled students are skipped.
    Returns the newly created enrollments.
    """
    student_ids = set(student_ids)
    students = list(Student.objects.filter(pk__in=student_ids))

    missing = student_ids - {s.pk for s in students}
    if missing:
        raise InvalidInput(f"Unknown student id(s): {sorted(missing)}")

    already = set(
        ScheduleEnrollment.objects
        .filter(schedule=schedule, student_id__in=student_ids)
        .values_list("student_id", flat=True)
    )

    created = [
        ScheduleEnrollment.objects.create(student=student, schedule=schedule)
        for student in students
        if student.pk not in already
    ]

    logger.info(
        "Enrolled %s student(s) in schedule %s (%s already enrolled)",
        len(created), schedule.pk, len(already),
    )
    return created


def remove_enrollment(enrollment):
    enrollment.delete()


def update_enrollment_status(enrollment, status):
    if status not in dict(ScheduleEnrollment.STATUS_CHOICES):
        raise InvalidInput(f"Unknown enrollment status: {status}")

    enrollment.status = status
    enrollment.save(update_fields=["status", "updated_at"])
    return enrollment


def enrollments_for_schedule(schedule):
    return (
        ScheduleEnrollment.objects
        .filter(schedule=schedule)
        .select_related("student__address", "student__education")
        .order_by("-enrollment_date")
    )


def schedules_for_student(email):
    """Schedules the student with this email is enrolled in; [] if unknown."""
    student = Student.objects.filter(email__iexact=(email or "").strip()).first()
    if student is None:
        logger.info("Student not found: %s", email)
        return CourseSchedule.objects.none()

    return (
        CourseSchedule.objects
        .filter(enrollments__student=student)
        .select_related("course", "course_offering__delivery_mode")
        .order_by("start_date")
    )
