# students/services/records.py
"""
Student records span three tables (student, address, education).
Every write touches them inside one transaction.
"""
import logging

from django.db import transaction, IntegrityError

from core.exceptions import DuplicateEmail
from students.models import Student, StudentAddress, StudentEducation

logger = logging.getLogger(__name__)

STUDENT_FIELDS = (
    "first_name",
    "last_name",
    "gender",
    "email",
    "mobile_number",
    "nationality",
)
ADDRESS_FIELDS = ("street", "postal_code", "city")
EDUCATION_FIELDS = (
    "education_background",
    "english_proficiency",
    "german_proficiency",
)


def _pick(data, fields):
    return {k: data[k] for k in fields if k in data}


def create_student(data):
    """
    ``data`` is the flat form payload (student + address + education).
    Either all three rows are written or none.
    """
    email = data["email"].strip().lower()
    if Student.objects.filter(email__iexact=email).exists():
        raise DuplicateEmail(email)

    try:
        with transaction.atomic():
            student = Student.objects.create(**{**_pick(data, STUDENT_FIELDS), "email": email})
            StudentAddress.objects.create(student=student, **_pick(data, ADDRESS_FIELDS))
            StudentEducation.objects.create(student=student, **_pick(data, EDUCATION_FIELDS))
    except IntegrityError:
        # concurrent insert with the same email
        raise DuplicateEmail(email)

    logger.info("Created student %s (%s)", student.pk, email)
    return student


@transaction.atomic
def update_student(student, data):
    if "email" in data:
        email = data["email"].strip().lower()
        if Student.objects.filter(email__iexact=email).exclude(pk=student.pk).exists():
            raise DuplicateEmail(email)
        data = {**data, "email": email}

    for field, value in _pick(data, STUDENT_FIELDS).items():
        setattr(student, field, value)
    student.save()

    address_data = _pick(data, ADDRESS_FIELDS)
    if address_data:
        StudentAddress.objects.update_or_create(student=student, defaults=address_data)

    education_data = _pick(data, EDUCATION_FIELDS)
    if education_data:
        StudentEducation.objects.update_or_create(student=student, defaults=education_data)

    return student


def delete_student(student):
    logger.info("Deleting student %s (%s)", student.pk, student.email)
    student.delete()


def get_complete_students():
    return Student.objects.select_related("address", "education")
