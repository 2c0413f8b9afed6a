from .student import Student, StudentAddress, StudentEducation
from .enrollment import ScheduleEnrollment

__all__ = [
    "Student",
    "StudentAddress",
    "StudentEducation",
    "ScheduleEnrollment",
]
