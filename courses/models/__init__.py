from .course import Course
from .delivery_mode import DeliveryMode
from .offering import CourseOffering
from .schedule import CourseSchedule
from .material import CourseMaterial

__all__ = [
    "Course",
    "DeliveryMode",
    "CourseOffering",
    "CourseSchedule",
    "CourseMaterial",
]
