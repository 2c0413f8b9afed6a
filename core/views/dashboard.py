from django.db.models import Count
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from accounts.permissions import console_admin_required
from courses.models import Course, CourseSchedule
from courses.services.schedule_status import refresh_schedule_statuses
from equipment.services.assets import status_counts
from students.models import Student
from trainers.models import Trainer


@require_GET
@console_admin_required
def dashboard(request):
    refresh_schedule_statuses()

    schedules = {value: 0 for value, _ in CourseSchedule.STATUS_CHOICES}
    for row in CourseSchedule.objects.values("status").annotate(total=Count("id")):
        schedules[row["status"]] = row["total"]

    return JsonResponse({
        "courses": Course.objects.count(),
        "schedules": schedules,
        "students": Student.objects.count(),
        "trainers": Trainer.objects.count(),
        "assets": status_counts(),
    })
