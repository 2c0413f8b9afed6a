from django.core.management.base import BaseCommand

from courses.models import CourseSchedule
from courses.services.scheduling import recompute_schedule


class Command(BaseCommand):
    help = "Recalculate end dates (and statuses) of course schedules"

    def add_arguments(self, parser):
        parser.add_argument(
            "--status",
            choices=[value for value, _ in CourseSchedule.STATUS_CHOICES],
            help="Only schedules currently in this status",
        )

    def handle(self, *args, **options):
        schedules = CourseSchedule.objects.select_related("course_offering")
        if options["status"]:
            schedules = schedules.filter(status=options["status"])

        warnings = 0
        count = 0
        for schedule in schedules:
            calculation = recompute_schedule(schedule)
            count += 1
            if calculation.warnings:
                warnings += 1

        self.stdout.write(self.style.SUCCESS(f"{count} schedule(s) recomputed"))
        if warnings:
            self.stdout.write(
                self.style.WARNING(
                    f"{warnings} schedule(s) were computed without holiday data"
                )
            )
