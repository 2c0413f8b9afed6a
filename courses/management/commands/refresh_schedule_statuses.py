from django.core.management.base import BaseCommand

from courses.services.schedule_status import refresh_schedule_statuses


class Command(BaseCommand):
    help = "Re-derive upcoming / ongoing / completed for every course schedule"

    def handle(self, *args, **options):
        updated = refresh_schedule_statuses()
        self.stdout.write(
            self.style.SUCCESS(f"{updated} schedule status(es) updated")
        )
