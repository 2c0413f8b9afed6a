from django.db.models.signals import pre_save, post_save
from django.dispatch import receiver

from courses.models import CourseOffering
from courses.services.scheduling import recompute_offering_schedules


@receiver(pre_save, sender=CourseOffering)
def remember_previous_duration(sender, instance, **kwargs):
    instance._previous_duration = None
    if instance.pk:
        instance._previous_duration = (
            CourseOffering.objects
            .filter(pk=instance.pk)
            .values_list("duration_days", flat=True)
            .first()
        )


@receiver(post_save, sender=CourseOffering)
def recompute_schedules_on_duration_change(sender, instance, created, **kwargs):
    if created:
        return

    previous = getattr(instance, "_previous_duration", None)
    if previous is None or previous == instance.duration_days:
        return

    recompute_offering_schedules(instance)
