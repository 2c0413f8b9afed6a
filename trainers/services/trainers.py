import logging
import mimetypes

from django.db import transaction

from core.exceptions import DuplicateEmail, InvalidInput
from courses.models import CourseSchedule
from trainers.models import Trainer, TrainerSkill, TrainerDocument, TrainerAssignment

logger = logging.getLogger(__name__)

TRAINER_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "mobile_number",
    "expertise_area",
    "expertise_course",
    "experience_level",
    "profile_image",
)


def _replace_skills(trainer, skills):
    cleaned = {s.strip() for s in skills if s and s.strip()}
    trainer.skills.exclude(skill__in=cleaned).delete()
    existing = set(trainer.skills.values_list("skill", flat=True))
    TrainerSkill.objects.bulk_create(
        TrainerSkill(trainer=trainer, skill=skill)
        for skill in sorted(cleaned - existing)
    )


# ============================
# TRAINER RECORDS
# ============================

@transaction.atomic
def create_trainer(*, data, skills=()):
    email = data["email"].strip().lower()
    if Trainer.objects.filter(email__iexact=email).exists():
        raise DuplicateEmail(email)

    fields = {k: v for k, v in data.items() if k in TRAINER_FIELDS}
    fields["email"] = email
    trainer = Trainer.objects.create(**fields)
    _replace_skills(trainer, skills)

    logger.info("Created trainer %s (%s)", trainer.pk, email)
    return trainer


@transaction.atomic
def update_trainer(trainer, *, data, skills=None):
    if "email" in data:
        email = data["email"].strip().lower()
        if Trainer.objects.filter(email__iexact=email).exclude(pk=trainer.pk).exists():
            raise DuplicateEmail(email)
        data = {**data, "email": email}

    for field in TRAINER_FIELDS:
        if field in data:
            setattr(trainer, field, data[field])
    trainer.save()

    if skills is not None:
        _replace_skills(trainer, skills)

    return trainer


def delete_trainer(trainer):
    logger.info("Deleting trainer %s (%s)", trainer.pk, trainer.email)
    if trainer.profile_image:
        trainer.profile_image.delete(save=False)
    for document in trainer.documents.all():
        document.file.delete(save=False)
    trainer.delete()


# ============================
# DOCUMENTS
# ============================

def add_document(trainer, *, file, title=""):
    document = TrainerDocument(
        trainer=trainer,
        title=title or file.name,
        file=file,
        file_type=getattr(file, "content_type", "") or mimetypes.guess_type(file.name)[0] or "",
        file_size=getattr(file, "size", None),
    )
    document.save()
    return document


def remove_document(document):
    document.file.delete(save=False)
    document.delete()


# ============================
# SCHEDULE ASSIGNMENTS
# ============================

@transaction.atomic
def set_schedule_trainers(schedule, trainer_ids):
    """Replace the trainer set of a schedule in one transaction."""
    trainer_ids = set(trainer_ids)
    found = set(Trainer.objects.filter(pk__in=trainer_ids).values_list("pk", flat=True))

    missing = trainer_ids - found
    if missing:
        raise InvalidInput(f"Unknown trainer id(s): {sorted(missing)}")

    TrainerAssignment.objects.filter(schedule=schedule).delete()
    TrainerAssignment.objects.bulk_create(
        TrainerAssignment(schedule=schedule, trainer_id=trainer_id)
        for trainer_id in sorted(trainer_ids)
    )

    logger.info("Schedule %s now has %s trainer(s)", schedule.pk, len(trainer_ids))
    return list(
        TrainerAssignment.objects
        .filter(schedule=schedule)
        .select_related("trainer")
    )


def remove_trainer_assignment(assignment):
    assignment.delete()


def trainers_for_schedule(schedule):
    return (
        TrainerAssignment.objects
        .filter(schedule=schedule)
        .select_related("trainer")
        .order_by("trainer__last_name")
    )


def schedules_for_trainer(email):
    trainer = Trainer.objects.filter(email__iexact=(email or "").strip()).first()
    if trainer is None:
        return CourseSchedule.objects.none()

    return (
        CourseSchedule.objects
        .filter(trainer_assignments__trainer=trainer)
        .select_related("course", "course_offering__delivery_mode")
        .order_by("start_date")
    )
