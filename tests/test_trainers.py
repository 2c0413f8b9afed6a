"""Trainer records, skills and schedule assignment sets."""
from datetime import date

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings

from core.exceptions import DuplicateEmail, InvalidInput
from courses.services.scheduling import create_schedule
from trainers.models import TrainerAssignment
from trainers.services import trainers as trainer_service
from tests.helpers import make_offering

DATA = {
    "first_name": "Jonas",
    "last_name": "Becker",
    "email": "Jonas.Becker@example.com",
    "experience_level": "expert",
    "expertise_area": "Language didactics",
}


class TestTrainerRecords(TestCase):
    def test_create_with_skills(self):
        trainer = trainer_service.create_trainer(data=DATA, skills=["German", " DaF ", ""])

        self.assertEqual(trainer.email, "jonas.becker@example.com")
        self.assertEqual(sorted(trainer.skills.values_list("skill", flat=True)), ["DaF", "German"])

    def test_duplicate_email(self):
        trainer_service.create_trainer(data=DATA)
        with self.assertRaises(DuplicateEmail):
            trainer_service.create_trainer(data={**DATA, "email": "JONAS.BECKER@example.com"})

    def test_skills_are_replaced(self):
        trainer = trainer_service.create_trainer(data=DATA, skills=["German", "English"])

        trainer_service.update_trainer(trainer, data={}, skills=["English", "Math"])

        self.assertEqual(sorted(trainer.skills.values_list("skill", flat=True)), ["English", "Math"])

    def test_skills_untouched_when_not_given(self):
        trainer = trainer_service.create_trainer(data=DATA, skills=["German"])
        trainer_service.update_trainer(trainer, data={"expertise_area": "Grammar"})
        self.assertEqual(list(trainer.skills.values_list("skill", flat=True)), ["German"])

    @override_settings(MEDIA_ROOT="/tmp/trainingdesk-test-media")
    def test_document_upload_records_type_and_size(self):
        trainer = trainer_service.create_trainer(data=DATA)
        upload = SimpleUploadedFile("cv.pdf", b"%PDF-1.4 test", content_type="application/pdf")

        document = trainer_service.add_document(trainer, file=upload)

        self.assertEqual(document.title, "cv.pdf")
        self.assertEqual(document.file_type, "application/pdf")
        self.assertEqual(document.file_size, len(b"%PDF-1.4 test"))

        trainer_service.remove_document(document)
        self.assertFalse(trainer.documents.exists())


class TestScheduleAssignments(TestCase):
    def setUp(self):
        self.schedule, _ = create_schedule(
            course_offering=make_offering(),
            start_date=date(2025, 3, 3),
        )
        self.jonas = trainer_service.create_trainer(data=DATA)
        self.lea = trainer_service.create_trainer(
            data={**DATA, "first_name": "Lea", "last_name": "Fischer", "email": "lea@example.com"}
        )

    def test_assignment_set_is_replaced(self):
        trainer_service.set_schedule_trainers(self.schedule, [self.jonas.pk])
        rows = trainer_service.set_schedule_trainers(self.schedule, [self.lea.pk])

        self.assertEqual([r.trainer for r in rows], [self.lea])
        self.assertEqual(TrainerAssignment.objects.count(), 1)

    def test_unknown_trainer_keeps_previous_set(self):
        trainer_service.set_schedule_trainers(self.schedule, [self.jonas.pk])

        with self.assertRaises(InvalidInput):
            trainer_service.set_schedule_trainers(self.schedule, [self.lea.pk, 9999])

        self.assertEqual(
            list(trainer_service.trainers_for_schedule(self.schedule).values_list("trainer", flat=True)),
            [self.jonas.pk],
        )

    def test_schedules_for_trainer(self):
        trainer_service.set_schedule_trainers(self.schedule, [self.jonas.pk, self.lea.pk])

        self.assertEqual(list(trainer_service.schedules_for_trainer("LEA@example.com")), [self.schedule])
        self.assertEqual(list(trainer_service.schedules_for_trainer("ghost@example.com")), [])

    def test_remove_single_assignment(self):
        rows = trainer_service.set_schedule_trainers(self.schedule, [self.jonas.pk, self.lea.pk])
        jonas_row = next(r for r in rows if r.trainer == self.jonas)

        trainer_service.remove_trainer_assignment(jonas_row)

        self.assertEqual([r.trainer for r in trainer_service.trainers_for_schedule(self.schedule)], [self.lea])
