"""
JSON console API: permissions, error mapping and the main flows.

Service errors surface as {"error": ..., "code": ...} with 400/404/409.
"""
from datetime import date
from smtplib import SMTPException
from unittest import mock

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import Role
from courses.models import CourseSchedule
from courses.services.scheduling import create_schedule
from equipment.models import PhysicalAsset
from students.services.enrollments import enroll_students
from tests.helpers import make_console_user, make_offering, make_student

STUDENT_PAYLOAD = {
    "first_name": "Mira",
    "last_name": "Novak",
    "email": "mira@example.com",
    "nationality": "HR",
    "street": "Hauptstraße 1",
    "postal_code": "10115",
    "city": "Berlin",
    "education_background": "masters",
    "english_proficiency": "C1",
    "german_proficiency": "B1",
}


class ApiTestCase(TestCase):
    def setUp(self):
        self.admin = make_console_user("admin@example.com")
        self.client = APIClient()
        self.client.force_login(self.admin)


class TestPermissions(TestCase):
    def test_anonymous_is_refused(self):
        self.assertEqual(APIClient().get("/api/courses/").status_code, 403)

    def test_non_admin_is_refused(self):
        client = APIClient()
        client.force_login(make_console_user("student@example.com", role_name=Role.STUDENT))

        self.assertEqual(client.get("/api/courses/").status_code, 403)
        self.assertEqual(client.get("/api/assets/").status_code, 403)
        self.assertEqual(client.get("/api/auth/me/").status_code, 200)

    def test_bad_credentials(self):
        resp = APIClient().post(
            "/api/auth/login/",
            {"email": "nobody@example.com", "password": "x"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Invalid credentials", "code": "invalid_credentials"})


class TestScheduleApi(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.offering = make_offering(duration_days=1)

    def test_create_returns_calculation(self):
        resp = self.client.post(
            "/api/schedules/",
            {"course_offering": self.offering.pk, "start_date": "2025-04-17"},
            format="json",
        )

        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["end_date"], "2025-04-22")
        self.assertEqual(body["course_title"], self.offering.course.title)
        self.assertEqual(len(body["calculation"]["holidays_skipped"]), 2)

    def test_end_date_in_payload_is_ignored(self):
        resp = self.client.post(
            "/api/schedules/",
            {"course_offering": self.offering.pk, "start_date": "2025-03-07", "end_date": "2030-01-01"},
            format="json",
        )
        self.assertEqual(resp.json()["end_date"], "2025-03-10")

    def test_preview_saves_nothing(self):
        resp = self.client.post(
            "/api/schedules/preview-end-date/",
            {"start_date": "2025-03-07", "working_days": 1},
            format="json",
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["end_date"], "2025-03-10")
        self.assertFalse(CourseSchedule.objects.exists())

    def test_preview_with_huge_working_days_is_400(self):
        resp = self.client.post(
            "/api/schedules/preview-end-date/",
            {"start_date": "2025-01-06", "working_days": 5000000},
            format="json",
        )

        self.assertEqual(resp.status_code, 400)
        self.assertIn("working_days", resp.json())

    def test_preview_past_the_last_date_is_400(self):
        resp = self.client.post(
            "/api/schedules/preview-end-date/",
            {"start_date": "9999-12-20", "working_days": 30},
            format="json",
        )

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["code"], "invalid")

    def test_status_filter(self):
        self.client.post(
            "/api/schedules/",
            {"course_offering": self.offering.pk, "start_date": "2025-03-07"},
            format="json",
        )

        self.assertEqual(len(self.client.get("/api/schedules/?status=completed").json()), 1)
        self.assertEqual(len(self.client.get("/api/schedules/?status=upcoming").json()), 0)

        resp = self.client.get("/api/schedules/?status=paused")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["code"], "invalid")

    def test_duplicate(self):
        created = self.client.post(
            "/api/schedules/",
            {"course_offering": self.offering.pk, "start_date": "2025-03-07"},
            format="json",
        ).json()

        resp = self.client.post(
            f"/api/schedules/{created['id']}/duplicate/",
            {"start_date": "2025-10-02"},
            format="json",
        )

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["end_date"], "2025-10-06")


class TestStudentApi(ApiTestCase):
    def test_create_and_duplicate_email(self):
        resp = self.client.post("/api/students/", STUDENT_PAYLOAD, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["city"], "Berlin")
        self.assertEqual(resp.json()["nationality"], "HR")

        resp = self.client.post("/api/students/", STUDENT_PAYLOAD, format="json")
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["code"], "duplicate_email")

    def test_missing_section_field_is_a_validation_error(self):
        payload = dict(STUDENT_PAYLOAD)
        del payload["city"]

        resp = self.client.post("/api/students/", payload, format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertIn("city", resp.json())

    def test_unknown_student_is_404(self):
        self.assertEqual(self.client.get("/api/students/9999/").status_code, 404)

    def test_non_admin_sees_only_own_schedules(self):
        schedule, _ = create_schedule(course_offering=make_offering(), start_date=date(2025, 3, 3))
        mira = make_student("mira@example.com")
        other = make_student("other@example.com")
        enroll_students(schedule, [mira.pk])

        client = APIClient()
        client.force_login(make_console_user("mira@example.com", role_name=Role.STUDENT))

        resp = client.get("/api/students/schedules/", {"email": other.email})
        self.assertEqual([s["id"] for s in resp.json()], [schedule.pk])


class TestAssetApi(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.asset = PhysicalAsset.objects.create(name="Laptop", serial_number="LT-001")
        self.student = make_student()

    def test_assign_twice(self):
        url = f"/api/assets/{self.asset.pk}/assign/"
        payload = {"assignee_id": self.student.pk, "assignee_type": "student"}

        resp = self.client.post(url, payload, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["asset"]["status"], "rental_in_progress")
        self.assertEqual(resp.json()["assignment"]["assigned_by"], "Console User")

        resp = self.client.post(url, payload, format="json")
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["code"], "asset_unavailable")

    def test_full_cycle_and_history(self):
        base = f"/api/assets/{self.asset.pk}"
        self.client.post(
            f"{base}/assign/",
            {"assignee_id": self.student.pk, "assignee_type": "student"},
            format="json",
        )
        self.assertEqual(self.client.post(f"{base}/ready-to-return/").json()["status"], "ready_to_return")

        resp = self.client.post(f"{base}/return/")
        self.assertEqual(resp.json()["asset"]["status"], "returned")
        self.assertIsNotNone(resp.json()["assignment"]["return_date"])

        self.assertEqual(self.client.post(f"{base}/available/").json()["status"], "available")

        history = self.client.get(f"{base}/history/").json()
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0]["assigned_to_name"], "Anna Schmidt")

    def test_status_is_read_only_on_update(self):
        resp = self.client.patch(
            f"/api/assets/{self.asset.pk}/",
            {"status": "lost", "name": "Laptop 14"},
            format="json",
        )
        self.assertEqual(resp.json()["status"], "available")
        self.assertEqual(resp.json()["name"], "Laptop 14")

    def test_edit_with_stale_version_is_409(self):
        read = self.client.get(f"/api/assets/{self.asset.pk}/").json()
        self.client.post(f"/api/assets/{self.asset.pk}/maintenance/")

        resp = self.client.patch(
            f"/api/assets/{self.asset.pk}/",
            {"name": "Laptop 14", "expected_version": read["version"]},
            format="json",
        )
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["code"], "stale_asset")

        fresh = self.client.get(f"/api/assets/{self.asset.pk}/").json()
        resp = self.client.patch(
            f"/api/assets/{self.asset.pk}/",
            {"name": "Laptop 14", "expected_version": fresh["version"]},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["version"], fresh["version"] + 1)
        self.assertNotIn("expected_version", resp.json())

    def test_duplicate_serial_is_409(self):
        resp = self.client.post("/api/assets/", {"name": "Other", "serial_number": "LT-001"}, format="json")
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["code"], "duplicate_serial_number")

    def test_bulk_status_and_counts(self):
        other = PhysicalAsset.objects.create(name="Tablet")
        resp = self.client.post(
            "/api/assets/bulk-status/",
            {"asset_ids": [self.asset.pk, other.pk], "status": "maintenance"},
            format="json",
        )

        self.assertEqual(resp.json(), {"updated": 2})
        self.assertEqual(self.client.get("/api/assets/status-counts/").json()["maintenance"], 2)

    def test_unknown_asset_is_404(self):
        resp = self.client.post("/api/assets/9999/maintenance/")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["code"], "asset_not_found")


class TestUserApi(ApiTestCase):
    def test_role_in_use_is_409(self):
        role = Role.objects.get(name=Role.ADMIN)
        resp = self.client.delete(f"/api/roles/{role.pk}/")

        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["code"], "role_in_use")

    def test_create_user(self):
        role = Role.objects.get(name=Role.TRAINER)
        resp = self.client.post(
            "/api/users/",
            {"email": "t@example.com", "name": "Tina Berg", "role": role.pk, "password": "long-enough"},
            format="json",
        )

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["role_name"], "trainer")

    def test_invite_reports_email_failure(self):
        with mock.patch(
            "accounts.services.invites.send_invite_email",
            side_effect=SMTPException("relay refused"),
        ), self.assertLogs("accounts.services.invites", level="ERROR"):
            resp = self.client.post(
                "/api/users/invite/",
                {"name": "Nina Roth", "email": "nina@example.com", "user_type": "student"},
                format="json",
            )

        self.assertEqual(resp.status_code, 201)
        self.assertFalse(resp.json()["email_sent"])
        self.assertIn("warning", resp.json())


class TestHealth(ApiTestCase):
    def test_staff_only(self):
        self.assertEqual(self.client.get("/health/").status_code, 302)

        self.admin.is_staff = True
        self.admin.save()

        resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["db"], "ok")
        self.assertEqual(resp.json()["holiday_cache"], "ok")
