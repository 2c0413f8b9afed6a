"""
Console users, roles, the explicit console session and invitations.
"""
from datetime import timedelta
from smtplib import SMTPException
from unittest import mock

from django.contrib.auth import authenticate, get_user_model
from django.core import mail
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import Role, UserProfile
from accounts.services import users as user_service
from accounts.services.invites import invite_user
from accounts.session import SESSION_KEY, ConsoleSession
from core.exceptions import DuplicateEmail, InvalidInput
from tests.helpers import make_console_user

User = get_user_model()


class TestUsersAndRoles(TestCase):
    def setUp(self):
        self.admin_role = Role.objects.get(name=Role.ADMIN)
        self.student_role = Role.objects.get(name=Role.STUDENT)

    def test_create_user_sets_profile_and_staff_flag(self):
        user = user_service.create_user(
            email="Maria@Example.com",
            name="Maria Lopez",
            role=self.admin_role,
            password="s3cret-pass",
        )

        self.assertEqual(user.email, "maria@example.com")
        self.assertEqual(user.get_full_name(), "Maria Lopez")
        self.assertTrue(user.is_staff)
        self.assertEqual(user.profile.role, self.admin_role)
        self.assertTrue(user.check_password("s3cret-pass"))

    def test_duplicate_email_is_refused(self):
        make_console_user("maria@example.com")
        with self.assertRaises(DuplicateEmail):
            user_service.create_user(
                email="MARIA@example.com",
                name="Maria",
                role=self.student_role,
                password="s3cret-pass",
            )

    def test_role_change_updates_staff_flag(self):
        user = make_console_user("maria@example.com")
        user_service.update_user(user, role=self.student_role, status=UserProfile.STATUS_INACTIVE)

        user.refresh_from_db()
        self.assertFalse(user.is_staff)
        self.assertEqual(user.profile.status, UserProfile.STATUS_INACTIVE)

    def test_role_in_use_cannot_be_deleted(self):
        make_console_user("maria@example.com", role_name=Role.STUDENT)

        with self.assertRaises(user_service.RoleInUse) as ctx:
            user_service.delete_role(self.student_role)

        self.assertEqual(ctx.exception.count, 1)
        self.assertTrue(Role.objects.filter(pk=self.student_role.pk).exists())

    def test_unused_role_can_be_deleted(self):
        role = Role.objects.create(name="auditor")
        user_service.delete_role(role)
        self.assertFalse(Role.objects.filter(name="auditor").exists())


class TestEmailBackend(TestCase):
    def test_login_by_email_is_case_insensitive(self):
        user = make_console_user("maria@example.com")
        self.assertEqual(authenticate(username="MARIA@example.com", password="s3cret-pass"), user)

    def test_wrong_password(self):
        make_console_user("maria@example.com")
        self.assertIsNone(authenticate(username="maria@example.com", password="nope"))

    def test_inactive_profile_is_refused(self):
        user = make_console_user("maria@example.com")
        user.profile.status = UserProfile.STATUS_INACTIVE
        user.profile.save()

        self.assertIsNone(authenticate(username="maria@example.com", password="s3cret-pass"))


class TestConsoleSession(TestCase):
    def test_role_comes_from_profile(self):
        user = make_console_user("trainer@example.com", role_name=Role.TRAINER)
        session = ConsoleSession.for_user(user)

        self.assertEqual(session.role, Role.TRAINER)
        self.assertFalse(session.is_admin)
        self.assertEqual(session.name, "Console User")

    def test_superuser_is_admin(self):
        root = User.objects.create_superuser("root", "root@example.com", "pw")
        self.assertTrue(ConsoleSession.for_user(root).is_admin)

    def test_survives_session_storage(self):
        user = make_console_user()
        session = ConsoleSession.for_user(user)
        self.assertEqual(ConsoleSession.from_session(session.to_session()), session)
        self.assertIsNone(ConsoleSession.from_session({"user_id": 1}))

    def test_expiry(self):
        now = timezone.now()
        session = ConsoleSession.for_user(make_console_user(), now=now)
        self.assertFalse(session.is_expired(now))
        self.assertTrue(session.is_expired(now + timedelta(hours=13)))

    def test_login_starts_and_logout_ends_session(self):
        make_console_user("maria@example.com")
        client = APIClient()

        resp = client.post(
            "/api/auth/login/",
            {"email": "maria@example.com", "password": "s3cret-pass"},
            format="json",
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["role"], Role.ADMIN)
        self.assertIn(SESSION_KEY, client.session)
        self.assertIsNotNone(UserProfile.objects.get().last_login_date)

        self.assertEqual(client.post("/api/auth/logout/").status_code, 204)
        self.assertEqual(client.get("/api/auth/me/").status_code, 403)

    def test_expired_session_logs_out(self):
        make_console_user("maria@example.com")
        client = APIClient()
        client.post(
            "/api/auth/login/",
            {"email": "maria@example.com", "password": "s3cret-pass"},
            format="json",
        )
        self.assertEqual(client.get("/api/auth/me/").status_code, 200)

        store = client.session
        data = store[SESSION_KEY]
        data["expires_at"] = (timezone.now() - timedelta(minutes=1)).isoformat()
        store[SESSION_KEY] = data
        store.save()

        self.assertEqual(client.get("/api/auth/me/").status_code, 403)

    def test_admin_site_login_gets_a_console_session(self):
        user = make_console_user("maria@example.com")
        client = APIClient()
        client.force_login(user)

        resp = client.get("/api/auth/me/")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["email"], "maria@example.com")


class TestInvites(TestCase):
    def test_invite_creates_account_and_sends_password(self):
        result = invite_user(name="Nina Roth", email="nina@example.com", user_type=Role.TRAINER)

        self.assertTrue(result.email_sent)
        self.assertEqual(result.user.profile.role.name, Role.TRAINER)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["nina@example.com"])
        self.assertIn("Temporary password", mail.outbox[0].body)

    def test_failed_email_is_a_partial_success(self):
        with mock.patch(
            "accounts.services.invites.send_invite_email",
            side_effect=SMTPException("relay refused"),
        ), self.assertLogs("accounts.services.invites", level="ERROR"):
            result = invite_user(name="Nina Roth", email="nina@example.com", user_type=Role.STUDENT)

        self.assertFalse(result.email_sent)
        self.assertIn("relay refused", result.error)
        self.assertTrue(User.objects.filter(email="nina@example.com").exists())

    def test_admins_cannot_be_invited(self):
        with self.assertRaises(InvalidInput):
            invite_user(name="Eve", email="eve@example.com", user_type=Role.ADMIN)


class TestPermissionDecorator(TestCase):
    def test_dashboard_requires_admin_role(self):
        client = APIClient()
        self.assertEqual(client.get("/api/dashboard/").status_code, 302)

        client.force_login(make_console_user("student@example.com", role_name=Role.STUDENT))
        self.assertEqual(client.get("/api/dashboard/").status_code, 403)

        client.force_login(make_console_user("admin@example.com"))
        resp = client.get("/api/dashboard/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["schedules"], {"upcoming": 0, "ongoing": 0, "completed": 0})
