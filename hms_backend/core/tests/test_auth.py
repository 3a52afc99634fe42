"""Tests for Authentication endpoints.

Tests cover:
- Login (POST /api/auth/login/)
- Refresh (POST /api/auth/refresh/)
- Logout (POST /api/auth/logout/)
- Me (GET /api/auth/me/)
"""

from __future__ import annotations

from django.test import TestCase

from rest_framework import status
from rest_framework.test import APIClient

from hms_backend.core.models import AuditLog, Role, User


class AuthenticationTest(TestCase):
    """Tests for /api/auth/ endpoints."""

    databases = {"default"}

    def setUp(self):
        self.role_admin, _ = Role.objects.get_or_create(
            name="admin",
            defaults={"label": "Administrator"},
        )
        self.role_receptionist, _ = Role.objects.get_or_create(
            name="receptionist",
            defaults={"label": "Receptionist"},
        )

        self.admin = User.objects.create_user(
            username="admin_auth_test",
            email="admin_auth@example.com",
            password="SecurePass123!",
            first_name="Asha",
            last_name="Roy",
            role=self.role_admin,
        )
        self.receptionist = User.objects.create_user(
            username="reception_auth_test",
            email="reception_auth@example.com",
            password="SecurePass123!",
            role=self.role_receptionist,
        )
        self.inactive_user = User.objects.create_user(
            username="inactive_auth_test",
            email="inactive_auth@example.com",
            password="SecurePass123!",
            role=self.role_receptionist,
            is_active=False,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _login(self, username="admin_auth_test", password="SecurePass123!"):
        return self.client.post(
            "/api/auth/login/",
            {"username": username, "password": password},
            format="json",
        )

    # ========== LOGIN TESTS ==========

    def test_login_success_returns_tokens_and_profile(self):
        response = self._login()

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)

        user_data = response.data["user"]
        self.assertEqual(user_data["id"], self.admin.id)
        self.assertEqual(user_data["full_name"], "Asha Roy")
        self.assertEqual(user_data["role"]["name"], "admin")

    def test_login_without_name_falls_back_to_username(self):
        response = self._login("reception_auth_test")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["full_name"], "reception_auth_test")
        self.assertEqual(response.data["user"]["role"]["name"], "receptionist")

    def test_login_wrong_password_returns_400(self):
        response = self._login(password="WrongPassword!")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertNotIn("access", response.data)

    def test_login_inactive_user_returns_400(self):
        response = self._login("inactive_auth_test")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_missing_fields_returns_400(self):
        response = self.client.post("/api/auth/login/", {"username": "admin_auth_test"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post("/api/auth/login/", {"password": "SecurePass123!"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_writes_sign_in_audit_entry(self):
        self._login()

        self.assertTrue(
            AuditLog.objects.filter(user=self.admin, action="signed_in", role_name="admin").exists()
        )

    # ========== REFRESH TESTS ==========

    def test_refresh_success_returns_new_access_token(self):
        refresh_token = self._login().data["refresh"]

        response = self.client.post("/api/auth/refresh/", {"refresh": refresh_token}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["access"])

    def test_refresh_invalid_token_returns_400(self):
        response = self.client.post("/api/auth/refresh/", {"refresh": "invalid_token_here"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    # ========== LOGOUT TESTS ==========

    def test_logout_blacklists_refresh_token(self):
        tokens = self._login().data
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = self.client.post("/api/auth/logout/", {"refresh": tokens["refresh"]}, format="json")
        self.assertEqual(response.status_code, status.HTTP_205_RESET_CONTENT)

        # A blacklisted token can no longer be refreshed.
        response = self.client.post("/api/auth/refresh/", {"refresh": tokens["refresh"]}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        self.assertTrue(AuditLog.objects.filter(user=self.admin, action="signed_out").exists())

    def test_logout_requires_authentication(self):
        tokens = self._login().data

        response = self.client.post("/api/auth/logout/", {"refresh": tokens["refresh"]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    # ========== ME ENDPOINT TESTS ==========

    def test_me_with_valid_token_returns_user(self):
        access_token = self._login().data["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.admin.id)
        self.assertEqual(response.data["full_name"], "Asha Roy")
        self.assertEqual(response.data["role"]["name"], "admin")

    def test_me_without_token_returns_401(self):
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_health_endpoint_no_auth_required(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["status"], "ok")


class AuthenticationEdgeCasesTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.user_no_role = User.objects.create_user(
            username="norole_auth_test",
            email="norole_auth@example.com",
            password="SecurePass123!",
            role=None,
        )
        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def test_login_user_without_role(self):
        response = self.client.post(
            "/api/auth/login/",
            {"username": "norole_auth_test", "password": "SecurePass123!"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data["user"]["role"])

    def test_user_without_role_is_denied_by_rbac(self):
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"
        client.force_authenticate(user=self.user_no_role)

        response = client.get("/api/patients/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
