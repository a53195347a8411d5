from unittest import mock

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APITestCase

from .models import ProfileSetting
from .store import SettingsStore

User = get_user_model()


class SettingsStoreTests(TestCase):
    def setUp(self):
        self.store = SettingsStore()

    def test_set_inserts_then_updates(self):
        self.assertTrue(self.store.set("email", "a@example.com"))
        self.assertTrue(self.store.set("email", "b@example.com"))
        self.assertEqual(ProfileSetting.objects.count(), 1)
        self.assertEqual(self.store.get("email"), "b@example.com")

    def test_get_missing_key(self):
        self.assertIsNone(self.store.get("nope"))

    def test_all(self):
        self.store.set("phone", "555")
        self.store.set("location", "SF")
        self.assertEqual(self.store.all(), {"location": "SF", "phone": "555"})

    def test_set_reports_database_failure(self):
        with mock.patch.object(ProfileSetting.objects, "update_or_create", side_effect=DatabaseError("boom")):
            self.assertFalse(self.store.set("email", "x"))

    def test_seed_command_keeps_existing_values(self):
        self.store.set("email", "mine@example.com")
        call_command("seed_profile_settings", stdout=mock.MagicMock())
        self.assertEqual(self.store.get("email"), "mine@example.com")
        self.assertEqual(self.store.get("location"), "San Francisco, CA")


class ProfileSettingApiTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="not-a-real-password", is_staff=True)
        SettingsStore().set("email", "hello@example.com")

    def test_list_is_public(self):
        resp = self.client.get("/api/profile-settings")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"], {"email": "hello@example.com"})

    def test_show(self):
        resp = self.client.get("/api/profile-settings/email")
        self.assertEqual(resp.data["data"], {"key": "email", "value": "hello@example.com"})

    def test_show_missing(self):
        resp = self.client.get("/api/profile-settings/phone")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data["error"], "Setting not found")

    def test_update_requires_value(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.put("/api/profile-settings/email", {}, format="json")
        self.assertEqual(resp.status_code, 422)
        self.assertIn("value", resp.data["errors"])

    def test_update_upserts(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.put("/api/profile-settings/phone", {"value": "+1 555"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"], {"key": "phone", "value": "+1 555"})
        self.assertEqual(SettingsStore().get("phone"), "+1 555")

    def test_update_failure_is_500(self):
        self.client.force_authenticate(user=self.admin)
        with mock.patch.object(SettingsStore, "set", return_value=False):
            resp = self.client.put("/api/profile-settings/phone", {"value": "x"}, format="json")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data["error"], "Failed to update setting")

    def test_anonymous_update_rejected(self):
        resp = self.client.put("/api/profile-settings/email", {"value": "evil"}, format="json")
        self.assertIn(resp.status_code, (401, 403))
        self.assertEqual(SettingsStore().get("email"), "hello@example.com")

    def test_batch_all_succeed(self):
        self.client.force_authenticate(user=self.admin)
        payload = {"settings": [{"key": "email", "value": "new@example.com"}, {"key": "city", "value": "SF"}]}
        resp = self.client.post("/api/profile-settings/batch", payload, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["message"], "All settings updated successfully")
        self.assertEqual(len(resp.data["data"]["updated"]), 2)

    def test_batch_partial_failure(self):
        self.client.force_authenticate(user=self.admin)
        real_set = SettingsStore.set

        def flaky_set(store, key, value):
            if key == "bad":
                return False
            return real_set(store, key, value)

        payload = {"settings": [{"key": "bad", "value": "x"}, {"key": "city", "value": "SF"}]}
        with mock.patch.object(SettingsStore, "set", flaky_set):
            resp = self.client.post("/api/profile-settings/batch", payload, format="json")
        self.assertEqual(resp.status_code, 207)
        self.assertEqual(resp.data["errors"], ["Failed to update setting: bad"])
        self.assertEqual(resp.data["data"]["updated"], [{"key": "city", "value": "SF"}])
        self.assertEqual(SettingsStore().get("city"), "SF")

    def test_batch_validation(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.post("/api/profile-settings/batch", {"settings": [{"key": "email"}]}, format="json")
        self.assertEqual(resp.status_code, 422)
