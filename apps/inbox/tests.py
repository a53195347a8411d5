from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APITestCase

from .models import Message
from . import services

User = get_user_model()

CONTACT = {
    "sender": "Ada",
    "email": "ada@example.com",
    "subject": "Hello",
    "content": "Loved the portfolio.",
}


class InboxServiceTests(TestCase):
    def test_new_message_is_unread(self):
        message = services.create_message(**CONTACT)
        self.assertFalse(message.read)

    def test_mark_read_is_idempotent(self):
        message = services.create_message(**CONTACT)
        services.mark_read(message)
        services.mark_read(message)
        self.assertTrue(Message.objects.get(pk=message.pk).read)

    def test_mark_all_read(self):
        services.create_message(**CONTACT)
        services.create_message(**CONTACT)
        self.assertEqual(services.mark_all_read(), 2)
        self.assertEqual(services.mark_all_read(), 0)

    def test_list_newest_first(self):
        first = services.create_message(**CONTACT)
        second = services.create_message(**{**CONTACT, "subject": "Again"})
        self.assertEqual(list(services.list_messages()), [second, first])


class InboxApiTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="not-a-real-password", is_staff=True)

    def test_public_contact_form(self):
        resp = self.client.post("/api/messages", {**CONTACT, "read": True}, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["message"], "Message sent successfully")
        self.assertFalse(resp.data["data"]["read"])

    def test_contact_form_validation(self):
        resp = self.client.post("/api/messages", {**CONTACT, "email": "not-an-email"}, format="json")
        self.assertEqual(resp.status_code, 422)
        self.assertIn("email", resp.data["errors"])
        self.assertFalse(Message.objects.exists())

    def test_listing_requires_admin(self):
        resp = self.client.get("/api/messages")
        self.assertIn(resp.status_code, (401, 403))

    def test_admin_flow(self):
        message = services.create_message(**CONTACT)
        self.client.force_authenticate(user=self.admin)

        resp = self.client.get("/api/messages")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.data["data"]), 1)

        resp = self.client.put(f"/api/messages/{message.pk}/read")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data["data"]["read"])

        resp = self.client.put(f"/api/messages/{message.pk}/toggle-read")
        self.assertEqual(resp.data["message"], "Message marked as unread")

        resp = self.client.put("/api/messages/mark-all-read")
        self.assertEqual(resp.data["data"], {"updated": 1})

        resp = self.client.delete(f"/api/messages/{message.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(Message.objects.exists())

    def test_mark_read_unknown_message(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.put("/api/messages/12345/read")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data["error"], "Message not found")
