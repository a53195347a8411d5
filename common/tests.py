from django.test import TestCase, override_settings
from django.urls import path
from rest_framework.exceptions import ValidationError
from rest_framework.test import APITestCase
from rest_framework.views import APIView

from apps.skills.models import Skill, SkillCategory
from .ordering import next_order


class BrokenView(APIView):
    permission_classes = []

    def get(self, request):
        raise RuntimeError("boom")


class FlatValidationView(APIView):
    permission_classes = []

    def get(self, request):
        raise ValidationError("bad input")


urlpatterns = [
    path("broken", BrokenView.as_view()),
    path("flat", FlatValidationView.as_view()),
]


class NextOrderTests(TestCase):
    def test_empty(self):
        self.assertEqual(next_order(Skill.objects.all()), 1)

    def test_after_max(self):
        Skill.objects.create(name="a", category=SkillCategory.BACKEND, order=0)
        self.assertEqual(next_order(Skill.objects.all()), 1)
        Skill.objects.create(name="b", category=SkillCategory.BACKEND, order=6)
        self.assertEqual(next_order(Skill.objects.all()), 7)


@override_settings(ROOT_URLCONF="common.tests")
class ExceptionHandlerTests(APITestCase):
    def test_unhandled_error_is_500_envelope(self):
        with self.assertLogs("common.exceptions", level="ERROR"):
            resp = self.client.get("/broken")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data["error"], "Internal server error")

    def test_non_field_validation_error(self):
        resp = self.client.get("/flat")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.data, {"errors": {"non_field_errors": ["bad input"]}})
