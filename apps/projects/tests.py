from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APITestCase

from .models import FeaturedProject
from . import services

User = get_user_model()


class FeaturedProjectServiceTests(TestCase):
    def test_order_is_global(self):
        FeaturedProject.objects.create(title="A", description="a", order=3)
        project = services.create_project(title="B", description="b")
        self.assertEqual(project.order, 4)

    def test_first_project_gets_order_one(self):
        project = services.create_project(title="A", description="a", technologies=None)
        self.assertEqual(project.order, 1)
        self.assertEqual(project.technologies, [])
        self.assertTrue(project.is_active)

    def test_reorder_skips_unknown_ids(self):
        a = FeaturedProject.objects.create(title="A", description="a", order=1)
        result = services.reorder_projects([{"id": 31337, "order": 1}, {"id": a.pk, "order": 5}])
        self.assertEqual(result.failed, [{"id": 31337, "order": 1}])
        a.refresh_from_db()
        self.assertEqual(a.order, 5)


class FeaturedProjectApiTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="not-a-real-password", is_staff=True)
        self.client.force_authenticate(user=self.admin)

    def test_create_and_list(self):
        resp = self.client.post(
            "/api/featured-projects",
            {
                "title": "Analytics dashboard",
                "description": "Charts and reporting",
                "technologies": ["React", "Chart.js"],
                "github_url": "https://github.com/example/dashboard",
            },
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["message"], "Project created successfully")
        self.assertEqual(resp.data["data"]["technologies"], ["React", "Chart.js"])
        self.assertEqual(resp.data["data"]["order"], 1)

        resp = self.client.get("/api/featured-projects")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["title"] for p in resp.data["data"]], ["Analytics dashboard"])

    def test_title_and_description_required(self):
        resp = self.client.post("/api/featured-projects", {"technologies": []}, format="json")
        self.assertEqual(resp.status_code, 422)
        self.assertIn("title", resp.data["errors"])
        self.assertIn("description", resp.data["errors"])

    def test_technologies_must_be_a_list(self):
        resp = self.client.post(
            "/api/featured-projects",
            {"title": "T", "description": "D", "technologies": "React"},
            format="json",
        )
        self.assertEqual(resp.status_code, 422)

    def test_filter_active(self):
        FeaturedProject.objects.create(title="On", description="x", order=1, is_active=True)
        FeaturedProject.objects.create(title="Off", description="x", order=2, is_active=False)
        resp = self.client.get("/api/featured-projects", {"is_active": "true"})
        self.assertEqual([p["title"] for p in resp.data["data"]], ["On"])

    def test_update_and_delete(self):
        project = FeaturedProject.objects.create(title="Old", description="x", order=1)
        resp = self.client.put(f"/api/featured-projects/{project.pk}", {"title": "New", "is_active": False}, format="json")
        self.assertEqual(resp.status_code, 200)
        project.refresh_from_db()
        self.assertEqual(project.title, "New")
        self.assertFalse(project.is_active)
        self.assertEqual(project.order, 1)

        resp = self.client.delete(f"/api/featured-projects/{project.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["message"], "Project deleted successfully")

    def test_missing_project(self):
        resp = self.client.get("/api/featured-projects/999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data["error"], "Project not found")

    def test_reorder(self):
        a = FeaturedProject.objects.create(title="A", description="x", order=1)
        b = FeaturedProject.objects.create(title="B", description="x", order=2)
        resp = self.client.post(
            "/api/featured-projects/reorder",
            {"projects": [{"id": a.pk, "order": 2}, {"id": b.pk, "order": 1}]},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p.title for p in services.list_projects()], ["B", "A"])

    def test_reorder_partial(self):
        a = FeaturedProject.objects.create(title="A", description="x", order=1)
        resp = self.client.post(
            "/api/featured-projects/reorder",
            {"projects": [{"id": a.pk, "order": 4}, {"id": 555, "order": 1}]},
            format="json",
        )
        self.assertEqual(resp.status_code, 207)
        self.assertEqual(resp.data["errors"], ["Project 555 not found"])
        a.refresh_from_db()
        self.assertEqual(a.order, 4)
