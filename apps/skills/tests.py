from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APITestCase

from .models import Skill, SkillCategory
from . import analytics, services

User = get_user_model()


def make_skills(category, count, start_order=1):
    return [
        Skill.objects.create(name=f"{category}-{i}", category=category, order=start_order + i)
        for i in range(count)
    ]


class SkillServiceTests(TestCase):
    def test_order_defaults_to_end_of_category(self):
        Skill.objects.create(name="React", category=SkillCategory.FRONTEND, order=4)
        Skill.objects.create(name="Docker", category=SkillCategory.DEVOPS, order=9)
        skill = services.create_skill(name="Vue", category=SkillCategory.FRONTEND)
        self.assertEqual(skill.order, 5)

    def test_order_starts_at_one_for_empty_category(self):
        Skill.objects.create(name="React", category=SkillCategory.FRONTEND, order=7)
        skill = services.create_skill(name="Django", category=SkillCategory.BACKEND)
        self.assertEqual(skill.order, 1)

    def test_explicit_order_is_kept(self):
        skill = services.create_skill(name="Django", category=SkillCategory.BACKEND, order=12)
        self.assertEqual(skill.order, 12)

    def test_defaults(self):
        skill = services.create_skill(name="Django", category=SkillCategory.BACKEND)
        self.assertEqual(skill.proficiency, 100)
        self.assertFalse(skill.to_study)
        self.assertEqual(skill.study_notes, "")

    def test_grouped_omits_empty_categories(self):
        make_skills(SkillCategory.FRONTEND, 2)
        make_skills(SkillCategory.DEVOPS, 1)
        grouped = services.grouped_by_category()
        self.assertEqual(set(grouped), {"frontend", "devops"})
        self.assertEqual([s.name for s in grouped["frontend"]], ["frontend-0", "frontend-1"])

    def test_toggle_study_round_trip(self):
        skill = services.create_skill(name="Go", category=SkillCategory.BACKEND)
        services.toggle_study(skill)
        self.assertTrue(Skill.objects.get(pk=skill.pk).to_study)
        services.toggle_study(skill)
        self.assertFalse(Skill.objects.get(pk=skill.pk).to_study)

    def test_study_list_ordering(self):
        Skill.objects.create(name="b2", category=SkillCategory.BACKEND, order=2, to_study=True)
        Skill.objects.create(name="b1", category=SkillCategory.BACKEND, order=1, to_study=True)
        Skill.objects.create(name="f1", category=SkillCategory.FRONTEND, order=1, to_study=False)
        self.assertEqual([s.name for s in services.study_list()], ["b1", "b2"])

    def test_notes_never_null(self):
        skill = services.create_skill(name="Go", category=SkillCategory.BACKEND, study_notes=None)
        self.assertEqual(skill.study_notes, "")
        services.update_notes(skill, None)
        self.assertEqual(Skill.objects.get(pk=skill.pk).study_notes, "")

    def test_reorder_unknown_id_keeps_valid_updates(self):
        a, b = make_skills(SkillCategory.BACKEND, 2)
        result = services.reorder_skills([{"id": a.pk, "order": 10}, {"id": 99999, "order": 3}, {"id": b.pk, "order": 20}])
        self.assertFalse(result.ok)
        self.assertEqual([item["id"] for item in result.failed], [99999])
        self.assertEqual(Skill.objects.get(pk=a.pk).order, 10)
        self.assertEqual(Skill.objects.get(pk=b.pk).order, 20)


class SkillAnalyticsTests(TestCase):
    def test_full_marks_are_senior(self):
        result = analytics.analyze_seniority({"frontend": 5, "backend": 5, "devops": 3})
        self.assertEqual(result.scores, {"frontend": 100.0, "backend": 100.0, "devops": 100.0})
        self.assertAlmostEqual(result.overall, 100.0)
        self.assertEqual(result.level, "Senior")

    def test_small_skill_set_is_junior(self):
        result = analytics.analyze_seniority({"frontend": 2, "backend": 1})
        self.assertEqual(result.scores["frontend"], 40.0)
        self.assertEqual(result.scores["backend"], 20.0)
        self.assertEqual(result.scores["devops"], 0.0)
        self.assertAlmostEqual(result.overall, 21.0)
        self.assertEqual(result.level, "Junior")
        self.assertEqual(result.weakest_area, "devops")
        self.assertIn("DevOps", result.analysis)

    def test_scores_are_capped(self):
        result = analytics.analyze_seniority({"frontend": 50, "backend": 0, "devops": 0})
        self.assertEqual(result.scores["frontend"], 100.0)
        self.assertAlmostEqual(result.overall, 35.0)

    def test_overall_is_weighted_sum(self):
        scores = {"frontend": 80.0, "backend": 60.0, "devops": 100 / 3}
        expected = 0.35 * 80.0 + 0.35 * 60.0 + 0.30 * (100 / 3)
        self.assertAlmostEqual(analytics.overall_score(scores), expected)

    def test_mid_level_threshold(self):
        # 4/4/1 -> 28 + 28 + 10 = 66
        result = analytics.analyze_seniority({"frontend": 4, "backend": 4, "devops": 1})
        self.assertEqual(result.level, "Mid-level")
        self.assertEqual(result.weakest_area, "devops")

    def test_weakest_tie_prefers_frontend_then_backend(self):
        self.assertEqual(analytics.weakest_category({"frontend": 0, "backend": 0, "devops": 0}), "frontend")
        self.assertEqual(analytics.weakest_category({"frontend": 50, "backend": 20, "devops": 20}), "backend")

    def test_distribution_percentages(self):
        dist = analytics.skills_distribution({"frontend": 1, "backend": 1, "devops": 1})
        self.assertEqual(dist.labels, ["frontend", "backend", "devops"])
        self.assertEqual(dist.counts, [1, 1, 1])
        self.assertEqual(dist.percentages, [33.3, 33.3, 33.3])
        self.assertAlmostEqual(sum(dist.percentages), 100, delta=0.5)

    def test_distribution_skips_empty_categories(self):
        dist = analytics.skills_distribution({"frontend": 3, "devops": 1})
        self.assertEqual(dist.labels, ["frontend", "devops"])
        self.assertEqual(dist.percentages, [75.0, 25.0])

    def test_distribution_without_skills(self):
        dist = analytics.skills_distribution({})
        self.assertEqual(dist.as_dict(), {"labels": [], "counts": [], "percentages": []})

    def test_round_half_up(self):
        self.assertEqual(analytics.round_half_up(6.25, 1), 6.3)
        self.assertEqual(analytics.round_half_up(66.5), 67)

    def test_report_on_empty_database(self):
        report = analytics.build_report()
        self.assertEqual(report["total_skills"], 0)
        self.assertEqual(report["top_skills"], [])
        self.assertEqual(report["senior_level_analysis"]["level"], "Junior")
        self.assertEqual(report["senior_level_analysis"]["scores"]["overall"], 0)

    def test_top_skills_rank_by_order_across_categories(self):
        Skill.objects.create(name="late", category=SkillCategory.FRONTEND, order=9)
        Skill.objects.create(name="first-backend", category=SkillCategory.BACKEND, order=1)
        Skill.objects.create(name="first-frontend", category=SkillCategory.FRONTEND, order=1)
        top = analytics.top_skills(limit=2)
        self.assertEqual([item["name"] for item in top], ["first-backend", "first-frontend"])
        self.assertEqual(set(top[0]), {"name", "category"})


class SkillApiTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="not-a-real-password", is_staff=True)
        self.client.force_authenticate(user=self.admin)

    def test_create_assigns_order(self):
        Skill.objects.create(name="React", category=SkillCategory.FRONTEND, order=3)
        resp = self.client.post("/api/skills", {"name": "Svelte", "category": "frontend"}, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["message"], "Skill created successfully")
        self.assertEqual(resp.data["data"]["order"], 4)

    def test_create_with_null_order_and_notes(self):
        resp = self.client.post(
            "/api/skills",
            {"name": "Go", "category": "backend", "order": None, "study_notes": None},
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["data"]["order"], 1)
        self.assertEqual(Skill.objects.get(name="Go").study_notes, "")

    def test_create_rejects_unknown_category(self):
        resp = self.client.post("/api/skills", {"name": "Figma", "category": "design"}, format="json")
        self.assertEqual(resp.status_code, 422)
        self.assertIn("category", resp.data["errors"])
        self.assertFalse(Skill.objects.exists())

    def test_create_rejects_out_of_range_proficiency(self):
        for value in (0, 101):
            resp = self.client.post("/api/skills", {"name": "Go", "category": "backend", "proficiency": value}, format="json")
            self.assertEqual(resp.status_code, 422)
            self.assertIn("proficiency", resp.data["errors"])
        self.assertFalse(Skill.objects.exists())

    def test_create_requires_name(self):
        resp = self.client.post("/api/skills", {"category": "backend"}, format="json")
        self.assertEqual(resp.status_code, 422)
        self.assertIn("name", resp.data["errors"])

    def test_partial_update(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND, order=1, study_notes="keep")
        resp = self.client.put(f"/api/skills/{skill.pk}", {"proficiency": 70}, format="json")
        self.assertEqual(resp.status_code, 200)
        skill.refresh_from_db()
        self.assertEqual(skill.proficiency, 70)
        self.assertEqual(skill.name, "Go")
        self.assertEqual(skill.study_notes, "keep")

    def test_update_with_null_notes_stores_empty_string(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND, study_notes="old")
        resp = self.client.put(f"/api/skills/{skill.pk}", {"study_notes": None}, format="json")
        self.assertEqual(resp.status_code, 200)
        skill.refresh_from_db()
        self.assertEqual(skill.study_notes, "")

    def test_update_rejects_bad_proficiency_without_mutation(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND, proficiency=50)
        resp = self.client.put(f"/api/skills/{skill.pk}", {"proficiency": 150, "name": "Rust"}, format="json")
        self.assertEqual(resp.status_code, 422)
        skill.refresh_from_db()
        self.assertEqual(skill.proficiency, 50)
        self.assertEqual(skill.name, "Go")

    def test_update_missing_skill(self):
        resp = self.client.put("/api/skills/4242", {"name": "x"}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data["error"], "Skill not found")

    def test_delete(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND)
        resp = self.client.delete(f"/api/skills/{skill.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(Skill.objects.filter(pk=skill.pk).exists())

    def test_grouped_endpoint(self):
        make_skills(SkillCategory.BACKEND, 2)
        resp = self.client.get("/api/skills/grouped")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(list(resp.data["data"]), ["backend"])
        self.assertEqual(len(resp.data["data"]["backend"]), 2)

    def test_list_filters_by_category(self):
        make_skills(SkillCategory.BACKEND, 2)
        make_skills(SkillCategory.DEVOPS, 1)
        resp = self.client.get("/api/skills", {"category": "devops"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([s["name"] for s in resp.data["data"]], ["devops-0"])

    def test_toggle_study_endpoint(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND)
        resp = self.client.put(f"/api/skills/{skill.pk}/toggle-study")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data["data"]["to_study"])
        self.assertEqual(resp.data["message"], "Skill added to study list")
        resp = self.client.put(f"/api/skills/{skill.pk}/toggle-study")
        self.assertFalse(resp.data["data"]["to_study"])

    def test_study_list_endpoint(self):
        Skill.objects.create(name="Go", category=SkillCategory.BACKEND, to_study=True)
        Skill.objects.create(name="Vue", category=SkillCategory.FRONTEND)
        resp = self.client.get("/api/skills/study-list")
        self.assertEqual([s["name"] for s in resp.data["data"]], ["Go"])

    def test_study_notes_endpoint(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND, study_notes="old")
        resp = self.client.put(f"/api/skills/{skill.pk}/study-notes", {"study_notes": "revisit the docs"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"]["study_notes"], "revisit the docs")
        resp = self.client.put(f"/api/skills/{skill.pk}/study-notes", {"study_notes": ""}, format="json")
        self.assertEqual(resp.data["data"]["study_notes"], "")
        resp = self.client.put(f"/api/skills/{skill.pk}/study-notes", {"study_notes": None}, format="json")
        self.assertEqual(resp.data["data"]["study_notes"], "")

    def test_proficiency_endpoint(self):
        skill = Skill.objects.create(name="Go", category=SkillCategory.BACKEND)
        resp = self.client.put(f"/api/skills/{skill.pk}/proficiency", {"proficiency": 42}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"]["proficiency"], 42)
        resp = self.client.put(f"/api/skills/{skill.pk}/proficiency", {"proficiency": 0}, format="json")
        self.assertEqual(resp.status_code, 422)
        skill.refresh_from_db()
        self.assertEqual(skill.proficiency, 42)

    def test_reorder_endpoint(self):
        a, b = make_skills(SkillCategory.FRONTEND, 2)
        resp = self.client.post(
            "/api/skills/reorder",
            {"skills": [{"id": a.pk, "order": 2}, {"id": b.pk, "order": 1}]},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["message"], "Skills reordered successfully")
        self.assertEqual([s.name for s in services.list_skills()], ["frontend-1", "frontend-0"])

    def test_reorder_partial_failure(self):
        a, = make_skills(SkillCategory.FRONTEND, 1)
        resp = self.client.post(
            "/api/skills/reorder",
            {"skills": [{"id": a.pk, "order": 8}, {"id": 777, "order": 1}]},
            format="json",
        )
        self.assertEqual(resp.status_code, 207)
        self.assertEqual(resp.data["errors"], ["Skill 777 not found"])
        self.assertEqual(resp.data["data"]["updated"], [{"id": a.pk, "order": 8}])
        a.refresh_from_db()
        self.assertEqual(a.order, 8)

    def test_reorder_validates_payload(self):
        resp = self.client.post("/api/skills/reorder", {"skills": [{"id": 1}]}, format="json")
        self.assertEqual(resp.status_code, 422)

    def test_analytics_endpoint(self):
        make_skills(SkillCategory.FRONTEND, 5)
        make_skills(SkillCategory.BACKEND, 5)
        make_skills(SkillCategory.DEVOPS, 3)
        resp = self.client.get("/api/skill-analytics")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["total_skills"], 13)
        self.assertEqual(resp.data["skills_distribution"]["counts"], [5, 5, 3])
        self.assertEqual(len(resp.data["top_skills"]), 5)
        analysis = resp.data["senior_level_analysis"]
        self.assertEqual(analysis["level"], "Senior")
        self.assertEqual(analysis["scores"], {"frontend": 100, "backend": 100, "devops": 100, "overall": 100})


class SkillPermissionTests(APITestCase):
    def test_public_can_read(self):
        Skill.objects.create(name="Go", category=SkillCategory.BACKEND)
        self.assertEqual(self.client.get("/api/skills").status_code, 200)
        self.assertEqual(self.client.get("/api/skill-analytics").status_code, 200)

    def test_anonymous_cannot_write(self):
        resp = self.client.post("/api/skills", {"name": "Go", "category": "backend"}, format="json")
        self.assertIn(resp.status_code, (401, 403))
        self.assertIn("error", resp.data)
        self.assertFalse(Skill.objects.exists())


class SeedSkillsCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_skills", stdout=StringIO())
        call_command("seed_skills", stdout=StringIO())
        self.assertEqual(Skill.objects.count(), 12)
        self.assertEqual(
            list(Skill.objects.filter(category="devops").values_list("order", flat=True)),
            [1, 2, 3, 4],
        )
