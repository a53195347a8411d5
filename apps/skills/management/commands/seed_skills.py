# skills/management/commands/seed_skills.py
from django.core.management.base import BaseCommand

from apps.skills.models import Skill, SkillCategory

DEFAULT_SKILLS = {
    SkillCategory.FRONTEND: ["React.js & Next.js", "Tailwind CSS", "JavaScript/TypeScript", "Responsive Design"],
    SkillCategory.BACKEND: ["PHP & Laravel", "Node.js & Express", "RESTful APIs", "Database Design"],
    SkillCategory.DEVOPS: ["Git & GitHub", "Docker", "CI/CD Pipelines", "Linux Server Administration"],
}


class Command(BaseCommand):
    help = "Insert the default portfolio skills (existing names are left alone)"

    def handle(self, *args, **options):
        created = 0
        for category, names in DEFAULT_SKILLS.items():
            for position, name in enumerate(names, start=1):
                _, was_created = Skill.objects.get_or_create(
                    name=name,
                    category=category,
                    defaults={"order": position},
                )
                created += int(was_created)
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} skills."))
