# profile_settings/management/commands/seed_profile_settings.py
from django.core.management.base import BaseCommand

from apps.profile_settings.store import SettingsStore

DEFAULT_SETTINGS = {
    "email": "reggie.ambrocio@example.com",
    "phone": "+1 (415) 555-0123",
    "location": "San Francisco, CA",
    "about_me_1": (
        "Hello! I'm Reggie, a passionate full-stack developer with expertise in building modern web "
        "applications. I specialize in creating responsive, user-friendly interfaces and robust backend systems."
    ),
    "about_me_2": (
        "With a strong foundation in Laravel, React, and Tailwind CSS, I bring ideas to life through clean, "
        "efficient code and thoughtful design. I'm constantly learning and exploring new technologies to "
        "enhance my skills and deliver better solutions."
    ),
    "about_me_3": (
        "When I'm not coding, you can find me exploring new technologies, contributing to open-source "
        "projects, or sharing my knowledge through writing and mentoring."
    ),
}


class Command(BaseCommand):
    help = "Insert default profile settings; keys that already have a value are kept"

    def add_arguments(self, parser):
        parser.add_argument("--overwrite", action="store_true", help="Replace existing values too")

    def handle(self, *args, **options):
        store = SettingsStore()
        existing = store.all()
        written = 0
        for key, value in DEFAULT_SETTINGS.items():
            if key in existing and not options["overwrite"]:
                continue
            if store.set(key, value):
                written += 1
            else:
                self.stderr.write(self.style.ERROR(f"Could not store {key}"))
        self.stdout.write(self.style.SUCCESS(f"Seeded {written} profile settings."))
