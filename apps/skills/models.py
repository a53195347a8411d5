# skills/models.py
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from common.models import TimestampedModel

MIN_PROFICIENCY = 1
MAX_PROFICIENCY = 100


class SkillCategory(models.TextChoices):
    FRONTEND = "frontend", "Frontend"
    BACKEND = "backend", "Backend"
    DEVOPS = "devops", "DevOps"


class Skill(TimestampedModel):
    """
    A portfolio skill. ``order`` is scoped to the category; ties fall back to id.
    """
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=16, choices=SkillCategory.choices, db_index=True)
    order = models.IntegerField(default=0)
    proficiency = models.PositiveSmallIntegerField(
        default=MAX_PROFICIENCY,
        validators=[MinValueValidator(MIN_PROFICIENCY), MaxValueValidator(MAX_PROFICIENCY)],
    )
    to_study = models.BooleanField(default=False, db_index=True)
    study_notes = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["category", "order", "id"]
        indexes = [models.Index(fields=["category", "order"])]

    def __str__(self):
        return f"{self.name} ({self.category})"
