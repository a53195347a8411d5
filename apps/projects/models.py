from django.db import models

from common.models import TimestampedModel


class FeaturedProject(TimestampedModel):
    """
    A project showcased on the public site. ``order`` is global across projects.
    """
    title = models.CharField(max_length=255)
    description = models.TextField()
    image_url = models.CharField(max_length=255, blank=True, null=True)
    project_url = models.CharField(max_length=255, blank=True, null=True)
    github_url = models.CharField(max_length=255, blank=True, null=True)
    technologies = models.JSONField(default=list, blank=True)
    order = models.IntegerField(default=0, db_index=True)
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        ordering = ["order", "id"]

    def __str__(self):
        return self.title
