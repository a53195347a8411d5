import logging

from common.ordering import apply_order_updates, next_order, ReorderResult
from .models import FeaturedProject

logger = logging.getLogger(__name__)


def list_projects():
    return FeaturedProject.objects.order_by("order", "id")


def create_project(**fields) -> FeaturedProject:
    if fields.get("order") is None:
        fields["order"] = next_order(FeaturedProject.objects.all())
    if fields.get("technologies") is None:
        fields["technologies"] = []
    project = FeaturedProject.objects.create(**fields)
    logger.info("Created featured project %s at order %s", project.pk, project.order)
    return project


def reorder_projects(items) -> ReorderResult:
    return apply_order_updates(FeaturedProject.objects.all(), items)
