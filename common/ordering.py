# common/ordering.py
"""
Manual sort order shared by skills (category scoped) and featured projects (global).
"""
import logging
from dataclasses import dataclass, field
from typing import List

from django.db.models import Max
from django.utils import timezone

logger = logging.getLogger(__name__)


def next_order(queryset) -> int:
    """Position after the last row of ``queryset``, or 1 when it is empty."""
    current = queryset.aggregate(max_order=Max("order"))["max_order"]
    if current is None:
        return 1
    return current + 1


@dataclass
class ReorderResult:
    updated: List[dict] = field(default_factory=list)
    failed: List[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def error_messages(self, label: str) -> List[str]:
        return [f"{label} {item['id']} not found" for item in self.failed]


def apply_order_updates(queryset, items) -> ReorderResult:
    """
    Write each ``{"id", "order"}`` pair on its own.

    There is no surrounding transaction: an unknown id is recorded in
    ``failed`` and the pairs already written stay written.
    """
    result = ReorderResult()
    for item in items:
        changed = queryset.filter(pk=item["id"]).update(order=item["order"], updated_at=timezone.now())
        if changed:
            result.updated.append({"id": item["id"], "order": item["order"]})
        else:
            result.failed.append({"id": item["id"], "order": item["order"]})

    if result.failed:
        logger.warning(
            "Reorder of %s applied %d item(s), %d unknown id(s): %s",
            queryset.model.__name__,
            len(result.updated),
            len(result.failed),
            [item["id"] for item in result.failed],
        )
    else:
        logger.info("Reordered %d %s row(s)", len(result.updated), queryset.model.__name__)
    return result
