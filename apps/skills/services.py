# skills/services.py
import logging
from typing import Dict, List, Optional

from common.ordering import apply_order_updates, next_order, ReorderResult
from .models import Skill, MAX_PROFICIENCY

logger = logging.getLogger(__name__)


def coerce_study_notes(value) -> str:
    # notes are never stored as null
    return value if isinstance(value, str) else ""


def list_skills():
    return Skill.objects.order_by("category", "order", "id")


def grouped_by_category() -> Dict[str, List[Skill]]:
    """
    Skills keyed by category. A category without skills has no key at all.
    """
    grouped: Dict[str, List[Skill]] = {}
    for skill in list_skills():
        grouped.setdefault(skill.category, []).append(skill)
    return grouped


def study_list():
    return list_skills().filter(to_study=True)


def next_order_in_category(category: str) -> int:
    return next_order(Skill.objects.filter(category=category))


def create_skill(
    name: str,
    category: str,
    order: Optional[int] = None,
    proficiency: int = MAX_PROFICIENCY,
    to_study: bool = False,
    study_notes=None,
) -> Skill:
    if order is None:
        order = next_order_in_category(category)
    skill = Skill.objects.create(
        name=name,
        category=category,
        order=order,
        proficiency=proficiency,
        to_study=to_study,
        study_notes=coerce_study_notes(study_notes),
    )
    logger.info("Created skill %s (%s) at order %s", skill.pk, category, order)
    return skill


def reorder_skills(items) -> ReorderResult:
    return apply_order_updates(Skill.objects.all(), items)


def toggle_study(skill: Skill) -> Skill:
    skill.to_study = not skill.to_study
    skill.save(update_fields=["to_study", "updated_at"])
    return skill


def update_notes(skill: Skill, notes) -> Skill:
    skill.study_notes = coerce_study_notes(notes)
    skill.save(update_fields=["study_notes", "updated_at"])
    return skill


def update_proficiency(skill: Skill, value: int) -> Skill:
    skill.proficiency = value
    skill.save(update_fields=["proficiency", "updated_at"])
    return skill
