# skills/analytics.py
"""
Skill analytics: category distribution, top skills and a weighted seniority score.

Everything except ``build_report`` is a pure function of per-category counts,
so the scoring can be exercised without a database.
"""
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List

from django.conf import settings
from django.db.models import Count

from .models import Skill, SkillCategory

FRONTEND = SkillCategory.FRONTEND.value
BACKEND = SkillCategory.BACKEND.value
DEVOPS = SkillCategory.DEVOPS.value

# skills per category needed for a full score
CATEGORY_THRESHOLDS = {
    FRONTEND: 5,
    BACKEND: 5,
    DEVOPS: 3,
}

CATEGORY_WEIGHTS = {
    FRONTEND: 0.35,
    BACKEND: 0.35,
    DEVOPS: 0.30,
}

SENIOR = "Senior"
MID_LEVEL = "Mid-level"
JUNIOR = "Junior"

SENIOR_MIN_SCORE = 85
MID_LEVEL_MIN_SCORE = 60

AREA_LABELS = {
    FRONTEND: "frontend development",
    BACKEND: "backend development",
    DEVOPS: "DevOps",
}

# scoring and tie-breaks always walk the categories in this order
CATEGORY_ORDER = [FRONTEND, BACKEND, DEVOPS]


def round_half_up(value: float, places: int = 0):
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if places == 0 else float(rounded)


@dataclass(frozen=True)
class Distribution:
    labels: List[str]
    counts: List[int]
    percentages: List[float]

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SeniorityAnalysis:
    scores: Dict[str, float]
    overall: float
    level: str
    weakest_area: str
    analysis: str

    def as_dict(self) -> dict:
        rounded = {category: round_half_up(score) for category, score in self.scores.items()}
        rounded["overall"] = round_half_up(self.overall)
        return {
            "scores": rounded,
            "level": self.level,
            "weakest_area": self.weakest_area,
            "analysis": self.analysis,
        }


def category_counts() -> Dict[str, int]:
    rows = Skill.objects.values("category").annotate(count=Count("id")).order_by()
    return {row["category"]: row["count"] for row in rows}


def skills_distribution(counts: Dict[str, int]) -> Distribution:
    """
    Share of each non-empty category, in percent with one decimal.
    No skills at all gives an empty distribution instead of dividing by zero.
    """
    total = sum(counts.values())
    if total == 0:
        return Distribution(labels=[], counts=[], percentages=[])

    present = [category for category in CATEGORY_ORDER if counts.get(category, 0) > 0]
    return Distribution(
        labels=list(present),
        counts=[counts[category] for category in present],
        percentages=[round_half_up(counts[category] / total * 100, 1) for category in present],
    )


def category_score(count: int, threshold: int) -> float:
    return min(100.0, count / threshold * 100)


def overall_score(scores: Dict[str, float]) -> float:
    return sum(scores[category] * CATEGORY_WEIGHTS[category] for category in CATEGORY_ORDER)


def level_for(overall: float) -> str:
    if overall >= SENIOR_MIN_SCORE:
        return SENIOR
    if overall >= MID_LEVEL_MIN_SCORE:
        return MID_LEVEL
    return JUNIOR


def weakest_category(scores: Dict[str, float]) -> str:
    lowest = min(scores[category] for category in CATEGORY_ORDER)
    return next(category for category in CATEGORY_ORDER if scores[category] == lowest)


def analysis_text(level: str, weakest: str) -> str:
    area = AREA_LABELS[weakest]
    if level == SENIOR:
        return (
            "Your skill set indicates senior developer proficiency. "
            "You have a strong balance of frontend, backend, and DevOps skills."
        )
    if level == MID_LEVEL:
        return (
            "Your skill set indicates mid-level developer proficiency. "
            f"To reach senior level, consider strengthening your skills in {area}."
        )
    return (
        "Your skill set indicates junior developer proficiency. "
        f"To advance, focus on building more skills across all areas, particularly in {area}."
    )


def analyze_seniority(counts: Dict[str, int]) -> SeniorityAnalysis:
    scores = {
        category: category_score(counts.get(category, 0), CATEGORY_THRESHOLDS[category])
        for category in CATEGORY_ORDER
    }
    overall = overall_score(scores)
    level = level_for(overall)
    weakest = weakest_category(scores)
    return SeniorityAnalysis(
        scores=scores,
        overall=overall,
        level=level,
        weakest_area=weakest,
        analysis=analysis_text(level, weakest),
    )


def top_skills(limit: int = None) -> List[dict]:
    """
    First skills by ``order`` across every category (ties by id).
    ``order`` is category scoped, so this ranks each category's leaders together.
    """
    limit = limit or settings.SKILL_TOP_LIMIT
    return list(Skill.objects.order_by("order", "id").values("name", "category")[:limit])


def build_report() -> dict:
    counts = category_counts()
    return {
        "total_skills": sum(counts.values()),
        "skills_distribution": skills_distribution(counts).as_dict(),
        "top_skills": top_skills(),
        "senior_level_analysis": analyze_seniority(counts).as_dict(),
    }
