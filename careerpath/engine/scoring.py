# careerpath/engine/scoring.py
from typing import List, NamedTuple

from careerpath.schemas.certification import Certification, UserProfile

# ---------- Rule weights ----------
ROLE_POINTS = 40
AREA_POINTS = 30
JUNIOR_BEGINNER_POINTS = 20
MID_LEVEL_POINTS = 15
SENIOR_ADVANCED_POINTS = 20
BUDGET_POINTS = 10
GOALS_POINTS = 10


class ScoreResult(NamedTuple):
    score: int
    reasons: List[str]


def _seniority_fit(seniority: str, level: str) -> tuple[int, str] | None:
    if seniority == "junior" and level == "beginner":
        return JUNIOR_BEGINNER_POINTS, "good entry point"
    if seniority == "mid" and level != "beginner":
        return MID_LEVEL_POINTS, "fits mid-level seniority"
    if seniority == "senior" and level == "advanced":
        return SENIOR_ADVANCED_POINTS, "advanced challenge for senior"
    return None


def _covers_goals(goals: List[str], skills) -> bool:
    lowered = [s.lower() for s in skills]
    return any(g.lower() in s for g in goals for s in lowered)


def score_certification(c: Certification, p: UserProfile) -> ScoreResult:
    """
    Score one certification against a profile.

    Every rule is evaluated; points add up and may go negative. `reasons`
    lists the rules that fired, in rule order.
    """
    score = 0
    reasons: List[str] = []

    if p.role and p.role.lower() in {r.lower() for r in c.roles}:
        score += ROLE_POINTS
        reasons.append("aligned to role")

    if p.target_area and (c.area or "").lower() == p.target_area.lower():
        score += AREA_POINTS
        reasons.append("matches target area")

    fit = _seniority_fit(p.seniority, c.level)
    if fit:
        score += fit[0]
        reasons.append(fit[1])

    if p.budget_usd is not None and c.estimated_cost_usd is not None:
        if c.estimated_cost_usd <= p.budget_usd:
            score += BUDGET_POINTS
            reasons.append("within budget")
        else:
            score -= BUDGET_POINTS
            reasons.append("over budget")

    # counted once no matter how many goals match
    if p.goals and _covers_goals(p.goals, c.skills):
        score += GOALS_POINTS
        reasons.append("covers stated goals")

    return ScoreResult(score, reasons)
