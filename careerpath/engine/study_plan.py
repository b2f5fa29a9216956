# careerpath/engine/study_plan.py
from typing import Dict, List

from careerpath.schemas.certification import RecommendationItem, UserProfile
from careerpath.schemas.study_plan import StudyPlan, StudyResource, StudyWeek

# weeks of study and hours per week by certification level
WEEKS_BY_LEVEL = {"beginner": 2, "intermediate": 3, "advanced": 4}
HOURS_BY_LEVEL = {"beginner": 6, "intermediate": 8, "advanced": 10}

RESOURCES_BY_AREA: Dict[str, List[StudyResource]] = {
    "cloud": [
        StudyResource(title="AWS Well-Architected Framework", url="https://wa.aws.amazon.com/", type="doc"),
        StudyResource(title="Azure documentation", url="https://learn.microsoft.com/azure/", type="doc"),
        StudyResource(title="Google Cloud Skills Boost", url="https://www.cloudskillsboost.google/", type="course"),
    ],
    "security": [
        StudyResource(title="NIST Cybersecurity Framework", url="https://www.nist.gov/cyberframework", type="doc"),
        StudyResource(title="OWASP Top 10", url="https://owasp.org/www-project-top-ten/", type="doc"),
    ],
    "data": [
        StudyResource(title="dbt documentation", url="https://docs.getdbt.com/", type="doc"),
        StudyResource(title="Power BI learning path", url="https://learn.microsoft.com/power-bi/", type="course"),
    ],
    "dev": [
        StudyResource(
            title="The Clean Architecture",
            url="https://blog.cleancoder.com/uncle-bob/2012/08/13/the-clean-architecture.html",
            type="doc",
        ),
    ],
    "networking": [
        StudyResource(title="Cisco Packet Tracer labs", url="https://www.netacad.com/courses/packet-tracer", type="practice"),
    ],
    "management": [
        StudyResource(title="PMBOK Guide overview", url="https://www.pmi.org/pmbok-guide-standards", type="doc"),
    ],
}


def _week_goals(week: int, total: int) -> List[str]:
    goals = []
    if week == 1:
        goals.append("Fundamentals and terminology")
    if week == 2:
        goals.append("Core services and best practices")
    if week >= 3:
        goals.append("Guided practice and mock exams")
    if week == total:
        goals.append("Final review and exam booking")
    return goals


def build_study_plan(profile: UserProfile, items: List[RecommendationItem]) -> StudyPlan:
    """Lay out consecutive study weeks for each recommendation, best score first."""
    ordered = sorted(items, key=lambda i: i.score, reverse=True)
    area_resources = RESOURCES_BY_AREA.get((profile.target_area or "").lower(), [])

    weeks: List[StudyWeek] = []
    for rec in ordered:
        cert = rec.certification
        total = WEEKS_BY_LEVEL[cert.level]
        for w in range(1, total + 1):
            resources = [
                *area_resources[:2],
                StudyResource(title=f"Exam guide - {cert.provider}", type="doc"),
                StudyResource(title="Practice exams", type="practice"),
            ]
            weeks.append(StudyWeek(
                title=f"{cert.name} - Week {w}/{total}",
                goals=_week_goals(w, total),
                resources=resources,
                estimate_hrs=HOURS_BY_LEVEL[cert.level],
            ))

    return StudyPlan(
        total_weeks=len(weeks),
        weeks=weeks,
        suggestion_order=[r.certification.id for r in ordered],
    )
