# careerpath/engine/recommend.py
from typing import Iterable, List

from careerpath.schemas.certification import Certification, RecommendationItem, UserProfile
from careerpath.engine.scoring import score_certification

DEFAULT_TOP_N = 5


def recommend(
    catalog: Iterable[Certification],
    profile: UserProfile,
    limit: int = DEFAULT_TOP_N,
) -> List[RecommendationItem]:
    """Score every certification and return the best `limit`, highest score first."""
    scored = []
    for c in catalog:
        score, reasons = score_certification(c, profile)
        scored.append(RecommendationItem(certification=c, score=score, reasons=reasons))

    # list.sort is stable: ties keep catalog order
    scored.sort(key=lambda x: x.score, reverse=True)
    return scored[:limit]
