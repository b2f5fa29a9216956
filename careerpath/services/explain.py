"""Explain Service - natural-language rationale for a recommendation list.

The prompt is a fixed template; everything else is the LLM's job. Failures
surface as ``LLMServiceError`` from the underlying service.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from careerpath.schemas.certification import RecommendationItem, UserProfile
from careerpath.services.llm_service import BaseLLMService, LLMService


def _profile_summary(profile: UserProfile) -> str:
    lines = [f"- Role: {profile.role}", f"- Seniority: {profile.seniority}"]
    if profile.target_area:
        lines.append(f"- Target area: {profile.target_area}")
    if profile.goals:
        lines.append(f"- Goals: {', '.join(profile.goals)}")
    if profile.budget_usd is not None:
        lines.append(f"- Budget: USD {profile.budget_usd:g}")
    return "\n".join(lines)


def _numbered(items: List[RecommendationItem]) -> str:
    if not items:
        return "(no recommendations)"
    lines = []
    for i, item in enumerate(items, start=1):
        cert = item.certification
        reasons = ", ".join(item.reasons) or "no specific reasons"
        lines.append(f"{i}. {cert.name} ({cert.provider}, {cert.level}) - score {item.score}: {reasons}")
    return "\n".join(lines)


def build_prompt(
    profile: UserProfile,
    items: List[RecommendationItem],
    question: Optional[str] = None,
) -> str:
    parts = [
        "You are a career advisor helping a professional choose certifications.",
        "",
        "Profile:",
        _profile_summary(profile),
        "",
        "Recommended certifications, best first:",
        _numbered(items),
        "",
        "Explain briefly why these certifications fit this profile and in which order to take them.",
    ]
    if question and question.strip():
        parts += ["", f"Also answer this question from the user: {question.strip()}"]
    return "\n".join(parts)


class ExplainService:
    def __init__(self, llm: Optional[BaseLLMService] = None):
        self._llm = llm

    @property
    def llm(self) -> BaseLLMService:
        return self._llm or LLMService.get_instance()

    def explain(
        self,
        profile: UserProfile,
        items: List[RecommendationItem],
        question: Optional[str] = None,
    ) -> str:
        prompt = build_prompt(profile, items, question)
        logger.debug("explain prompt built ({} chars, {} items)", len(prompt), len(items))
        return self.llm.call(prompt).strip()
