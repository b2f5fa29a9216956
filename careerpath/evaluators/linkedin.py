# careerpath/evaluators/linkedin.py
# ------------------------------------------------------------
# LinkedIn profile heuristics over scraped public HTML
#   name 8 / headline 8 / about 9
#   experience count 15 / total years 10 / recent role 5
#   education 8 / skills 20 / endorsed skills 5
#   -10 when no content could be fetched
# ------------------------------------------------------------
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from loguru import logger

from careerpath.core.errors import InputValidationError
from careerpath.evaluators.linkedin_parser import (
    extract_about,
    extract_education,
    extract_experiences,
    extract_headline,
    extract_name,
    extract_skills,
)
from careerpath.evaluators.scraper import HttpProfileScraper, ProfileScraper
from careerpath.schemas.evaluation import (
    Education,
    Experience,
    FetchMeta,
    LinkedInEvaluation,
    LinkedInStats,
    Skill,
)

NO_NAME = "name not identified"
SHORT_HEADLINE = "short or missing headline"
SHORT_ABOUT = "missing or very short about section"
NO_EXPERIENCE = "no experience detected"
LIMITED_EXPERIENCE = "limited professional experience"
NO_RECENT_EXPERIENCE = "no recent professional experience"
NO_EDUCATION = "no education detected"
NO_SKILLS = "no skills detected"
NO_ENDORSEMENTS = "skills without endorsements"
CONTENT_UNAVAILABLE = "public profile content unavailable"

ACCESS_WEAKNESSES = [
    "LinkedIn blocked automated access to the profile",
    "The profile may be private or access-restricted",
]
ACCESS_RECOMMENDATIONS = [
    "Consider the official LinkedIn API or share the profile details manually",
    "LinkedIn applies strict anti-bot measures that prevent automated analysis",
]

_SENIOR = re.compile(
    r"\b(?:senior|sr|lead|principal|staff|architect|director|head|chief|vp|cto|ceo)\b", re.I
)
_MID = re.compile(r"\b(?:mid|middle|intermediate|specialist|analyst)\b", re.I)
_JUNIOR = re.compile(r"\b(?:junior|jr|entry|associate|trainee|intern)\b", re.I)
_YEARS = re.compile(r"(\d+)\s*(?:years?|yrs?)\b", re.I)


def infer_seniority(headline: Optional[str]) -> Optional[str]:
    if not headline:
        return None
    if _SENIOR.search(headline):
        return "senior"
    if _MID.search(headline):
        return "mid"
    if _JUNIOR.search(headline):
        return "junior"
    return None


def _total_years(experiences: List[Experience]) -> int:
    total = 0
    for exp in experiences:
        m = _YEARS.search(exp.duration or "")
        if m:
            total += int(m.group(1))
    return total


def _has_recent(experiences: List[Experience], now: datetime) -> bool:
    markers = (str(now.year), str(now.year - 1), "present", "current")
    for exp in experiences:
        period = (exp.period or "").lower()
        if any(m in period for m in markers):
            return True
    return False


def calculate_linkedin_score(
    *,
    name: Optional[str],
    headline: Optional[str],
    about: Optional[str],
    experiences: List[Experience],
    education: List[Education],
    skills: List[Skill],
    fetched: bool,
    now: Optional[datetime] = None,
) -> Tuple[int, List[str], List[str]]:
    now = now or datetime.now(timezone.utc)
    score = 0
    strengths: List[str] = []
    weaknesses: List[str] = []

    if name:
        score += 8; strengths.append("full name present")
    else:
        weaknesses.append(NO_NAME)

    headline_len = len(headline or "")
    if headline_len > 30:
        score += 8; strengths.append("detailed professional headline")
    elif headline_len > 15:
        score += 5; strengths.append("headline present")
    else:
        weaknesses.append(SHORT_HEADLINE)

    about_len = len(about or "")
    if about_len > 300:
        score += 9; strengths.append("very detailed about section")
    elif about_len > 150:
        score += 6; strengths.append("detailed about section")
    elif about_len > 50:
        score += 3; strengths.append("about section present")
    else:
        weaknesses.append(SHORT_ABOUT)

    n_exp = len(experiences)
    if n_exp >= 5:
        score += 15; strengths.append("many experiences listed (5+)")
    elif n_exp >= 3:
        score += 12; strengths.append("good number of experiences (3+)")
    elif n_exp >= 1:
        score += 8; strengths.append("some experience listed")
    else:
        weaknesses.append(NO_EXPERIENCE)

    years = _total_years(experiences)
    if years >= 5:
        score += 10; strengths.append("significant professional experience (5+ years)")
    elif years >= 2:
        score += 7; strengths.append("some professional experience (2+ years)")
    else:
        weaknesses.append(LIMITED_EXPERIENCE)

    if _has_recent(experiences, now):
        score += 5; strengths.append("recent professional experience")
    else:
        weaknesses.append(NO_RECENT_EXPERIENCE)

    n_edu = len(education)
    if n_edu >= 2:
        score += 8; strengths.append("multiple education entries")
    elif n_edu >= 1:
        score += 5; strengths.append("education listed")
    else:
        weaknesses.append(NO_EDUCATION)

    n_skills = len(skills)
    if n_skills >= 15:
        score += 20; strengths.append("many skills listed (15+)")
    elif n_skills >= 10:
        score += 15; strengths.append("good number of skills (10+)")
    elif n_skills >= 5:
        score += 10; strengths.append("several skills listed (5+)")
    elif n_skills >= 1:
        score += 5; strengths.append("a few skills listed")
    else:
        weaknesses.append(NO_SKILLS)

    endorsed = sum(1 for s in skills if s.endorsements > 0)
    if endorsed >= 5:
        score += 5; strengths.append("many endorsed skills (5+)")
    elif endorsed >= 1:
        score += 3; strengths.append("some endorsed skills")
    else:
        weaknesses.append(NO_ENDORSEMENTS)

    if not fetched:
        score -= 10
        weaknesses.append(CONTENT_UNAVAILABLE)

    score = max(0, min(100, score))
    return score, strengths, weaknesses


def generate_linkedin_recommendations(weaknesses: List[str], score: int) -> List[str]:
    out: List[str] = []
    if score < 50:
        out.append("Complete every section of your LinkedIn profile to improve visibility")
        out.append("Add a descriptive professional headline")
        out.append("Write a detailed about section covering your experience and goals")
        out.append("List all of your relevant professional experience")
    if score < 70:
        if NO_EXPERIENCE in weaknesses:
            out.append("Add professional experiences with detailed descriptions")
            out.append("Include responsibilities and achievements for each position")
        if NO_SKILLS in weaknesses:
            out.append("List your main technical and soft skills")
            out.append("Ask colleagues to endorse your skills")
        if NO_EDUCATION in weaknesses:
            out.append("Add your education and certifications")
    if score >= 80:
        out.append("Excellent profile! Consider sharing technical content regularly")
        out.append("Join professional groups relevant to your field")
        out.append("Keep the profile up to date with new experience and skills")
    return out


def parsing_quality(
    fetched: bool,
    *,
    name: Optional[str],
    headline: Optional[str],
    about: Optional[str],
    experiences: List[Experience],
    education: List[Education],
    skills: List[Skill],
) -> str:
    if not fetched:
        return "failed_fetch_no_html"
    if name and headline and about and experiences and education and skills:
        return "good"
    return "partial"


def _assessment(
    name: Optional[str],
    score: int,
    seniority: Optional[str],
    strengths: List[str],
    weaknesses: List[str],
    stats: LinkedInStats,
    headline: Optional[str],
    about: Optional[str],
    recommendations: List[str],
) -> str:
    if about:
        about_line = "About: " + (about[:100] + "..." if len(about) > 100 else about)
    else:
        about_line = "About section not detected"
    lines = [
        f"Profile of {name} - Score: {score}/100" if name else f"LinkedIn profile - Score: {score}/100",
        "",
        f"Suggested seniority: {seniority}" if seniority else "Seniority not detected",
        "",
        f"Strengths: {', '.join(strengths)}" if strengths else "No strengths identified",
        "",
        f"Areas to improve: {', '.join(weaknesses)}" if weaknesses else "No areas to improve identified",
        "",
        f"Stats: {stats.experiences} experiences, {stats.education} education entries, {stats.skills} skills",
        f"Headline: {headline}" if headline else "Headline not detected",
        about_line,
    ]
    if recommendations:
        lines += ["", "Recommendations: " + "; ".join(recommendations)]
    return "\n".join(lines)


def _check_url(url: str) -> str:
    raw = (url or "").strip()
    bad_url = InputValidationError(
        "Provide a valid LinkedIn profile URL.",
        details=[{"loc": ["url"], "msg": "must be an absolute http(s) URL", "type": "value_error"}],
    )
    try:
        parsed = urlparse(raw)
    except ValueError as e:
        raise bad_url from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise bad_url
    return raw


class LinkedInEvaluator:
    """Score a public LinkedIn profile from whatever HTML the scraper can get."""

    def __init__(self, scraper: Optional[ProfileScraper] = None):
        self.scraper = scraper or HttpProfileScraper()

    def evaluate(self, url: str, now: Optional[datetime] = None) -> LinkedInEvaluation:
        profile_url = _check_url(url)
        fetch = self.scraper.fetch(profile_url)
        html = fetch.html if fetch.fetched else ""

        soup = BeautifulSoup(html, "html.parser")
        name = extract_name(soup)
        headline = extract_headline(soup)
        about = extract_about(html)
        experiences = extract_experiences(html)
        education = extract_education(html)
        skills = extract_skills(html)

        seniority = infer_seniority(headline)
        score, strengths, weaknesses = calculate_linkedin_score(
            name=name,
            headline=headline,
            about=about,
            experiences=experiences,
            education=education,
            skills=skills,
            fetched=fetch.fetched,
            now=now,
        )
        recommendations = generate_linkedin_recommendations(weaknesses, score)
        if not fetch.fetched:
            weaknesses.extend(ACCESS_WEAKNESSES)
            recommendations = ACCESS_RECOMMENDATIONS + recommendations

        quality = parsing_quality(
            fetch.fetched,
            name=name,
            headline=headline,
            about=about,
            experiences=experiences,
            education=education,
            skills=skills,
        )
        logger.info(
            "LinkedIn evaluation for {}: score={} quality={} (experiences={}, education={}, skills={})",
            profile_url, score, quality, len(experiences), len(education), len(skills),
        )

        stats = LinkedInStats(experiences=len(experiences), education=len(education), skills=len(skills))
        return LinkedInEvaluation(
            profile_url=profile_url,
            name=name,
            headline=headline,
            about=about,
            experiences=experiences,
            education=education,
            skills=skills,
            inferred_seniority=seniority,
            stats=stats,
            strengths=strengths,
            weaknesses=weaknesses,
            score=score,
            assessment=_assessment(
                name, score, seniority, strengths, weaknesses, stats, headline, about, recommendations
            ),
            recommendations=recommendations,
            meta=FetchMeta(fetched=fetch.fetched, status=fetch.status, parsing_quality=quality),
        )
