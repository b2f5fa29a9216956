# careerpath/evaluators/github.py
# ------------------------------------------------------------
# GitHub profile heuristics (public REST API)
#   profile completeness  0-20
#   followers             0-15
#   repository count      0-15
#   stars                 0-15
#   recent activity       0-10
#   language diversity    0-5
# ------------------------------------------------------------
from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote, urlparse

import requests
from loguru import logger

from careerpath.core.errors import InputValidationError, UpstreamFetchError
from careerpath.schemas.evaluation import (
    GitHubEvaluation,
    GitHubStats,
    LanguageCount,
    RecentRepo,
)

USER_AGENT = "careerpath-app"
RECENT_DAYS = 90

FEW_FOLLOWERS = "few followers"
NO_REPOS = "no public repositories"
FEW_STARS = "few stars on repositories"
LITTLE_ACTIVITY = "little recent repository activity"
FEW_LANGUAGES = "little language diversity"


# ========== Identifier parsing ==========
def parse_username(url: Optional[str] = None, username: Optional[str] = None) -> str:
    """Username wins over URL; the URL must point at github.com."""
    if username and username.strip():
        return username.strip()
    raw = (url or "").strip()
    if not raw:
        raise InputValidationError("Provide a valid GitHub URL or a username.")
    bad_url = InputValidationError(
        "Provide a valid GitHub URL or a username.",
        details=[{"loc": ["url"], "msg": "not a github.com URL", "type": "value_error"}],
    )
    try:
        parsed = urlparse(raw)
    except ValueError as e:
        raise bad_url from e
    host = (parsed.hostname or "").lower()
    if parsed.scheme not in ("http", "https") or not (host == "github.com" or host.endswith(".github.com")):
        raise bad_url
    first = parsed.path.lstrip("/").split("/")[0]
    if not first:
        raise InputValidationError("GitHub URL has no username segment.")
    return first


# ========== Scoring ==========
def _band(value: int, bands: List[Tuple[int, int, str]]) -> Tuple[int, Optional[str]]:
    for threshold, points, label in bands:
        if value >= threshold:
            return points, label
    return 0, None


def _parse_ts(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def calculate_github_score(
    user: Dict[str, Any],
    repos: List[Dict[str, Any]],
    now: Optional[datetime] = None,
) -> Tuple[int, List[str], List[str]]:
    now = now or datetime.now(timezone.utc)
    score = 0
    strengths: List[str] = []
    weaknesses: List[str] = []

    # Profile completeness
    for key, points, label in (
        ("name", 5, "full name on profile"),
        ("bio", 5, "descriptive bio"),
        ("blog", 3, "website or blog linked"),
        ("company", 3, "company listed"),
        ("location", 2, "location listed"),
        ("hireable", 2, "open to hiring"),
    ):
        if user.get(key):
            score += points
            strengths.append(label)

    # Social proof
    pts, label = _band(int(user.get("followers") or 0), [
        (1000, 15, "large following (1000+)"),
        (500, 12, "good following (500+)"),
        (100, 8, "meaningful following (100+)"),
        (50, 5, "some followers (50+)"),
    ])
    if label:
        score += pts; strengths.append(label)
    else:
        weaknesses.append(FEW_FOLLOWERS)

    # Repository count
    pts, label = _band(len(repos), [
        (20, 15, "many public repositories (20+)"),
        (10, 12, "good number of repositories (10+)"),
        (5, 8, "several repositories (5+)"),
        (1, 5, "at least one repository"),
    ])
    if label:
        score += pts; strengths.append(label)
    else:
        weaknesses.append(NO_REPOS)

    # Stars
    total_stars = sum(int(r.get("stargazers_count") or 0) for r in repos)
    pts, label = _band(total_stars, [
        (100, 15, "many stars (100+)"),
        (50, 12, "good number of stars (50+)"),
        (20, 8, "some stars (20+)"),
        (5, 5, "a few stars (5+)"),
    ])
    if label:
        score += pts; strengths.append(label)
    else:
        weaknesses.append(FEW_STARS)

    # Recent activity
    cutoff = now - timedelta(days=RECENT_DAYS)
    recent = 0
    for r in repos:
        ts = _parse_ts(r.get("updated_at"))
        if ts and ts >= cutoff:
            recent += 1
    pts, label = _band(recent, [
        (5, 10, "many recently active repositories"),
        (3, 7, "some recently active repositories"),
        (1, 4, "at least one recently active repository"),
    ])
    if label:
        score += pts; strengths.append(label)
    else:
        weaknesses.append(LITTLE_ACTIVITY)

    # Language diversity
    languages = {r.get("language") for r in repos if r.get("language")}
    pts, label = _band(len(languages), [
        (5, 5, "high language diversity (5+)"),
        (3, 3, "good language diversity (3+)"),
        (2, 1, "some language diversity"),
    ])
    if label:
        score += pts; strengths.append(label)
    else:
        weaknesses.append(FEW_LANGUAGES)

    score = min(100, max(0, score))
    return score, strengths, weaknesses


def generate_recommendations(weaknesses: List[str], score: int) -> List[str]:
    out: List[str] = []
    if score < 50:
        out.append("Publish more public repositories to showcase your skills")
        out.append("Update your repositories regularly to show ongoing activity")
        out.append("Add a descriptive bio and contact details to your profile")
    if score < 70:
        if FEW_FOLLOWERS in weaknesses:
            out.append("Contribute to open source projects to raise your visibility")
            out.append("Share your projects in relevant technical communities")
        if FEW_STARS in weaknesses:
            out.append("Invest in code quality and documentation for your projects")
            out.append("Build projects that solve real problems other developers have")
    if score >= 80:
        out.append("Excellent profile! Consider mentoring other developers")
        out.append("Keep contributing to the open source community")
    return out


def _assessment(
    display_name: str,
    score: int,
    strengths: List[str],
    weaknesses: List[str],
    stats: GitHubStats,
    recommendations: List[str],
) -> str:
    lines = [
        f"GitHub profile of {display_name} - Score: {score}/100",
        "",
        f"Strengths: {', '.join(strengths)}" if strengths else "No strengths identified",
        "",
        f"Areas to improve: {', '.join(weaknesses)}" if weaknesses else "No areas to improve identified",
        "",
        f"Stats: {stats.followers} followers, {stats.public_repos} repositories, {stats.total_stars} total stars",
        "Top languages: " + (", ".join(l.language for l in stats.top_languages) or "none detected"),
        "Recent repositories: " + (", ".join(r.name for r in stats.recent_repos) or "none"),
    ]
    if recommendations:
        lines += ["", "Recommendations: " + "; ".join(recommendations)]
    return "\n".join(lines)


def build_stats(user: Dict[str, Any], repos: List[Dict[str, Any]]) -> GitHubStats:
    total_stars = 0
    total_forks = 0
    lang_count: Counter = Counter()
    for r in repos:
        total_stars += int(r.get("stargazers_count") or 0)
        total_forks += int(r.get("forks_count") or 0)
        lang = (r.get("language") or "").strip()
        if lang:
            lang_count[lang] += 1

    # most_common keeps first-seen order among equal counts
    top = [LanguageCount(language=l, count=n) for l, n in lang_count.most_common(5)]
    recent = [
        RecentRepo(name=r.get("name", ""), url=r.get("html_url", ""), updated_at=r.get("updated_at", ""))
        for r in repos[:5]
    ]
    return GitHubStats(
        followers=int(user.get("followers") or 0),
        following=int(user.get("following") or 0),
        public_repos=int(user.get("public_repos") or len(repos)),
        total_stars=total_stars,
        total_forks=total_forks,
        top_languages=top,
        recent_repos=recent,
    )


# ========== Evaluator ==========
class GitHubEvaluator:
    """Fetch a public GitHub profile and score it."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        api_url: str = "https://api.github.com",
        token: Optional[str] = None,
        timeout: float = 15.0,
    ):
        self.session = session or requests.Session()
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_json(self, what: str, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            res = self.session.get(url, headers=self._headers(), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("GitHub API ({}) unreachable: {}", what, e)
            raise UpstreamFetchError(f"GitHub API ({what}) unreachable: {e}") from e
        if not res.ok:
            logger.warning("GitHub API ({}) failed with status {}", what, res.status_code)
            raise UpstreamFetchError(f"GitHub API ({what}) failed: {res.status_code}", status=res.status_code)
        try:
            return res.json()
        except ValueError as e:
            logger.warning("GitHub API ({}) returned a non-JSON body", what)
            raise UpstreamFetchError(f"GitHub API ({what}) returned invalid JSON", status=res.status_code) from e

    def evaluate(
        self,
        url: Optional[str] = None,
        username: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> GitHubEvaluation:
        login = parse_username(url=url, username=username)
        base = f"{self.api_url}/users/{quote(login, safe='')}"

        user = self._get_json("user", base) or {}
        repos = self._get_json("repos", f"{base}/repos", params={"per_page": 100, "sort": "updated"}) or []

        stats = build_stats(user, repos)
        score, strengths, weaknesses = calculate_github_score(user, repos, now=now)
        recommendations = generate_recommendations(weaknesses, score)
        logger.info("GitHub evaluation for {}: score={}", login, score)

        return GitHubEvaluation(
            username=login,
            profile_url=user.get("html_url") or f"https://github.com/{login}",
            stats=stats,
            score=score,
            strengths=strengths,
            weaknesses=weaknesses,
            assessment=_assessment(user.get("name") or login, score, strengths, weaknesses, stats, recommendations),
            recommendations=recommendations,
        )
