# careerpath/schemas/evaluation.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Requests ----------
class GitHubEvalIn(BaseModel):
    url: Optional[str] = Field(default=None, description="GitHub profile URL, e.g. https://github.com/torvalds")
    username: Optional[str] = Field(default=None, description="GitHub username if no URL is given")


class LinkedInEvalIn(BaseModel):
    url: str = Field(description="Public LinkedIn profile URL, e.g. https://www.linkedin.com/in/username/")


# ---------- GitHub ----------
class LanguageCount(_CamelModel):
    language: str
    count: int


class RecentRepo(_CamelModel):
    name: str
    url: str
    updated_at: str


class GitHubStats(_CamelModel):
    followers: int
    following: int
    public_repos: int
    total_stars: int
    total_forks: int
    top_languages: List[LanguageCount]
    recent_repos: List[RecentRepo]


class GitHubEvaluation(_CamelModel):
    username: str
    profile_url: str
    stats: GitHubStats
    score: int = Field(ge=0, le=100)
    strengths: List[str]
    weaknesses: List[str]
    assessment: str
    recommendations: List[str]


# ---------- LinkedIn ----------
class Experience(_CamelModel):
    title: Optional[str] = None
    company: Optional[str] = None
    period: Optional[str] = None
    duration: Optional[str] = None


class Education(_CamelModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    period: Optional[str] = None


class Skill(_CamelModel):
    name: str
    endorsements: int = 0


class LinkedInStats(_CamelModel):
    experiences: int
    education: int
    skills: int


class FetchMeta(_CamelModel):
    fetched: bool
    status: Optional[int] = None
    parsing_quality: Optional[str] = None


class LinkedInEvaluation(_CamelModel):
    profile_url: str
    name: Optional[str] = None
    headline: Optional[str] = None
    about: Optional[str] = None
    experiences: List[Experience]
    education: List[Education]
    skills: List[Skill]
    inferred_seniority: Optional[str] = None
    stats: LinkedInStats
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)
    assessment: str
    recommendations: List[str]
    meta: FetchMeta
