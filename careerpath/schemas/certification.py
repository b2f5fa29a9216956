# careerpath/schemas/certification.py
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Level = Literal["beginner", "intermediate", "advanced"]
Seniority = Literal["junior", "mid", "senior"]

# Known areas; `area` also accepts free text
AREAS = ("cloud", "security", "data", "management", "dev", "networking")


class Certification(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    provider: str
    area: str = "dev"
    level: Level
    skills: tuple[str, ...] = ()
    roles: tuple[str, ...] = ()
    prerequisites: tuple[str, ...] = ()
    duration_hours: Optional[float] = Field(default=None, gt=0, alias="durationHours")
    estimated_cost_usd: Optional[float] = Field(default=None, ge=0, alias="estimatedCostUSD")


class UserProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: str = Field(description='e.g. "developer", "devops", "pm"')
    seniority: Seniority
    target_area: Optional[str] = Field(default=None, alias="targetArea")
    goals: List[str] = Field(default_factory=list)
    budget_usd: Optional[float] = Field(default=None, ge=0, alias="budgetUSD")


class RecommendationItem(BaseModel):
    certification: Certification
    score: int
    reasons: List[str]


class RecommendationResponse(BaseModel):
    items: List[RecommendationItem]


class SearchFilters(BaseModel):
    area: Optional[str] = None
    level: Optional[Level] = None
    role: Optional[str] = None
    query: Optional[str] = Field(default=None, description="Free text over name, provider and skills")
    limit: int = Field(default=20, ge=1, le=100)


class SearchResponse(BaseModel):
    items: List[Certification]
