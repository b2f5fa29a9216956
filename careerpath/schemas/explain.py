# careerpath/schemas/explain.py
from typing import Optional

from pydantic import BaseModel, Field

from careerpath.schemas.certification import RecommendationResponse, UserProfile


class ExplainIn(BaseModel):
    profile: UserProfile
    recommendations: RecommendationResponse
    question: Optional[str] = Field(default=None, max_length=1000)


class ExplainOut(BaseModel):
    answer: str
