# careerpath/schemas/study_plan.py
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from careerpath.schemas.certification import RecommendationItem, UserProfile


class StudyResource(BaseModel):
    title: str
    url: Optional[str] = None
    type: Optional[Literal["doc", "video", "course", "practice"]] = None


class StudyWeek(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    goals: List[str]
    resources: List[StudyResource]
    estimate_hrs: int = Field(alias="estimateHrs")


class StudyPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_weeks: int = Field(alias="totalWeeks")
    weeks: List[StudyWeek]
    suggestion_order: List[str] = Field(alias="suggestionOrder")


class StudyPlanIn(BaseModel):
    profile: UserProfile
    items: List[RecommendationItem]
