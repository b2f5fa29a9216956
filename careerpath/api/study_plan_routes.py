# careerpath/api/study_plan_routes.py
from fastapi import APIRouter

from careerpath.engine.study_plan import build_study_plan
from careerpath.schemas.study_plan import StudyPlan, StudyPlanIn

router = APIRouter(prefix="/api", tags=["Study plan"])

@router.post("/study-plan", response_model=StudyPlan, summary="Week-by-week plan for recommended certifications")
def study_plan(payload: StudyPlanIn):
    return build_study_plan(payload.profile, payload.items)
