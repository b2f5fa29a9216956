# careerpath/api/eval_routes.py
# InputValidationError / UpstreamFetchError are mapped to 422 / 502 in main.py
from typing import Optional

from fastapi import APIRouter, Depends

from careerpath.api.deps import get_github_evaluator, get_linkedin_evaluator
from careerpath.evaluators.github import GitHubEvaluator
from careerpath.evaluators.linkedin import LinkedInEvaluator
from careerpath.schemas.evaluation import (
    GitHubEvalIn,
    GitHubEvaluation,
    LinkedInEvalIn,
    LinkedInEvaluation,
)

router = APIRouter(prefix="/api/eval", tags=["Profile evaluation"])

@router.get("/github", response_model=GitHubEvaluation)
def github_eval_query(
    url: Optional[str] = None,
    username: Optional[str] = None,
    evaluator: GitHubEvaluator = Depends(get_github_evaluator),
):
    return evaluator.evaluate(url=url, username=username)

@router.post("/github", response_model=GitHubEvaluation)
def github_eval(payload: GitHubEvalIn, evaluator: GitHubEvaluator = Depends(get_github_evaluator)):
    return evaluator.evaluate(url=payload.url, username=payload.username)

@router.get("/linkedin", response_model=LinkedInEvaluation)
def linkedin_eval_query(url: str, evaluator: LinkedInEvaluator = Depends(get_linkedin_evaluator)):
    return evaluator.evaluate(url)

@router.post("/linkedin", response_model=LinkedInEvaluation)
def linkedin_eval(payload: LinkedInEvalIn, evaluator: LinkedInEvaluator = Depends(get_linkedin_evaluator)):
    return evaluator.evaluate(payload.url)
