# careerpath/api/deps.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from careerpath.core.config import settings
from careerpath.db.session import get_db
from careerpath.engine.catalog import Catalog
from careerpath.evaluators.github import GitHubEvaluator
from careerpath.evaluators.linkedin import LinkedInEvaluator
from careerpath.evaluators.scraper import HttpProfileScraper
from careerpath.services.explain import ExplainService
from careerpath.services.profile_cards import ProfileCardStore


def get_catalog(request: Request) -> Catalog:
    """The immutable catalog loaded once in create_app()."""
    return request.app.state.catalog


def get_store(db: Session = Depends(get_db)) -> ProfileCardStore:
    return ProfileCardStore(db, public_base_url=settings.PUBLIC_BASE_URL)


def get_github_evaluator() -> GitHubEvaluator:
    return GitHubEvaluator(
        api_url=settings.GITHUB_API_URL,
        token=settings.GITHUB_TOKEN,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def get_linkedin_evaluator() -> LinkedInEvaluator:
    return LinkedInEvaluator(HttpProfileScraper(timeout=settings.HTTP_TIMEOUT_SECONDS))


def get_explain_service() -> ExplainService:
    return ExplainService()
