"""Shared fixtures: in-memory database, small catalog, fake HTTP and LLM."""

import os

# must be set before careerpath.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone

import pytest
import requests
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from careerpath.api.deps import (
    get_catalog,
    get_explain_service,
    get_github_evaluator,
    get_linkedin_evaluator,
    get_store,
)
from careerpath.db.base import Base
from careerpath.db.session import get_db
from careerpath.engine.catalog import Catalog
from careerpath.evaluators.github import GitHubEvaluator
from careerpath.evaluators.linkedin import LinkedInEvaluator
from careerpath.evaluators.scraper import HttpProfileScraper
from careerpath.models.profile_card import ProfileCard  # noqa: F401
from careerpath.schemas.certification import Certification
from careerpath.services.explain import ExplainService
from careerpath.services.llm_service import BaseLLMService, LLMServiceError
from careerpath.services.profile_cards import ProfileCardStore

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Fakes
# ============================================================================

class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class FakeSession:
    """Stands in for requests.Session; responses are looked up by exact URL.

    A route value may be a FakeResponse, an exception instance (raised) or a
    list of either (consumed one per call).
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "params": params, "timeout": timeout})
        if url not in self.routes:
            return FakeResponse(404, {"message": "Not Found"})
        value = self.routes[url]
        if isinstance(value, list):
            value = value.pop(0)
        if isinstance(value, Exception):
            raise value
        return value


class MockLLMService(BaseLLMService):
    def __init__(self, response="These certifications fit well."):
        self.response = response
        self.should_fail = False
        self.prompts = []

    def call(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.should_fail:
            raise LLMServiceError("Mock LLM failure")
        return self.response


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start=NOW):
        self.current = start

    def __call__(self):
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


# ============================================================================
# Catalog
# ============================================================================

@pytest.fixture
def certs():
    return [
        Certification(
            id="aws-ccp", name="AWS Certified Cloud Practitioner", provider="AWS",
            area="cloud", level="beginner",
            skills=("cloud fundamentals", "aws core services", "billing"),
            roles=("developer", "devops", "pm"),
            estimated_cost_usd=100,
        ),
        Certification(
            id="aws-saa", name="AWS Certified Solutions Architect - Associate", provider="AWS",
            area="cloud", level="intermediate",
            skills=("architecture", "high availability", "aws core services"),
            roles=("developer", "devops", "architect"),
            prerequisites=("aws-ccp",),
            estimated_cost_usd=150,
        ),
        Certification(
            id="cka", name="Certified Kubernetes Administrator", provider="CNCF",
            area="cloud", level="advanced",
            skills=("kubernetes", "containers", "troubleshooting"),
            roles=("devops", "sre"),
            estimated_cost_usd=395,
        ),
        Certification(
            id="sec-plus", name="CompTIA Security+", provider="CompTIA",
            area="security", level="beginner",
            skills=("threats", "network security", "identity"),
            roles=("security", "support"),
            estimated_cost_usd=392,
        ),
        Certification(
            id="pmp", name="Project Management Professional", provider="PMI",
            area="management", level="advanced",
            skills=("project management", "risk", "stakeholders"),
            roles=("pm",),
        ),
        Certification(
            id="psm-1", name="Professional Scrum Master I", provider="Scrum.org",
            area="management", level="beginner",
            skills=("scrum", "agile"),
            roles=("pm", "developer"),
            estimated_cost_usd=200,
        ),
    ]


@pytest.fixture
def catalog(certs) -> Catalog:
    return Catalog(certs)


# ============================================================================
# Database
# ============================================================================

@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(db_session, clock):
    return ProfileCardStore(db_session, public_base_url="http://cards.test/", clock=clock)


# ============================================================================
# External services
# ============================================================================

@pytest.fixture
def github_user():
    return {
        "login": "octo",
        "name": "Octo Cat",
        "bio": "Building things",
        "blog": "https://octo.dev",
        "company": "GitHub",
        "location": "Internet",
        "hireable": True,
        "followers": 120,
        "following": 3,
        "public_repos": 2,
        "html_url": "https://github.com/octo",
    }


@pytest.fixture
def github_repos():
    return [
        {"name": "alpha", "html_url": "https://github.com/octo/alpha", "updated_at": "2025-05-20T10:00:00Z",
         "stargazers_count": 30, "forks_count": 4, "language": "Python"},
        {"name": "beta", "html_url": "https://github.com/octo/beta", "updated_at": "2024-01-02T10:00:00Z",
         "stargazers_count": 0, "forks_count": 1, "language": "Go"},
    ]


@pytest.fixture
def github_session(github_user, github_repos):
    return FakeSession({
        "https://api.github.test/users/octo": FakeResponse(200, github_user),
        "https://api.github.test/users/octo/repos": FakeResponse(200, github_repos),
    })


@pytest.fixture
def linkedin_session():
    return FakeSession()


@pytest.fixture
def mock_llm():
    return MockLLMService()


@pytest.fixture
def unreachable_session():
    return FakeSession({
        "https://www.linkedin.com/in/someone/": requests.ConnectionError("connection refused"),
    })


# ============================================================================
# App
# ============================================================================

@pytest.fixture
def client(catalog, session_factory, github_session, linkedin_session, mock_llm):
    from careerpath.main import create_app

    app = create_app()

    def _db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    api_clock = FakeClock()

    def _store():
        s = session_factory()
        try:
            yield ProfileCardStore(s, public_base_url="http://cards.test", clock=api_clock)
        finally:
            s.close()

    app.dependency_overrides[get_db] = _db
    app.dependency_overrides[get_store] = _store
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_github_evaluator] = lambda: GitHubEvaluator(
        session=github_session, api_url="https://api.github.test"
    )
    app.dependency_overrides[get_linkedin_evaluator] = lambda: LinkedInEvaluator(
        HttpProfileScraper(session=linkedin_session)
    )
    app.dependency_overrides[get_explain_service] = lambda: ExplainService(llm=mock_llm)

    with TestClient(app) as c:
        yield c
