"""LinkedIn evaluator: header fallback, best-effort parsing and scoring."""

import pytest

from careerpath.core.errors import InputValidationError
from careerpath.evaluators.linkedin import (
    ACCESS_RECOMMENDATIONS,
    ACCESS_WEAKNESSES,
    CONTENT_UNAVAILABLE,
    LinkedInEvaluator,
    calculate_linkedin_score,
    infer_seniority,
)
from careerpath.evaluators.linkedin_parser import clean, extract_skills
from careerpath.evaluators.scraper import HttpProfileScraper
from careerpath.schemas.evaluation import Experience, Skill
from conftest import NOW, FakeResponse, FakeSession

PROFILE_URL = "https://www.linkedin.com/in/jane-doe/"

ABOUT = "I design and operate data platforms. " * 5

PROFILE_HTML = f"""
<html>
<head>
  <title>Jane Doe | LinkedIn</title>
  <meta property="og:title" content="Jane Doe | LinkedIn">
  <meta name="description" content="Senior Data Engineer at Acme building streaming pipelines">
</head>
<body>
  <section aria-label="About"><h2>About</h2><p>{ABOUT}</p></section>
  <section aria-label="Experience"><ul>
    <li><h3>Senior Data Engineer</h3><h4>Acme</h4><span>Jan 2022 - Present</span><span>3 yrs 5 mos</span></li>
    <li><h3>Data Engineer</h3><h4>Globex</h4><span>Mar 2018 - Dec 2021</span><span>3 yrs 10 mos</span></li>
  </ul></section>
  <section aria-label="Education"><ul>
    <li><h3>State University</h3><h4>BSc</h4><span class="field-of-study">Computer Science</span><span>2014 - 2018</span></li>
  </ul></section>
  <section aria-label="Skills"><ul>
    <li><span>Python</span><span>12 endorsements</span></li>
    <li><span>SQL</span><span>3 endorsements</span></li>
    <li><span>Kafka</span></li>
  </ul></section>
</body>
</html>
"""


def _evaluator(routes):
    session = FakeSession(routes)
    return LinkedInEvaluator(HttpProfileScraper(session=session)), session


class TestSeniority:
    @pytest.mark.parametrize("headline,expected", [
        ("Sr. Software Engineer", "senior"),
        ("Principal Architect at Initech", "senior"),
        ("Data Analyst", "mid"),
        ("Software Engineering Intern", "junior"),
        ("Junior Developer", "junior"),
        ("Leadership coach", None),
        ("Engineer", None),
        (None, None),
    ])
    def test_infer(self, headline, expected):
        assert infer_seniority(headline) == expected


class TestParsing:
    def test_full_profile(self):
        ev, _ = _evaluator({PROFILE_URL: FakeResponse(200, text=PROFILE_HTML)})
        result = ev.evaluate(PROFILE_URL, now=NOW)

        assert result.name == "Jane Doe"
        assert result.headline == "Senior Data Engineer at Acme building streaming pipelines"
        assert result.inferred_seniority == "senior"
        assert result.about == ABOUT.strip()
        assert result.experiences[0] == Experience(
            title="Senior Data Engineer", company="Acme", period="2022 - Present", duration="3 yrs 5 mos",
        )
        assert result.education[0].institution == "State University"
        assert result.education[0].degree == "BSc"
        assert result.education[0].field == "Computer Science"
        assert result.education[0].period == "2014 - 2018"
        assert [(s.name, s.endorsements) for s in result.skills] == [("Python", 12), ("SQL", 3), ("Kafka", 0)]
        assert result.stats.experiences == 2
        assert result.meta.fetched is True
        assert result.meta.status == 200
        assert result.meta.parsing_quality == "good"

    def test_full_profile_score(self):
        ev, _ = _evaluator({PROFILE_URL: FakeResponse(200, text=PROFILE_HTML)})
        result = ev.evaluate(PROFILE_URL, now=NOW)

        # name 8, headline 8, about 6, experiences 8, years 10, recent 5,
        # education 5, skills 5, endorsed 3
        assert result.score == 58
        assert result.weaknesses == []
        assert result.recommendations == []
        assert result.assessment.startswith("Profile of Jane Doe - Score: 58/100")

    def test_partial_profile(self):
        html = "<html><head><title>John Roe - LinkedIn</title></head><body></body></html>"
        ev, _ = _evaluator({PROFILE_URL: FakeResponse(200, text=html)})
        result = ev.evaluate(PROFILE_URL, now=NOW)

        assert result.name == "John Roe"
        assert result.experiences == []
        assert result.meta.parsing_quality == "partial"
        assert CONTENT_UNAVAILABLE not in result.weaknesses

    def test_skills_without_list_markup(self):
        html = '<section aria-label="Skills"><span>Go</span><span>Terraform</span></section>'
        assert [s.name for s in extract_skills(html)] == ["Go", "Terraform"]

    def test_clean_decodes_entities(self):
        assert clean("<b>R&amp;D</b>\n  lead") == "R&D lead"
        assert clean("<p>   </p>") is None


class TestFetch:
    def test_falls_back_to_next_strategy(self):
        ev, session = _evaluator({
            PROFILE_URL: [FakeResponse(999), FakeResponse(200, text=PROFILE_HTML)],
        })
        result = ev.evaluate(PROFILE_URL, now=NOW)

        assert result.meta.fetched is True
        assert len(session.calls) == 2
        assert session.calls[0]["headers"] != session.calls[1]["headers"]

    def test_unreachable_profile(self, unreachable_session):
        ev = LinkedInEvaluator(HttpProfileScraper(session=unreachable_session))
        result = ev.evaluate("https://www.linkedin.com/in/someone/", now=NOW)

        assert result.meta.fetched is False
        assert result.meta.status is None
        assert result.meta.parsing_quality == "failed_fetch_no_html"
        assert result.score == 0
        assert result.weaknesses[-3:] == [CONTENT_UNAVAILABLE, *ACCESS_WEAKNESSES]
        assert result.recommendations[:2] == ACCESS_RECOMMENDATIONS
        assert len(unreachable_session.calls) == 3

    def test_blocked_profile_keeps_last_status(self):
        ev, session = _evaluator({PROFILE_URL: FakeResponse(999)})
        result = ev.evaluate(PROFILE_URL, now=NOW)

        assert result.meta.fetched is False
        assert result.meta.status == 999
        assert len(session.calls) == 3

    @pytest.mark.parametrize("url", ["", "linkedin.com/in/jane", "javascript:alert(1)", "https://[linkedin.com/in/x"])
    def test_invalid_url(self, url):
        ev, session = _evaluator({})
        with pytest.raises(InputValidationError):
            ev.evaluate(url)
        assert session.calls == []


class TestScore:
    def test_not_fetched_penalty(self):
        kwargs = dict(
            name="A", headline="h" * 40, about=None,
            experiences=[], education=[], skills=[Skill(name="Go", endorsements=1)],
        )
        fetched, _, _ = calculate_linkedin_score(fetched=True, now=NOW, **kwargs)
        blocked, _, weaknesses = calculate_linkedin_score(fetched=False, now=NOW, **kwargs)

        assert fetched - blocked == 10
        assert weaknesses[-1] == CONTENT_UNAVAILABLE

    def test_previous_year_counts_as_recent(self):
        exp = [Experience(title="Dev", period="2021 - 2024")]
        _, strengths, _ = calculate_linkedin_score(
            name=None, headline=None, about=None, experiences=exp,
            education=[], skills=[], fetched=True, now=NOW,
        )
        assert "recent professional experience" in strengths

    def test_many_skills(self):
        skills = [Skill(name=f"s{i}", endorsements=1) for i in range(15)]
        score, strengths, _ = calculate_linkedin_score(
            name=None, headline=None, about=None, experiences=[],
            education=[], skills=skills, fetched=True, now=NOW,
        )
        assert score == 20 + 5
        assert "many skills listed (15+)" in strengths
