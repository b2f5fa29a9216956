"""Recommendation assembly and certification search."""

import pytest

from careerpath.engine.recommend import recommend
from careerpath.engine.search import search
from careerpath.schemas.certification import SearchFilters, UserProfile


class TestRecommend:
    def test_top_five_sorted_descending(self, catalog):
        profile = UserProfile(role="devops", seniority="senior", target_area="cloud")
        items = recommend(catalog, profile)

        assert len(items) == 5
        scores = [i.score for i in items]
        assert scores == sorted(scores, reverse=True)
        assert items[0].certification.id == "cka"
        assert items[0].score == 40 + 30 + 20

    def test_ties_keep_catalog_order(self, catalog):
        profile = UserProfile(role="nobody", seniority="junior")
        items = recommend(catalog, profile, limit=10)

        # beginner certs score 20, everything else 0
        assert [i.certification.id for i in items] == [
            "aws-ccp", "sec-plus", "psm-1", "aws-saa", "cka", "pmp",
        ]

    def test_certification_is_the_catalog_object(self, catalog):
        profile = UserProfile(role="pm", seniority="mid")
        for item in recommend(catalog, profile):
            assert item.certification is catalog.get(item.certification.id)

    def test_deterministic(self, catalog):
        profile = UserProfile(role="developer", seniority="junior", goals=["agile"], budget_usd=150)
        first = recommend(catalog, profile)
        second = recommend(catalog, profile)

        assert [(i.certification.id, i.score, i.reasons) for i in first] == \
               [(i.certification.id, i.score, i.reasons) for i in second]

    def test_limit(self, catalog):
        profile = UserProfile(role="pm", seniority="mid")
        assert len(recommend(catalog, profile, limit=2)) == 2

    def test_empty_catalog(self):
        assert recommend([], UserProfile(role="pm", seniority="mid")) == []


class TestSearch:
    def test_no_filters_returns_catalog_order(self, catalog):
        result = search(catalog, SearchFilters())
        assert [c.id for c in result] == [c.id for c in catalog]

    def test_area_is_case_insensitive(self, catalog):
        result = search(catalog, SearchFilters(area="Management"))
        assert [c.id for c in result] == ["pmp", "psm-1"]

    def test_level(self, catalog):
        result = search(catalog, SearchFilters(level="advanced"))
        assert [c.id for c in result] == ["cka", "pmp"]

    def test_role_membership(self, catalog):
        result = search(catalog, SearchFilters(role="SRE"))
        assert [c.id for c in result] == ["cka"]

    def test_query_matches_name_provider_or_skill(self, catalog):
        assert [c.id for c in search(catalog, SearchFilters(query="kubernetes"))] == ["cka"]
        assert [c.id for c in search(catalog, SearchFilters(query="comptia"))] == ["sec-plus"]
        assert [c.id for c in search(catalog, SearchFilters(query="AGILE"))] == ["psm-1"]

    def test_filters_combine_with_and(self, catalog):
        result = search(catalog, SearchFilters(area="cloud", level="beginner", role="pm"))
        assert [c.id for c in result] == ["aws-ccp"]

    def test_limit_applied_after_filtering(self, catalog):
        result = search(catalog, SearchFilters(area="cloud", limit=2))
        assert [c.id for c in result] == ["aws-ccp", "aws-saa"]

    def test_no_match(self, catalog):
        assert search(catalog, SearchFilters(query="underwater basket weaving")) == []

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_bounds(self, limit):
        with pytest.raises(ValueError):
            SearchFilters(limit=limit)
