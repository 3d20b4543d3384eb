"""
Tests for the value objects validated from raw records.
"""

import pytest
from pydantic import ValidationError

from backend.venture_matching.models.business_idea import BusinessIdea, IdeaStatus, Stage
from backend.venture_matching.models.investment_offer import InvestmentOffer
from backend.venture_matching.models.match_result import MatchResult
from backend.venture_matching.models.records import Range, timestamp
from backend.venture_matching.models.risk_level import RiskLevel, RiskTolerance
from backend.venture_matching.models.user_profile import Role, UserProfile


def without(data, key):
    data = dict(data)
    del data[key]
    return data


def nulled(data, key):
    return {**data, key: None}


class TestTimestamp:

    def test_accepts_epoch_millis_and_iso(self):
        assert timestamp(1500) == 1500.0
        assert timestamp("1970-01-01T00:00:01Z") == 1000.0
        assert timestamp("1970-01-01T00:00:02+00:00") == 2000.0

    def test_defaults_to_zero(self):
        assert timestamp(None) == 0.0
        assert timestamp("yesterday") == 0.0


class TestRange:

    def test_valid(self):
        bounds = Range.model_validate({"min": "10", "max": 20})
        assert (bounds.min, bounds.max) == (10.0, 20.0)

    @pytest.mark.parametrize("data", [
        {"min": 20, "max": 10},
        {"min": 10},
        {"min": "nan", "max": 10},
        {"min": 0, "max": float("inf")},
        {"min": True, "max": 10},
    ])
    def test_invalid(self, data):
        with pytest.raises(ValidationError):
            Range.model_validate(data)


class TestUserProfile:

    def test_investor_fields(self, make_profile):
        profile = UserProfile.model_validate(make_profile(
            "i1", "investor", risk_tolerance="high", preferred_industries=["Tech", " AI "]))
        assert profile.is_investor
        assert profile.role is Role.INVESTOR
        assert profile.risk_tolerance is RiskTolerance.HIGH
        assert (profile.investment_range.min, profile.investment_range.max) == (10000.0, 500000.0)
        assert profile.preferred_industries == frozenset({"tech", "ai"})

    def test_camel_case_record(self):
        profile = UserProfile.model_validate({"_id": "u9", "userType": "creator", "createdAt": 42})
        assert profile.id == "u9"
        assert profile.is_creator
        assert profile.created_at == 42.0

    def test_numeric_id_becomes_string(self):
        assert UserProfile.model_validate({"id": 7, "user_type": "creator"}).id == "7"

    def test_null_columns_use_defaults(self, make_profile):
        profile = UserProfile.model_validate(make_profile("c1", "creator", industry=None, name=None))
        assert profile.industry == ""
        assert profile.name == ""

    @pytest.mark.parametrize("overrides", [
        {"user_type": "admin"},
        {"risk_tolerance": "reckless"},
        {"preferred_industries": 5},
    ])
    def test_invalid_profiles_raise(self, make_profile, overrides):
        with pytest.raises(ValidationError):
            UserProfile.model_validate({**make_profile("i1", "investor"), **overrides})

    @pytest.mark.parametrize("key", ["id", "user_type"])
    def test_missing_required_field_raises(self, make_profile, key):
        data = make_profile("i1", "investor")
        with pytest.raises(ValidationError):
            UserProfile.model_validate(without(data, key))
        with pytest.raises(ValidationError):
            UserProfile.model_validate(nulled(data, key))

    @pytest.mark.parametrize("bad_range", [{"min": 10, "max": 5}, [1, 2], {"min": "x", "max": 5}])
    def test_malformed_investment_range_is_dropped(self, make_profile, bad_range):
        profile = UserProfile.model_validate(make_profile("i1", "investor", investment_range=bad_range))
        assert profile.investment_range is None
        assert profile.is_investor


class TestBusinessIdea:

    def test_published_idea(self, make_idea):
        idea = BusinessIdea.model_validate(make_idea("idea1", "c1", created_at="1970-01-01T00:00:03Z"))
        assert idea.is_published
        assert idea.stage is Stage.MVP
        assert idea.status is IdeaStatus.PUBLISHED
        assert idea.funding_goal == 50000.0
        assert idea.created_at == 3000.0

    def test_draft_is_not_published(self, make_idea):
        assert not BusinessIdea.model_validate(make_idea("idea1", "c1", status="draft")).is_published

    def test_camel_case_record(self):
        idea = BusinessIdea.model_validate({
            "_id": "k1", "creatorId": "c1", "category": "Tech", "fundingGoal": 1000,
            "equityOffered": 5, "stage": "early", "status": "published", "tags": ["B2B"],
        })
        assert idea.id == "k1"
        assert idea.creator_id == "c1"
        assert idea.tags == frozenset({"b2b"})

    @pytest.mark.parametrize("overrides", [
        {"funding_goal": 0},
        {"funding_goal": -10},
        {"funding_goal": "lots"},
        {"funding_goal": "nan"},
        {"funding_goal": float("nan")},
        {"funding_goal": "inf"},
        {"funding_goal": True},
        {"equity_offered": 120},
        {"stage": "seed"},
        {"status": "archived"},
        {"category": ""},
        {"category": "   "},
        {"tags": 5},
        {"tags": "not-a-list"},
    ])
    def test_invalid_ideas_raise(self, make_idea, overrides):
        with pytest.raises(ValidationError):
            BusinessIdea.model_validate({**make_idea("idea1", "c1"), **overrides})

    @pytest.mark.parametrize("key", ["creator_id", "funding_goal", "category", "stage"])
    def test_missing_required_field_raises(self, make_idea, key):
        data = make_idea("idea1", "c1")
        with pytest.raises(ValidationError):
            BusinessIdea.model_validate(without(data, key))
        with pytest.raises(ValidationError):
            BusinessIdea.model_validate(nulled(data, key))

    def test_numeric_strings_are_accepted(self, make_idea):
        idea = BusinessIdea.model_validate(make_idea("idea1", "c1", funding_goal="75000"))
        assert idea.funding_goal == 75000.0


class TestInvestmentOffer:

    def test_offer_fields(self, make_offer):
        offer = InvestmentOffer.model_validate(make_offer("o1", "i1", preferred_stages=["MVP", "early"]))
        assert offer.is_active
        assert (offer.amount_range.min, offer.amount_range.max) == (20000.0, 100000.0)
        assert (offer.preferred_equity.min, offer.preferred_equity.max) == (5.0, 20.0)
        assert offer.preferred_stages == frozenset({Stage.MVP, Stage.EARLY})
        assert offer.preferred_industries == frozenset({"tech", "health"})

    def test_missing_is_active_means_inactive(self, make_offer):
        assert not InvestmentOffer.model_validate(without(make_offer("o1", "i1"), "is_active")).is_active

    def test_malformed_equity_is_dropped(self, make_offer):
        offer = InvestmentOffer.model_validate(make_offer("o1", "i1", preferred_equity={"min": 50, "max": 5}))
        assert offer.preferred_equity is None

    @pytest.mark.parametrize("overrides", [
        {"amount_range": {"min": 100}},
        {"amount_range": {"min": 200, "max": 100}},
        {"amount_range": {"min": 0, "max": "inf"}},
        {"amount_range": [1, 2]},
        {"preferred_stages": ["series-b"]},
        {"preferred_stages": 5},
        {"preferred_industries": 5},
    ])
    def test_invalid_offers_raise(self, make_offer, overrides):
        with pytest.raises(ValidationError):
            InvestmentOffer.model_validate({**make_offer("o1", "i1"), **overrides})

    @pytest.mark.parametrize("key", ["investor_id", "amount_range"])
    def test_missing_required_field_raises(self, make_offer, key):
        data = make_offer("o1", "i1")
        with pytest.raises(ValidationError):
            InvestmentOffer.model_validate(without(data, key))
        with pytest.raises(ValidationError):
            InvestmentOffer.model_validate(nulled(data, key))


class TestRiskLevel:

    @pytest.mark.parametrize("stage,level", [
        ("concept", "high"), ("mvp", "high"), ("early", "medium"), ("growth", "low"),
    ])
    def test_stage_risk(self, stage, level):
        assert RiskLevel.for_stage(stage).level == RiskTolerance(level)

    def test_credit_by_distance(self):
        high = RiskLevel("high")
        assert high.credit(RiskLevel("high")) == 100
        assert high.credit(RiskLevel(RiskTolerance.MEDIUM)) == 50
        assert high.credit(RiskLevel("low")) == 0

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            RiskLevel("extreme")


class TestMatchResult:

    def test_to_record(self, make_idea, make_offer):
        idea = BusinessIdea.model_validate(make_idea("idea1", "c1"))
        offer = InvestmentOffer.model_validate(make_offer("o1", "i1"))
        factors = {"amountCompatibility": 100, "industryAlignment": 100,
                   "stagePreference": 100, "riskAlignment": 50}
        record = MatchResult(idea, offer, 93, factors).to_record()

        assert record == {
            "idea_id": "idea1",
            "offer_id": "o1",
            "creator_id": "c1",
            "investor_id": "i1",
            "match_score": 93,
            "matching_factors": factors,
            "status": "suggested",
        }
        assert record["matching_factors"] is not factors
