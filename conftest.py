"""
Shared fixtures for the matching engine tests.

Record factories return raw dicts shaped like Supabase rows; pass keyword
arguments to override any field. Nothing here touches a database.
"""

import pytest


@pytest.fixture
def make_profile():
    def _make(id, user_type, **overrides):
        data = {
            "id": id,
            "user_type": user_type,
            "name": f"User {id}",
            "created_at": 1000,
        }
        if user_type == "investor":
            data["risk_tolerance"] = "medium"
            data["investment_range"] = {"min": 10000, "max": 500000}
            data["preferred_industries"] = ["Tech"]
        data.update(overrides)
        return data
    return _make


@pytest.fixture
def make_idea():
    def _make(id, creator_id, **overrides):
        data = {
            "id": id,
            "creator_id": creator_id,
            "title": f"Idea {id}",
            "category": "Tech",
            "tags": [],
            "funding_goal": 50000,
            "equity_offered": 10,
            "stage": "mvp",
            "status": "published",
            "created_at": 1000,
        }
        data.update(overrides)
        return data
    return _make


@pytest.fixture
def make_offer():
    def _make(id, investor_id, **overrides):
        data = {
            "id": id,
            "investor_id": investor_id,
            "title": f"Offer {id}",
            "amount_range": {"min": 20000, "max": 100000},
            "preferred_equity": {"min": 5, "max": 20},
            "preferred_stages": ["mvp", "early"],
            "preferred_industries": ["Tech", "Health"],
            "is_active": True,
            "created_at": 1000,
        }
        data.update(overrides)
        return data
    return _make


@pytest.fixture
def snapshot(make_profile, make_idea, make_offer):
    """
    Two creators and three investors with one offer each, differing only in
    risk tolerance. idea1 scores 100/93/85 against o2/o1/o3, idea2 falls below
    the threshold everywhere.
    """
    profiles = [
        make_profile("c1", "creator"),
        make_profile("c2", "creator"),
        make_profile("i1", "investor", risk_tolerance="medium"),
        make_profile("i2", "investor", risk_tolerance="high"),
        make_profile("i3", "investor", risk_tolerance="low"),
    ]
    ideas = [
        make_idea("idea1", "c1"),
        make_idea("idea2", "c1", category="Retail", stage="growth",
                  funding_goal=500000, created_at=2000),
    ]
    offers = [
        make_offer("o1", "i1"),
        make_offer("o2", "i2"),
        make_offer("o3", "i3"),
    ]
    return profiles, ideas, offers
