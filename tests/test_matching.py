import pytest

from internmatch.core.config import get_settings
from internmatch.services.matching_service import (
    compute_match_score, find_matching_skills, match_interns, parse_skills_param, skills_match
)


def profile(name, skills):
    return {"id": name, "name": name, "skills": skills}


# ============================================================
# SCORING
# ============================================================

def test_single_required_skill_full_match():
    [m] = match_interns(["react"], [profile("amara", ["React", "Node.js"])])
    assert m.match_score == 100
    assert m.matching_skills == ["React"]


def test_half_of_required_skills():
    [m] = match_interns(["react", "python"], [profile("amara", ["React"])])
    assert m.match_score == 50
    assert m.matching_skills == ["React"]


def test_substring_counts_in_both_directions():
    # "java" is inside "javascript"
    [m] = match_interns(["java"], [profile("david", ["JavaScript"])])
    assert m.match_score == 100
    # and a short profile skill inside a longer required one
    [m] = match_interns(["Machine Learning Engineering"], [profile("kwame", ["machine learning"])])
    assert m.match_score == 100


def test_exact_mode_drops_substring_hits():
    assert match_interns(["java"], [profile("david", ["JavaScript"])], mode="exact") == []
    [m] = match_interns(["java"], [profile("david", ["Java", "JavaScript"])], mode="exact")
    assert m.matching_skills == ["Java"]


def test_exact_mode_from_settings(monkeypatch):
    monkeypatch.setattr(get_settings(), "skill_match_mode", "exact")
    assert match_interns(["java"], [profile("david", ["JavaScript"])]) == []
    [m] = match_interns(["JAVA"], [profile("david", ["java"])])
    assert m.match_score == 100


def test_score_is_capped_at_100():
    [m] = match_interns(["react"], [profile("emmanuel", ["React", "React Native"])])
    assert m.matching_skills == ["React", "React Native"]
    assert m.match_score == 100


def test_score_rounds_to_whole_percent():
    assert compute_match_score(1, 3) == 33
    assert compute_match_score(2, 3) == 67
    assert compute_match_score(0, 3) == 0


def test_profiles_without_overlap_are_dropped():
    results = match_interns(["python"], [
        profile("fatima", ["SEO", "Social Media"]),
        profile("kwame", ["Python", "Django"]),
    ])
    assert [m.profile["id"] for m in results] == ["kwame"]


def test_sorted_by_score_then_input_order():
    results = match_interns(["react", "node"], [
        profile("first", ["React"]),
        profile("second", ["React", "Node.js"]),
        profile("third", ["Node.js"]),
    ])
    assert [(m.profile["id"], m.match_score) for m in results] == [
        ("second", 100), ("first", 50), ("third", 50),
    ]


def test_limit_truncates_after_sorting():
    profiles = [profile(f"p{i}", ["React"] if i % 2 else ["React", "SQL"]) for i in range(6)]
    results = match_interns(["react", "sql"], profiles, limit=2)
    assert [m.profile["id"] for m in results] == ["p0", "p2"]


def test_default_limit_is_ten():
    profiles = [profile(f"p{i}", ["Python"]) for i in range(15)]
    assert len(match_interns(["python"], profiles)) == 10


def test_required_skills_must_not_be_empty():
    with pytest.raises(ValueError):
        match_interns([], [profile("amara", ["React"])])


def test_unknown_mode():
    with pytest.raises(ValueError):
        match_interns(["react"], [], mode="fuzzy")


def test_to_dict_merges_profile_and_score():
    [m] = match_interns(["react"], [profile("amara", ["React"])])
    assert m.to_dict() == {
        "id": "amara", "name": "amara", "skills": ["React"],
        "match_score": 100, "matching_skills": ["React"],
    }


# ============================================================
# HELPERS
# ============================================================

def test_parse_skills_param():
    assert parse_skills_param(" react, ,Python ,") == ["react", "Python"]
    assert parse_skills_param("") == []
    assert parse_skills_param(None) == []


def test_blank_skills_never_match():
    assert not skills_match("", "react")
    assert not skills_match("react", "   ")


def test_find_matching_skills_keeps_original_spelling():
    assert find_matching_skills(["Node.JS", "Figma"], ["node.js"]) == ["Node.JS"]
