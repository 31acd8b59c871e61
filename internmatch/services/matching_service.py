"""
Skill Matching Service

PURPOSE:
Rank intern profiles against the skills an organization asks for.

HOW IT WORKS:
1. Compare every profile skill with every required skill, case-insensitively
2. A profile skill "matches" if either string contains the other
   ("React" matches "react", "React Native" matches "react",
   "java" matches "JavaScript")
3. Score = share of required skills covered, as a whole percentage
4. Drop profiles with no matching skill, sort best first, keep the top N

The substring rule is deliberately loose. Set skill_match_mode=exact
to compare whole skill names instead.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from internmatch.core.config import get_settings

DEFAULT_LIMIT = 10

MATCH_MODES = ("substring", "exact")


@dataclass
class InternMatch:
    """One ranked profile."""
    profile: dict
    match_score: int
    matching_skills: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            **self.profile,
            "match_score": self.match_score,
            "matching_skills": self.matching_skills,
        }


def parse_skills_param(raw: Optional[str]) -> List[str]:
    """Split a comma-separated skills query value, dropping blanks."""
    if not raw:
        return []
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


def skills_match(profile_skill: str, required_skill: str, mode: str = "substring") -> bool:
    """Case-insensitive comparison of a single pair of skills."""
    a = profile_skill.strip().lower()
    b = required_skill.strip().lower()
    if not a or not b:
        return False
    if mode == "exact":
        return a == b
    return a in b or b in a


def find_matching_skills(
    profile_skills: List[str],
    required_skills: List[str],
    mode: str = "substring"
) -> List[str]:
    """Profile skills (original spelling, original order) that hit any required skill."""
    return [
        skill for skill in profile_skills
        if any(skills_match(skill, required, mode) for required in required_skills)
    ]


def compute_match_score(matching_count: int, required_count: int) -> int:
    """
    Whole-number percentage of required skills covered.

    Capped at 100: several profile skills can hit the same required skill
    ("React", "React Native" against "react").
    """
    if required_count <= 0:
        return 0
    return min(100, round(100 * matching_count / required_count))


def match_interns(
    required_skills: List[str],
    profiles: Iterable[dict],
    limit: int = DEFAULT_LIMIT,
    mode: Optional[str] = None
) -> List[InternMatch]:
    """
    Score and rank intern profiles against required skills.

    Args:
        required_skills: Non-empty list of skills the role needs
        profiles: Profile dicts with a "skills" list; order is the tie-break
        limit: Maximum number of results
        mode: "substring" (default from settings) or "exact"

    Returns:
        InternMatch list, highest score first. Profiles with no
        matching skill are left out.
    """
    if not required_skills:
        raise ValueError("At least one required skill is needed")

    mode = mode or get_settings().skill_match_mode
    if mode not in MATCH_MODES:
        raise ValueError(f"Unknown match mode '{mode}'")

    results = []
    for profile in profiles:
        matching = find_matching_skills(profile.get("skills", []), required_skills, mode)
        if not matching:
            continue
        results.append(InternMatch(
            profile=profile,
            match_score=compute_match_score(len(matching), len(required_skills)),
            matching_skills=matching,
        ))

    # sort() is stable, so equal scores keep the input order
    results.sort(key=lambda m: m.match_score, reverse=True)
    return results[:limit]
