# backend/applicant_tracker/service/score.py
"""
Overall score:
weighted sub-scores -> language penalties -> trait/experience/diversity
adjustments -> clamp to [0, 100] -> round to 2 decimals.

Entry:
    calculate_overall_score(...) -> float
    score_breakdown(...) -> dict   (same computation, every step exposed)

The multiplicative penalties act on whatever has been accumulated so far, so
the order of the steps below is part of the result.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.utils import contains_skill, round_half_away_from_zero

WEIGHTS: Dict[str, float] = {
    "technical": 0.4,
    "interview": 0.3,
    "cultural_fit": 0.3,
}

JAVA_PENALTY = 0.7
JAVASCRIPT_PENALTY = 0.75
VIM_BONUS = 2.0
PROD_DEBUG_BONUS = 1.0
HONESTY_PENALTY = 0.5
HONESTY_MIN_YEARS = 2
EXPERIENCE_PER_YEAR = 0.5
EXPERIENCE_CAP = 3.5
DIVERSITY_FREE_SKILLS = 5
DIVERSITY_PER_SKILL = 0.2
DIVERSITY_CAP = 2.0


def score_breakdown(
    name: str,
    skills: Optional[Sequence[str]],
    years_experience: int,
    interview_score: float,
    cultural_fit_score: float,
    technical_score: float,
    can_exit_vim: bool,
    knows_go: bool,
    debugs_in_production: bool,
) -> Dict[str, Any]:
    """
    Run the scoring steps and return every intermediate value.
    `name` is accepted for interface stability; it does not affect the score.
    """
    skills = list(skills or [])

    # ---------- 1) Weighted base ----------
    base = (
        technical_score * WEIGHTS["technical"]
        + interview_score * WEIGHTS["interview"]
        + cultural_fit_score * WEIGHTS["cultural_fit"]
    )
    weighted_base = base

    # ---------- 2) Java without Go ----------
    java_penalty = contains_skill(skills, "Java") and not knows_go
    if java_penalty:
        base *= JAVA_PENALTY

    # ---------- 3) Vim ----------
    vim_bonus = VIM_BONUS if can_exit_vim else 0.0
    base += vim_bonus

    # ---------- 4) Debugging in production ----------
    honesty = 0.0
    if debugs_in_production:
        honesty = PROD_DEBUG_BONUS
    elif years_experience > HONESTY_MIN_YEARS:
        honesty = -HONESTY_PENALTY
    base += honesty

    # ---------- 5) Experience (negative years give a negative boost) ----------
    experience_boost = min(years_experience * EXPERIENCE_PER_YEAR, EXPERIENCE_CAP)
    base += experience_boost

    # ---------- 6) Skill diversity ----------
    diversity_bonus = 0.0
    if len(skills) > DIVERSITY_FREE_SKILLS:
        diversity_bonus = min((len(skills) - DIVERSITY_FREE_SKILLS) * DIVERSITY_PER_SKILL, DIVERSITY_CAP)
    base += diversity_bonus

    # ---------- 7) JavaScript without TypeScript or Go ----------
    javascript_penalty = (
        contains_skill(skills, "JavaScript")
        and not contains_skill(skills, "TypeScript")
        and not knows_go
    )
    if javascript_penalty:
        base *= JAVASCRIPT_PENALTY

    # ---------- 8) Clamp + 9) round ----------
    unclamped = base
    final = round_half_away_from_zero(max(0.0, min(base, 100.0)), 2)

    return {
        "weighted_base": weighted_base,
        "java_penalty_applied": java_penalty,
        "vim_bonus": vim_bonus,
        "honesty_adjustment": honesty,
        "experience_boost": experience_boost,
        "diversity_bonus": diversity_bonus,
        "javascript_penalty_applied": javascript_penalty,
        "unclamped": unclamped,
        "final": final,
    }


def calculate_overall_score(
    name: str,
    skills: Optional[Sequence[str]],
    years_experience: int,
    interview_score: float,
    cultural_fit_score: float,
    technical_score: float,
    can_exit_vim: bool,
    knows_go: bool,
    debugs_in_production: bool,
) -> float:
    """Overall score in [0, 100], rounded half away from zero to 2 decimals. Never raises."""
    return score_breakdown(
        name,
        skills,
        years_experience,
        interview_score,
        cultural_fit_score,
        technical_score,
        can_exit_vim,
        knows_go,
        debugs_in_production,
    )["final"]


__all__ = ["calculate_overall_score", "score_breakdown", "WEIGHTS"]
