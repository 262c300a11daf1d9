"""Tests for the overall score calculator."""

import pytest

from applicant_tracker.service.score import calculate_overall_score, score_breakdown


def _score(
    *,
    name: str = "Test Person",
    skills=None,
    years: int = 0,
    interview: float = 70.0,
    cultural: float = 70.0,
    technical: float = 70.0,
    vim: bool = False,
    go: bool = True,
    prod: bool = False,
) -> float:
    return calculate_overall_score(
        name, skills if skills is not None else ["Go"], years,
        interview, cultural, technical, vim, go, prod,
    )


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestCalculateOverallScore:
    def test_weighted_base(self) -> None:
        # 80*0.4 + 60*0.3 + 70*0.3 = 71
        assert _score(technical=80, interview=60, cultural=70, skills=["Go", "Kubernetes"]) == 71.0

    def test_vim_experience_and_honesty_penalty(self) -> None:
        # 70 + 2 (vim) + 2.5 (exp) - 0.5 (says never debugs in prod with 5 years)
        assert _score(years=5, vim=True, skills=["Go", "Docker"]) == 74.0

    def test_debugging_in_production_bonus(self) -> None:
        assert _score(years=5, prod=True, skills=["Go", "Python"]) == 73.5

    def test_honesty_penalty_for_experienced_dev(self) -> None:
        assert _score(years=5) == 72.0

    def test_no_honesty_penalty_for_junior(self) -> None:
        assert _score(years=1) == 70.5

    def test_no_honesty_penalty_at_exactly_two_years(self) -> None:
        assert _score(years=2) == 71.0

    def test_experience_boost_is_capped(self) -> None:
        # 70 + 1 (prod) + 3.5 (cap)
        assert _score(years=10, prod=True) == 74.5

    def test_java_penalty_without_go(self) -> None:
        assert _score(skills=["Java"], go=False, interview=80, cultural=80, technical=80) == 56.0

    def test_java_no_penalty_when_knows_go(self) -> None:
        assert _score(skills=["Java"], go=True, interview=80, cultural=80, technical=80) == 80.0

    def test_java_match_is_case_insensitive(self) -> None:
        assert _score(skills=["jAVA"], go=False, interview=80, cultural=80, technical=80) == 56.0

    def test_javascript_does_not_count_as_java(self) -> None:
        score = _score(skills=["JavaScript", "TypeScript"], go=False, interview=80, cultural=80, technical=80)
        assert score == 80.0

    def test_javascript_penalty(self) -> None:
        assert _score(skills=["JavaScript"], go=False, interview=80, cultural=80, technical=80) == 60.0

    def test_javascript_with_typescript_no_penalty(self) -> None:
        assert _score(skills=["javascript", "typescript"], go=False, interview=80, cultural=80, technical=80) == 80.0

    def test_java_and_javascript_penalties_compound(self) -> None:
        # 80 * 0.7 * 0.75
        score = _score(skills=["Java", "JavaScript"], go=False, interview=80, cultural=80, technical=80)
        assert score == 42.0

    def test_javascript_penalty_applies_after_bonuses(self) -> None:
        # (70 + 2 + 1) * 0.75 = 54.75
        score = _score(skills=["JavaScript"], go=False, vim=True, prod=True)
        assert score == 54.75

    def test_skill_diversity_bonus(self) -> None:
        skills = [f"skill-{i}" for i in range(7)]
        assert _score(skills=skills) == 70.4

    def test_skill_diversity_bonus_capped(self) -> None:
        skills = [f"skill-{i}" for i in range(20)]
        assert _score(skills=skills) == 72.0

    def test_no_diversity_bonus_at_five_skills(self) -> None:
        skills = [f"skill-{i}" for i in range(5)]
        assert _score(skills=skills) == 70.0

    def test_top_candidate_capped_at_100(self) -> None:
        score = calculate_overall_score(
            "Jonathan Søholm-Boesen",
            ["Go", "gRPC", "Kubernetes", "Being Modest", "Microservices", "Time Travel"],
            10, 99.8, 99.9, 99.7, True, True, False,
        )
        assert score == 100.0

    def test_rounds_to_two_decimals(self) -> None:
        # 33.333 * 0.4 = 13.3332
        assert _score(technical=33.333, interview=0, cultural=0) == 13.33

    def test_name_does_not_affect_score(self) -> None:
        assert _score(name="Jonathan Søholm-Boesen") == _score(name="Someone Else")


class TestScenarios:
    def test_all_zero_with_java_is_zero(self) -> None:
        assert _score(skills=["Java"], go=False, interview=0, cultural=0, technical=0) == 0.0

    def test_baseline_without_adjustments(self) -> None:
        assert _score(technical=80, interview=60, cultural=70, go=True, skills=[]) == 71.0


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEdgeCases:
    def test_empty_and_none_skills(self) -> None:
        assert _score(skills=[]) == 70.0
        assert calculate_overall_score("x", None, 0, 70, 70, 70, False, True, False) == 70.0

    def test_negative_years_give_negative_boost(self) -> None:
        assert _score(years=-4) == 68.0

    def test_sub_scores_above_100_are_clamped(self) -> None:
        assert _score(interview=200, cultural=200, technical=200) == 100.0

    def test_negative_result_is_clamped_to_zero(self) -> None:
        assert _score(interview=0, cultural=0, technical=0, years=-50) == 0.0

    @pytest.mark.parametrize("years", [-100, -1, 0, 3, 50])
    @pytest.mark.parametrize("sub", [-500.0, 0.0, 55.5, 100.0, 1e6])
    def test_always_within_bounds(self, years, sub) -> None:
        score = calculate_overall_score(
            "x", ["Java", "JavaScript"] + [f"s{i}" for i in range(10)],
            years, sub, sub, sub, True, False, years % 2 == 0,
        )
        assert 0.0 <= score <= 100.0

    def test_deterministic(self) -> None:
        args = ("A B", ["Go", "Rust", "React"], 6, 88.0, 86.0, 89.0, True, True, False)
        assert len({calculate_overall_score(*args) for _ in range(20)}) == 1


class TestScoreBreakdown:
    def test_breakdown_matches_score(self) -> None:
        args = ("Bob Smith", ["Java", "Spring Boot"], 10, 65.0, 70.0, 60.0, False, False, True)
        breakdown = score_breakdown(*args)
        assert breakdown["final"] == calculate_overall_score(*args)
        assert breakdown["java_penalty_applied"] is True
        assert breakdown["javascript_penalty_applied"] is False
        assert breakdown["honesty_adjustment"] == 1.0
        assert breakdown["experience_boost"] == 3.5

    def test_breakdown_reports_unclamped_value(self) -> None:
        breakdown = score_breakdown("x", [], 0, 200.0, 200.0, 200.0, False, True, False)
        assert breakdown["unclamped"] == pytest.approx(200.0)
        assert breakdown["final"] == 100.0
