"""
Tests for the CoC 7e outcome classifier and house-rule boundary table.
"""

import pytest

from models.types import RuleVariant
from utils.coc import (
    RANK_NAMES,
    classify,
    classify_with_requirement,
    is_growth_success,
    required_threshold,
    rule_bounds,
)

VARIANTS = list(range(6))
THRESHOLDS = [0, 1, 49, 50, 51, 99, 100]


class TestRuleBounds:
    """Tests for the per-variant critical/fumble table."""

    @pytest.mark.parametrize("variant,threshold,expected", [
        (0, 49, (1, 96)),
        (0, 50, (1, 100)),
        (1, 49, (1, 96)),
        (1, 50, (5, 100)),
        (2, 10, (5, 96)),
        (3, 90, (5, 96)),
        (4, 30, (3, 99)),
        (4, 100, (5, 100)),
        (5, 49, (2, 96)),
        (5, 50, (2, 99)),
    ])
    def test_table(self, variant, threshold, expected):
        assert rule_bounds(variant, threshold) == expected

    def test_critical_floored_at_one(self):
        """Scaled bands would give 0 below threshold 10."""
        assert rule_bounds(RuleVariant.SCALED, 0) == (1, 96)
        assert rule_bounds(RuleVariant.NARROW_CRITICAL, 4) == (1, 96)

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValueError):
            rule_bounds(6, 50)

    @pytest.mark.parametrize("variant", VARIANTS)
    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_bounds_in_range(self, variant, threshold):
        critical, fumble = rule_bounds(variant, threshold)
        assert 1 <= critical <= 5
        assert 96 <= fumble <= 100


class TestClassify:
    """Tests for classify()."""

    # Outside variant 3 a critical needs a passed check and a fumble a failed one
    @pytest.mark.parametrize("variant", VARIANTS)
    @pytest.mark.parametrize("threshold", [49, 50, 51, 99, 100])
    def test_critical_bound_is_critical(self, variant, threshold):
        critical, _ = rule_bounds(variant, threshold)
        outcome = classify(variant, critical, threshold)
        assert outcome.success_rank == 4
        assert outcome.critical_threshold == critical

    @pytest.mark.parametrize("variant", VARIANTS)
    @pytest.mark.parametrize("threshold", [0, 1, 49, 50, 51])
    def test_fumble_bound_is_fumble(self, variant, threshold):
        _, fumble = rule_bounds(variant, threshold)
        outcome = classify(variant, fumble, threshold)
        assert outcome.success_rank == -2
        assert outcome.fumble_threshold == fumble

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_forced_bands_hold_everywhere(self, threshold):
        critical, fumble = rule_bounds(RuleVariant.FORCED_BANDS, threshold)
        assert classify(RuleVariant.FORCED_BANDS, critical, threshold).success_rank == 4
        assert classify(RuleVariant.FORCED_BANDS, fumble, threshold).success_rank == -2

    @pytest.mark.parametrize("variant", VARIANTS)
    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_rank_non_increasing_outside_bands(self, variant, threshold):
        critical, fumble = rule_bounds(variant, threshold)
        ranks = [classify(variant, rolled, threshold).success_rank
                 for rolled in range(critical + 1, fumble)]
        assert ranks == sorted(ranks, reverse=True)

    def test_rulebook_fumble_below_fifty(self):
        assert classify(0, 100, 49).success_rank == -2

    def test_rulebook_96_plain_failure_at_sixty(self):
        assert classify(0, 96, 60).success_rank == -1

    @pytest.mark.parametrize("rolled,rank", [
        (1, 4),
        (10, 3),
        (11, 2),
        (25, 2),
        (26, 1),
        (50, 1),
        (51, -1),
        (99, -1),
        (100, -2),
    ])
    def test_rulebook_bands_at_fifty(self, rolled, rank):
        assert classify(0, rolled, 50).success_rank == rank

    def test_wide_critical_needs_fifty(self):
        assert classify(1, 5, 50).success_rank == 4
        # Below 50 only 1 is critical; 5 is still an extreme success
        assert classify(1, 5, 49).success_rank == 3

    def test_forced_fumble_overrides_success(self):
        assert classify(3, 97, 99).success_rank == -2
        # Rulebook keeps the same roll a regular success
        assert classify(0, 97, 99).success_rank == 1

    def test_forced_critical_overrides_failure(self):
        assert classify(3, 4, 3).success_rank == 4

    def test_strict_bands_follow_the_check(self):
        # Same bounds as variant 3, but 96-99 only fumbles above the skill
        assert classify(2, 97, 99).success_rank == 1
        assert classify(2, 97, 60).success_rank == -2
        # and 1-5 only crits at or below it
        assert classify(2, 4, 3).success_rank == -1
        assert classify(2, 4, 60).success_rank == 4

    def test_critical_only_on_a_passed_check(self):
        assert classify(0, 1, 0).success_rank == -1
        assert classify(0, 100, 100).success_rank == 1

    def test_outcome_success_flag(self):
        assert classify(0, 30, 50).is_success
        assert not classify(0, 70, 50).is_success


class TestRequirement:
    """Tests for difficulty-requirement collapse."""

    @pytest.mark.parametrize("rank,requirement,key", [
        (2, 2, "COC:判定_必須_困難_成功"),
        (1, 2, "COC:判定_必須_困難_失敗"),
        (4, 2, "COC:判定_必須_困難_成功"),
        (3, 3, "COC:判定_必須_極難_成功"),
        (2, 3, "COC:判定_必須_極難_失敗"),
        (4, 4, "COC:判定_必須_大成功_成功"),
        (3, 4, "COC:判定_必須_大成功_失敗"),
        (-2, 4, "COC:判定_必須_大成功_失敗"),
    ])
    def test_collapse(self, rank, requirement, key):
        assert classify_with_requirement(rank, requirement) == key

    @pytest.mark.parametrize("rank", [-2, -1, 1, 2, 3, 4])
    @pytest.mark.parametrize("requirement", [0, 1])
    def test_plain_ranks_without_requirement(self, rank, requirement):
        assert classify_with_requirement(rank, requirement) == RANK_NAMES[rank]

    def test_required_threshold(self):
        assert required_threshold(60, 0, 1) == 60
        assert required_threshold(60, 1, 1) == 60
        assert required_threshold(60, 2, 1) == 30
        assert required_threshold(60, 3, 1) == 12
        assert required_threshold(60, 4, 5) == 5


class TestGrowth:
    """Tests for growth success."""

    def test_failed_check_grows(self):
        assert is_growth_success(classify(0, 80, 60), 80)

    def test_passed_check_does_not_grow(self):
        assert not is_growth_success(classify(0, 30, 60), 30)

    def test_high_roll_always_grows(self):
        # 97 against 99 is a success under the rulebook, but still grows
        assert is_growth_success(classify(0, 97, 99), 97)
