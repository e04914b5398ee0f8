"""
Tests for the longest-prefix dice/arithmetic evaluator.
"""

import pytest

from models.types import RollFlags, ValueKind
from utils.dice import ExpressionEvaluator, truncating_div
from utils.errors import ExprError, NonIntegerOperand

LOOKUP = RollFlags(attribute_lookup=True)
LOOKUP_DEFAULTS = RollFlags(attribute_lookup=True, default_attributes=True)


class DictContext:
    """Minimal evaluation context backed by a dict."""

    def __init__(self, values):
        self.values = values

    def get(self, name):
        if name in self.values:
            return self.values[name], True
        return None, False


class TestPrefixSemantics:
    """Tests for matched/remainder splitting."""

    def test_space_ends_expression(self, evaluator):
        token = evaluator.evaluate("20 1/10")
        assert token.value.value == 20
        assert token.matched_text == "20"
        assert token.remainder_text == " 1/10"

    def test_whitespace_around_operator_is_consumed(self, evaluator):
        token = evaluator.evaluate("1 + 2 rest")
        assert token.value.value == 3
        assert token.matched_text == "1 + 2"
        assert token.remainder_text == " rest"

    def test_dangling_operator_is_left_over(self, evaluator):
        token = evaluator.evaluate("1 +")
        assert token.value.value == 1
        assert token.matched_text == "1"
        assert token.remainder_text == " +"

    def test_divider_kept_in_remainder(self, evaluator):
        token = evaluator.evaluate("1/ x")
        assert token.matched_text == "1"
        assert token.remainder_text == "/ x"

    def test_nothing_parses(self, evaluator):
        with pytest.raises(ExprError):
            evaluator.evaluate("abc")

    def test_empty_text(self, evaluator):
        with pytest.raises(ExprError):
            evaluator.evaluate("")

    def test_evaluate_all_rejects_leftovers(self, evaluator):
        with pytest.raises(ExprError):
            evaluator.evaluate_all("1 2")


class TestArithmetic:
    """Tests for operators and precedence."""

    @pytest.mark.parametrize("text,expected", [
        ("1+2*3", 7),
        ("(1+2)*3", 9),
        ("7/2", 3),
        ("-7/2", -3),
        ("10-2-3", 5),
        ("--4", 4),
    ])
    def test_values(self, evaluator, text, expected):
        assert evaluator.evaluate_all(text).value.value == expected

    def test_truncating_div(self):
        assert truncating_div(7, 2) == 3
        assert truncating_div(-7, 2) == -3
        assert truncating_div(7, -2) == -3

    def test_division_by_zero_is_not_an_integer(self, evaluator):
        token = evaluator.evaluate("1/0")
        assert token.matched_text == "1/0"
        assert token.value_kind is ValueKind.OTHER

    def test_string_literal(self, evaluator):
        token = evaluator.evaluate('"abc"')
        assert token.value.value == "abc"
        assert not token.value.is_integer

    def test_string_not_usable_in_arithmetic(self, evaluator):
        token = evaluator.evaluate('1+"a"')
        assert token.matched_text == "1"
        assert token.remainder_text == '+"a"'

    def test_evaluate_int_rejects_strings(self, evaluator):
        with pytest.raises(NonIntegerOperand):
            evaluator.evaluate_int('"abc"')


class TestDice:
    """Tests for dice rolls."""

    def test_roll_detail(self, evaluator, rng):
        rng.push(3, 4)
        token = evaluator.evaluate("2d6")
        assert token.value.value == 7
        assert token.detail == "2d6=[3+4]=7"
        assert rng.calls == [(1, 6), (1, 6)]

    def test_bare_d_is_hundred_sided(self, evaluator, rng):
        rng.push(42)
        token = evaluator.evaluate("d")
        assert token.value.value == 42
        assert token.detail == "1d100=42"

    def test_dice_in_arithmetic(self, evaluator, rng):
        rng.push(5)
        assert evaluator.evaluate_all("d10+2").value.value == 7

    def test_worst_case(self, evaluator):
        token = evaluator.evaluate("3d6+1d10", flags=RollFlags(worst_case=True))
        assert token.value.value == 28

    @pytest.mark.parametrize("text", ["0d6", "6d6", "1d1", "1d2000"])
    def test_limits(self, text):
        evaluator = ExpressionEvaluator(max_dice_count=5, max_dice_sides=1000)
        with pytest.raises(ExprError):
            evaluator.evaluate(text)

    def test_from_rules(self, rules):
        rules.dnd_max_dice_count = 3
        evaluator = ExpressionEvaluator.from_rules(rules)
        assert evaluator.max_dice_count == 3
        assert evaluator.max_dice_sides == rules.dnd_max_dice_sides


class TestAttributes:
    """Tests for attribute lookup mode."""

    def test_identifier_needs_lookup_flag(self, evaluator):
        with pytest.raises(ExprError):
            evaluator.evaluate("侦查", DictContext({"侦查": 60}))

    def test_context_value(self, evaluator):
        token = evaluator.evaluate("侦查", DictContext({"侦查": 60}), LOOKUP)
        assert token.value.value == 60
        assert token.matched_text == "侦查"

    def test_inline_value(self, evaluator):
        token = evaluator.evaluate("侦查50 d", DictContext({"侦查": 60}), LOOKUP)
        assert token.value.value == 50
        assert token.matched_text == "侦查50"
        assert token.remainder_text == " d"

    def test_alias_through_store(self, evaluator, view):
        view.set("偵查", 60)
        view.set("敏捷", 70)
        assert evaluator.evaluate("侦察", view, LOOKUP).value.value == 60
        # dex must not be read as a die
        assert evaluator.evaluate("dex", view, LOOKUP).value.value == 70

    def test_default_skill_table(self, evaluator):
        assert evaluator.evaluate("急救", flags=LOOKUP_DEFAULTS).value.value == 30
        with pytest.raises(ExprError):
            evaluator.evaluate("急救", flags=LOOKUP)

    def test_stored_value_beats_default(self, evaluator):
        token = evaluator.evaluate("急救", DictContext({"急救": 55}), LOOKUP_DEFAULTS)
        assert token.value.value == 55

    def test_unknown_attribute(self, evaluator):
        with pytest.raises(ExprError, match="不存在的技能"):
            evaluator.evaluate("不存在的技能", flags=LOOKUP_DEFAULTS)

    @pytest.mark.parametrize("text,prefix", [
        ("侦查50", 0),
        ("常規侦查50", 1),
        ("困難侦查50", 2),
        ("极难侦查50", 3),
        ("大成功侦查50", 4),
    ])
    def test_difficulty_prefix(self, evaluator, text, prefix):
        token = evaluator.evaluate(text, flags=LOOKUP)
        assert token.value.value == 50
        assert token.difficulty_prefix == prefix

    def test_prefix_with_stored_value(self, evaluator):
        token = evaluator.evaluate("困難侦查", DictContext({"侦查": 60}), LOOKUP)
        assert token.value.value == 60
        assert token.difficulty_prefix == 2

    def test_attribute_arithmetic(self, evaluator):
        token = evaluator.evaluate("侦查+10", DictContext({"侦查": 60}), LOOKUP)
        assert token.value.value == 70
