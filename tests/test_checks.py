"""
Tests for ResultBinder: batched checks, secret delivery, sanity and growth.
"""

import pytest

from models.types import ParseErrorKind
from utils.checks import ResultBinder, mutate_attribute, split_rounds
from utils.errors import (
    AttributeNotFound,
    CheckParseError,
    NonIntegerOperand,
    TooManyRounds,
)


@pytest.fixture
def binder(evaluator, rules, view):
    return ResultBinder(evaluator, rules, "調查員", view)


class TestHelpers:

    @pytest.mark.parametrize("text,expected", [
        ("3#侦查", (3, "侦查")),
        ("2 # 1/1d6", (2, "1/1d6")),
        ("0#侦查", (1, "侦查")),
        ("侦查", (1, "侦查")),
    ])
    def test_split_rounds(self, text, expected):
        assert split_rounds(text) == expected

    def test_mutation_subtracts(self):
        mutation = mutate_attribute(10, 3)
        assert mutation.new_value == 7
        assert not mutation.crisis

    def test_mutation_floor_at_zero(self):
        mutation = mutate_attribute(3, 4)
        assert mutation.new_value == 0
        assert mutation.crisis

    def test_mutation_large_loss_is_crisis(self):
        mutation = mutate_attribute(50, 5)
        assert mutation.new_value == 45
        assert mutation.crisis

    def test_mutation_adds(self):
        mutation = mutate_attribute(50, 2, subtract=False)
        assert mutation.new_value == 52
        assert not mutation.crisis


class TestCheck:
    """Tests for ra/rc style checks."""

    def test_single_round(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(42)

        report = binder.check("侦查")

        assert not report.is_secret
        assert report.rounds[0].outcome.success_rank == 1
        assert report.public_text == "<調查員>的「侦查」檢定結果為: d100=42/60, (1d100=42) 成功"

    def test_batch_rolls_each_round(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(10, 50, 99)

        report = binder.check("3#侦查")

        assert [r.outcome.success_rank for r in report.rounds] == [3, 1, -1]
        assert report.bindings["$t次數"] == 3
        assert report.public_text.startswith("對<調查員>的「侦查」進行了3次檢定")
        assert len(report.public_text.splitlines()) == 4

    def test_too_many_rounds_before_any_roll(self, binder, view, rng):
        view.set("侦查", 60)
        with pytest.raises(TooManyRounds) as excinfo:
            binder.check("13#侦查")
        assert excinfo.value.limit == 12
        assert rng.calls == []
        assert str(excinfo.value) == "你真的需要這麼多輪檢定嗎？最多 12 輪"

    def test_round_limit_from_config(self, evaluator, rules, view):
        rules.coc_max_check_rounds = 2
        binder = ResultBinder(evaluator, rules, "調查員", view)
        with pytest.raises(TooManyRounds):
            binder.check("3#50 60")

    def test_secret(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(42)

        report = binder.check("侦查", secret=True)

        assert report.is_secret
        assert report.public_text == "<調查員>悄悄進行了一項侦查檢定"
        assert report.private_text.startswith("來自頻道的暗中檢定:\n")
        assert "d100=42/60" in report.private_text

    def test_difficulty_requirement(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(25)

        report = binder.check("困難侦查")

        assert report.bindings["$t判定值"] == 30
        assert report.bindings["$t判定結果"] == "成功了！這要費點力氣"

    def test_rule_override(self, binder, rules, view, rng):
        rules.coc_rule_index = 3
        rng.push(97, 97)
        assert binder.check("99").rounds[0].outcome.success_rank == -2
        assert binder.check("99", rule_index=0).rounds[0].outcome.success_rank == 1

    def test_default_attribute(self, binder, view, rng):
        view.set("侦查", 60)
        report = binder.check("50", default_attribute="侦查")
        assert report.public_text.endswith("50=50/60 成功")
        assert rng.calls == []

    def test_guild_template_override(self, evaluator, rules, view, rng):
        rules.text_templates = {"COC:判定_成功_普通": "過了"}
        binder = ResultBinder(evaluator, rules, "調查員", view)
        rng.push(42)
        assert binder.check("60").public_text.endswith("過了")

    def test_non_integer(self, binder, rng):
        rng.push(50)
        with pytest.raises(NonIntegerOperand):
            binder.check('"abc"')

    def test_parse_error(self, binder, view):
        view.set("侦查", 60)
        with pytest.raises(CheckParseError) as excinfo:
            binder.check("侦查 ???")
        assert excinfo.value.kind is ParseErrorKind.TRAILING_GARBAGE

    def test_dice_limit_reason_in_message(self, binder):
        with pytest.raises(CheckParseError) as excinfo:
            binder.check("d2000 50")
        assert excinfo.value.reason == "骰子面數過多 (最多 1000)"
        assert "骰子面數過多" in str(excinfo.value)

    def test_rolled_threshold_detail_shown(self, binder, rng):
        rng.push(30, 4)
        report = binder.check("d50 1d6*10")
        assert report.bindings["$t判定值"] == 40
        assert report.public_text.endswith("d50=30/40, (1d50=30, 1d6=4) 成功")


class TestSanityCheck:
    """Tests for sc."""

    def test_rounds_chain_mutations(self, binder, view, rng):
        view.set("理智", 60)
        # round 1 success, round 2 failure losing 1d6=4, round 3 success
        rng.push(10, 80, 4, 50)

        report = binder.sanity_check("3# 1/1d6")

        mutations = [r.mutation for r in report.rounds]
        assert [m.old_value for m in mutations] == [60, 59, 55]
        assert [m.new_value for m in mutations] == [59, 55, 54]
        assert view.get("理智") == (54, True)
        assert rng.values == []

    def test_fumble_uses_worst_case(self, binder, view, rng):
        view.set("理智", 40)
        rng.push(99)

        report = binder.sanity_check("0/1d6")

        mutation = report.rounds[0].mutation
        assert report.rounds[0].outcome.success_rank == -2
        assert mutation.delta == 6
        assert mutation.new_value == 34
        assert mutation.crisis
        assert "臨時性瘋狂" in report.public_text

    def test_floor_at_zero(self, binder, view, rng):
        view.set("理智", 3)
        rng.push(90, 8)

        report = binder.sanity_check("0/1d10")

        assert report.rounds[0].mutation.new_value == 0
        assert view.get("san") == (0, True)
        assert "永久瘋狂" in report.public_text

    def test_success_formula(self, binder, view, rng):
        view.set("理智", 60)
        rng.push(30)

        report = binder.sanity_check("1/1d6")

        assert report.rounds[0].mutation.delta == 1
        assert report.bindings["$t表達式文本"] == "1"
        assert view.get("理智") == (59, True)

    def test_threshold_override(self, binder, view, rng):
        rng.push(10)
        binder.sanity_check("1/1d6 50")
        assert view.get("理智") == (49, True)

    def test_missing_sanity(self, binder, rng):
        with pytest.raises(AttributeNotFound):
            binder.sanity_check("1/1d6")
        assert rng.calls == []

    def test_parse_error_leaves_store_untouched(self, binder, view):
        view.set("理智", 60)
        with pytest.raises(CheckParseError) as excinfo:
            binder.sanity_check("1/ ")
        assert excinfo.value.kind is ParseErrorKind.DIVIDER_MISMATCH
        assert view.get("理智") == (60, True)

    def test_too_many_rounds_leaves_store_untouched(self, binder, view, rng):
        view.set("理智", 60)
        with pytest.raises(TooManyRounds):
            binder.sanity_check("13# 1/1d6")
        assert view.get("理智") == (60, True)
        assert rng.calls == []

    def test_secret(self, binder, view, rng):
        view.set("理智", 60)
        rng.push(10)
        report = binder.sanity_check("1/1d6", secret=True)
        assert report.is_secret
        assert "理智變化: 60 ➯ 59" in report.private_text


class TestGrowthCheck:
    """Tests for en."""

    def test_growth_on_failed_check(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(80, 7)

        report = binder.growth_check("侦查")

        assert report.bindings["$t增量"] == 7
        assert view.get("侦查") == (67, True)
        assert "當前為67點" in report.public_text

    def test_no_growth_on_passed_check(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(30)

        report = binder.growth_check("侦查")

        assert view.get("侦查") == (60, True)
        assert "成長失敗" in report.public_text
        assert report.rounds[0].mutation is None

    def test_fail_formula(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(30)
        binder.growth_check("侦查+1/1d10")
        assert view.get("侦查") == (61, True)

    def test_custom_success_formula(self, binder, view, rng):
        view.set("侦查", 60)
        rng.push(99)
        binder.growth_check("偵查+5")
        assert view.get("侦查") == (65, True)

    def test_inline_value(self, binder, view, rng):
        rng.push(95, 5)
        binder.growth_check("侦查30")
        assert view.get("侦查") == (35, True)

    def test_missing_skill(self, binder, rng):
        with pytest.raises(AttributeNotFound):
            binder.growth_check("图书馆使用")
        assert rng.calls == []

    def test_bad_format(self, binder):
        with pytest.raises(CheckParseError):
            binder.growth_check("123")
