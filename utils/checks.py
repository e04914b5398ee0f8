import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.types import Outcome, ParseErrorKind, RollFlags
from utils.check_parser import parse_check, parse_dual
from utils.coc import (
    RANK_NAMES,
    classify,
    classify_with_requirement,
    is_growth_success,
    required_threshold,
)
from utils.coc_data import SANITY_ATTRIBUTE
from utils.config import GuildConfig
from utils.dice import CANONICAL_ROLL, ExpressionEvaluator
from utils.errors import AttributeNotFound, CheckParseError, NonIntegerOperand, TooManyRounds
from utils.logger import get_logger
from utils.templates import TextTemplates

# 3#侦查 / 3# 1/1d6
ROUNDS_RE = re.compile(r"^\s*(\d+)\s*#\s*(.*)$", re.S)
# .en 侦查(50)(+(失敗成長/)成功成長)
GROWTH_RE = re.compile(r"^\s*([^\W\d]+)\s*(\d+)?\s*(?:\+(?:([^/]+)/)?\s*(.+))?$")

SANITY_REMARKS = {
    -2: "COC:理智檢定_附加語_大失敗",
    -1: "COC:理智檢定_附加語_失敗",
    1: "COC:理智檢定_附加語_成功",
    2: "COC:理智檢定_附加語_成功",
    3: "COC:理智檢定_附加語_成功",
    4: "COC:理智檢定_附加語_大成功",
}


def split_rounds(text: str) -> Tuple[int, str]:
    """拆出 N# 前綴，返回 (輪數, 剩餘文本)"""
    match = ROUNDS_RE.match(text)
    if match:
        return max(1, int(match.group(1))), match.group(2)
    return 1, text


@dataclass
class Mutation:
    """一次屬性變化"""
    old_value: int
    new_value: int
    delta: int
    crisis: bool = False


def mutate_attribute(old_value: int, delta: int, subtract: bool = True) -> Mutation:
    """
    扣除(或增加) delta，結果最低為0
    新值為0或變化量達到5時標記 crisis，僅用於提示
    """
    new_value = old_value - delta if subtract else old_value + delta
    new_value = max(0, new_value)
    crisis = new_value == 0 or abs(delta) >= 5
    return Mutation(old_value=old_value, new_value=new_value, delta=delta, crisis=crisis)


@dataclass
class RoundResult:
    """單輪結果"""
    outcome: Outcome
    bindings: Dict[str, Any]
    text: str
    mutation: Optional[Mutation] = None


@dataclass
class CheckReport:
    """整條指令的結果"""
    rounds: List[RoundResult]
    public_text: str
    private_text: Optional[str] = None
    bindings: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_secret(self) -> bool:
        return self.private_text is not None


class ResultBinder:
    """
    把解析和判定的結果綁定成模板變量，處理多輪檢定、暗中檢定和屬性變化
    """
    def __init__(self, evaluator: ExpressionEvaluator, rules: GuildConfig,
                 player_name: str, view=None):
        self.evaluator = evaluator
        self.rules = rules
        self.player_name = player_name
        self.view = view
        self.templates = TextTemplates(rules.text_templates)
        self.logger = get_logger()

    def _base_bindings(self) -> Dict[str, Any]:
        return {"$t玩家": self.player_name}

    def _rounds(self, text: str) -> Tuple[int, str]:
        times, rest = split_rounds(text)
        if times > self.rules.coc_max_check_rounds:
            limit = self.rules.coc_max_check_rounds
            raise TooManyRounds(times, limit, self.templates.render(
                "COC:檢定_輪數過多警告", {"$t上限": limit}))
        return times, rest

    def _eval_int(self, text: str, flags: Optional[RollFlags] = None):
        return self.evaluator.evaluate_int(text, self.view, flags)

    def _finish(self, rounds: List[RoundResult], bindings: Dict[str, Any],
                single_key: str, multi_key: str, secret: bool) -> CheckReport:
        if len(rounds) > 1:
            bindings["$t次數"] = len(rounds)
            bindings["$t結果文本"] = "\n".join(r.text for r in rounds)
            text = self.templates.render(multi_key, bindings)
        else:
            bindings["$t結果文本"] = rounds[0].text
            text = self.templates.render(single_key, bindings)

        if secret:
            public = self.templates.render("COC:檢定_暗中_群內", bindings)
            private = self.templates.get("COC:檢定_暗中_私聊_前綴") + text
            return CheckReport(rounds=rounds, public_text=public, private_text=private, bindings=bindings)
        return CheckReport(rounds=rounds, public_text=text, bindings=bindings)

    def check(self, text: str, rule_index: Optional[int] = None, secret: bool = False,
              default_attribute: Optional[str] = None) -> CheckReport:
        """屬性檢定 (.ra/.rc/.rah/.rch)"""
        times, text = self._rounds(text)
        rule = self.rules.coc_rule_index if rule_index is None else rule_index

        bindings = self._base_bindings()
        rounds = []
        for _ in range(times):
            rounds.append(self._check_round(text, rule, default_attribute, bindings))

        self.logger.info(
            f"{self.player_name} 檢定 {text.strip()!r} x{times}: "
            f"{[r.outcome.success_rank for r in rounds]}"
        )
        return self._finish(rounds, bindings, "COC:檢定", "COC:檢定_多輪", secret)

    def _check_round(self, text: str, rule: int, default_attribute: Optional[str],
                     bindings: Dict[str, Any]) -> RoundResult:
        result = parse_check(text, self.evaluator, self.view, default_attribute)
        if not result.ok:
            raise CheckParseError(result.error_kind, result.error_text, result.reason)
        spec = result.spec

        if not spec.check_value.is_integer or not spec.threshold_value.is_integer:
            raise NonIntegerOperand("你輸入的表達式並非整數: " + " ".join(spec.original_order))

        rolled = spec.check_value.value
        threshold = spec.threshold_value.value
        outcome = classify(rule, rolled, threshold)
        result_name = classify_with_requirement(outcome.success_rank, spec.difficulty_requirement)

        # 屬性表達式含骰子時 (如 1d6*10) 一併顯示其過程
        steps = ", ".join(d for d in (spec.check_detail, spec.threshold_detail) if d)
        detail = f", ({steps})" if steps else ""
        bindings.update({
            "$tD100": rolled,
            "$t判定值": required_threshold(threshold, spec.difficulty_requirement,
                                         outcome.critical_threshold),
            "$t判定結果": self.templates.get(result_name),
            "$t檢定表達式文本": spec.check_expr_text,
            "$t屬性表達式文本": spec.threshold_expr_text,
            "$t檢定計算過程": detail,
            "$t計算過程": detail,
        })
        round_bindings = dict(bindings)
        return RoundResult(
            outcome=outcome,
            bindings=round_bindings,
            text=self.templates.render("COC:檢定_單項結果文本", round_bindings),
        )

    def sanity_check(self, text: str, secret: bool = False) -> CheckReport:
        """
        理智檢定 (.sc)
        多輪時每一輪都在上一輪扣除後的理智值上進行，全部完成後才寫回
        """
        times, text = self._rounds(text)
        result = parse_dual(text, self.evaluator, self.view, self.rules.coc_sanity_default_success)
        if not result.ok:
            raise CheckParseError(result.error_kind, result.error_text, result.reason)
        spec = result.spec

        bindings = self._base_bindings()
        rounds = []
        with self.view.lock():
            if spec.threshold_override is not None:
                current = spec.threshold_override
            else:
                current, exists = self.view.get(SANITY_ATTRIBUTE)
                if not exists:
                    raise AttributeNotFound(SANITY_ATTRIBUTE)

            for _ in range(times):
                round_result = self._sanity_round(spec, current, bindings)
                current = round_result.mutation.new_value
                rounds.append(round_result)

            self.view.set(SANITY_ATTRIBUTE, current)

        self.logger.info(
            f"{self.player_name} 理智檢定 {text.strip()!r} x{times}: "
            f"{rounds[0].mutation.old_value} -> {current}"
        )
        return self._finish(rounds, bindings, "COC:理智檢定", "COC:理智檢定_多輪", secret)

    def _sanity_round(self, spec, san: int, bindings: Dict[str, Any]) -> RoundResult:
        rolled, cond_token = self._eval_int(spec.condition_expr_text)
        outcome = classify(self.rules.coc_rule_index, rolled, san)

        if outcome.is_success:
            formula = spec.success_formula_text
            delta, _ = self._eval_int(formula)
        else:
            # 大失敗時失敗扣除取最大值
            formula = spec.fail_formula_text
            delta, _ = self._eval_int(formula, RollFlags(worst_case=outcome.success_rank == -2))

        mutation = mutate_attribute(san, delta, subtract=True)

        crisis_tip = ""
        if mutation.new_value == 0:
            crisis_tip = self.templates.get("COC:提示_永久瘋狂")
        elif mutation.crisis:
            crisis_tip = self.templates.get("COC:提示_臨時瘋狂")

        bindings.update({
            "$tD100": rolled,
            "$t判定值": san,
            "$t判定結果": self.templates.get(RANK_NAMES[outcome.success_rank]),
            "$t檢定表達式文本": spec.condition_expr_text,
            "$t屬性表達式文本": "理智",
            "$t檢定計算過程": f", ({cond_token.detail})" if cond_token.detail else "",
            "$t舊值": mutation.old_value,
            "$t新值": mutation.new_value,
            "$t表達式文本": formula,
            "$t表達式值": delta,
            "$t提示_角色瘋狂": crisis_tip,
            "$t附加語": self.templates.get(SANITY_REMARKS[outcome.success_rank]),
        })
        round_bindings = dict(bindings)
        return RoundResult(
            outcome=outcome,
            bindings=round_bindings,
            text=self.templates.render("COC:理智檢定_單項結果文本", round_bindings).rstrip(),
            mutation=mutation,
        )

    def growth_check(self, text: str) -> CheckReport:
        """技能成長 (.en 技能名(技能值)(+(失敗成長/)成功成長))"""
        match = GROWTH_RE.match(text)
        if not match:
            raise CheckParseError(ParseErrorKind.UNRECOGNIZED, text.strip())
        name, inline_value, fail_expr, success_expr = match.groups()
        canonical = self.view.canonical(name)

        bindings = self._base_bindings()
        bindings["$t技能"] = canonical

        with self.view.lock():
            if inline_value:
                skill = int(inline_value)
            else:
                skill, exists = self.view.get(canonical)
                if not exists:
                    raise AttributeNotFound(canonical)

            rolled, _ = self._eval_int(CANONICAL_ROLL)
            outcome = classify(self.rules.coc_rule_index, rolled, skill)
            grew = is_growth_success(outcome, rolled)

            bindings.update({
                "$tD100": rolled,
                "$t判定值": skill,
                "$t判定結果": "成功" if grew else "失敗",
            })

            formula = (success_expr or self.rules.coc_growth_default_success) if grew else fail_expr
            mutation = None
            if formula:
                delta, _ = self._eval_int(formula.strip())
                mutation = mutate_attribute(skill, delta, subtract=False)
                self.view.set(canonical, mutation.new_value)
                bindings.update({
                    "$t表達式文本": formula.strip(),
                    "$t舊值": mutation.old_value,
                    "$t增量": delta,
                    "$t新值": mutation.new_value,
                })
                key = "COC:技能成長_結果_成功" if grew else "COC:技能成長_結果_失敗變更"
            else:
                key = "COC:技能成長_結果_失敗"

        bindings["$t結果文本"] = self.templates.render(key, bindings)
        text = self.templates.render("COC:技能成長", bindings)
        self.logger.info(f"{self.player_name} 成長檢定 {canonical}: {rolled}/{skill} -> {bool(grew)}")
        return CheckReport(
            rounds=[RoundResult(outcome=outcome, bindings=dict(bindings), text=text, mutation=mutation)],
            public_text=text,
            bindings=bindings,
        )
