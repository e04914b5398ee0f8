"""
檢定指令解析

反覆調用表達式求值器，每讀一段就看剩餘文本，決定這段是檢定值、判定值還是成功/失敗公式。
兩種文法：
    .ra (<檢定表達式，預設d100>) <屬性表達式>
    .sc (<檢定表達式，預設d100>) (<成功時扣除>/)<失敗時扣除> (<理智值>)
解析失敗時返回帶錯誤類型的 ParseResult，不拋出異常，也不修改任何屬性。
"""

import re
from typing import Optional, Tuple

from models.types import (
    CheckSpec,
    DualFormulaSpec,
    ParseErrorKind,
    ParseResult,
    ParseToken,
    RollFlags,
)
from utils.dice import CANONICAL_ROLL, ExpressionEvaluator
from utils.errors import ExprError
from utils.logger import get_logger

DIVIDER = "/"
INTEGER_RE = re.compile(r"[+-]?\d+")

CHECK_FLAGS = RollFlags(attribute_lookup=True, default_attributes=True)
# 雙公式只在這裡驗證格式，真正的值由調用方另行求值，所以不消耗隨機數
DUAL_FLAGS = RollFlags(worst_case=True)


def consume_role(evaluator: ExpressionEvaluator, text: str, context=None,
                 flags: Optional[RollFlags] = None) -> ParseToken:
    """讀取一段表達式，失敗時返回帶 error 的 token"""
    try:
        return evaluator.evaluate(text, context, flags)
    except ExprError as e:
        return ParseToken(matched_text="", remainder_text=text, error=str(e))


def split_divider(text: str) -> Optional[Tuple[str, str]]:
    """在最外層第一個 / 處切開，括號內的 / 不算"""
    depth = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == DIVIDER and depth == 0:
            return text[:i], text[i + 1:]
    return None


def parse_check(text: str, evaluator: ExpressionEvaluator, context=None,
                default_threshold: Optional[str] = None) -> ParseResult:
    """
    解析單一判定值文法

    只有一個表達式時，若 default_threshold 指向的屬性存在，表達式作為檢定值；
    否則表達式作為判定值，檢定值使用 d100。兩種情況都記錄 swapped。
    """
    text = text.strip()
    logger = get_logger()

    first = consume_role(evaluator, text, context, CHECK_FLAGS)
    if not text or not first.ok:
        logger.debug(f"檢定解析失敗(無法識別): {text!r} {first.error}")
        return ParseResult.failure(ParseErrorKind.UNRECOGNIZED, text, first.error)

    second = None
    rest = first.remainder_text.strip()
    if rest:
        second = consume_role(evaluator, rest, context, CHECK_FLAGS)
        if not second.ok or second.remainder_text.strip():
            leftover = second.remainder_text.strip() if second.ok else rest
            logger.debug(f"檢定解析失敗(多餘內容): {text!r} -> {leftover!r}")
            return ParseResult.failure(ParseErrorKind.TRAILING_GARBAGE, leftover, second.error)

    swapped = second is None
    if second is not None:
        check, threshold = first, second
    else:
        default = None
        if default_threshold:
            default = consume_role(evaluator, default_threshold, context,
                                   RollFlags(attribute_lookup=True))
            if not default.ok or default.remainder_text.strip():
                default = None

        if default is not None:
            check, threshold = first, default
        else:
            # 讀完了，剛才讀到的其實是屬性表達式
            check = consume_role(evaluator, CANONICAL_ROLL, context, CHECK_FLAGS)
            threshold = first

    requirement = max(first.difficulty_prefix,
                      second.difficulty_prefix if second is not None else 0)

    order = [first.matched_text.strip()]
    if second is not None:
        order.append(second.matched_text.strip())

    return ParseResult.success(CheckSpec(
        check_expr_text=check.matched_text.strip(),
        check_value=check.value,
        threshold_expr_text=threshold.matched_text.strip(),
        threshold_value=threshold.value,
        difficulty_requirement=requirement,
        swapped=swapped,
        check_detail=check.detail,
        threshold_detail=threshold.detail,
        original_order=order,
    ))


def parse_dual(text: str, evaluator: ExpressionEvaluator, context=None,
               default_success: str = "0") -> ParseResult:
    """
    解析雙公式文法

    1/10       -> 檢定 d100，成功 1，失敗 10
    1d6        -> 檢定 d100，成功 default_success，失敗 1d6
    20 1/10    -> 檢定 20，成功 1，失敗 10
    結尾的整數視為指定的判定值。
    """
    text = text.strip()
    logger = get_logger()

    first = consume_role(evaluator, text, context, DUAL_FLAGS)
    if not text or not first.ok:
        logger.debug(f"雙公式解析失敗(無法識別): {text!r}")
        return ParseResult.failure(ParseErrorKind.UNRECOGNIZED, text, first.error)

    condition = CANONICAL_ROLL
    rest = first.remainder_text
    pair = split_divider(first.matched_text)

    if pair is None:
        following = consume_role(evaluator, rest, context, DUAL_FLAGS) if rest.strip() else None
        if following is not None and following.ok and split_divider(following.matched_text):
            # 20 1/10: 第一段是檢定表達式
            condition = first.matched_text.strip()
            pair = split_divider(following.matched_text)
            rest = following.remainder_text
        elif following is not None and (
                following.remainder_text.lstrip().startswith(DIVIDER) if following.ok
                else DIVIDER in rest):
            # 20 1/ 或 20 x/1：有分隔符但其中一側無法求值
            logger.debug(f"雙公式解析失敗(分隔符): {text!r}")
            return ParseResult.failure(ParseErrorKind.DIVIDER_MISMATCH, rest.strip(), following.error)
        else:
            pair = (default_success, first.matched_text)

    success, fail = (side.strip() for side in pair)
    for side in (success, fail):
        token = consume_role(evaluator, side, context, DUAL_FLAGS)
        if not side or not token.ok or token.remainder_text.strip():
            logger.debug(f"雙公式解析失敗(分隔符兩側): {text!r} -> {side!r}")
            return ParseResult.failure(ParseErrorKind.DIVIDER_MISMATCH, side or text, token.error)

    threshold_override = None
    leftover = rest.strip()
    if leftover:
        if not INTEGER_RE.fullmatch(leftover):
            logger.debug(f"雙公式解析失敗(多餘內容): {text!r} -> {leftover!r}")
            return ParseResult.failure(ParseErrorKind.TRAILING_GARBAGE, leftover)
        threshold_override = int(leftover)

    return ParseResult.success(DualFormulaSpec(
        condition_expr_text=condition,
        success_formula_text=success,
        fail_formula_text=fail,
        threshold_override=threshold_override,
    ))
