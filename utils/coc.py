from typing import Callable, Dict, Tuple

from models.types import Outcome, RuleVariant


def _rulebook(threshold: int) -> Tuple[int, int]:
    # 不滿50出96-100大失敗，滿50出100大失敗
    return 1, 96 if threshold < 50 else 100


def _wide_critical(threshold: int) -> Tuple[int, int]:
    # 不滿50出1大成功，滿50出1-5大成功
    return 5 if threshold >= 50 else 1, 96 if threshold < 50 else 100


def _strict_bands(threshold: int) -> Tuple[int, int]:
    return 5, 96


def _scaled(threshold: int) -> Tuple[int, int]:
    # 大成功 = min(5, 判定值/10)，大失敗 = min(100, 96+判定值/10)
    return min(5, threshold // 10), min(100, 96 + threshold // 10)


def _narrow_critical(threshold: int) -> Tuple[int, int]:
    return min(2, threshold // 5), 96 if threshold < 50 else 99


# 房規 -> 判定值 => (大成功閾值, 大失敗閾值)
RULE_BOUNDS: Dict[RuleVariant, Callable[[int], Tuple[int, int]]] = {
    RuleVariant.RULEBOOK: _rulebook,
    RuleVariant.WIDE_CRITICAL: _wide_critical,
    RuleVariant.STRICT_BANDS: _strict_bands,
    RuleVariant.FORCED_BANDS: _strict_bands,
    RuleVariant.SCALED: _scaled,
    RuleVariant.NARROW_CRITICAL: _narrow_critical,
}

RANK_NAMES = {
    -2: "COC:判定_大失敗",
    -1: "COC:判定_失敗",
    1: "COC:判定_成功_普通",
    2: "COC:判定_成功_困難",
    3: "COC:判定_成功_極難",
    4: "COC:判定_大成功",
}

REQUIREMENT_NAMES = {
    2: ("COC:判定_必須_困難_成功", "COC:判定_必須_困難_失敗"),
    3: ("COC:判定_必須_極難_成功", "COC:判定_必須_極難_失敗"),
    4: ("COC:判定_必須_大成功_成功", "COC:判定_必須_大成功_失敗"),
}


def rule_bounds(variant: int, threshold: int) -> Tuple[int, int]:
    """
    返回房規下的 (大成功閾值, 大失敗閾值)
    大成功閾值最低為1
    """
    threshold = max(0, threshold)
    critical, fumble = RULE_BOUNDS[RuleVariant(variant)](threshold)
    return max(1, critical), fumble


def classify(variant: int, rolled: int, threshold: int) -> Outcome:
    """
    根據CoC 7e及房規確定成功等級
    返回: -2=大失敗, -1=失敗, 1=普通成功, 2=困難成功, 3=極難成功, 4=大成功
    """
    critical, fumble = rule_bounds(variant, threshold)

    rank = 1 if rolled <= threshold else -1
    if rank == 1:
        if rolled <= threshold // 2:
            rank = 2
        if rolled <= threshold // 5:
            rank = 3
        if rolled <= critical:
            rank = 4
    elif rolled >= fumble:
        rank = -2

    # 房規3的改判：不論成敗，強行大成功或大失敗
    if variant == RuleVariant.FORCED_BANDS:
        if rolled <= critical:
            rank = 4
        if rolled >= fumble:
            rank = -2

    return Outcome(success_rank=rank, critical_threshold=critical, fumble_threshold=fumble)


def classify_with_requirement(rank: int, requirement: int) -> str:
    """
    有難度需求(困難/極難/大成功)時只分通過/不通過，否則返回六級結果
    """
    if requirement > 1:
        passed, failed = REQUIREMENT_NAMES[min(requirement, 4)]
        return passed if rank >= requirement else failed
    return RANK_NAMES[rank]


def required_threshold(threshold: int, requirement: int, critical: int) -> int:
    """難度需求下實際需要骰到的值"""
    if requirement == 2:
        return threshold // 2
    if requirement == 3:
        return threshold // 5
    if requirement == 4:
        return critical
    return threshold


def is_growth_success(outcome: Outcome, rolled: int) -> bool:
    """成長檢定：檢定失敗或骰出96以上即成長成功"""
    return outcome.success_rank < 0 or rolled > 95
