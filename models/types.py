from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, List, Optional


class ValueKind(Enum):
    """表達式值的類型"""
    INTEGER = "int"
    OTHER = "other"


@dataclass
class TypedValue:
    """帶類型標記的值"""
    value: Any
    kind: ValueKind = ValueKind.INTEGER

    @property
    def is_integer(self) -> bool:
        return self.kind is ValueKind.INTEGER


@dataclass
class RollFlags:
    """求值旗標"""
    attribute_lookup: bool = False  # 裸識別字視為屬性名
    default_attributes: bool = False  # 未錄入的技能使用預設值
    worst_case: bool = False  # 所有骰子取最大面


@dataclass
class ParseToken:
    """一次求值所讀取的片段"""
    matched_text: str
    remainder_text: str
    value: Optional[TypedValue] = None
    detail: str = ""
    difficulty_prefix: int = 0
    error: Optional[str] = None

    @property
    def value_kind(self) -> Optional[ValueKind]:
        return self.value.kind if self.value else None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CheckSpec:
    """檢定指令：檢定表達式 vs 屬性表達式"""
    check_expr_text: str
    check_value: TypedValue
    threshold_expr_text: str
    threshold_value: TypedValue
    difficulty_requirement: int = 0
    swapped: bool = False
    check_detail: str = ""
    threshold_detail: str = ""
    # 原輸入中的表達式順序，供錯誤提示使用
    original_order: List[str] = field(default_factory=list)


@dataclass
class DualFormulaSpec:
    """成功/失敗雙公式指令，如 .sc 1/1d6"""
    condition_expr_text: str
    success_formula_text: str
    fail_formula_text: str
    threshold_override: Optional[int] = None


class RuleVariant(IntEnum):
    """CoC 房規 (0-5)"""
    RULEBOOK = 0
    WIDE_CRITICAL = 1
    STRICT_BANDS = 2
    FORCED_BANDS = 3
    SCALED = 4
    NARROW_CRITICAL = 5


@dataclass(frozen=True)
class Outcome:
    """判定結果"""
    success_rank: int  # -2, -1, 1, 2, 3, 4
    critical_threshold: int
    fumble_threshold: int

    @property
    def is_success(self) -> bool:
        return self.success_rank > 0


class ParseErrorKind(Enum):
    """解析失敗類型"""
    UNRECOGNIZED = "unrecognized"
    DIVIDER_MISMATCH = "divider_mismatch"
    TRAILING_GARBAGE = "trailing_garbage"


@dataclass
class ParseResult:
    """解析結果，成功時帶 spec，失敗時帶錯誤類型"""
    spec: Any = None
    error_kind: Optional[ParseErrorKind] = None
    error_text: str = ""
    # 求值器給出的具體原因，如骰子面數過多
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, spec) -> "ParseResult":
        return cls(spec=spec)

    @classmethod
    def failure(cls, kind: ParseErrorKind, text: str, reason: Optional[str] = None) -> "ParseResult":
        return cls(error_kind=kind, error_text=text, reason=reason)
