import re
import random
from typing import List, Optional, Tuple

from models.types import ParseToken, RollFlags, TypedValue, ValueKind
from utils.coc_data import COC7_DEFAULT_ATTRS, DIFFICULTY_PREFIXES, resolve_alias
from utils.config import GuildConfig
from utils.errors import ExprError, NonIntegerOperand

CANONICAL_ROLL = "d100"

# 骰子: 2d6、d20、d (預設100面)；後面不能緊接字母，避免吃掉 dex 之類的屬性名
DICE_RE = re.compile(r"(\d*)[dD](\d*)(?![^\W\d])")
INT_RE = re.compile(r"\d+")
IDENT_RE = re.compile(r"[^\W\d]+")
STRING_RE = re.compile(r'"([^"]*)"')
WS_RE = re.compile(r"\s*")

ADD_OPS = "+-"
MUL_OPS = "*/"


def truncating_div(a: int, b: int) -> int:
    """向零取整的整數除法"""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class _Cursor:
    """單次求值的讀取狀態"""
    def __init__(self, evaluator: "ExpressionEvaluator", text: str, context, flags: RollFlags):
        self.evaluator = evaluator
        self.text = text
        self.pos = 0
        self.context = context
        self.flags = flags
        self.details: List[str] = []
        self.prefix = 0
        self.reason: Optional[str] = None

    def skip_ws(self):
        self.pos = WS_RE.match(self.text, self.pos).end()

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def expr(self) -> Optional[TypedValue]:
        left = self.term()
        if left is None:
            return None
        return self._binary_tail(left, ADD_OPS, self.term)

    def term(self) -> Optional[TypedValue]:
        left = self.unary()
        if left is None:
            return None
        return self._binary_tail(left, MUL_OPS, self.unary)

    def _binary_tail(self, left: TypedValue, ops: str, operand) -> TypedValue:
        while True:
            # 只有後面接著運算符時才吞掉空白
            saved = (self.pos, len(self.details), self.prefix)
            self.skip_ws()
            op = self.peek()
            if not op or op not in ops:
                self._restore(saved)
                return left
            self.pos += 1
            self.skip_ws()
            right = operand()
            if right is None or not left.is_integer or not right.is_integer:
                if right is not None:
                    self.reason = "非整數的值不能參與運算"
                self._restore(saved)
                return left
            if op == "/" and right.value == 0:
                # 1/0 在 sc 中是合法寫法，保留文本但結果不是整數
                left = TypedValue("NaN", ValueKind.OTHER)
                continue
            left = TypedValue(self._apply(op, left.value, right.value))

    def _restore(self, saved: Tuple[int, int, int]):
        self.pos, n_details, self.prefix = saved
        del self.details[n_details:]

    @staticmethod
    def _apply(op: str, a: int, b: int) -> int:
        if op == "+":
            return a + b
        if op == "-":
            return a - b
        if op == "*":
            return a * b
        return truncating_div(a, b)

    def unary(self) -> Optional[TypedValue]:
        if self.peek() == "-":
            saved = (self.pos, len(self.details), self.prefix)
            self.pos += 1
            self.skip_ws()
            operand = self.unary()
            if operand is None or not operand.is_integer:
                self._restore(saved)
                return None
            return TypedValue(-operand.value)
        return self.primary()

    def primary(self) -> Optional[TypedValue]:
        if self.peek() == "(":
            saved = (self.pos, len(self.details), self.prefix)
            self.pos += 1
            self.skip_ws()
            inner = self.expr()
            self.skip_ws()
            if inner is None or self.peek() != ")":
                self._restore(saved)
                return None
            self.pos += 1
            return inner

        m = STRING_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()
            return TypedValue(m.group(1), ValueKind.OTHER)

        m = DICE_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()
            count = int(m.group(1)) if m.group(1) else 1
            sides = int(m.group(2)) if m.group(2) else 100
            return TypedValue(self.roll(count, sides))

        m = INT_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()
            return TypedValue(int(m.group()))

        m = IDENT_RE.match(self.text, self.pos)
        if m and self.flags.attribute_lookup:
            return self.attribute(m)

        if self.reason is None:
            self.reason = "無法識別的內容"
        return None

    def roll(self, count: int, sides: int) -> int:
        rules = self.evaluator
        if count == 0:
            raise ExprError("骰子數量必須至少為1")
        if count > rules.max_dice_count:
            raise ExprError(f"骰子數量過多 (最多 {rules.max_dice_count})")
        if sides < 2:
            raise ExprError("骰子面數必須至少為2")
        if sides > rules.max_dice_sides:
            raise ExprError(f"骰子面數過多 (最多 {rules.max_dice_sides})")

        if self.flags.worst_case:
            rolls = [sides] * count
        else:
            rolls = [rules.rng.randint(1, sides) for _ in range(count)]
        total = sum(rolls)

        if count == 1:
            self.details.append(f"{count}d{sides}={total}")
        else:
            rolls_str = "+".join(map(str, rolls))
            self.details.append(f"{count}d{sides}=[{rolls_str}]={total}")
        return total

    def attribute(self, m) -> Optional[TypedValue]:
        name = m.group()
        prefix = 0
        for word, level in DIFFICULTY_PREFIXES.items():
            if name.startswith(word) and len(name) > len(word):
                if level > prefix:
                    prefix = level
                    stripped = name[len(word):]
        if prefix:
            name = stripped

        end = m.end()
        inline = INT_RE.match(self.text, end)
        if inline:
            # 侦查50: 直接使用給出的數值
            self.pos = inline.end()
            self.prefix = max(self.prefix, prefix)
            return TypedValue(int(inline.group()))

        value = None
        if self.context is not None:
            stored, exists = self.context.get(name)
            if exists:
                value = stored
        if value is None and self.flags.default_attributes:
            value = COC7_DEFAULT_ATTRS.get(resolve_alias(name))
        if value is None:
            self.reason = f"未找到屬性 {name}"
            return None

        self.pos = end
        self.prefix = max(self.prefix, prefix)
        return TypedValue(value)


class ExpressionEvaluator:
    """
    擲骰/算術表達式求值器
    讀取輸入中最長的合法前綴，返回值、讀取的文本和剩餘文本
    """
    def __init__(self, rng: Optional[random.Random] = None,
                 max_dice_count: int = 50, max_dice_sides: int = 1000):
        self.rng = rng or random.Random()
        self.max_dice_count = max_dice_count
        self.max_dice_sides = max_dice_sides

    @classmethod
    def from_rules(cls, rules: GuildConfig, rng: Optional[random.Random] = None) -> "ExpressionEvaluator":
        return cls(rng=rng, max_dice_count=rules.dnd_max_dice_count,
                   max_dice_sides=rules.dnd_max_dice_sides)

    def evaluate(self, text: str, context=None, flags: Optional[RollFlags] = None) -> ParseToken:
        """
        求值 text 的最長合法前綴
        matched_text 一定是 text 的前綴，remainder_text 不會自動去掉分隔符
        """
        cursor = _Cursor(self, text, context, flags or RollFlags())
        cursor.skip_ws()
        value = cursor.expr()
        if value is None:
            raise ExprError(f"{cursor.reason or '無效的表達式'}: {text.strip()}")

        return ParseToken(
            matched_text=text[:cursor.pos],
            remainder_text=text[cursor.pos:],
            value=value,
            detail=", ".join(cursor.details),
            difficulty_prefix=cursor.prefix,
        )

    def evaluate_all(self, text: str, context=None, flags: Optional[RollFlags] = None) -> ParseToken:
        """求值整段文本，有剩餘內容時視為錯誤"""
        token = self.evaluate(text, context, flags)
        if token.remainder_text.strip():
            raise ExprError(f"表達式後有無法識別的內容: {token.remainder_text.strip()}")
        return token

    def evaluate_int(self, text: str, context=None, flags: Optional[RollFlags] = None) -> Tuple[int, ParseToken]:
        """求值整段文本並要求結果為整數"""
        token = self.evaluate_all(text, context, flags)
        if token.value_kind is not ValueKind.INTEGER:
            raise NonIntegerOperand(f"表達式的結果不是整數: {text.strip()}")
        return token.value.value, token
