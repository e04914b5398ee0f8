from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from utils.dice import ExpressionEvaluator
from utils.templates import TextTemplates

# 擲骰順序與公式，幸運最後擲且不計入總和
CHARACTER_STATS: List[Tuple[str, str]] = [
    ("力量", "3d6*5"),
    ("敏捷", "3d6*5"),
    ("意志", "3d6*5"),
    ("体质", "3d6*5"),
    ("外貌", "3d6*5"),
    ("教育", "(2d6+6)*5"),
    ("体型", "(2d6+6)*5"),
    ("智力", "(2d6+6)*5"),
    ("幸运", "3d6*5"),
]
LUCK = "幸运"
MAX_CHARACTERS = 10


@dataclass
class Character:
    """一組七版人物屬性"""
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def hp(self) -> int:
        return (self.stats["体质"] + self.stats["体型"]) // 10

    @property
    def total(self) -> int:
        return sum(v for k, v in self.stats.items() if k != LUCK)

    @property
    def total_with_luck(self) -> int:
        return sum(self.stats.values())

    def bindings(self) -> Dict[str, int]:
        values = {f"$t{name}": value for name, value in self.stats.items()}
        values.update({
            "$t生命值": self.hp,
            "$t總和": self.total,
            "$t含幸運總和": self.total_with_luck,
        })
        return values


def roll_character(evaluator: ExpressionEvaluator) -> Character:
    character = Character()
    for name, formula in CHARACTER_STATS:
        character.stats[name], _ = evaluator.evaluate_int(formula)
    return character


def generate_characters(evaluator: ExpressionEvaluator, player: str, count: Optional[int] = None,
                        templates: Optional[TextTemplates] = None) -> Tuple[List[Character], str]:
    """
    人物作成 (.coc)，返回 (各組屬性, 回覆文本)
    數量預設1，最多10組
    """
    templates = templates or TextTemplates()
    count = min(max(count or 1, 1), MAX_CHARACTERS)

    characters = [roll_character(evaluator) for _ in range(count)]
    blocks = [templates.render("COC:制卡_單組", c.bindings()) for c in characters]
    text = templates.render("COC:制卡", {
        "$t玩家": player,
        "$t制卡結果": "\n\n".join(blocks),
    })
    return characters, text
