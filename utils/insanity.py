"""
瘋狂症狀抽取 (.ti/.li)

先擲 1D10 決定症狀，症狀文本中的 {1d10} 等內嵌表達式當場求值；
抽到 9 (恐懼) 或 10 (躁狂) 時再擲 1D100 查對應的症狀表。
"""

import re
from dataclasses import dataclass
from typing import Optional

from utils.coc_data import SUMMARY_SYMPTOMS, SYMPTOM_TABLES, TEMPORARY_SYMPTOMS
from utils.dice import ExpressionEvaluator
from utils.templates import TextTemplates

# {1d10}，不含 {$t...} 模板變量
INLINE_EXPR_RE = re.compile(r"\{([^{}$]+)\}")


@dataclass
class InsanityRoll:
    """一次瘋狂症狀抽取"""
    symptom_roll: int
    symptom: str
    text: str = ""
    table_roll: Optional[int] = None
    table_entry: Optional[str] = None


def expand_inline(text: str, evaluator: ExpressionEvaluator) -> str:
    """把文本中的內嵌表達式換成求值結果"""
    return INLINE_EXPR_RE.sub(lambda m: str(evaluator.evaluate_int(m.group(1))[0]), text)


def roll_insanity(evaluator: ExpressionEvaluator, player: str, summary: bool = False,
                  templates: Optional[TextTemplates] = None) -> InsanityRoll:
    """抽取即時症狀，summary 為 True 時抽取總結症狀"""
    templates = templates or TextTemplates()
    symptoms = SUMMARY_SYMPTOMS if summary else TEMPORARY_SYMPTOMS

    num, _ = evaluator.evaluate_int("1d10")
    result = InsanityRoll(symptom_roll=num, symptom=expand_inline(symptoms[num - 1], evaluator))

    table_text = ""
    table = SYMPTOM_TABLES.get(num)
    if table is not None:
        result.table_roll, _ = evaluator.evaluate_int("1d100")
        result.table_entry = table[result.table_roll]
        table_text = templates.render("COC:瘋狂_症狀表", {
            "$t骰點": result.table_roll,
            "$t症狀": result.table_entry,
        })

    key = "COC:瘋狂_總結症狀" if summary else "COC:瘋狂_即時症狀"
    result.text = templates.render(key, {
        "$t玩家": player,
        "$t骰點": num,
        "$t症狀": result.symptom,
        "$t症狀表": table_text,
    })
    return result
