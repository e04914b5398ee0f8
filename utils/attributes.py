import re
from typing import Dict, List, Optional

from models.database import AttributeView
from utils.coc_data import ATTRIBUTE_ORDER_TOP
from utils.dice import ExpressionEvaluator
from utils.errors import AttributeNotFound
from utils.logger import get_logger
from utils.templates import TextTemplates

# 力量50 敏捷:60 san=45
ASSIGN_RE = re.compile(r"([^\d\s:=]+?)[:=]?(\d+)")
# 理智-1d6 / hp+=2
MODIFY_RE = re.compile(r"^\s*([^\d\s+\-]+?)\s*([+-])=?\s*(.+)$")


def parse_assignments(text: str) -> Dict[str, int]:
    """讀取 名稱數值 形式的屬性錄入"""
    return {name: int(value) for name, value in ASSIGN_RE.findall(re.sub(r"\s+", "", text))}


def modify_attribute(view: AttributeView, evaluator: ExpressionEvaluator, text: str,
                     templates: TextTemplates, player_name: str) -> Optional[str]:
    """
    處理 .st 理智-1d6，返回回覆文本
    不是增減格式時返回 None
    """
    match = MODIFY_RE.match(text)
    if not match:
        return None
    name, sign, expr = match.groups()

    with view.lock():
        old_value, exists = view.get(name)
        if not exists:
            raise AttributeNotFound(name)
        delta, _ = evaluator.evaluate_int(expr, view)
        new_value = old_value + delta if sign == "+" else old_value - delta
        view.set(name, new_value)

    get_logger().info(f"{player_name} 屬性 {view.canonical(name)}: {old_value} -> {new_value}")
    return templates.render("COC:屬性設置_增減", {
        "$t玩家": player_name,
        "$t屬性": view.canonical(name),
        "$t舊值": old_value,
        "$t新值": new_value,
        "$t增加或扣除": "增加" if sign == "+" else "扣除",
        "$t表達式文本": expr.strip(),
        "$t變化量": delta,
    })


def set_attributes(view: AttributeView, text: str, templates: TextTemplates,
                   player_name: str) -> str:
    """處理 .st 力量50 敏捷60"""
    values = parse_assignments(text)
    count, synonyms = view.db.set_values(view.guild_id, view.user_id, values, view.alias_index)
    get_logger().info(f"{player_name} 錄入了 {count} 條屬性")
    return templates.render("COC:屬性設置", {
        "$t玩家": player_name,
        "$t數量": len(values),
        "$t有效數量": count,
        "$t同義詞數量": synonyms,
    })


def ordered_names(values: Dict[str, int]) -> List[str]:
    """常用屬性在前，其餘按名稱排序"""
    top = [name for name in ATTRIBUTE_ORDER_TOP if name in values]
    others = sorted(name for name in values if name not in ATTRIBUTE_ORDER_TOP)
    return top + others


def show_attributes(view: AttributeView, templates: TextTemplates, player_name: str,
                    limit: Optional[int] = None, pick: Optional[List[str]] = None) -> str:
    """處理 .st show (最小數值 / 屬性名...)"""
    values = view.db.get_all_values(view.guild_id, view.user_id)
    picked = {view.canonical(name) for name in pick} if pick else None

    lines = []
    hidden = 0
    for name in ordered_names(values):
        value = values[name]
        if picked is not None and name not in picked:
            continue
        if limit is not None and name not in ATTRIBUTE_ORDER_TOP and value < limit:
            hidden += 1
            continue
        lines.append(f"{name}: {value}")

    bindings = {"$t玩家": player_name}
    if lines:
        # 每行4項
        info = "\n".join("\t".join(lines[i:i + 4]) for i in range(0, len(lines), 4))
    else:
        info = templates.get("COC:屬性設置_列出_未發現記錄")
    if limit is not None:
        info += templates.render("COC:屬性設置_列出_隱藏提示", {"$t數量": hidden, "$t判定值": limit})

    bindings["$t屬性信息"] = info
    return templates.render("COC:屬性設置_列出", bindings)


def delete_attributes(view: AttributeView, names: List[str], templates: TextTemplates,
                      player_name: str) -> str:
    """處理 .st del 屬性1 屬性2"""
    deleted, failed = view.db.delete_values(view.guild_id, view.user_id, names, view.alias_index)
    return templates.render("COC:屬性設置_刪除", {
        "$t玩家": player_name,
        "$t屬性列表": " ".join(deleted),
        "$t失敗數量": len(failed),
    })


def clear_attributes(view: AttributeView, templates: TextTemplates, player_name: str) -> str:
    """處理 .st clr"""
    count = view.db.clear(view.guild_id, view.user_id)
    return templates.render("COC:屬性設置_清除", {"$t玩家": player_name, "$t數量": count})
