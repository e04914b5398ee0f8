import re
from typing import Any, Dict, Optional

PLACEHOLDER_RE = re.compile(r"\{(\$t[^{}]+)\}")

DEFAULT_TEMPLATES: Dict[str, str] = {
    # 判定結果
    "COC:判定_大失敗": "大失敗！",
    "COC:判定_失敗": "失敗！",
    "COC:判定_成功_普通": "成功",
    "COC:判定_成功_困難": "成功(困難)",
    "COC:判定_成功_極難": "成功(極難)",
    "COC:判定_大成功": "運氣不錯，大成功！",
    "COC:判定_必須_困難_成功": "成功了！這要費點力氣",
    "COC:判定_必須_困難_失敗": "失敗！還是有點難吧？",
    "COC:判定_必須_極難_成功": "居然成功了！運氣不錯啊！",
    "COC:判定_必須_極難_失敗": "失敗了，不要太勉強自己",
    "COC:判定_必須_大成功_成功": "大成功！",
    "COC:判定_必須_大成功_失敗": "失敗了，不出所料",

    # 檢定
    "COC:檢定": "<{$t玩家}>的「{$t屬性表達式文本}」檢定結果為: {$t結果文本}",
    "COC:檢定_多輪": "對<{$t玩家}>的「{$t屬性表達式文本}」進行了{$t次數}次檢定，結果為:\n{$t結果文本}",
    "COC:檢定_單項結果文本": "{$t檢定表達式文本}={$tD100}/{$t判定值}{$t檢定計算過程} {$t判定結果}",
    "COC:檢定_暗中_群內": "<{$t玩家}>悄悄進行了一項{$t屬性表達式文本}檢定",
    "COC:檢定_暗中_私聊_前綴": "來自頻道的暗中檢定:\n",
    "COC:檢定_輪數過多警告": "你真的需要這麼多輪檢定嗎？最多 {$t上限} 輪",

    # 理智檢定
    "COC:理智檢定": "<{$t玩家}>的理智檢定:\n{$t結果文本}",
    "COC:理智檢定_多輪": "<{$t玩家}>進行了{$t次數}次理智檢定:\n{$t結果文本}",
    "COC:理智檢定_單項結果文本": (
        "{$t檢定表達式文本}={$tD100}/{$t判定值}{$t檢定計算過程} {$t判定結果}\n"
        "理智變化: {$t舊值} ➯ {$t新值} (扣除{$t表達式文本}={$t表達式值}點){$t附加語}\n"
        "{$t提示_角色瘋狂}"
    ),
    "COC:理智檢定_附加語_大失敗": "\n你的意志被徹底擊潰了",
    "COC:理智檢定_附加語_失敗": "\n不必太過在意，加把勁吧",
    "COC:理智檢定_附加語_成功": "\n穩住了",
    "COC:理智檢定_附加語_大成功": "\n這點恐懼不算什麼",
    "COC:提示_永久瘋狂": "提示：理智歸零，已永久瘋狂(可用.ti或.li抽取瘋狂症狀)",
    "COC:提示_臨時瘋狂": "提示：單次損失理智超過5點，若智力檢定(.ra 智力)通過，將進入臨時性瘋狂",

    # 瘋狂症狀
    "COC:瘋狂_即時症狀": "<{$t玩家}>的瘋狂發作-即時症狀:\n1D10={$t骰點}\n{$t症狀}{$t症狀表}",
    "COC:瘋狂_總結症狀": "<{$t玩家}>的瘋狂發作-總結症狀:\n1D10={$t骰點}\n{$t症狀}{$t症狀表}",
    "COC:瘋狂_症狀表": "\n1D100={$t骰點}\n{$t症狀}",

    # 人物作成
    "COC:制卡": "<{$t玩家}>的七版COC人物作成:\n{$t制卡結果}",
    "COC:制卡_單組": (
        "力量:{$t力量} 敏捷:{$t敏捷} 意志:{$t意志}\n"
        "體質:{$t体质} 外貌:{$t外貌} 教育:{$t教育}\n"
        "體型:{$t体型} 智力:{$t智力}\n"
        "HP:{$t生命值} 幸運:{$t幸运} [{$t總和}/{$t含幸運總和}]"
    ),

    # 技能成長
    "COC:技能成長": "<{$t玩家}>的「{$t技能}」成長檢定:\n{$tD100}/{$t判定值} {$t判定結果}\n{$t結果文本}",
    "COC:技能成長_結果_成功": "「{$t技能}」增加了{$t表達式文本}={$t增量}點，當前為{$t新值}點",
    "COC:技能成長_結果_失敗": "「{$t技能}」成長失敗了！",
    "COC:技能成長_結果_失敗變更": "「{$t技能}」變化了{$t表達式文本}={$t增量}點，當前為{$t新值}點",

    # 屬性設置
    "COC:屬性設置": "<{$t玩家}>的屬性錄入完成，本次共記錄了{$t數量}條數據 (其中{$t同義詞數量}條為同義詞)",
    "COC:屬性設置_增減": "<{$t玩家}>的「{$t屬性}」變化: {$t舊值} ➯ {$t新值} ({$t增加或扣除}{$t表達式文本}={$t變化量})",
    "COC:屬性設置_刪除": "<{$t玩家}>的如下屬性被成功刪除: {$t屬性列表}，失敗{$t失敗數量}項",
    "COC:屬性設置_清除": "<{$t玩家}>的屬性數據已經清除，共計{$t數量}條",
    "COC:屬性設置_列出": "<{$t玩家}>的個人屬性為:\n{$t屬性信息}",
    "COC:屬性設置_列出_未發現記錄": "未發現屬性記錄",
    "COC:屬性設置_列出_隱藏提示": "\n注：{$t數量}條屬性因小於{$t判定值}被隱藏",

    # 房規
    "COC:設置房規": "已切換房規為{$t房規}: {$t房規說明}",
    "COC:設置房規_當前": "當前房規: {$t房規}",
}

RULE_DESCRIPTIONS = {
    0: "規則書：出1大成功，不滿50出96-100大失敗，滿50出100大失敗",
    1: "不滿50出1大成功，滿50出1-5大成功；不滿50出96-100大失敗，滿50出100大失敗",
    2: "出1-5且≤成功率大成功；出100或出96-99且>成功率大失敗",
    3: "出1-5大成功；出100或出96-99大失敗",
    4: "出1-5且≤成功率/10大成功；出≥96+成功率/10大失敗",
    5: "出1-2且≤成功率/5大成功；不滿50出96-100大失敗，滿50出99-100大失敗",
}


class TextTemplates:
    """回覆文本，公會可覆蓋預設值"""
    def __init__(self, overrides: Optional[Dict[str, str]] = None):
        self.overrides = overrides or {}

    def get(self, key: str) -> str:
        if key in self.overrides:
            return self.overrides[key]
        return DEFAULT_TEMPLATES.get(key, key)

    def render(self, key: str, bindings: Dict[str, Any]) -> str:
        """用 bindings 替換 {$t名稱}，沒有綁定的佔位符保持原樣"""
        def replace(m):
            name = m.group(1)
            if name in bindings:
                return str(bindings[name])
            return m.group(0)

        return PLACEHOLDER_RE.sub(replace, self.get(key))
