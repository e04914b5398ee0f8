from typing import Optional

from models.types import ParseErrorKind


class CheckError(Exception):
    """檢定流程中可回報給使用者的錯誤"""


class ExprError(CheckError, ValueError):
    """表達式無法求值"""


class CheckParseError(CheckError, ValueError):
    """指令文本無法解析"""
    def __init__(self, kind: ParseErrorKind, text: str, reason: Optional[str] = None):
        self.kind = kind
        self.text = text
        self.reason = reason
        message = PARSE_ERROR_MESSAGES[kind].format(text=text)
        if reason:
            message += f"\n原因: {reason}"
        super().__init__(message)


class NonIntegerOperand(CheckError, TypeError):
    """檢定用的值不是整數"""


class AttributeNotFound(CheckError, LookupError):
    """屬性未錄入"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"無法找到屬性 {name}，請先使用 st 錄入")


class TooManyRounds(CheckError, ValueError):
    """連續檢定輪數超過上限"""
    def __init__(self, requested: int, limit: int, message: Optional[str] = None):
        self.requested = requested
        self.limit = limit
        super().__init__(message or f"檢定輪數過多 (最多 {limit} 輪)")


PARSE_ERROR_MESSAGES = {
    ParseErrorKind.UNRECOGNIZED: "無法解析的表達式: {text}",
    ParseErrorKind.DIVIDER_MISMATCH: "成功/失敗表達式格式錯誤: {text}",
    ParseErrorKind.TRAILING_GARBAGE: "表達式後有無法識別的內容: {text}",
}
