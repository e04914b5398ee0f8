import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional


class BotLogger:
    """自定義日誌系統"""

    def __init__(self, log_file: Optional[str] = "bot.log", level: int = logging.INFO):
        self.logger = logging.getLogger('TRPGBot')
        self.logger.setLevel(level)

        # 避免重複添加處理器
        if not self.logger.handlers:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

            # 控制台處理器
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            # 文件處理器（帶輪換），log_file 為空時不寫文件
            if log_file:
                file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=1024*1024,  # 1MB
                    backupCount=5,
                    encoding='utf-8'
                )
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

    def set_level(self, level: str):
        """設置日誌級別"""
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    def info(self, message: str):
        """記錄信息級別日誌"""
        self.logger.info(message)

    def warning(self, message: str):
        """記錄警告級別日誌"""
        self.logger.warning(message)

    def error(self, message: str):
        """記錄錯誤級別日誌"""
        self.logger.error(message)

    def debug(self, message: str):
        """記錄調試級別日誌"""
        self.logger.debug(message)


_logger: Optional[BotLogger] = None


def get_logger() -> BotLogger:
    """獲取日誌實例，第一次調用時才建立處理器"""
    global _logger
    if _logger is None:
        _logger = BotLogger(log_file=os.getenv("TRPG_LOG_FILE", "bot.log"))
    return _logger
