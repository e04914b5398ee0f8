#!/usr/bin/env python3
"""
CoC 檢定機器人
第七版克蘇魯的呼喚 TRPG 檢定指令的 Discord 機器人
"""

import asyncio
import sys

from dotenv import load_dotenv

# 加載環境變量
load_dotenv()

from bot import TRPGBot
from utils.logger import get_logger


async def run(bot: TRPGBot):
    try:
        await bot.start()
    finally:
        await bot.close()


def main():
    """主函數"""
    logger = get_logger()

    logger.info("正在啟動CoC檢定機器人...")

    # 創建並啟動機器人（機器人會自己查找環境變量）
    try:
        bot = TRPGBot()
    except ValueError as e:
        logger.error(f"錯誤：{e}")
        sys.exit(1)

    try:
        asyncio.run(run(bot))
    except KeyboardInterrupt:
        logger.info("收到中斷信號，正在關閉機器人...")
    finally:
        logger.info("機器人已關閉")


if __name__ == "__main__":
    main()
