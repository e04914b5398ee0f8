import discord
from discord.ext import commands
import os
from pathlib import Path
from typing import Optional

from utils.config import ConfigManager
from utils.logger import get_logger
from models.database import AttributeDB


class TRPGBot:
    """CoC 檢定機器人類"""
    def __init__(self):
        self.logger = get_logger()
        root_dir = self.find_project_root()

        # 查找環境變量文件
        env_file = self.find_env_file(root_dir)
        if env_file:
            from dotenv import load_dotenv
            load_dotenv(dotenv_path=env_file)

        # 從環境變量獲取token
        token = os.getenv("DISCORD_TOKEN")
        if not token:
            self.logger.error("未找到 DISCORD_TOKEN 環境變量，請在項目根目錄的 .env 中添加 DISCORD_TOKEN=your_token_here")
            raise ValueError("未找到 DISCORD_TOKEN 環境變量")

        self.token = token

        self.config_manager = ConfigManager(config_path=str(root_dir / "config.json"))
        self.attributes_db = AttributeDB(db_path=str(root_dir / "attributes.db"))
        self.logger.set_level(self.config_manager.global_config.log_level)

        # 設置機器人
        intents = discord.Intents.default()
        intents.message_content = True  # 需要讀取消息內容
        intents.guilds = True

        self.bot = commands.Bot(
            command_prefix=self.config_manager.global_config.command_prefix,
            intents=intents,
            description="CoC 7e 檢定機器人",
            help_command=None
        )
        self.bot.config_manager = self.config_manager
        self.bot.attributes_db = self.attributes_db

        self.setup_events()

    def find_project_root(self) -> Path:
        """查找項目根目錄"""
        current_path = Path(__file__).resolve()

        # 搜索包含 .git 目錄的父目錄
        for parent in current_path.parents:
            if (parent / '.git').exists():
                return parent

        return current_path.parent

    def find_env_file(self, root_dir: Path) -> Optional[Path]:
        """查找環境變量文件"""
        env_file = root_dir / ".env"
        if env_file.is_file():
            self.logger.info(f"找到環境變量文件: {env_file}")
            return env_file

        self.logger.warning(f"在 {root_dir} 中未找到 .env 文件，僅使用系統環境變量")
        return None

    def setup_events(self):
        """設置事件處理器"""
        @self.bot.event
        async def on_ready():
            self.logger.info(f'{self.bot.user} 已經上線! 已連接到 {len(self.bot.guilds)} 個服務器')

            # 同步應用命令
            try:
                await self.bot.tree.sync()
                self.logger.info("應用命令已同步")
            except discord.HTTPException as e:
                self.logger.error(f"同步應用命令時出錯: {e}")

        @self.bot.event
        async def on_guild_join(guild):
            """當機器人加入服務器時的處理"""
            self.logger.info(f'加入了服務器: {guild.name} (ID: {guild.id})')

    async def add_cogs(self):
        """添加Cog模塊"""
        from cogs.dice_cog import CheckCog
        from cogs.skills_cog import AttributesCog
        from cogs.help_cog import HelpCog

        await self.bot.add_cog(CheckCog(self.bot, self.config_manager, self.attributes_db))
        await self.bot.add_cog(AttributesCog(self.bot, self.config_manager, self.attributes_db))
        await self.bot.add_cog(HelpCog(self.bot, self.config_manager))

    async def start(self):
        """啟動機器人"""
        await self.add_cogs()
        await self.bot.start(self.token)

    async def close(self):
        """關閉機器人"""
        await self.bot.close()
