import json
import os
from typing import Dict, Optional
from dataclasses import dataclass, asdict, field, fields


@dataclass
class GlobalConfig:
    """全局配置"""
    command_prefix: str = "."
    log_level: str = "INFO"


@dataclass
class GuildConfig:
    """公會配置"""
    # CoC 房規 (0-5)
    coc_rule_index: int = 0
    coc_max_check_rounds: int = 12
    coc_sanity_default_success: str = "0"
    coc_growth_default_success: str = "1d10"

    # 骰子限制
    dnd_max_dice_count: int = 50
    dnd_max_dice_sides: int = 1000

    # 自訂回覆文本，覆蓋 utils/templates.py 中的預設文本
    text_templates: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "GuildConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigManager:
    """配置管理器"""
    def __init__(self, config_path: str = "config.json"):
        self.config_path = config_path
        self.global_config = GlobalConfig()
        self.guild_configs: Dict[int, GuildConfig] = {}
        self.load_config()

    def load_config(self):
        """加載配置"""
        if os.path.exists(self.config_path):
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            # 加載全局配置
            global_data = data.get('global', {})
            self.global_config = GlobalConfig(
                command_prefix=global_data.get('command_prefix', '.'),
                log_level=global_data.get('log_level', 'INFO')
            )

            # 加載公會配置
            guild_data = data.get('guilds', {})
            for guild_id, cfg in guild_data.items():
                self.guild_configs[int(guild_id)] = GuildConfig.from_dict(cfg)
        else:
            # 如果配置文件不存在，創建默認配置
            self.save_config()

    def save_config(self):
        """保存配置"""
        data = {
            'global': asdict(self.global_config),
            'guilds': {str(guild_id): asdict(config)
                       for guild_id, config in self.guild_configs.items()}
        }

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get_guild_config(self, guild_id: Optional[int]) -> GuildConfig:
        """獲取公會配置"""
        if guild_id is None:
            return GuildConfig()
        return self.guild_configs.get(guild_id, GuildConfig())

    def set_guild_config(self, guild_id: int, config: GuildConfig):
        """設置公會配置"""
        self.guild_configs[guild_id] = config
        self.save_config()

    def set_rule_index(self, guild_id: int, rule_index: int) -> GuildConfig:
        """設置房規"""
        if not 0 <= rule_index <= 5:
            raise ValueError("房規必須是 0-5")
        config = self.get_guild_config(guild_id)
        config.coc_rule_index = rule_index
        self.set_guild_config(guild_id, config)
        return config
