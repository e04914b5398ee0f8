"""
Tests for configuration and reply templates.
"""

import json

import pytest

from utils.config import ConfigManager, GuildConfig
from utils.templates import RULE_DESCRIPTIONS, TextTemplates


class TestConfigManager:

    def test_missing_file_created_with_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        manager = ConfigManager(config_path=str(path))

        assert path.exists()
        assert manager.global_config.command_prefix == "."
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"global": {"command_prefix": ".", "log_level": "INFO"}, "guilds": {}}

    def test_unknown_guild_gets_defaults(self, tmp_path):
        manager = ConfigManager(config_path=str(tmp_path / "config.json"))
        assert manager.get_guild_config(42) == GuildConfig()
        assert manager.get_guild_config(None).coc_rule_index == 0

    def test_rule_index_round_trip(self, tmp_path):
        path = str(tmp_path / "config.json")
        ConfigManager(config_path=path).set_rule_index(42, 3)

        reloaded = ConfigManager(config_path=path)
        assert reloaded.get_guild_config(42).coc_rule_index == 3

    @pytest.mark.parametrize("rule", [-1, 6])
    def test_rule_index_range(self, tmp_path, rule):
        manager = ConfigManager(config_path=str(tmp_path / "config.json"))
        with pytest.raises(ValueError):
            manager.set_rule_index(42, rule)

    def test_from_dict_ignores_unknown_keys(self):
        config = GuildConfig.from_dict({"coc_rule_index": 2, "dice_history": []})
        assert config.coc_rule_index == 2
        assert config.coc_max_check_rounds == 12


class TestTextTemplates:

    def test_render(self):
        templates = TextTemplates()
        text = templates.render("COC:設置房規_當前", {"$t房規": 2})
        assert text == "當前房規: 2"

    def test_unknown_placeholder_kept(self):
        templates = TextTemplates({"X": "{$t玩家} {$t未知}"})
        assert templates.render("X", {"$t玩家": "P"}) == "P {$t未知}"

    def test_unknown_key_returns_key(self):
        assert TextTemplates().get("COC:不存在") == "COC:不存在"

    def test_override(self):
        templates = TextTemplates({"COC:判定_失敗": "失手了"})
        assert templates.get("COC:判定_失敗") == "失手了"
        assert templates.get("COC:判定_大失敗") == "大失敗！"

    def test_every_rule_described(self):
        assert sorted(RULE_DESCRIPTIONS) == list(range(6))
