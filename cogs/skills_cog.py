import discord
from discord.ext import commands

from utils.attributes import (
    clear_attributes,
    delete_attributes,
    modify_attribute,
    set_attributes,
    show_attributes,
)
from utils.dice import ExpressionEvaluator
from utils.errors import CheckError
from utils.templates import TextTemplates

ST_HELP = (
    "屬性設置指令，支援分支指令如下：\n"
    "`.st show/list <數值>`：展示個人屬性，若加<數值>則不顯示小於該數值的屬性\n"
    "`.st show <屬性名1> <屬性名2>`：只展示指定屬性\n"
    "`.st clr/clear`：清除屬性\n"
    "`.st del <屬性名1> <屬性名2> ...`：刪除屬性，可多項，以空格間隔\n"
    "`.st <屬性名><值>`：例：.st 敏捷50\n"
    "`.st <屬性名>±<表達式>`：例：.st 敏捷+1d50"
)


class AttributesCog(commands.Cog, name="Attributes"):
    """角色屬性相關指令"""
    def __init__(self, bot, config_manager, attributes_db):
        self.bot = bot
        self.config_manager = config_manager
        self.attributes_db = attributes_db

    @commands.hybrid_command(name="st", description="角色屬性指令")
    async def st_command(self, ctx, *, args: str = ""):
        """屬性錄入/查看/刪除"""
        guild_id = ctx.guild.id if ctx.guild else 0
        rules = self.config_manager.get_guild_config(ctx.guild.id if ctx.guild else None)
        templates = TextTemplates(rules.text_templates)
        view = self.attributes_db.view(guild_id, ctx.author.id)
        player = ctx.author.display_name

        parts = args.split()
        action = parts[0].lower() if parts else "help"

        try:
            if action == "help":
                text = ST_HELP
            elif action in ("show", "list"):
                limit = None
                pick = None
                if len(parts) >= 2:
                    if parts[1].isdigit():
                        limit = int(parts[1])
                    else:
                        pick = parts[1:]
                text = show_attributes(view, templates, player, limit=limit, pick=pick)
            elif action in ("del", "rm"):
                text = delete_attributes(view, parts[1:], templates, player)
            elif action in ("clr", "clear"):
                text = clear_attributes(view, templates, player)
            else:
                evaluator = ExpressionEvaluator.from_rules(rules)
                text = modify_attribute(view, evaluator, args, templates, player)
                if text is None:
                    text = set_attributes(view, args, templates, player)
        except CheckError as e:
            embed = discord.Embed(
                title="錯誤",
                description=str(e),
                color=0xff0000
            )
            await ctx.send(embed=embed)
            return

        embed = discord.Embed(
            title="角色屬性",
            description=text,
            color=0x2ecc71
        )
        await ctx.send(embed=embed)


async def setup(bot):
    """設置Cog"""
    await bot.add_cog(AttributesCog(bot, bot.config_manager, bot.attributes_db))
