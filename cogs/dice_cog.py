import re

import discord
from discord.ext import commands
from typing import Optional

from models.types import RuleVariant
from utils.chargen import generate_characters
from utils.checks import CheckReport, ResultBinder
from utils.dice import ExpressionEvaluator
from utils.errors import CheckError
from utils.insanity import roll_insanity
from utils.logger import get_logger
from utils.templates import RULE_DESCRIPTIONS, TextTemplates

# <@123> 或 <@!123>
MENTION_RE = re.compile(r"<@!?(\d+)>")


def check_target(ctx, expression: str):
    """
    取出表達式中的 @某人，返回 (檢定對象, 去掉提及後的表達式)
    沒有提及或該成員不在服務器時，對象為發起人
    """
    match = MENTION_RE.search(expression)
    if not match:
        return ctx.author, expression
    rest = (expression[:match.start()] + " " + expression[match.end():]).strip()
    member = ctx.guild.get_member(int(match.group(1))) if ctx.guild else None
    return member or ctx.author, rest


class CheckCog(commands.Cog, name="Checks"):
    """CoC 7e 檢定相關指令"""
    def __init__(self, bot, config_manager, attributes_db):
        self.bot = bot
        self.config_manager = config_manager
        self.attributes_db = attributes_db
        self.logger = get_logger()

    def get_rules(self, ctx):
        return self.config_manager.get_guild_config(ctx.guild.id if ctx.guild else None)

    def make_binder(self, ctx, target=None) -> ResultBinder:
        """target 為屬性所屬的成員，預設為發起人"""
        guild_id = ctx.guild.id if ctx.guild else 0
        rules = self.get_rules(ctx)
        target = target or ctx.author
        view = self.attributes_db.view(guild_id, target.id)
        return ResultBinder(ExpressionEvaluator.from_rules(rules), rules,
                            target.display_name, view)

    async def send_report(self, ctx, title: str, report: CheckReport):
        """發送結果，暗中檢定時詳細結果私訊給發起人"""
        if report.is_secret:
            try:
                await ctx.author.send(embed=discord.Embed(
                    title=title,
                    description=report.private_text,
                    color=0x7289da
                ))
            except discord.Forbidden:
                await ctx.send("無法私訊你，請開啟私訊後再進行暗中檢定")
                return
            await ctx.send(report.public_text)
            return

        embed = discord.Embed(
            title=title,
            description=report.public_text,
            color=0x7289da
        )
        await ctx.send(embed=embed)

    async def send_error(self, ctx, title: str, error: Exception):
        embed = discord.Embed(
            title=title,
            description=f"錯誤: {str(error)}",
            color=0xff0000
        )
        await ctx.send(embed=embed)

    async def run_check(self, ctx, expression: str, rule_index: Optional[int] = None,
                        secret: bool = False, target=None):
        try:
            report = self.make_binder(ctx, target).check(expression, rule_index=rule_index, secret=secret)
        except CheckError as e:
            self.logger.warning(f"檢定失敗 {expression!r}: {e}")
            await self.send_error(ctx, "CoC 檢定錯誤", e)
            return
        await self.send_report(ctx, "CoC 7e 檢定結果", report)

    @commands.hybrid_command(name="ra", description="CoC 7e 屬性檢定")
    async def ra_command(self, ctx, *, expression: str):
        """.ra (<檢定表達式，預設d100>) <屬性表達式> (@某人)"""
        target, expression = check_target(ctx, expression)
        await self.run_check(ctx, expression, target=target)

    @commands.hybrid_command(name="rc", description="CoC 7e 屬性檢定（強制規則書）")
    async def rc_command(self, ctx, *, expression: str):
        """.rc 同 .ra，但固定使用規則書規則"""
        target, expression = check_target(ctx, expression)
        await self.run_check(ctx, expression, rule_index=RuleVariant.RULEBOOK, target=target)

    @commands.hybrid_command(name="rah", description="CoC 7e 暗中檢定")
    async def rah_command(self, ctx, *, expression: str):
        """暗中檢定，結果私訊給發起人"""
        target, expression = check_target(ctx, expression)
        await self.run_check(ctx, expression, secret=True, target=target)

    @commands.hybrid_command(name="rch", description="CoC 7e 暗中檢定（強制規則書）")
    async def rch_command(self, ctx, *, expression: str):
        """暗中檢定，固定使用規則書規則"""
        target, expression = check_target(ctx, expression)
        await self.run_check(ctx, expression, rule_index=RuleVariant.RULEBOOK, secret=True,
                             target=target)

    @commands.hybrid_command(name="sc", description="CoC 7e 理智檢定")
    async def sc_command(self, ctx, *, expression: str):
        """.sc (<檢定表達式>) (<成功時扣除>/)<失敗時扣除> (@某人)"""
        target, expression = check_target(ctx, expression)
        try:
            report = self.make_binder(ctx, target).sanity_check(expression)
        except CheckError as e:
            self.logger.warning(f"理智檢定失敗 {expression!r}: {e}")
            await self.send_error(ctx, "理智檢定錯誤", e)
            return
        await self.send_report(ctx, "CoC 7e 理智檢定", report)

    @commands.hybrid_command(name="en", description="CoC 7e 技能成長")
    async def en_command(self, ctx, *, expression: str):
        """.en <技能名>(技能值)(+(失敗成長/)成功成長)"""
        try:
            report = self.make_binder(ctx).growth_check(expression)
        except CheckError as e:
            await self.send_error(ctx, "技能成長錯誤", e)
            return
        await self.send_report(ctx, "CoC 7e 技能成長", report)

    async def send_insanity(self, ctx, summary: bool):
        rules = self.get_rules(ctx)
        result = roll_insanity(ExpressionEvaluator.from_rules(rules), ctx.author.display_name,
                               summary=summary, templates=TextTemplates(rules.text_templates))
        self.logger.info(f"{ctx.author.display_name} 抽取瘋狂症狀: {result.symptom_roll}")
        embed = discord.Embed(
            title="CoC 7e 瘋狂發作",
            description=result.text,
            color=0x7289da
        )
        await ctx.send(embed=embed)

    @commands.hybrid_command(name="ti", description="抽取一個臨時性瘋狂症狀")
    async def ti_command(self, ctx):
        """.ti 即時症狀"""
        await self.send_insanity(ctx, summary=False)

    @commands.hybrid_command(name="li", description="抽取一個總結性瘋狂症狀")
    async def li_command(self, ctx):
        """.li 總結症狀"""
        await self.send_insanity(ctx, summary=True)

    @commands.hybrid_command(name="coc", description="CoC 7e 人物作成")
    async def coc_command(self, ctx, count: Optional[int] = None):
        """.coc (<數量>) 最多10組"""
        rules = self.get_rules(ctx)
        characters, text = generate_characters(
            ExpressionEvaluator.from_rules(rules), ctx.author.display_name, count,
            templates=TextTemplates(rules.text_templates))
        self.logger.info(f"{ctx.author.display_name} 人物作成 x{len(characters)}")
        embed = discord.Embed(
            title="CoC 7e 人物作成",
            description=text,
            color=0x7289da
        )
        await ctx.send(embed=embed)

    @commands.hybrid_command(name="setcoc", description="設置 CoC 房規 (0-5)")
    async def setcoc_command(self, ctx, rule: Optional[commands.Range[int, 0, 5]] = None):
        """設置或查看房規"""
        if not ctx.guild:
            await ctx.send("此指令只能在服務器中使用")
            return

        rules = self.config_manager.get_guild_config(ctx.guild.id)
        templates = TextTemplates(rules.text_templates)
        if rule is None:
            text = templates.render("COC:設置房規_當前", {"$t房規": rules.coc_rule_index})
        else:
            self.config_manager.set_rule_index(ctx.guild.id, rule)
            self.logger.info(f"公會 {ctx.guild.id} 房規設置為 {rule}")
            text = templates.render("COC:設置房規", {
                "$t房規": rule,
                "$t房規說明": RULE_DESCRIPTIONS[rule],
            })

        embed = discord.Embed(
            title="CoC 房規",
            description=text,
            color=0x7289da
        )
        await ctx.send(embed=embed)


async def setup(bot):
    """設置Cog"""
    await bot.add_cog(CheckCog(bot, bot.config_manager, bot.attributes_db))
