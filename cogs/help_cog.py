import discord
from discord.ext import commands


HELP_DETAILS = (
    "**/ra (<檢定表達式>) <屬性表達式>**\n"
    "屬性檢定，檢定表達式預設 `d100`。支援 `侦查`、`侦查50`、`困難侦查`、`d50 60`、`3#侦查`（最多 12 輪）。"
    "結尾加上 `@某人` 時使用此人的屬性進行檢定。"
    "`/rc` 固定使用規則書，`/rah`、`/rch` 為暗中檢定，結果會私訊給你。\n\n"

    "**/sc (<檢定表達式>) (<成功扣除>/)<失敗扣除> (<理智值>)**\n"
    "理智檢定，例如 `1/1d6`、`1d10`、`d50 0/1d3`。大失敗時失敗扣除取最大值，理智最低為 0。同樣支援 `@某人`。\n\n"

    "**/ti**、**/li**\n"
    "抽取臨時性 (即時) 或總結性瘋狂症狀，抽到恐懼或躁狂時再從對應的症狀表抽取。\n\n"

    "**/coc [數量]**\n"
    "七版人物作成，預設 1 組，最多 10 組。\n\n"

    "**/en <技能名>(<技能值>)(+(<失敗成長>/)<成功成長>)**\n"
    "技能成長檢定，成功時預設增加 `1d10`。\n\n"

    "**/st**\n"
    "`/st 力量50 敏捷60` 錄入屬性，`/st 理智-1d6` 增減屬性，`/st show`、`/st del`、`/st clr`。\n\n"

    "**/setcoc [0-5]**\n"
    "設置或查看本服務器的 CoC 房規。"
)


class HelpCog(commands.Cog, name="Help"):
    """幫助相關指令"""
    def __init__(self, bot, config_manager):
        self.bot = bot
        self.config_manager = config_manager

    @commands.hybrid_command(name="help", description="顯示指令說明")
    async def help_command(self, ctx):
        """顯示幫助信息"""
        embed = discord.Embed(
            title="CoC 檢定機器人 指令說明",
            description="請點擊下方按鈕查看各指令的詳細說明。\n支援 `/ra`、`/rc`、`/rah`、`/rch`、`/sc`、`/en`、`/ti`、`/li`、`/coc`、`/st`、`/setcoc`。",
            color=0x1abc9c
        )

        view = HelpView()
        await ctx.send(embed=embed, view=view)


class HelpView(discord.ui.View):
    """幫助視圖"""
    def __init__(self):
        super().__init__(timeout=120)  # 2分鐘後超時

    @discord.ui.button(label="查看詳細說明", style=discord.ButtonStyle.green, emoji="ℹ️")
    async def show_help(self, interaction: discord.Interaction, button: discord.ui.Button):
        details_embed = discord.Embed(
            title="指令詳細說明",
            description=HELP_DETAILS,
            color=0x1abc9c
        )
        await interaction.response.send_message(embed=details_embed, ephemeral=True)


async def setup(bot):
    """設置Cog"""
    await bot.add_cog(HelpCog(bot, bot.config_manager))
