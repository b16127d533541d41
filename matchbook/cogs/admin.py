import discord
from discord.ext import commands

from matchbook.utils.error_embeds import ErrorEmbeds
from matchbook.utils.registry_exceptions import MatchRegistryException
from matchbook.utils.logger import setup_logger

logger = setup_logger(__name__)

class AdminCog(commands.Cog):
    """Registry ownership and bot maintenance commands"""

    def __init__(self, bot):
        self.bot = bot
        self.logger = logger

    @property
    def authorization(self):
        return self.bot.authorization

    def _is_owner(self, ctx) -> bool:
        return self.authorization.is_authorized_writer(ctx.author.id)

    @commands.hybrid_command(name='registry-owner')
    async def registry_owner(self, ctx):
        """Show who can register matches and set outcomes"""
        embed = discord.Embed(
            title="Registry Owner",
            description=f"<@{self.authorization.owner_id}> holds write access to the match registry.",
            color=discord.Color.blue()
        )
        await ctx.send(embed=embed)

    @commands.hybrid_command(name='transfer-ownership')
    async def transfer_ownership(self, ctx, member: discord.Member):
        """Hand registry write access to another member (Owner only)"""
        try:
            self.authorization.transfer_ownership(ctx.author.id, member.id)
        except MatchRegistryException as e:
            await ctx.send(embed=ErrorEmbeds.registry_error(e))
            return

        self.logger.info(f"{ctx.author} transferred registry ownership to {member}")
        await ctx.send(f"✅ {member.mention} now owns the match registry.")

    @commands.hybrid_command(name='registry-stats')
    async def registry_stats(self, ctx):
        """Show registry statistics (Owner only)"""
        if not self._is_owner(ctx):
            await ctx.send(embed=ErrorEmbeds.permission_denied())
            return

        total = await self.bot.registry.count()
        pending = await self.bot.registry.count(pending_only=True)

        embed = discord.Embed(
            title="📊 Registry Statistics",
            color=discord.Color.blue()
        )
        embed.add_field(name="Matches", value=total, inline=True)
        embed.add_field(name="Pending", value=pending, inline=True)
        embed.add_field(name="Settled or Underway", value=total - pending, inline=True)
        await ctx.send(embed=embed)

    @commands.command(name='shutdown')
    async def shutdown_bot(self, ctx):
        """Shutdown the bot (Owner only)"""
        if not self._is_owner(ctx):
            await ctx.send(embed=ErrorEmbeds.permission_denied())
            return

        await ctx.send("🔴 Shutting down Match Registry Bot...")
        await self.bot.close()

async def setup(bot):
    await bot.add_cog(AdminCog(bot))
