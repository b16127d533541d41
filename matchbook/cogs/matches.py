import discord
from discord.ext import commands

from matchbook.config import Config
from matchbook.database.models import MatchOutcome
from matchbook.utils.embeds import build_match_embed, build_match_list_embed
from matchbook.utils.error_embeds import ErrorEmbeds
from matchbook.utils.match_calendar import parse_kickoff
from matchbook.utils.match_id import parse_match_id
from matchbook.utils.registry_exceptions import MatchRegistryException
from matchbook.utils.logger import setup_logger

logger = setup_logger(__name__)

class MatchCog(commands.Cog):
    """Match registration, outcome and lookup commands"""

    def __init__(self, bot):
        self.bot = bot
        self.logger = logger

    @property
    def registry(self):
        return self.bot.registry

    @commands.hybrid_command(name='match-add')
    async def add_match(
        self,
        ctx,
        name: str,
        participants: str,
        kickoff: str,
        participant_count: int = Config.DEFAULT_PARTICIPANT_COUNT
    ):
        """Register a match, e.g. "Group A" "Mexico vs South Africa" "2026-06-11 19:00" (Owner only)"""
        try:
            date = parse_kickoff(kickoff)
            match_id = await self.registry.insert(ctx.author.id, name, participants, participant_count, date)
        except MatchRegistryException as e:
            await ctx.send(embed=ErrorEmbeds.registry_error(e))
            return
        except ValueError as e:
            await ctx.send(embed=ErrorEmbeds.invalid_input(str(e)))
            return

        match = await self.registry.get(match_id)
        await ctx.send(embed=build_match_embed(match, title=f"✅ Registered: {match.name}"))

    @commands.hybrid_command(name='match-outcome')
    async def set_outcome(self, ctx, match_id: str, outcome: str, winner: int = -1):
        """Set a match outcome: pending, underway, draw or decided (with winner index) (Owner only)"""
        try:
            parsed_id = parse_match_id(match_id)
            parsed_outcome = MatchOutcome(outcome.strip().lower())
        except ValueError:
            valid = ", ".join(o.value for o in MatchOutcome)
            await ctx.send(embed=ErrorEmbeds.invalid_input(
                f"Expected a 0x-prefixed 64-digit match id and one of: {valid}"
            ))
            return

        try:
            await self.registry.set_outcome(ctx.author.id, parsed_id, parsed_outcome, winner)
        except MatchRegistryException as e:
            await ctx.send(embed=ErrorEmbeds.registry_error(e))
            return

        match = await self.registry.get(parsed_id)
        await ctx.send(embed=build_match_embed(match, title=f"✅ Updated: {match.name}"))

    @commands.hybrid_command(name='match-info')
    async def match_info(self, ctx, match_id: str):
        """Show a registered match"""
        try:
            parsed_id = parse_match_id(match_id)
        except ValueError as e:
            await ctx.send(embed=ErrorEmbeds.invalid_input(str(e)))
            return

        match = await self.registry.find(parsed_id)
        if match is None:
            await ctx.send(embed=ErrorEmbeds.match_not_found(match_id))
            return

        await ctx.send(embed=build_match_embed(match))

    @commands.hybrid_command(name='match-list')
    async def list_matches(self, ctx, pending_only: bool = False):
        """List registered matches, newest first"""
        match_ids = await (self.registry.list_pending() if pending_only else self.registry.list_all())
        shown_ids = match_ids[:Config.MATCH_LIST_DISPLAY_LIMIT]
        matches = [await self.registry.get(match_id) for match_id in shown_ids]

        title = "🕒 Pending Matches" if pending_only else "📋 All Matches"
        await ctx.send(embed=build_match_list_embed(matches, title, total=len(match_ids)))

    @commands.hybrid_command(name='match-latest')
    async def latest_match(self, ctx, pending_only: bool = False):
        """Show the most recently registered match"""
        match = await self.registry.most_recent(pending_only=pending_only)
        if not await self.registry.exists(match.match_id):
            description = "No pending matches." if pending_only else "No matches registered yet."
            embed = discord.Embed(
                title="Latest Match",
                description=description,
                color=discord.Color.orange()
            )
            await ctx.send(embed=embed)
            return

        await ctx.send(embed=build_match_embed(match, title=f"Latest: {match.name}"))

async def setup(bot):
    await bot.add_cog(MatchCog(bot))
