"""
Shared embed utilities for the match registry bot.

Provides reusable embed builders so every cog renders matches the same way.
"""

import discord
from typing import List, Optional

from matchbook.constants import UIConstants
from matchbook.data_models.match import Match
from matchbook.database.models import MatchOutcome
from matchbook.utils.match_calendar import format_timestamp

OUTCOME_STYLE = {
    MatchOutcome.PENDING: (UIConstants.PENDING_EMOJI, UIConstants.PENDING_COLOR),
    MatchOutcome.UNDERWAY: (UIConstants.UNDERWAY_EMOJI, UIConstants.UNDERWAY_COLOR),
    MatchOutcome.DRAW: (UIConstants.DRAW_EMOJI, UIConstants.DRAW_COLOR),
    MatchOutcome.DECIDED: (UIConstants.DECIDED_EMOJI, UIConstants.DECIDED_COLOR),
}


def outcome_label(match: Match) -> str:
    """Outcome with emoji, plus the winner when decided"""
    emoji, _ = OUTCOME_STYLE[match.outcome]
    label = f"{emoji} {match.outcome.value.title()}"
    if match.is_decided:
        winner = match.winner_name or f"participant #{match.winner}"
        label += f": {winner}"
    return label


def build_match_embed(match: Match, title: Optional[str] = None) -> discord.Embed:
    """
    Build the detail embed for a single stored match.

    Args:
        match: Match to render
        title: Optional title override (defaults to the match name)

    Returns:
        Formatted Discord embed ready for display
    """
    _, color = OUTCOME_STYLE[match.outcome]
    embed = discord.Embed(
        title=title or match.name,
        description=match.participants or "No participants listed",
        color=color
    )
    embed.add_field(name="Kickoff", value=format_timestamp(match.date), inline=True)
    embed.add_field(name="Outcome", value=outcome_label(match), inline=True)
    embed.add_field(name="Participants", value=str(match.participant_count), inline=True)
    embed.set_footer(text=f"ID: {match.id_hex}")
    return embed


def build_match_list_embed(matches: List[Match], title: str, total: int) -> discord.Embed:
    """
    Build a compact list embed, newest match first.

    Args:
        matches: Matches to show (already cut to the display limit)
        title: Embed title
        total: Number of matches before the display cut
    """
    embed = discord.Embed(title=title, color=UIConstants.DEFAULT_EMBED_COLOR)

    if not matches:
        embed.description = "No matches found."
        return embed

    lines = []
    for match in matches:
        lines.append(
            f"**{match.name}** - {match.participants}\n"
            f"{outcome_label(match)} | {format_timestamp(match.date)} | `{match.id_hex[:18]}…`"
        )
    embed.description = "\n".join(lines)

    if total > len(matches):
        embed.add_field(
            name="Note",
            value=f"Showing latest {len(matches)} of {total} matches",
            inline=False
        )
    return embed
