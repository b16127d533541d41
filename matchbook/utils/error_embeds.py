"""
Centralized error embeds for consistent error handling across the match registry bot.
"""

import discord

from matchbook.utils.registry_exceptions import MatchRegistryException, UnauthorizedError


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""

    @staticmethod
    def registry_error(error: MatchRegistryException) -> discord.Embed:
        """Create embed for a rejected registry write."""
        title = "Permission Denied" if isinstance(error, UnauthorizedError) else "Request Rejected"
        return discord.Embed(
            title=title,
            description=error.user_message,
            color=discord.Color.red()
        )

    @staticmethod
    def invalid_input(message: str) -> discord.Embed:
        """Create embed for invalid user input."""
        return discord.Embed(
            title="Invalid Input",
            description=message,
            color=discord.Color.red()
        )

    @staticmethod
    def match_not_found(match_id_text: str) -> discord.Embed:
        """Create embed for when a match is not found."""
        return discord.Embed(
            title="Match Not Found",
            description=f"No match is registered with id `{match_id_text}`.",
            color=discord.Color.red()
        )

    @staticmethod
    def permission_denied() -> discord.Embed:
        """Create embed for permission errors."""
        return discord.Embed(
            title="Permission Denied",
            description="You don't have permission to perform this action.",
            color=discord.Color.red()
        )
