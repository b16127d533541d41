"""
Registry-wide constants for the Match Registry bot.

Sentinel values, packed field widths and Discord UI values live here so the
storage, operations and presentation layers agree on them.
"""

class RegistryConstants:
    """Constants describing match identity and stored field ranges."""

    # Identifiers are SHA-256 digests
    MATCH_ID_LENGTH = 32

    # Reserved "no id" value, never produced for a stored match
    ZERO_MATCH_ID = bytes(MATCH_ID_LENGTH)

    # Winner index meaning "no winner recorded"
    UNSET_WINNER = -1

    # Packed widths used when deriving identifiers
    PARTICIPANT_COUNT_MAX = 255   # uint8
    DATE_BYTES = 32               # int256, big-endian

    # Dates are stored in a signed 64-bit column
    DATE_MIN = -2 ** 63
    DATE_MAX = 2 ** 63 - 1

    # Participants are stored as one delimited string, e.g. "Mexico vs South Africa"
    PARTICIPANT_DELIMITER = " vs "

class UIConstants:
    """Constants for Discord UI elements."""

    # Embed colors
    DEFAULT_EMBED_COLOR = 0x3498db  # Blue
    PENDING_COLOR = 0x95a5a6        # Grey
    UNDERWAY_COLOR = 0xf1c40f       # Yellow
    DRAW_COLOR = 0xe67e22           # Orange
    DECIDED_COLOR = 0x2ecc71        # Green

    # Emoji per outcome
    PENDING_EMOJI = "🕒"
    UNDERWAY_EMOJI = "⚽"
    DRAW_EMOJI = "🤝"
    DECIDED_EMOJI = "🏆"
