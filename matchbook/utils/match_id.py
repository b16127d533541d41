"""
Match identifier helpers.

A match id is content-addressed: the SHA-256 digest of the packed tuple
(name, participant_count, date). The participant list does not contribute,
so two registrations of the same event with different line-ups collide on
purpose.

Packed layout (no separators, no length prefixes):
    utf-8 name || participant_count as 1 unsigned byte || date as 32-byte signed big-endian
"""

import hashlib

from matchbook.constants import RegistryConstants


def derive_match_id(name: str, participant_count: int, date: int) -> bytes:
    """
    Derive the 32-byte identifier for a match.

    Args:
        name: Display label of the match
        participant_count: Number of participants (0-255)
        date: Opaque timestamp supplied by the caller, signed 64-bit

    Returns:
        32-byte SHA-256 digest

    Raises:
        ValueError: If a field does not fit its packed width, or the date
            falls outside the signed 64-bit range it is stored in
    """
    if not 0 <= participant_count <= RegistryConstants.PARTICIPANT_COUNT_MAX:
        raise ValueError(
            f"participant_count must be between 0 and {RegistryConstants.PARTICIPANT_COUNT_MAX}, got {participant_count}"
        )

    if not RegistryConstants.DATE_MIN <= date <= RegistryConstants.DATE_MAX:
        raise ValueError(
            f"date must be between {RegistryConstants.DATE_MIN} and {RegistryConstants.DATE_MAX}, got {date}"
        )

    try:
        packed_date = int(date).to_bytes(RegistryConstants.DATE_BYTES, 'big', signed=True)
    except OverflowError as e:
        raise ValueError(f"date {date} does not fit in {RegistryConstants.DATE_BYTES * 8} bits") from e

    digest = hashlib.sha256()
    digest.update(name.encode('utf-8'))
    digest.update(bytes([participant_count]))
    digest.update(packed_date)
    return digest.digest()


def format_match_id(match_id: bytes) -> str:
    """Render a match id as 0x-prefixed lowercase hex."""
    return '0x' + bytes(match_id).hex()


def parse_match_id(text: str) -> bytes:
    """
    Parse a 0x-prefixed (or bare) 64-digit hex string into a match id.

    Raises:
        ValueError: If the text is not exactly 32 bytes of hex
    """
    cleaned = text.strip()
    if cleaned.lower().startswith('0x'):
        cleaned = cleaned[2:]

    if len(cleaned) != RegistryConstants.MATCH_ID_LENGTH * 2:
        raise ValueError(f"Match id must be {RegistryConstants.MATCH_ID_LENGTH * 2} hex digits: {text}")

    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"Invalid match id: {text}") from e
