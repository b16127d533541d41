"""
Custom exceptions for the match registry with user-friendly error messages.

Every write-side precondition failure has its own type. Reads never raise for
a missing match; they return the placeholder record instead.
"""

from matchbook.utils.match_id import format_match_id


class MatchRegistryException(Exception):
    """Base exception for match registry errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class UnauthorizedError(MatchRegistryException):
    """Raised when a caller without write privilege attempts a mutation."""
    def __init__(self, caller):
        self.caller = caller
        super().__init__(
            f"Caller {caller} is not the registry writer",
            "❌ Only the registry owner can change matches!"
        )

class DuplicateRecordError(MatchRegistryException):
    """Raised when an insert derives an id that is already stored."""
    def __init__(self, match_id: bytes):
        self.match_id = match_id
        super().__init__(
            f"Match {format_match_id(match_id)} already exists",
            "❌ A match with the same name, participant count and date is already registered!"
        )

class NotFoundError(MatchRegistryException):
    """Raised when an outcome transition targets an unknown match."""
    def __init__(self, match_id: bytes):
        self.match_id = match_id
        super().__init__(
            f"Match {format_match_id(match_id)} not found",
            f"❌ No match found with id `{format_match_id(match_id)}`."
        )

class InvalidWinnerError(MatchRegistryException):
    """Raised when a decided outcome names a winner outside the participant range."""
    def __init__(self, winner: int, participant_count: int):
        self.winner = winner
        self.participant_count = participant_count
        super().__init__(
            f"Invalid winner index {winner} for {participant_count} participants",
            f"❌ Winner must be between 0 and {participant_count - 1}."
            if participant_count > 0
            else "❌ This match has no participants to declare a winner."
        )
