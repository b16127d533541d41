"""
Match read model.

Provides the immutable record handed to registry readers, so nothing outside
the match store can mutate stored state through a returned object.
"""

from dataclasses import dataclass
from typing import List, Optional

from matchbook.constants import RegistryConstants
from matchbook.database.models import MatchOutcome, MatchRow
from matchbook.utils.match_id import format_match_id


@dataclass(frozen=True)
class Match:
    """One sporting event as seen by readers."""
    match_id: bytes
    name: str
    participants: str          # Delimited, e.g. "Mexico vs South Africa"
    participant_count: int
    date: int                  # Opaque timestamp
    outcome: MatchOutcome
    winner: int                # -1 when unset

    @classmethod
    def placeholder(cls, match_id: bytes = RegistryConstants.ZERO_MATCH_ID) -> 'Match':
        """Zero-valued record returned by reads when no match exists."""
        return cls(
            match_id=match_id,
            name='',
            participants='',
            participant_count=0,
            date=0,
            outcome=MatchOutcome.PENDING,
            winner=RegistryConstants.UNSET_WINNER,
        )

    @classmethod
    def from_row(cls, row: MatchRow) -> 'Match':
        return cls(
            match_id=bytes(row.match_id),
            name=row.name,
            participants=row.participants,
            participant_count=row.participant_count,
            date=row.date,
            outcome=row.outcome,
            winner=row.winner,
        )

    @property
    def id_hex(self) -> str:
        return format_match_id(self.match_id)

    @property
    def is_decided(self) -> bool:
        return self.outcome == MatchOutcome.DECIDED

    @property
    def participant_names(self) -> List[str]:
        if not self.participants:
            return []
        return [name.strip() for name in self.participants.split(RegistryConstants.PARTICIPANT_DELIMITER)]

    @property
    def winner_name(self) -> Optional[str]:
        """Name of the winning participant, only when decided and resolvable"""
        if not self.is_decided:
            return None
        names = self.participant_names
        if 0 <= self.winner < len(names):
            return names[self.winner]
        return None
