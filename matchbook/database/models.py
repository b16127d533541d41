"""
Match registry schema.

The `matches` table is both halves of the match store:
- the append-only sequence, ordered by the autoincrement `seq` column
  (position = seq - 1, never reused because rows are never deleted)
- the identifier index, a UNIQUE index on `match_id`
"""

from sqlalchemy import (
    Column, Integer, BigInteger, String, Text, LargeBinary, DateTime,
    SmallInteger, Enum as SQLEnum, CheckConstraint
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func
from enum import Enum

from matchbook.constants import RegistryConstants

Base = declarative_base()

class MatchOutcome(Enum):
    """Lifecycle classification of a match. Any outcome may follow any other."""
    PENDING = "pending"      # Registered, not started
    UNDERWAY = "underway"    # In progress
    DRAW = "draw"            # Finished without a winner
    DECIDED = "decided"      # Finished, winner index recorded

class MatchRow(Base):
    """
    Stored match record.

    Only `outcome` and `winner` are ever updated after insertion.
    """
    __tablename__ = 'matches'

    seq = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(LargeBinary(RegistryConstants.MATCH_ID_LENGTH), nullable=False, unique=True, index=True)

    # Event description
    name = Column(String(200), nullable=False)
    participants = Column(Text, nullable=False, default='')
    participant_count = Column(SmallInteger, nullable=False)
    date = Column(BigInteger, nullable=False)  # Opaque timestamp

    # Lifecycle
    outcome = Column(SQLEnum(MatchOutcome), nullable=False, default=MatchOutcome.PENDING, index=True)
    winner = Column(SmallInteger, nullable=False, default=RegistryConstants.UNSET_WINNER)

    # Metadata
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint(
            f'participant_count >= 0 AND participant_count <= {RegistryConstants.PARTICIPANT_COUNT_MAX}',
            name='ck_matches_participant_count'
        ),
        {'sqlite_autoincrement': True},
    )

    @property
    def position(self) -> int:
        """Zero-based position in insertion order"""
        return self.seq - 1

    def __repr__(self):
        return f"<MatchRow(seq={self.seq}, name='{self.name}', outcome={self.outcome.value}, winner={self.winner})>"
