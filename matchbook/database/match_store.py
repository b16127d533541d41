"""
Match Store - append-only sequence of matches plus the identifier index.

Pure data access over the `matches` table. Validation, authorization and
write serialization live in the operations layer (MatchRegistry); this class
only guarantees that each write is a single transaction, so readers never see
a row without its index entry or the other way round.
"""

from typing import List, Optional
from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError

from matchbook.constants import RegistryConstants
from matchbook.data_models.match import Match
from matchbook.database.database import Database
from matchbook.database.models import MatchRow, MatchOutcome
from matchbook.utils.registry_exceptions import DuplicateRecordError
from matchbook.utils.match_id import format_match_id
from matchbook.utils.logger import setup_logger

logger = setup_logger(__name__)


class MatchStore:
    """Owns every stored match. Rows are appended, never removed or reordered."""

    def __init__(self, database: Database):
        self.db = database
        self.logger = logger

    async def exists(self, match_id: bytes) -> bool:
        """True when a match with this id has been appended"""
        if match_id == RegistryConstants.ZERO_MATCH_ID:
            return False
        async with self.db.get_session() as session:
            seq = await session.scalar(
                select(MatchRow.seq).where(MatchRow.match_id == match_id)
            )
        return seq is not None

    async def find(self, match_id: bytes) -> Optional[Match]:
        """Resolve an id to its record, or None if it was never appended"""
        if match_id == RegistryConstants.ZERO_MATCH_ID:
            return None
        async with self.db.get_session() as session:
            row = await session.scalar(
                select(MatchRow).where(MatchRow.match_id == match_id)
            )
            return Match.from_row(row) if row else None

    async def append(
        self,
        match_id: bytes,
        name: str,
        participants: str,
        participant_count: int,
        date: int
    ) -> Match:
        """
        Append a new pending match at the end of the sequence.

        Raises:
            DuplicateRecordError: If the id is already indexed
        """
        row = MatchRow(
            match_id=match_id,
            name=name,
            participants=participants,
            participant_count=participant_count,
            date=date,
            outcome=MatchOutcome.PENDING,
            winner=RegistryConstants.UNSET_WINNER,
        )
        try:
            async with self.db.transaction() as session:
                session.add(row)
                await session.flush()
                self.logger.debug(f"Appended match {format_match_id(match_id)} at position {row.position}")
                return Match.from_row(row)
        except IntegrityError as e:
            raise DuplicateRecordError(match_id) from e

    async def update_outcome(self, match_id: bytes, outcome: MatchOutcome, winner: Optional[int] = None) -> bool:
        """
        Overwrite the outcome (and the winner, when given) of a stored match in place.

        Returns:
            True if a row was updated
        """
        values = {'outcome': outcome}
        if winner is not None:
            values['winner'] = winner

        async with self.db.transaction() as session:
            result = await session.execute(
                update(MatchRow)
                .where(MatchRow.match_id == match_id)
                .values(**values)
            )
            return result.rowcount == 1

    def _ordered_ids(self, pending_only: bool):
        query = select(MatchRow.match_id)
        if pending_only:
            query = query.where(MatchRow.outcome == MatchOutcome.PENDING)
        return query.order_by(MatchRow.seq.desc())

    async def list_ids(self, pending_only: bool = False) -> List[bytes]:
        """Match ids in reverse insertion order, optionally only pending ones"""
        async with self.db.get_session() as session:
            result = await session.scalars(self._ordered_ids(pending_only))
            return [bytes(match_id) for match_id in result.all()]

    async def latest_id(self, pending_only: bool = False) -> Optional[bytes]:
        """Most recently appended id, or None if there is none"""
        async with self.db.get_session() as session:
            match_id = await session.scalar(self._ordered_ids(pending_only).limit(1))
            return bytes(match_id) if match_id is not None else None

    async def count(self, pending_only: bool = False) -> int:
        query = select(func.count(MatchRow.seq))
        if pending_only:
            query = query.where(MatchRow.outcome == MatchOutcome.PENDING)
        async with self.db.get_session() as session:
            return await session.scalar(query) or 0
