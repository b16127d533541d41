"""
Match Registry Operations

Public operations of the match registry, layered directly over MatchStore:
- insert: register a match under its content-derived id (writer only)
- set_outcome: move a match through its outcome lifecycle (writer only)
- exists / get / find: point lookups
- list_all / list_pending / most_recent: enumeration, newest-inserted first

Writes fail loudly with a MatchRegistryException subclass before anything is
changed. Reads never raise for a missing match: `get` and `most_recent`
return the placeholder record, `find` returns None.

Writes are serialized by a single asyncio lock held across the
check-then-write sequence; reads take no lock.
"""

import asyncio
from typing import List, Optional

from matchbook.constants import RegistryConstants
from matchbook.data_models.match import Match
from matchbook.database.match_store import MatchStore
from matchbook.database.models import MatchOutcome
from matchbook.operations.authorization import WriterAuthorization
from matchbook.utils.registry_exceptions import (
    DuplicateRecordError, NotFoundError, InvalidWinnerError
)
from matchbook.utils.match_id import derive_match_id, format_match_id
from matchbook.utils.logger import setup_logger

logger = setup_logger(__name__)


class MatchRegistry:
    """Core service class for match registration and outcome tracking."""

    def __init__(self, store: MatchStore, authorization: WriterAuthorization):
        """Initialize with the match store and the writer capability"""
        self.store = store
        self.authorization = authorization
        self._write_lock = asyncio.Lock()
        self.logger = logger

    # ============================================================================
    # Writes
    # ============================================================================

    async def insert(
        self,
        caller: int,
        name: str,
        participants: str,
        participant_count: int,
        date: int
    ) -> bytes:
        """
        Register a new match and return its id.

        The id is derived from (name, participant_count, date) only, so the
        same event registered with a different participant list is still a
        duplicate.

        Args:
            caller: Principal requesting the write
            name: Display label
            participants: Delimited participant names
            participant_count: Number of participants
            date: Opaque timestamp, signed 64-bit

        Returns:
            bytes: The 32-byte match id

        Raises:
            UnauthorizedError: If caller lacks write privilege
            DuplicateRecordError: If the derived id is already registered
            ValueError: If participant_count does not fit one byte or date is outside the signed 64-bit range
        """
        self.authorization.require_writer(caller)
        match_id = derive_match_id(name, participant_count, date)

        async with self._write_lock:
            if await self.store.exists(match_id):
                self.logger.warning(f"Rejected duplicate match '{name}' ({format_match_id(match_id)})")
                raise DuplicateRecordError(match_id)

            await self.store.append(match_id, name, participants, participant_count, date)

        self.logger.info(f"Registered match '{name}' as {format_match_id(match_id)}")
        return match_id

    async def set_outcome(
        self,
        caller: int,
        match_id: bytes,
        outcome: MatchOutcome,
        winner: int = RegistryConstants.UNSET_WINNER
    ) -> None:
        """
        Set the outcome of a registered match.

        Any outcome may follow any other. The winner is validated and stored
        only for DECIDED; for every other outcome it is ignored and the
        previously stored winner is left as it was.

        Raises:
            UnauthorizedError: If caller lacks write privilege
            NotFoundError: If no match has this id
            InvalidWinnerError: If DECIDED and winner is not in [0, participant_count)
        """
        self.authorization.require_writer(caller)

        async with self._write_lock:
            match = await self.store.find(match_id)
            if match is None:
                self.logger.warning(f"Rejected outcome {outcome.value} for unknown match {format_match_id(match_id)}")
                raise NotFoundError(match_id)

            if outcome == MatchOutcome.DECIDED:
                if not 0 <= winner < match.participant_count:
                    self.logger.warning(
                        f"Rejected winner {winner} for match {format_match_id(match_id)} "
                        f"with {match.participant_count} participants"
                    )
                    raise InvalidWinnerError(winner, match.participant_count)
                await self.store.update_outcome(match_id, outcome, winner)
            else:
                await self.store.update_outcome(match_id, outcome)

        self.logger.info(
            f"Match {format_match_id(match_id)} outcome {match.outcome.value} -> {outcome.value}"
            + (f" (winner {winner})" if outcome == MatchOutcome.DECIDED else "")
        )

    # ============================================================================
    # Reads
    # ============================================================================

    async def exists(self, match_id: bytes) -> bool:
        return await self.store.exists(match_id)

    async def find(self, match_id: bytes) -> Optional[Match]:
        """Stored match, or None if the id was never registered"""
        return await self.store.find(match_id)

    async def get(self, match_id: bytes) -> Match:
        """Stored match, or the placeholder record carrying the requested id"""
        match = await self.store.find(match_id)
        return match if match is not None else Match.placeholder(match_id)

    async def list_all(self) -> List[bytes]:
        """Every match id, most recently inserted first"""
        return await self.store.list_ids()

    async def list_pending(self) -> List[bytes]:
        """Ids of pending matches, most recently inserted first"""
        return await self.store.list_ids(pending_only=True)

    async def most_recent(self, pending_only: bool = False) -> Match:
        """
        Most recently inserted match (optionally only among pending ones).

        Returns the placeholder record with the zero id when there is none.
        """
        match_id = await self.store.latest_id(pending_only=pending_only)
        if match_id is None:
            return Match.placeholder()
        return await self.get(match_id)

    async def count(self, pending_only: bool = False) -> int:
        return await self.store.count(pending_only=pending_only)
