"""
Writer authorization for the match registry.

Exactly one principal (a Discord user id) holds write privilege at a time.
The registry is handed this object and asks it before every mutation.
"""

from typing import Optional

from matchbook.utils.registry_exceptions import UnauthorizedError
from matchbook.utils.logger import setup_logger

logger = setup_logger(__name__)


class WriterAuthorization:
    """Single-owner write capability with ownership transfer."""

    def __init__(self, owner_id: int):
        if not owner_id:
            raise ValueError("A registry owner id is required")
        self._owner_id = owner_id
        self.logger = logger

    @property
    def owner_id(self) -> int:
        return self._owner_id

    def is_authorized_writer(self, caller: Optional[int]) -> bool:
        return caller is not None and caller == self._owner_id

    def require_writer(self, caller: Optional[int]) -> None:
        """Raise UnauthorizedError unless caller holds write privilege"""
        if not self.is_authorized_writer(caller):
            self.logger.warning(f"Rejected write from {caller}: not the registry owner")
            raise UnauthorizedError(caller)

    def transfer_ownership(self, caller: Optional[int], new_owner_id: int) -> None:
        """
        Hand write privilege to another principal.

        Raises:
            UnauthorizedError: If caller is not the current owner
            ValueError: If new_owner_id is empty (renouncing is not supported)
        """
        self.require_writer(caller)
        if not new_owner_id:
            raise ValueError("New owner id is required")

        previous = self._owner_id
        self._owner_id = new_owner_id
        self.logger.info(f"Registry ownership transferred from {previous} to {new_owner_id}")
