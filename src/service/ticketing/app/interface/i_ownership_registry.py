"""
Ownership Registry Interface

ERC-721-like substrate that tracks which principal holds each ticket and the
approvals that let a third party move it. The ledger never re-implements
holdership; it only calls this port.

A registry takes part in the ledger's unit of work, so it must be able to
snapshot and restore its state: a purchase whose payment fails must not
leave a minted ticket behind.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IOwnershipRegistry(ABC):
    @abstractmethod
    async def mint(self, *, to_address: str, token_id: int) -> None:
        """
        Create token_id owned by to_address.

        Raises:
            InvalidRecipientError: If to_address is the zero address
            ValidationError: If token_id already exists
        """
        pass

    @abstractmethod
    async def transfer(self, *, from_address: str, to_address: str, token_id: int) -> None:
        """
        Atomically move token_id and clear its single-token approval.

        Raises:
            NotOwnerError: If from_address does not own token_id
            InvalidRecipientError: If to_address is the zero address
        """
        pass

    @abstractmethod
    async def owner_of(self, *, token_id: int) -> str:
        """
        Raises:
            NotFoundError: If token_id was never minted
        """
        pass

    @abstractmethod
    async def balance_of(self, *, owner: str) -> int:
        pass

    @abstractmethod
    async def approve(self, *, approved: str, token_id: int) -> None:
        """Set (or clear with the zero address) the single-token approval"""
        pass

    @abstractmethod
    async def get_approved(self, *, token_id: int) -> Optional[str]:
        """Approved address for token_id, None when unset or unknown"""
        pass

    @abstractmethod
    async def set_approval_for_all(self, *, owner: str, operator: str, approved: bool) -> None:
        pass

    @abstractmethod
    async def is_approved_for_all(self, *, owner: str, operator: str) -> bool:
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """Opaque copy of the current state, taken when a unit of work starts"""
        pass

    @abstractmethod
    def restore(self, snapshot: Any) -> None:
        """Return to a state captured by snapshot(); used when a unit of work is not committed"""
        pass
