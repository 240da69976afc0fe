from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import AuthorizationError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ownership_registry import IOwnershipRegistry


class TicketOwnershipFacade:
    """Authorizes callers, then delegates holdership changes to the ownership registry."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @property
    def registry(self) -> IOwnershipRegistry:
        return self.uow.ownership_registry

    async def _is_authorized_for(self, *, caller: str, holder: str, ticket_id: int) -> bool:
        if caller == holder:
            return True
        if await self.registry.get_approved(token_id=ticket_id) == caller:
            return True
        return await self.registry.is_approved_for_all(owner=holder, operator=caller)

    @Logger.io
    async def transfer_ticket(
        self, *, from_address: str, to_address: str, ticket_id: int, caller: str
    ) -> None:
        """
        Raises:
            AuthorizationError: Caller is neither from_address nor approved by it
            NotOwnerError: from_address does not own the ticket (from the registry)
            InvalidRecipientError: to_address is the zero address (from the registry)
        """
        async with self.uow:
            if not await self._is_authorized_for(
                caller=caller, holder=from_address, ticket_id=ticket_id
            ):
                raise AuthorizationError('Caller is not the ticket holder nor approved')

            await self.registry.transfer(
                from_address=from_address, to_address=to_address, token_id=ticket_id
            )
            await self.uow.commit()

        Logger.base.info(f'🔁 [OWNERSHIP] Ticket {ticket_id} moved {from_address} -> {to_address}')

    @Logger.io
    async def approve(self, *, approved: str, ticket_id: int, caller: str) -> None:
        async with self.uow:
            owner = await self.registry.owner_of(token_id=ticket_id)
            if approved == owner:
                raise ValidationError('Approval to the current owner')
            if caller != owner and not await self.registry.is_approved_for_all(
                owner=owner, operator=caller
            ):
                raise AuthorizationError('Caller is not the ticket owner nor an approved operator')

            await self.registry.approve(approved=approved, token_id=ticket_id)
            await self.uow.commit()

    @Logger.io
    async def set_approval_for_all(self, *, operator: str, approved: bool, caller: str) -> None:
        async with self.uow:
            await self.registry.set_approval_for_all(
                owner=caller, operator=operator, approved=approved
            )
            await self.uow.commit()

    async def owner_of(self, *, ticket_id: int) -> str:
        return await self.registry.owner_of(token_id=ticket_id)

    async def balance_of(self, *, owner: str) -> int:
        return await self.registry.balance_of(owner=owner)

    async def get_approved(self, *, ticket_id: int) -> Optional[str]:
        return await self.registry.get_approved(token_id=ticket_id)

    async def is_approved_for_all(self, *, owner: str, operator: str) -> bool:
        return await self.registry.is_approved_for_all(owner=owner, operator=operator)
