"""
In-memory Ownership Registry Implementation

ERC-721 style holdership: one owner per token, per-owner balances,
single-token approvals cleared on transfer, and operator approvals.
"""

from collections import Counter
from typing import Dict, Optional, Set, Tuple

from src.platform.exception.exceptions import (
    InvalidRecipientError,
    NotFoundError,
    NotOwnerError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ownership_registry import IOwnershipRegistry
from src.service.ticketing.domain.value_object.address import is_zero_address


_RegistrySnapshot = Tuple[Dict[int, str], Dict[int, str], Set[Tuple[str, str]]]


class InMemoryOwnershipRegistryImpl(IOwnershipRegistry):
    def __init__(self) -> None:
        self._owners: Dict[int, str] = {}
        self._token_approvals: Dict[int, str] = {}
        self._operator_approvals: Set[Tuple[str, str]] = set()  # (owner, operator)

    @Logger.io
    async def mint(self, *, to_address: str, token_id: int) -> None:
        if is_zero_address(to_address):
            raise InvalidRecipientError('Cannot mint to the zero address')
        if token_id in self._owners:
            raise ValidationError(f'Token {token_id} already minted')

        self._owners[token_id] = to_address

    @Logger.io
    async def transfer(self, *, from_address: str, to_address: str, token_id: int) -> None:
        if self._owners.get(token_id) != from_address:
            raise NotOwnerError(f'{from_address} does not own token {token_id}')
        if is_zero_address(to_address):
            raise InvalidRecipientError('Cannot transfer to the zero address')

        self._token_approvals.pop(token_id, None)
        self._owners[token_id] = to_address

    async def owner_of(self, *, token_id: int) -> str:
        owner = self._owners.get(token_id)
        if owner is None:
            raise NotFoundError(f'Token {token_id} does not exist')
        return owner

    async def balance_of(self, *, owner: str) -> int:
        if is_zero_address(owner):
            raise InvalidRecipientError('Zero address is not a valid owner')
        return Counter(self._owners.values())[owner]

    @Logger.io
    async def approve(self, *, approved: str, token_id: int) -> None:
        if token_id not in self._owners:
            raise NotFoundError(f'Token {token_id} does not exist')

        if is_zero_address(approved):
            self._token_approvals.pop(token_id, None)
        else:
            self._token_approvals[token_id] = approved

    async def get_approved(self, *, token_id: int) -> Optional[str]:
        return self._token_approvals.get(token_id)

    @Logger.io
    async def set_approval_for_all(self, *, owner: str, operator: str, approved: bool) -> None:
        if owner == operator:
            raise ValidationError('Cannot approve oneself as operator')

        if approved:
            self._operator_approvals.add((owner, operator))
        else:
            self._operator_approvals.discard((owner, operator))

    async def is_approved_for_all(self, *, owner: str, operator: str) -> bool:
        return (owner, operator) in self._operator_approvals

    def snapshot(self) -> _RegistrySnapshot:
        return dict(self._owners), dict(self._token_approvals), set(self._operator_approvals)

    def restore(self, snapshot: _RegistrySnapshot) -> None:
        owners, token_approvals, operator_approvals = snapshot
        self._owners = dict(owners)
        self._token_approvals = dict(token_approvals)
        self._operator_approvals = set(operator_approvals)
