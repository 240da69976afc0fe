"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.address import ZERO_ADDRESS, is_zero_address

__all__ = ['ZERO_ADDRESS', 'is_zero_address']
