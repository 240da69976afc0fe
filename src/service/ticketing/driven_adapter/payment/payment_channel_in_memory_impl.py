from collections import defaultdict
from typing import DefaultDict, Iterable, Set

from src.platform.exception.exceptions import PaymentDeliveryError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_payment_channel import IPaymentChannel
from src.service.ticketing.domain.value_object.address import is_zero_address


class InMemoryPaymentChannelImpl(IPaymentChannel):
    """
    Push-payment channel that credits recipient balances in memory.

    Recipients registered as refusing make every push to them fail,
    the way a contract without a payable fallback rejects funds.
    """

    def __init__(self, *, refusing_recipients: Iterable[str] = ()) -> None:
        self._balances: DefaultDict[str, int] = defaultdict(int)
        self._refusing_recipients: Set[str] = set(refusing_recipients)

    @Logger.io
    async def push(self, *, recipient: str, amount: int) -> None:
        if amount < 0:
            raise ValidationError('Payment amount cannot be negative')
        if is_zero_address(recipient) or recipient in self._refusing_recipients:
            raise PaymentDeliveryError(f'Recipient {recipient} refused the payment')

        self._balances[recipient] += amount
        Logger.base.info(f'💸 [PAYMENT] Delivered {amount} wei to {recipient}')

    def balance_of(self, recipient: str) -> int:
        return self._balances.get(recipient, 0)

    def refuse_payments_to(self, recipient: str) -> None:
        self._refusing_recipients.add(recipient)

    def accept_payments_to(self, recipient: str) -> None:
        self._refusing_recipients.discard(recipient)
