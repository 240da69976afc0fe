from abc import ABC, abstractmethod


class IPaymentChannel(ABC):
    """
    Port (interface) for escrow-less push payments.

    A push either delivers the full amount to the recipient or fails;
    it never delivers part of it.
    """

    @abstractmethod
    async def push(self, *, recipient: str, amount: int) -> None:
        """
        Deliver amount (in wei) to recipient.

        Raises:
            PaymentDeliveryError: If the recipient refuses the funds
        """
        pass
