class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# Event creation / approval parameters
class ValidationError(DomainError):
    pass


# Caller lacks the host, owner or approved relationship
class AuthorizationError(ForbiddenError):
    pass


class InactiveEventError(ConflictError):
    pass


class EventExpiredError(ConflictError):
    pass


class SoldOutError(ConflictError):
    pass


class PaymentMismatchError(DomainError):
    pass


# Raised by the ownership registry, surfaced unchanged
class NotOwnerError(ForbiddenError):
    pass


class InvalidRecipientError(DomainError):
    pass


class PaymentDeliveryError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
