# storefront/domain/errors.py


class StorefrontError(Exception):
    """Base class for errors raised by the storefront services."""


class InvalidInput(StorefrontError):
    """Missing or malformed request fields."""


class InvalidState(StorefrontError):
    """The request is well formed but cannot be applied right now (e.g. empty cart)."""


class NotFound(StorefrontError):
    pass


class Conflict(StorefrontError):
    """A write collided with a unique constraint (e.g. an already recorded payment)."""


class PaymentProcessorError(StorefrontError):
    pass


class RelayError(StorefrontError):
    pass
