from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class OrderNotFoundError(DomainError):
    """Order, or the subscription record attached to it, does not exist."""


class UnsupportedCartCompositionError(DomainError):
    """Subscription checkout requires exactly one product in the cart."""


class UnsupportedBillingPeriodError(DomainError):
    """Billing period has no gateway counterpart."""


class InvalidStartDateError(DomainError):
    """Custom start day saved on the product is out of range."""


class BillingError(DomainError):
    """Failure reported by (or while talking to) the payment gateway."""


class GatewayError(BillingError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CurrencyConversionError(BillingError):
    """No exchange rate configured for the store currency."""


class PlanCreationFailedError(BillingError):
    """Gateway refused to create a plan."""


class CustomerCreationFailedError(BillingError):
    """Gateway refused to create the customer."""


class SubscriptionCreationFailedError(BillingError):
    """Gateway refused to create the subscription."""


class SubscriptionCancellationFailedError(BillingError):
    """Gateway subscription could not be fetched or cancelled."""
