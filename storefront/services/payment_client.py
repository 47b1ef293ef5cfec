# storefront/services/payment_client.py
from dataclasses import dataclass, field
from typing import Any, Dict

import stripe

from storefront.domain.errors import PaymentProcessorError
from storefront.utils.logging import get_logger
from storefront.utils.settings import (
    PAYMENT_CURRENCY,
    PAYMENT_DESCRIPTION,
    PAYMENT_TIMEOUT_SECONDS,
    STRIPE_SECRET_KEY,
)

logger = get_logger(__name__)


@dataclass
class ProcessorIntent:
    """The fields of a processor payment intent the storefront relies on."""

    id: str
    amount: int
    currency: str
    status: str
    client_secret: str | None = None
    metadata: Dict[str, Any] = field(default_factory=dict)


def _to_intent(obj) -> ProcessorIntent:
    metadata = {}
    if obj.metadata:
        for key in ("session_id", "customer_email"):
            if key in obj.metadata:
                metadata[key] = obj.metadata[key]
    return ProcessorIntent(
        id=obj.id,
        amount=obj.amount,
        currency=obj.currency,
        status=obj.status,
        client_secret=obj.client_secret,
        metadata=metadata,
    )


class PaymentClient:
    """
    Stripe payment intents.
    No network retries: a failure goes straight back to the caller.
    """

    def __init__(
        self,
        api_key: str | None = None,
        currency: str | None = None,
        description: str | None = None,
        timeout: int | None = None,
    ):
        self.currency = currency or PAYMENT_CURRENCY
        self.description = description or PAYMENT_DESCRIPTION
        self.client = stripe.StripeClient(
            api_key or STRIPE_SECRET_KEY,
            http_client=stripe.RequestsClient(timeout=timeout or PAYMENT_TIMEOUT_SECONDS),
            max_network_retries=0,
        )

    def create_intent(self, amount: int, session_id: str, customer_email: str | None = None) -> ProcessorIntent:
        metadata = {"session_id": session_id}
        params: Dict[str, Any] = {
            "amount": amount,
            "currency": self.currency,
            "description": self.description,
            "metadata": metadata,
            "automatic_payment_methods": {"enabled": True},
        }
        if customer_email:
            metadata["customer_email"] = customer_email
            params["receipt_email"] = customer_email

        try:
            intent = self.client.payment_intents.create(params=params)
        except stripe.StripeError as e:
            logger.error(f"Stripe create payment intent failed for session {session_id}: {e}")
            raise PaymentProcessorError(str(e)) from e

        logger.info(f"Created PaymentIntent {intent.id} for {amount} {self.currency}")
        return _to_intent(intent)

    def retrieve_intent(self, intent_id: str) -> ProcessorIntent:
        try:
            intent = self.client.payment_intents.retrieve(intent_id)
        except stripe.StripeError as e:
            logger.error(f"Stripe retrieve payment intent {intent_id} failed: {e}")
            raise PaymentProcessorError(str(e)) from e
        return _to_intent(intent)
