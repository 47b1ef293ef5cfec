# storefront/services/checkout_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.payment import PaymentModel
from storefront.domain.errors import Conflict, InvalidInput, InvalidState
from storefront.repos.cart_repo import CartRepo
from storefront.repos.payment_repo import PaymentRepo
from storefront.services.payment_client import PaymentClient
from storefront.utils.logging import get_logger
from storefront.utils.money import round_money, to_minor_units

logger = get_logger(__name__)


def payment_as_dict(payment: PaymentModel) -> Dict[str, Any]:
    return {
        "id": payment.id,
        "payment_intent_id": payment.payment_intent_id,
        "session_id": payment.session_id,
        "amount": payment.amount,
        "currency": payment.currency,
        "status": payment.status,
        "customer_email": payment.customer_email,
        "items": payment.items,
        "created_at": payment.created_at,
    }


class CheckoutService:
    """
    Two-step checkout driven by the client:

    1. create_payment_intent - price the current cart and open an intent
       with the processor. Nothing is written to the database.
    2. confirm_payment - ask the processor for the intent's real status,
       record a Payment with a snapshot of the cart and empty the cart,
       in one transaction.

    The amount charged is fixed at step 1 while the snapshot is taken at
    step 2, so a cart changed in between (another tab) is recorded as it is
    at confirmation. The processor amount is stored as-is and a mismatch
    is logged as a warning.
    """

    def __init__(self, db: Session, payment_client: PaymentClient):
        self.db = db
        self.carts = CartRepo(db)
        self.payments = PaymentRepo(db)
        self.payment_client = payment_client

    def create_payment_intent(self, session_id: str, customer_email: str | None = None) -> Dict[str, str]:
        if not session_id:
            raise InvalidInput("Session ID is required")

        lines = self.carts.get_cart_lines(session_id)
        if not lines:
            raise InvalidState("Cart is empty")

        total = sum((product.price * item.quantity for item, product in lines), Decimal("0"))
        amount = to_minor_units(total)

        intent = self.payment_client.create_intent(amount, session_id, customer_email)

        return {
            "client_secret": intent.client_secret,
            "payment_intent_id": intent.id,
        }

    def confirm_payment(self, payment_intent_id: str, session_id: str) -> Dict[str, Any]:
        if not payment_intent_id or not session_id:
            raise InvalidInput("Payment intent ID and Session ID are required")

        # the processor decides whether the payment went through, not the caller
        intent = self.payment_client.retrieve_intent(payment_intent_id)
        self._check_session(intent.id, intent.metadata, session_id)

        items = self._snapshot(session_id)
        self._check_amount(intent.id, intent.amount, items)

        payment = PaymentModel(
            payment_intent_id=intent.id,
            session_id=session_id,
            amount=intent.amount,
            currency=intent.currency,
            status=intent.status,
            customer_email=intent.metadata.get("customer_email") or None,
            items=items,
        )

        try:
            self.payments.add_payment(payment)
            cleared = self.carts.clear_items(session_id)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.payments.get_by_intent(intent.id) is None:
                raise
            logger.info(f"Payment {payment_intent_id} already recorded")
            raise Conflict(f"Payment {payment_intent_id} has already been confirmed")
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Recorded payment {payment.payment_intent_id} ({payment.status}, "
            f"{payment.amount} {payment.currency}) for session {session_id}, cleared {cleared} cart items"
        )

        return payment_as_dict(payment)

    def _snapshot(self, session_id: str) -> List[Dict[str, Any]]:
        return [
            {
                "product_id": product.id,
                "name": product.name,
                "price": float(product.price),
                "quantity": item.quantity,
                "item_total": float(round_money(product.price * item.quantity)),
            }
            for item, product in self.carts.get_cart_lines(session_id)
        ]

    def _check_session(self, intent_id: str, metadata: Dict[str, Any], session_id: str):
        owner = metadata.get("session_id")
        if owner and owner != session_id:
            logger.warning(f"Payment {intent_id} belongs to session {owner}, refused for session {session_id}")
            raise InvalidInput("Payment intent does not belong to this session")

    def _check_amount(self, intent_id: str, charged: int, items: List[Dict[str, Any]]):
        expected = to_minor_units(sum((Decimal(str(i["item_total"])) for i in items), Decimal("0")))
        if expected != charged:
            logger.warning(
                f"Payment {intent_id}: processor amount {charged} differs from cart snapshot "
                f"amount {expected}; recording the processor amount"
            )
