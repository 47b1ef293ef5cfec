# storefront/services/order_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.domain.errors import NotFound
from storefront.repos.payment_repo import PaymentRepo
from storefront.utils.money import from_minor_units


class OrderService:
    """Read side of recorded payments."""

    def __init__(self, db: Session):
        self.repo = PaymentRepo(db)

    def get_order(self, payment_intent_id: str) -> Dict[str, Any]:
        payment = self.repo.get_by_intent(payment_intent_id)

        if not payment:
            raise NotFound("Order not found")

        return {
            "id": payment.id,
            "payment_intent_id": payment.payment_intent_id,
            "amount": float(from_minor_units(payment.amount)),
            "currency": payment.currency,
            "status": payment.status,
            "customer_email": payment.customer_email,
            "items": payment.items or [],
            "created_at": payment.created_at,
        }
