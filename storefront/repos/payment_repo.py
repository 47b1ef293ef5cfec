# storefront/repos/payment_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.payment import PaymentModel


class PaymentRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_payment(self, payment: PaymentModel) -> PaymentModel:
        # flush only: the caller commits together with the cart clearing
        self.db.add(payment)
        self.db.flush()
        return payment

    def get_by_intent(self, payment_intent_id: str) -> PaymentModel | None:
        return self.db.execute(
            select(PaymentModel).where(PaymentModel.payment_intent_id == payment_intent_id)
        ).scalar_one_or_none()
