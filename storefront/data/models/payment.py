from sqlalchemy import JSON, Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from storefront.data.database import Base


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    payment_intent_id = Column(String(255), unique=True, nullable=False)
    session_id = Column(String(255), nullable=False, index=True)

    amount = Column(Integer, nullable=False)  # minor currency units
    currency = Column(String(3), nullable=False)
    status = Column(String(50), nullable=False)
    customer_email = Column(String(255), nullable=True)

    # snapshot of the cart at confirmation time
    items = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
