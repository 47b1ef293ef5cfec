# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import NotFound
from storefront.domain.schemas import OrderOut
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("/{payment_intent_id}", response_model=OrderOut)
def get_order(payment_intent_id: str, db: Session = Depends(get_db)):
    """
    Recorded payment by intent id, amount in major currency units.
    """
    svc = OrderService(db)
    try:
        return svc.get_order(payment_intent_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
