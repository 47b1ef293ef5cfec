# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_payment_client
from storefront.data.database import get_db
from storefront.domain.errors import Conflict, InvalidInput, InvalidState, PaymentProcessorError
from storefront.domain.schemas import (
    ConfirmPaymentIn,
    ConfirmPaymentOut,
    PaymentIntentIn,
    PaymentIntentOut,
)
from storefront.services.checkout_service import CheckoutService
from storefront.services.payment_client import PaymentClient

router = APIRouter(prefix="/api", tags=["checkout"])


def get_service(db: Session, payment_client: PaymentClient):
    return CheckoutService(db, payment_client)


@router.post("/create-payment-intent", response_model=PaymentIntentOut)
def create_payment_intent(
    payload: PaymentIntentIn,
    db: Session = Depends(get_db),
    payment_client: PaymentClient = Depends(get_payment_client),
):
    svc = get_service(db, payment_client)
    try:
        return svc.create_payment_intent(payload.session_id, payload.customer_email)
    except (InvalidInput, InvalidState) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PaymentProcessorError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/confirm-payment", response_model=ConfirmPaymentOut)
def confirm_payment(
    payload: ConfirmPaymentIn,
    db: Session = Depends(get_db),
    payment_client: PaymentClient = Depends(get_payment_client),
):
    """
    Records the payment and empties the cart.
    409 means the intent was already confirmed; clients treat it as done.
    """
    svc = get_service(db, payment_client)
    try:
        payment = svc.confirm_payment(payload.payment_intent_id, payload.session_id)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Conflict as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PaymentProcessorError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"success": True, "payment": payment}
