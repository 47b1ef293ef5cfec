# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import InvalidInput, NotFound
from storefront.domain.schemas import (
    ActionResult,
    CartAddIn,
    CartOut,
    CartRemoveIn,
    CartUpdateIn,
)
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.post("/add", response_model=ActionResult)
def add_item(payload: CartAddIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.add_item(payload.session_id, payload.product_id, payload.quantity)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ActionResult(message="Item added to cart")


@router.get("/{session_id}", response_model=CartOut)
def get_cart(session_id: str, db: Session = Depends(get_db)):
    return get_service(db).get_cart(session_id)


@router.put("/update", response_model=ActionResult)
def update_item(payload: CartUpdateIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.update_quantity(payload.session_id, payload.product_id, payload.quantity)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ActionResult(message="Cart updated")


@router.delete("/remove", response_model=ActionResult)
def remove_item(payload: CartRemoveIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.remove_item(payload.session_id, payload.product_id)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ActionResult(message="Item removed from cart")
