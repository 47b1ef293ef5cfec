# storefront/domain/schemas.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# INT4 columns: ids and quantities must fit a 32-bit signed integer
MAX_INT = 2**31 - 1


class _RequestModel(BaseModel):
    """Request bodies use the camelCase keys of the storefront frontend; snake_case is accepted too."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class CartAddIn(_RequestModel):
    session_id: str = Field(..., alias="sessionId", min_length=1, max_length=255)
    product_id: int = Field(..., alias="productId", gt=0, le=MAX_INT)
    quantity: int = Field(1, gt=0, le=MAX_INT)


class CartUpdateIn(_RequestModel):
    session_id: str = Field(..., alias="sessionId", min_length=1, max_length=255)
    product_id: int = Field(..., alias="productId", gt=0, le=MAX_INT)
    quantity: int = Field(..., ge=0, le=MAX_INT, description="0 removes the line item")


class CartRemoveIn(_RequestModel):
    session_id: str = Field(..., alias="sessionId", min_length=1, max_length=255)
    product_id: int = Field(..., alias="productId", gt=0, le=MAX_INT)


class PaymentIntentIn(_RequestModel):
    session_id: str = Field(..., alias="sessionId", min_length=1, max_length=255)
    customer_email: EmailStr | None = Field(None, alias="customerEmail")


class ConfirmPaymentIn(_RequestModel):
    payment_intent_id: str = Field(..., alias="paymentIntentId", min_length=1, max_length=255)
    session_id: str = Field(..., alias="sessionId", min_length=1, max_length=255)


class ContactIn(_RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class ProductOut(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: float
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ActionResult(BaseModel):
    success: bool = True
    message: str


class CartItemOut(BaseModel):
    id: int
    product_id: int
    name: str
    price: float
    description: str | None = None
    quantity: int


class CartOut(BaseModel):
    items: List[CartItemOut]
    total: str
    count: int


class PaymentIntentOut(BaseModel):
    client_secret: str = Field(..., serialization_alias="clientSecret")
    payment_intent_id: str = Field(..., serialization_alias="paymentIntentId")


class SnapshotItem(BaseModel):
    product_id: int
    name: str
    price: float
    quantity: int
    item_total: float


class PaymentOut(BaseModel):
    id: int
    payment_intent_id: str
    session_id: str
    amount: int
    currency: str
    status: str
    customer_email: str | None = None
    items: List[SnapshotItem]
    created_at: datetime | None = None


class ConfirmPaymentOut(BaseModel):
    success: bool = True
    payment: PaymentOut


class OrderOut(BaseModel):
    id: int
    payment_intent_id: str
    amount: float
    currency: str
    status: str
    customer_email: str | None = None
    items: List[SnapshotItem]
    created_at: datetime | None = None


class ContactOut(BaseModel):
    success: bool = True
