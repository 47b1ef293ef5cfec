# storefront/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.domain.errors import InvalidInput, NotFound
from storefront.domain.schemas import MAX_INT
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger
from storefront.utils.money import format_money

logger = get_logger(__name__)


def _require(session_id: str | None, product_id: int | None = None, *, check_product: bool = True):
    if not session_id:
        raise InvalidInput("Session ID is required")
    if check_product and not product_id:
        raise InvalidInput("Product ID is required")
    if product_id is not None and product_id > MAX_INT:
        raise InvalidInput("Product ID is out of range")


def _check_quantity_range(quantity: int):
    if quantity > MAX_INT:
        raise InvalidInput(f"Quantity must not exceed {MAX_INT}")


class CartService:
    """
    Session-scoped cart.
    commands (add, update, remove) modify state and commit,
    query (get_cart) only reads.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    # query
    def get_cart(self, session_id: str) -> Dict[str, Any]:
        lines = self.repo.get_cart_lines(session_id)

        items = [
            {
                "id": item.id,
                "product_id": product.id,
                "name": product.name,
                "price": float(product.price),
                "description": product.description,
                "quantity": item.quantity,
            }
            for item, product in lines
        ]
        total = sum((product.price * item.quantity for item, product in lines), Decimal("0.00"))

        return {
            "items": items,
            "total": format_money(total),
            "count": sum(item.quantity for item, _ in lines),
        }

    # commands
    def get_or_create_cart(self, session_id: str) -> CartModel:
        _require(session_id, check_product=False)
        cart = self.repo.get_or_create_cart(session_id)
        self.repo.commit()
        return cart

    def add_item(self, session_id: str, product_id: int, quantity: int = 1):
        _require(session_id, product_id)
        if quantity is None or quantity <= 0:
            raise InvalidInput("Quantity must be a positive integer")
        _check_quantity_range(quantity)

        if not self.products.get_product(product_id):
            raise NotFound("Product not found")

        try:
            cart = self.repo.get_or_create_cart(session_id)
            self.repo.upsert_item(cart.id, product_id, quantity)
            self.repo.commit()
        except (IntegrityError, DataError):
            # the incremented quantity overflowed the column
            self.repo.rollback()
            raise InvalidInput(f"Quantity must not exceed {MAX_INT}")
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Added product {product_id} x{quantity} to cart {cart.id} (session {session_id})")

    def update_quantity(self, session_id: str, product_id: int, quantity: int):
        _require(session_id, product_id)
        if quantity is None or quantity < 0:
            raise InvalidInput("Quantity must not be negative")
        _check_quantity_range(quantity)

        try:
            if quantity == 0:
                self.repo.delete_item(session_id, product_id)
            else:
                self.repo.set_item_quantity(session_id, product_id, quantity)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Set product {product_id} quantity to {quantity} (session {session_id})")

    def remove_item(self, session_id: str, product_id: int):
        _require(session_id, product_id)

        try:
            removed = self.repo.delete_item(session_id, product_id)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        if removed:
            logger.info(f"Removed product {product_id} from cart (session {session_id})")
