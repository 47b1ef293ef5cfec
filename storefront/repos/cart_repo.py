# storefront/repos/cart_repo.py
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CartRepo:
    """
    Cart header + line items.
    Writes that race on a unique key (session_id, (cart_id, product_id))
    go through INSERT ... ON CONFLICT so they stay atomic.
    """

    def __init__(self, db: Session):
        self.db = db

    def _insert(self, model):
        dialect = self.db.get_bind().dialect.name
        insert = _INSERTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Unsupported database dialect for upserts: {dialect}")
        return insert(model)

    def get_cart_by_session(self, session_id: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.session_id == session_id)
        ).scalar_one_or_none()

    def get_or_create_cart(self, session_id: str) -> CartModel:
        stmt = (
            self._insert(CartModel)
            .values(session_id=session_id)
            .on_conflict_do_nothing(index_elements=["session_id"])
        )
        self.db.execute(stmt)
        return self.get_cart_by_session(session_id)

    def upsert_item(self, cart_id: int, product_id: int, quantity: int):
        stmt = self._insert(CartItemModel).values(
            cart_id=cart_id,
            product_id=product_id,
            quantity=quantity,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["cart_id", "product_id"],
            set_={"quantity": CartItemModel.__table__.c.quantity + stmt.excluded.quantity},
        )
        self.db.execute(stmt)

    def set_item_quantity(self, session_id: str, product_id: int, quantity: int) -> int:
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.cart_id == self._cart_id_subquery(session_id),
                CartItemModel.product_id == product_id,
            )
            .values(quantity=quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_item(self, session_id: str, product_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(
                CartItemModel.cart_id == self._cart_id_subquery(session_id),
                CartItemModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def clear_items(self, session_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.cart_id == self._cart_id_subquery(session_id))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def get_cart_lines(self, session_id: str) -> List[tuple[CartItemModel, ProductModel]]:
        rows = self.db.execute(
            select(CartItemModel, ProductModel)
            .join(CartModel, CartItemModel.cart_id == CartModel.id)
            .join(ProductModel, CartItemModel.product_id == ProductModel.id)
            .where(CartModel.session_id == session_id)
            .order_by(CartItemModel.id)
        ).all()
        return [(item, product) for item, product in rows]

    def _cart_id_subquery(self, session_id: str):
        return (
            select(CartModel.id)
            .where(CartModel.session_id == session_id)
            .scalar_subquery()
        )

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
