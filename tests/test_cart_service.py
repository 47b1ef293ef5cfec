import pytest

from storefront.domain.errors import InvalidInput, NotFound
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.services.cart_service import CartService
from tests.conftest import AI_ID, DESIGN_ID


@pytest.fixture()
def svc(db):
    return CartService(db)


def _rows(db, model):
    return db.query(model).all()


class TestGetOrCreateCart:
    def test_same_session_returns_same_cart(self, svc, db):
        first = svc.get_or_create_cart("sess-1")
        second = svc.get_or_create_cart("sess-1")

        assert first.id == second.id
        assert len(_rows(db, CartModel)) == 1

    def test_different_sessions_get_different_carts(self, svc):
        assert svc.get_or_create_cart("sess-1").id != svc.get_or_create_cart("sess-2").id

    def test_missing_session_key(self, svc):
        with pytest.raises(InvalidInput):
            svc.get_or_create_cart("")


class TestAddItem:
    def test_repeated_add_increments_quantity(self, svc, db):
        svc.add_item("sess-1", DESIGN_ID, 2)
        svc.add_item("sess-1", DESIGN_ID, 3)

        items = _rows(db, CartItemModel)
        assert len(items) == 1
        assert items[0].quantity == 5

    def test_default_quantity_is_one(self, svc):
        svc.add_item("sess-1", DESIGN_ID)

        cart = svc.get_cart("sess-1")
        assert cart["items"][0]["quantity"] == 1

    def test_creates_cart_on_first_add(self, svc, db):
        svc.add_item("sess-new", DESIGN_ID)

        carts = _rows(db, CartModel)
        assert [c.session_id for c in carts] == ["sess-new"]

    def test_unknown_product(self, svc, db):
        with pytest.raises(NotFound):
            svc.add_item("sess-1", 9999)
        assert _rows(db, CartItemModel) == []

    @pytest.mark.parametrize("session_id, product_id", [("", DESIGN_ID), (None, DESIGN_ID), ("sess-1", None)])
    def test_missing_fields(self, svc, session_id, product_id):
        with pytest.raises(InvalidInput):
            svc.add_item(session_id, product_id)

    def test_oversized_values_rejected(self, svc, db):
        with pytest.raises(InvalidInput):
            svc.add_item("sess-1", DESIGN_ID, 2**64)
        with pytest.raises(InvalidInput):
            svc.add_item("sess-1", 2**64)
        assert _rows(db, CartItemModel) == []

    def test_increment_past_column_range_rejected(self, svc, db):
        svc.add_item("sess-1", DESIGN_ID, 2**31 - 1)

        with pytest.raises(InvalidInput):
            svc.add_item("sess-1", DESIGN_ID, 1)

        items = _rows(db, CartItemModel)
        assert len(items) == 1
        assert items[0].quantity == 2**31 - 1

    def test_non_positive_quantity(self, svc):
        with pytest.raises(InvalidInput):
            svc.add_item("sess-1", DESIGN_ID, 0)


class TestUpdateQuantity:
    def test_replaces_quantity(self, svc):
        svc.add_item("sess-1", DESIGN_ID, 2)
        svc.update_quantity("sess-1", DESIGN_ID, 7)

        assert svc.get_cart("sess-1")["items"][0]["quantity"] == 7

    def test_zero_deletes_line_item(self, svc, db):
        svc.add_item("sess-1", DESIGN_ID, 2)
        svc.update_quantity("sess-1", DESIGN_ID, 0)

        assert _rows(db, CartItemModel) == []

    def test_zero_on_absent_item_is_noop(self, svc):
        svc.update_quantity("sess-1", DESIGN_ID, 0)
        assert svc.get_cart("sess-1")["items"] == []

    def test_negative_quantity(self, svc):
        svc.add_item("sess-1", DESIGN_ID, 2)
        with pytest.raises(InvalidInput):
            svc.update_quantity("sess-1", DESIGN_ID, -1)
        assert svc.get_cart("sess-1")["count"] == 2


class TestRemoveItem:
    def test_removes_only_that_product(self, svc):
        svc.add_item("sess-1", DESIGN_ID, 1)
        svc.add_item("sess-1", AI_ID, 1)
        svc.remove_item("sess-1", DESIGN_ID)

        assert [i["product_id"] for i in svc.get_cart("sess-1")["items"]] == [AI_ID]

    def test_absent_item_is_noop(self, svc):
        svc.remove_item("sess-unknown", DESIGN_ID)
        svc.remove_item("sess-unknown", DESIGN_ID)


class TestGetCart:
    def test_unknown_session_is_empty(self, svc):
        assert svc.get_cart("nobody") == {"items": [], "total": "0.00", "count": 0}

    def test_totals(self, svc):
        svc.add_item("sess-1", DESIGN_ID, 2)
        svc.add_item("sess-1", AI_ID, 1)

        cart = svc.get_cart("sess-1")

        assert cart["total"] == "6500.00"
        assert cart["count"] == 3

    def test_item_shape(self, svc):
        svc.add_item("sess-1", DESIGN_ID, 2)

        (item,) = svc.get_cart("sess-1")["items"]

        assert item["product_id"] == DESIGN_ID
        assert item["name"] == "Design"
        assert item["price"] == 2000.0
        assert item["description"] == "Professional design services for your business"
        assert item["quantity"] == 2

    def test_carts_are_isolated_by_session(self, svc):
        svc.add_item("sess-1", DESIGN_ID, 2)
        svc.add_item("sess-2", AI_ID, 1)

        assert svc.get_cart("sess-1")["total"] == "4000.00"
        assert svc.get_cart("sess-2")["total"] == "2500.00"
