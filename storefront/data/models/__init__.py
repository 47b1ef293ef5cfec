# import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.product import ProductModel
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.payment import PaymentModel
from storefront.data.models.contact import ContactModel

__all__ = ["ProductModel", "CartModel", "CartItemModel", "PaymentModel", "ContactModel"]
