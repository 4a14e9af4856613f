from storefront.models.user import User
from storefront.models.product import Product
from storefront.models.cart import CartLine

__all__ = [
    "User",
    "Product",
    "CartLine"
]
