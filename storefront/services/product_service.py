from sqlalchemy.orm import Session
from typing import List
from storefront.models.product import Product
from storefront.schemas.product import ProductCreate
from storefront.exceptions import Conflict


def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.id.asc()).all()


def create_product(db: Session, product_data: ProductCreate) -> Product:
    """Insert a catalog entry under its caller-supplied id"""
    if db.get(Product, product_data.id) is not None:
        raise Conflict(f"Product ID {product_data.id} already exists.")

    product = Product(
        id=product_data.id,
        name=product_data.name,
        price=product_data.price,
        category=product_data.category,
        image_url=product_data.image_url,
        description=product_data.description,
        details=list(product_data.details),
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product
