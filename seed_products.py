"""
Script to load the product catalog from a JSON file

Usage:
    python seed_products.py products.json

The file holds a list of objects with the same fields as POST /api/products:
    id, name, price, category, imageUrl, description, details
Products whose id already exists are skipped.
"""
import json
import sys
from pydantic import ValidationError
from storefront.database import SessionLocal, init_db
from storefront.models.product import Product
from storefront.schemas.product import ProductCreate


def seed_products(path: str) -> int:
    """Insert new products from ``path``; returns the number inserted"""
    with open(path, encoding="utf-8") as f:
        raw_products = json.load(f)

    try:
        products = [ProductCreate.model_validate(item) for item in raw_products]
    except ValidationError as e:
        print(f"[ERROR] Invalid product data in {path}:")
        print(e)
        sys.exit(1)

    init_db()
    db = SessionLocal()
    inserted = 0

    try:
        for data in products:
            if db.get(Product, data.id) is not None:
                print(f"[SKIP] Product ID {data.id} already exists")
                continue

            db.add(Product(
                id=data.id,
                name=data.name,
                price=data.price,
                category=data.category,
                image_url=data.image_url,
                description=data.description,
                details=list(data.details),
            ))
            inserted += 1

        db.commit()
    except Exception as e:
        db.rollback()
        print(f"[ERROR] Error seeding products: {e}")
        sys.exit(1)
    finally:
        db.close()

    print(f"[SUCCESS] Inserted {inserted} of {len(products)} products")
    return inserted


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    seed_products(sys.argv[1])
