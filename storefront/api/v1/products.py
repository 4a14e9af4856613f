from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from storefront.database import get_db
from storefront.schemas.product import ProductCreate, ProductResponse
from storefront.services.product_service import list_products, create_product

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def get_products(db: Session = Depends(get_db)):
    """Get all products"""
    return list_products(db)


@router.post("", status_code=status.HTTP_201_CREATED)
def add_product(product_data: ProductCreate, db: Session = Depends(get_db)):
    """Add a product to the catalog"""
    product = create_product(db, product_data)

    return {
        "message": "Product added successfully.",
        "product": ProductResponse.model_validate(product).model_dump(by_alias=True)
    }
