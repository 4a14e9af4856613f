from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from storefront.database import get_db
from storefront.api.deps import get_user_id
from storefront.schemas.cart import CartLineUpsert, CartView, CheckoutRequest
from storefront.services.cart_service import get_cart_view, upsert_cart_line, remove_cart_line
from storefront.services.checkout_service import checkout

router = APIRouter()


@router.get("", response_model=CartView)
def get_cart(user_id: int = Depends(get_user_id), db: Session = Depends(get_db)):
    """Get user's cart with totals"""
    return get_cart_view(db, user_id)


@router.post("", response_model=CartView)
def set_cart_item(item_data: CartLineUpsert, db: Session = Depends(get_db)):
    """Add a product, replace its quantity, or remove it with qty 0"""
    return upsert_cart_line(db, item_data.user_id, item_data.product_id, item_data.qty)


@router.post("/checkout")
def checkout_cart(checkout_data: CheckoutRequest, db: Session = Depends(get_db)):
    """Mock payment: issue a receipt and clear the cart"""
    receipt = checkout(db, checkout_data.user_id, checkout_data.name, checkout_data.email)

    return {
        "message": "Checkout successful!",
        "receipt": receipt.model_dump(by_alias=True)
    }


@router.delete("/{product_id}", response_model=CartView)
def remove_from_cart(
    product_id: int,
    user_id: int = Depends(get_user_id),
    db: Session = Depends(get_db)
):
    """Remove item from cart"""
    return remove_cart_line(db, user_id, product_id)
