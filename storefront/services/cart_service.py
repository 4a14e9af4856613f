from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional
from storefront.config import settings
from storefront.models.cart import CartLine
from storefront.models.product import Product
from storefront.schemas.cart import CartItem, CartView
from storefront.exceptions import NotFound
import logging

logger = logging.getLogger(__name__)

SHIPPING_COST = Decimal(settings.SHIPPING_COST)
TAX_RATE = Decimal(settings.TAX_RATE)
CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_totals(
    cart_lines: Iterable,
    products: Iterable,
    shipping: Optional[Decimal] = None,
    tax_rate: Optional[Decimal] = None,
) -> CartView:
    """Price cart lines against a catalog snapshot.

    Lines whose product is not in the catalog are dropped. Item order
    follows ``cart_lines``. The subtotal accumulates unrounded line totals
    and is rounded once; tax is taken on the rounded subtotal, so
    ``grand_total == subtotal + tax + shipping`` holds exactly.
    """
    shipping = SHIPPING_COST if shipping is None else Decimal(shipping)
    tax_rate = TAX_RATE if tax_rate is None else Decimal(tax_rate)

    catalog = {product.id: product for product in products}

    subtotal = Decimal("0")
    items = []
    for line in cart_lines:
        product = catalog.get(line.product_id)
        if product is None:
            continue

        price = Decimal(str(product.price))
        line_total = price * line.qty
        subtotal += line_total

        items.append(CartItem(
            product_id=product.id,
            name=product.name,
            price=float(price),
            qty=line.qty,
            image_url=product.image_url,
            line_total=float(round_money(line_total)),
        ))

    subtotal = round_money(subtotal)
    tax = round_money(subtotal * tax_rate)
    grand_total = subtotal + tax + shipping

    return CartView(
        items=items,
        subtotal=float(subtotal),
        shipping=float(shipping),
        tax=float(tax),
        grand_total=float(round_money(grand_total)),
    )


def get_cart_lines(db: Session, user_id: int, for_update: bool = False) -> List[CartLine]:
    """Cart lines for a user in insertion order"""
    query = db.query(CartLine).filter(CartLine.user_id == user_id).order_by(CartLine.id.asc())
    if for_update:
        query = query.with_for_update()
    return query.all()


def load_catalog(db: Session, cart_lines: List[CartLine]) -> List[Product]:
    """Catalog rows referenced by the given lines"""
    product_ids = {line.product_id for line in cart_lines}
    if not product_ids:
        return []
    return db.query(Product).filter(Product.id.in_(product_ids)).all()


def get_cart_view(db: Session, user_id: int) -> CartView:
    cart_lines = get_cart_lines(db, user_id)
    return calculate_totals(cart_lines, load_catalog(db, cart_lines))


def upsert_cart_line(db: Session, user_id: int, product_id: int, qty: int) -> CartView:
    """Set the quantity of a product in a user's cart.

    qty replaces the stored quantity; 0 removes the line and is a no-op
    when the line does not exist.
    """
    if db.get(Product, product_id) is None:
        raise NotFound("Product not found.")

    filters = (CartLine.user_id == user_id, CartLine.product_id == product_id)

    if qty == 0:
        db.query(CartLine).filter(*filters).delete(synchronize_session=False)
        db.commit()
        logger.info("Cart %s: removed product %s", user_id, product_id)
        return get_cart_view(db, user_id)

    existing_line = db.query(CartLine).filter(*filters).first()
    if existing_line:
        existing_line.qty = qty
        db.commit()
    else:
        db.add(CartLine(user_id=user_id, product_id=product_id, qty=qty))
        try:
            db.commit()
        except IntegrityError:
            # A concurrent request inserted the same pair first
            db.rollback()
            db.query(CartLine).filter(*filters).update({CartLine.qty: qty}, synchronize_session=False)
            db.commit()

    logger.info("Cart %s: product %s set to qty %s", user_id, product_id, qty)
    return get_cart_view(db, user_id)


def remove_cart_line(db: Session, user_id: int, product_id: int) -> CartView:
    deleted = db.query(CartLine).filter(
        CartLine.user_id == user_id,
        CartLine.product_id == product_id
    ).delete(synchronize_session=False)

    if deleted == 0:
        db.rollback()
        raise NotFound("Item not found in cart.")

    db.commit()
    logger.info("Cart %s: removed product %s", user_id, product_id)
    return get_cart_view(db, user_id)
