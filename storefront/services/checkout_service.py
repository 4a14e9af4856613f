from sqlalchemy.orm import Session
from datetime import datetime, timezone
from storefront.models.cart import CartLine
from storefront.schemas.cart import Customer, Receipt
from storefront.services.cart_service import calculate_totals, get_cart_lines, load_catalog
from storefront.exceptions import Conflict, ValidationFailure
import logging
import random
import string

logger = logging.getLogger(__name__)


def generate_order_number() -> str:
    """Generate a random, unpersisted order number"""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    random_str = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
    return f"ORD{timestamp}{random_str}"


def checkout(db: Session, user_id: int, name: str, email: str) -> Receipt:
    """Price the user's cart, issue a receipt and empty the cart.

    Pricing and clearing happen in one transaction. Only the lines that
    were priced are deleted; if another checkout removed them first the
    transaction is rolled back and Conflict is raised, so a cart is never
    paid for twice.
    """
    cart_lines = get_cart_lines(db, user_id, for_update=True)
    if not cart_lines:
        raise ValidationFailure("Cannot checkout with an empty cart.")

    totals = calculate_totals(cart_lines, load_catalog(db, cart_lines))

    receipt = Receipt(
        order_id=generate_order_number(),
        timestamp=datetime.now(timezone.utc).isoformat(),
        customer=Customer(name=name, email=email, user_id=user_id),
        total_paid=totals.grand_total,
        items=totals.items,
    )

    line_ids = [line.id for line in cart_lines]
    deleted = db.query(CartLine).filter(
        CartLine.user_id == user_id,
        CartLine.id.in_(line_ids)
    ).delete(synchronize_session=False)

    if deleted != len(line_ids):
        db.rollback()
        logger.warning("Checkout race for user %s: expected %s lines, deleted %s", user_id, len(line_ids), deleted)
        raise Conflict("Cart changed during checkout. Please try again.")

    db.commit()
    logger.info("Checkout %s for user %s: %s items, total %.2f",
                receipt.order_id, user_id, len(receipt.items), receipt.total_paid)
    return receipt
