from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from storefront.models.user import User
from storefront.schemas.user import UserCreate
from storefront.exceptions import Conflict, Unauthorized
from storefront.utils.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "An account with this email already exists."


def register_user(db: Session, user_data: UserCreate) -> User:
    """Register a new user"""
    if db.query(User).filter(User.email == user_data.email).first():
        raise Conflict(EMAIL_TAKEN)

    user = User(
        name=user_data.name,
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise Conflict(EMAIL_TAKEN)
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate user and return user object.

    Unknown email and wrong password fail with the same error so the
    response does not reveal which one was wrong.
    """
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password_hash):
        raise Unauthorized()

    return user
