from typing import Optional
from fastapi import Query
from storefront.exceptions import AuthenticationRequired


def get_user_id(
    user_id: Optional[str] = Query(None, alias="userId")
) -> int:
    """Caller identity taken from the ``userId`` query parameter.

    The value is trusted as supplied: there is no token and no check that
    the caller owns this id.
    """
    if user_id is None or not user_id.strip():
        raise AuthenticationRequired()
    try:
        return int(user_id)
    except ValueError:
        raise AuthenticationRequired()
