from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from stock_api.core.errors import Unauthorized
from stock_api.db.session import get_db
from stock_api.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)

__all__ = ["get_db", "get_current_user"]


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the `Authorization: Bearer <token>` header to a user."""
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    user = db.query(User).filter(User.token == credentials.credentials).first()
    if user is None:
        raise Unauthorized("The provided token is invalid")
    return user
