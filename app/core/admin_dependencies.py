# app/core/admin_dependencies.py

from fastapi import Depends, HTTPException, status, Request
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.api.auth.models.model_admin_user import AdminUserModel
from app.api.auth.auth_repo import AuthRepository
from app.core.security import SECRET_KEY, ALGORITHM
from app.database.db_connection import get_db
from app.utils.logger import logger

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Not authenticated",
    headers={"WWW-Authenticate": "Bearer"},
)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> AdminUserModel:
    """
    Resolves the authenticated admin from the Authorization header (Bearer <token>).
    """
    # 1. Token from the Authorization header
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        logger.warning("[AUTH] Missing or malformed Authorization header.")
        raise credentials_exception

    access_token = auth_header.replace("Bearer ", "", 1)

    # 2. Decode the JWT
    try:
        payload = jwt.decode(
            access_token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
        )
        user_id = payload.get("sub")
        if not user_id:
            raise credentials_exception
    except JWTError as e:
        logger.error(f"[AUTH] Could not decode JWT: {e}")
        raise credentials_exception

    # 3. Load the admin
    user = AuthRepository(db).get_user_by_id(user_id)
    if not user or not user.is_active:
        raise credentials_exception

    return user
