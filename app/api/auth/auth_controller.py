# app/api/auth/auth_controller.py

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.auth.auth_repo import AuthRepository
from app.api.auth.models.model_admin_user import AdminUserModel
from app.api.auth.schema_auth import LoginRequest, TokenResponse, AdminUserResponse
from app.core.admin_dependencies import get_current_user
from app.core.security import verify_password, create_access_token, ACCESS_TOKEN_EXPIRE_MINUTES
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(tags=["auth"], prefix="/api/auth")


@router.post("/token", response_model=TokenResponse)
def login_admin(
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    repo = AuthRepository(db)
    user = repo.get_user_by_email(payload.email)
    if not user or not user.is_active or not verify_password(payload.password, user.hashed_password):
        logger.warning(f"[AUTH] Failed sign-in for {payload.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"}
        )

    repo.touch_sign_in(user)
    access_token = create_access_token(
        data={"sub": user.id},
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    logger.info(f"[AUTH] Sign-in ok - user={user.email}")

    return TokenResponse(
        access_token=access_token,
        token_type="Bearer",
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.get(
    "/me",
    response_model=AdminUserResponse,
    summary="Returns the admin bound to the JWT"
)
def current_admin(
    current_user: AdminUserModel = Depends(get_current_user),
):
    return current_user
