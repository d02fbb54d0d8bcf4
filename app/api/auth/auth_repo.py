# app/api/auth/auth_repo.py
from typing import Optional

from sqlalchemy.orm import Session

from app.api.auth.models.model_admin_user import AdminUserModel
from app.core.security import hash_password
from app.utils.database_utils import now_trimmed


class AuthRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_user_by_email(self, email: str) -> Optional[AdminUserModel]:
        return (
            self.db.query(AdminUserModel)
            .filter(AdminUserModel.email == email.strip().lower())
            .first()
        )

    def get_user_by_id(self, user_id: str) -> Optional[AdminUserModel]:
        return self.db.query(AdminUserModel).filter(AdminUserModel.id == user_id).first()

    def create_user(self, email: str, password: str, full_name: str = None) -> AdminUserModel:
        user = AdminUserModel(
            email=email.strip().lower(),
            hashed_password=hash_password(password),
            full_name=full_name,
        )
        self.db.add(user)
        self.db.flush()
        return user

    def touch_sign_in(self, user: AdminUserModel) -> AdminUserModel:
        user.last_sign_in_at = now_trimmed()
        self.db.flush()
        return user
