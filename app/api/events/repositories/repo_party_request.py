from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.api.events.models.model_notification import NotificationModel
from app.api.events.models.model_party_request import PartyRequestModel
from app.api.events.models.model_user_profile import UserProfileModel


class PartyRequestRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, request_id: str) -> Optional[PartyRequestModel]:
        return self.db.query(PartyRequestModel).filter_by(id=request_id).first()

    def list_with_emails(self, status: Optional[str] = None) -> List[Tuple[PartyRequestModel, Optional[str]]]:
        """Requests, newest first, paired with the requester email (None when no profile)."""
        query = (
            self.db.query(PartyRequestModel, UserProfileModel.email)
            .outerjoin(UserProfileModel, UserProfileModel.id == PartyRequestModel.user_id)
        )
        if status:
            query = query.filter(PartyRequestModel.status == status)
        return query.order_by(PartyRequestModel.created_at.desc()).all()

    def get_user_email(self, user_id: str) -> Optional[str]:
        profile = self.db.query(UserProfileModel).filter_by(id=user_id).first()
        return profile.email if profile else None

    def add_notification(self, **data) -> NotificationModel:
        obj = NotificationModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj
