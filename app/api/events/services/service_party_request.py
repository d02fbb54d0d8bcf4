from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.events.models.model_party_request import PartyRequestModel
from app.api.events.repositories.repo_party_request import PartyRequestRepository
from app.api.events.schemas.schema_party_request import PartyRequestReview, PartyRequestResponse
from app.utils.logger import logger
from app.utils.payload import clean_str

NOTIFICATION_TYPE = "party_request"


def build_review_notification(request: PartyRequestModel, new_status: str, notes: Optional[str]) -> dict:
    verdict = "approved" if new_status == "approved" else "rejected"
    message = f'Your party request "{request.event_name}" has been {verdict}.'
    if notes:
        message += f" Notes: {notes}"
    return {
        "user_id": request.user_id,
        "type": NOTIFICATION_TYPE,
        "title": f"Party Request {verdict.capitalize()}",
        "message": message,
        "related_id": request.id,
    }


class PartyRequestService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PartyRequestRepository(db)

    def _request_or_404(self, request_id: str) -> PartyRequestModel:
        request = self.repo.get_by_id(request_id)
        if not request:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Party request not found")
        return request

    def _to_response(self, request: PartyRequestModel, email: Optional[str]) -> PartyRequestResponse:
        return PartyRequestResponse.model_validate(request).model_copy(update={"user_email": email})

    def list(self, status_filter: Optional[str] = None) -> List[PartyRequestResponse]:
        return [
            self._to_response(request, email)
            for request, email in self.repo.list_with_emails(status_filter)
        ]

    def get(self, request_id: str) -> PartyRequestResponse:
        request = self._request_or_404(request_id)
        return self._to_response(request, self.repo.get_user_email(request.user_id))

    def review(self, request_id: str, req: PartyRequestReview) -> PartyRequestResponse:
        """
        Writes the new status and admin notes and, for approvals and
        rejections, notifies the requester in the same transaction.
        """
        request = self._request_or_404(request_id)
        notes = clean_str(req.admin_notes)

        request.status = req.status
        request.admin_notes = notes
        if req.status in ("approved", "rejected"):
            self.repo.add_notification(**build_review_notification(request, req.status, notes))

        self.db.commit()
        self.db.refresh(request)
        logger.info(f"[PartyRequestService] id={request_id} status={req.status}")
        return self._to_response(request, self.repo.get_user_email(request.user_id))
