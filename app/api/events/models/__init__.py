from .model_event import EventModel
from .model_party_request import PartyRequestModel
from .model_user_profile import UserProfileModel
from .model_notification import NotificationModel

__all__ = [
    "EventModel",
    "PartyRequestModel",
    "UserProfileModel",
    "NotificationModel",
]
