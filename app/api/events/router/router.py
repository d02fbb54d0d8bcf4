from fastapi import APIRouter

from app.api.events.router.admin import router_events, router_party_requests

api_events = APIRouter(tags=["API - Events"])

api_events.include_router(router_events.router)
api_events.include_router(router_party_requests.router)
