from fastapi import APIRouter

from app.api.dashboard.router.admin import router_dashboard
from app.api.dashboard.router.public import router_language

api_dashboard = APIRouter(tags=["API - Dashboard"])

api_dashboard.include_router(router_dashboard.router)
api_dashboard.include_router(router_language.router)
