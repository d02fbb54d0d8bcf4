from fastapi import APIRouter

from app.api.riders.router.admin import router_riders

api_riders = APIRouter(tags=["API - Riders"])

api_riders.include_router(router_riders.router)
