from fastapi import APIRouter

from app.api.cache.router.admin import router_cache

api_cache = APIRouter(tags=["API - Cache"])

api_cache.include_router(router_cache.router)
