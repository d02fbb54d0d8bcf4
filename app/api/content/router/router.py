from fastapi import APIRouter

from app.api.content.router.admin import router_app_config, router_content

api_content = APIRouter(tags=["API - Content"])

api_content.include_router(router_app_config.router)
api_content.include_router(router_content.router)
