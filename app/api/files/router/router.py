from fastapi import APIRouter

from app.api.files.router.admin import router_files, router_uploads

api_files = APIRouter(tags=["API - Files"])

api_files.include_router(router_files.router)
api_files.include_router(router_uploads.router)
