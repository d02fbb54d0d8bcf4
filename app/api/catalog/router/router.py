from fastapi import APIRouter

from app.api.catalog.router.admin import router_categories, router_menu_items, router_addons

api_catalog = APIRouter(tags=["API - Catalog"])

api_catalog.include_router(router_categories.router)
api_catalog.include_router(router_menu_items.router)
api_catalog.include_router(router_addons.router)
