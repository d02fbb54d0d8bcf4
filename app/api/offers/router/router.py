from fastapi import APIRouter

from app.api.offers.router.admin import router_special_offers

api_offers = APIRouter(tags=["API - Offers"])

api_offers.include_router(router_special_offers.router)
