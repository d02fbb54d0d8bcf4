from fastapi import APIRouter

from app.api.restaurants.router.admin import router_restaurants

api_restaurants = APIRouter(tags=["API - Restaurants"])

api_restaurants.include_router(router_restaurants.router)
