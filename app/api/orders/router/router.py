from fastapi import APIRouter

from app.api.orders.router.admin import router_orders, router_customers

api_orders = APIRouter(tags=["API - Orders"])

api_orders.include_router(router_orders.router)
api_orders.include_router(router_customers.router)
