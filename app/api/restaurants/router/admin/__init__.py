from . import router_restaurants

__all__ = ["router_restaurants"]
