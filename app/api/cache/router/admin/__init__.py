from . import router_cache

__all__ = ["router_cache"]
