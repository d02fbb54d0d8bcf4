from . import router_dashboard

__all__ = ["router_dashboard"]
