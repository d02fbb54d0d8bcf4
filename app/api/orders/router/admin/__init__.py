from . import router_orders, router_customers

__all__ = ["router_orders", "router_customers"]
