from . import router_categories, router_menu_items, router_addons

__all__ = ["router_categories", "router_menu_items", "router_addons"]
