from . import router_special_offers

__all__ = ["router_special_offers"]
