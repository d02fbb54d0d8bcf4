from . import router_riders

__all__ = ["router_riders"]
