from . import router_events, router_party_requests

__all__ = ["router_events", "router_party_requests"]
