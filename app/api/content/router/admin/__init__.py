from . import router_app_config, router_content

__all__ = ["router_app_config", "router_content"]
