from . import router_files, router_uploads

__all__ = ["router_files", "router_uploads"]
