from .model_admin_user import AdminUserModel

__all__ = ["AdminUserModel"]
