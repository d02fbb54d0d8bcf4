from .model_app_config import AppConfigModel
from .model_content import ContentModel

__all__ = ["AppConfigModel", "ContentModel"]
