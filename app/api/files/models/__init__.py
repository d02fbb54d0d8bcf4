from .model_file import FileModel

__all__ = ["FileModel"]
