from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.files.models.model_file import FileModel


class FileRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, file_id: str) -> Optional[FileModel]:
        return self.db.query(FileModel).filter_by(id=file_id).first()

    def list(self, file_type: Optional[str] = None) -> List[FileModel]:
        query = self.db.query(FileModel)
        if file_type:
            query = query.filter(FileModel.type == file_type)
        return query.order_by(FileModel.created_at.desc()).all()

    def create(self, **data) -> FileModel:
        obj = FileModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete(self, obj: FileModel):
        self.db.delete(obj)
        self.db.flush()
