from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.content.models.model_app_config import AppConfigModel
from app.api.content.models.model_content import ContentModel


class AppConfigRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, config_id: str) -> Optional[AppConfigModel]:
        return self.db.query(AppConfigModel).filter_by(id=config_id).first()

    def get_by_key(self, key: str) -> Optional[AppConfigModel]:
        return self.db.query(AppConfigModel).filter_by(key=key).first()

    def list(self) -> List[AppConfigModel]:
        return self.db.query(AppConfigModel).order_by(AppConfigModel.key.asc()).all()

    def create(self, **data) -> AppConfigModel:
        obj = AppConfigModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete(self, obj: AppConfigModel):
        self.db.delete(obj)
        self.db.flush()


class ContentRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, content_id: str) -> Optional[ContentModel]:
        return self.db.query(ContentModel).filter_by(id=content_id).first()

    def list(self, page: Optional[str] = None) -> List[ContentModel]:
        query = self.db.query(ContentModel)
        if page:
            query = query.filter(ContentModel.page == page)
        return query.order_by(ContentModel.page.asc(), ContentModel.order_index.asc()).all()

    def create(self, **data) -> ContentModel:
        obj = ContentModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete(self, obj: ContentModel):
        self.db.delete(obj)
        self.db.flush()
