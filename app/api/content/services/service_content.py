import json
from typing import Any, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.content.models.model_app_config import AppConfigModel
from app.api.content.models.model_content import ContentModel
from app.api.content.repositories.repo_content import AppConfigRepository, ContentRepository
from app.api.content.schemas.schema_app_config import AppConfigCreate, AppConfigUpdate
from app.api.content.schemas.schema_content import ContentCreate, ContentUpdate
from app.utils.logger import logger
from app.utils.payload import apply_changes, clean_str, drop_nulls


def parse_json_value(value: Any) -> Any:
    """Values typed into a text box arrive as JSON text."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Value must be valid JSON: {e.msg}")


class AppConfigService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = AppConfigRepository(db)

    def _config_or_404(self, config_id: str) -> AppConfigModel:
        obj = self.repo.get_by_id(config_id)
        if not obj:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Config entry not found")
        return obj

    def list(self) -> List[AppConfigModel]:
        return self.repo.list()

    def create(self, req: AppConfigCreate) -> AppConfigModel:
        key = req.key.strip()
        if self.repo.get_by_key(key):
            raise HTTPException(status.HTTP_409_CONFLICT, f"Config key '{key}' already exists")
        value = parse_json_value(req.value)
        try:
            obj = self.repo.create(key=key, value=value, description=clean_str(req.description))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, f"Config key '{key}' already exists")
        self.db.refresh(obj)
        logger.info(f"[AppConfigService] Created key={key}")
        return obj

    def update(self, config_id: str, req: AppConfigUpdate) -> AppConfigModel:
        obj = self._config_or_404(config_id)
        data = req.model_dump(exclude_unset=True)
        if "value" in data:
            obj.value = parse_json_value(data["value"])
        if "description" in data:
            obj.description = clean_str(data["description"])
        self.db.commit()
        self.db.refresh(obj)
        logger.info(f"[AppConfigService] Updated key={obj.key}")
        return obj

    def delete(self, config_id: str):
        obj = self._config_or_404(config_id)
        self.repo.delete(obj)
        self.db.commit()


class ContentService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ContentRepository(db)

    def _content_or_404(self, content_id: str) -> ContentModel:
        obj = self.repo.get_by_id(content_id)
        if not obj:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Content not found")
        return obj

    def list(self, page: Optional[str] = None) -> List[ContentModel]:
        return self.repo.list(page)

    def create(self, req: ContentCreate) -> ContentModel:
        obj = self.repo.create(
            page=clean_str(req.page) or "home",
            section=clean_str(req.section) or "default",
            title=clean_str(req.title),
            description=clean_str(req.description),
            content=req.content or {},
            image_url=clean_str(req.image_url),
            order_index=req.order_index,
            is_active=req.is_active,
        )
        self.db.commit()
        self.db.refresh(obj)
        logger.info(f"[ContentService] Created id={obj.id} page={obj.page} section={obj.section}")
        return obj

    def update(self, content_id: str, req: ContentUpdate) -> ContentModel:
        obj = self._content_or_404(content_id)
        data = drop_nulls(
            req.model_dump(exclude_unset=True),
            nullable=("title", "description", "image_url", "content"),
        )
        for key in ("page", "section"):
            if key in data and not clean_str(data[key]):
                data.pop(key)
        if "content" in data and data["content"] is None:
            data["content"] = {}
        apply_changes(obj, data)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, content_id: str):
        obj = self._content_or_404(content_id)
        self.repo.delete(obj)
        self.db.commit()
