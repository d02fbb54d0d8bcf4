from typing import Optional

from fastapi import APIRouter, Cookie, Header, HTTPException, Response, status

from app.api.dashboard.schemas.schema_dashboard import LanguageResponse, LanguageUpdate
from app.config.settings import LANGUAGE_COOKIE, SUPPORTED_LANGUAGES
from app.i18n.config import is_supported, resolve_language
from app.utils.logger import logger

router = APIRouter(prefix="/api/i18n", tags=["Public - Language"])

# One year
COOKIE_MAX_AGE = 60 * 60 * 24 * 365


@router.get("/language", response_model=LanguageResponse)
def get_language(
    dashboard_language: Optional[str] = Cookie(None, alias=LANGUAGE_COOKIE),
    accept_language: Optional[str] = Header(None),
):
    return LanguageResponse(
        language=resolve_language(dashboard_language, accept_language),
        supported=list(SUPPORTED_LANGUAGES),
    )


@router.put("/language", response_model=LanguageResponse)
def set_language(req: LanguageUpdate, response: Response):
    language = req.language.strip().lower()
    if not is_supported(language):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"Unsupported language '{req.language}'. Use one of: {', '.join(SUPPORTED_LANGUAGES)}",
        )
    response.set_cookie(LANGUAGE_COOKIE, language, max_age=COOKIE_MAX_AGE, samesite="lax")
    logger.info(f"[I18N] Language set to {language}")
    return LanguageResponse(language=language, supported=list(SUPPORTED_LANGUAGES))
