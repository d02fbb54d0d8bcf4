import os
from dotenv import load_dotenv
from pathlib import Path

# Load .env manually when running outside Docker
if not os.getenv("RUNNING_IN_DOCKER"):
    dotenv_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=dotenv_path)


def _as_bool(value: str, default: str = "false") -> bool:
    return (value or default).lower() in ("1", "true", "yes")


# Database
# DATABASE_URL wins; otherwise the PostgreSQL URL is assembled from DB_*.
DATABASE_URL = os.getenv("DATABASE_URL")

DB_CONFIG = {
    'database': os.getenv('DB_NAME'),
    'user': os.getenv('DB_USER'),
    'password': os.getenv('DB_PASSWORD'),
    'host': os.getenv('DB_HOST'),
    'port': int(os.getenv('DB_PORT', 5432)),
}

# Database SSL (optional)
DB_SSL_MODE = os.getenv('DB_SSL_MODE')  # e.g. require, verify-ca, verify-full

APP_TIMEZONE = os.getenv("APP_TIMEZONE", "Europe/Rome")

# JWT / Security
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 90))

# Bootstrap admin (created on startup when missing)
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL = _as_bool(os.getenv("CORS_ALLOW_ALL"))

# FastAPI / App
BASE_URL = os.getenv("BASE_URL", "")
ENABLE_DOCS = _as_bool(os.getenv("ENABLE_DOCS"), "true")

# Redis
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")

# MinIO / object storage
MINIO_ENDPOINT = os.getenv("MINIO_ENDPOINT", "minio:9000")
MINIO_PUBLIC_ENDPOINT = os.getenv("MINIO_PUBLIC_ENDPOINT", "").rstrip("/")
MINIO_ROOT_USER = os.getenv("MINIO_ROOT_USER", "")
MINIO_ROOT_PASSWORD = os.getenv("MINIO_ROOT_PASSWORD", "")
MINIO_SECURE = _as_bool(os.getenv("MINIO_SECURE"))
FILES_BUCKET = os.getenv("FILES_BUCKET", "files")
IMAGES_BUCKET = os.getenv("IMAGES_BUCKET", "images")
MAX_IMAGE_SIZE_BYTES = int(os.getenv("MAX_IMAGE_SIZE_BYTES", 5 * 1024 * 1024))

# i18n
SUPPORTED_LANGUAGES = ("en", "it")
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
LANGUAGE_COOKIE = "dashboard_language"

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", Path(__file__).resolve().parents[2] / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
