# app/database/db_connection.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from ..config.settings import DATABASE_URL, DB_CONFIG, DB_SSL_MODE, APP_TIMEZONE
from app.utils.logger import logger

# Single declarative base for every model
Base = declarative_base()


def _build_connection_string() -> str:
    if DATABASE_URL:
        return DATABASE_URL

    missing = [k for k in ('database', 'user', 'password', 'host', 'port') if not DB_CONFIG.get(k)]
    if missing:
        raise RuntimeError(f"Invalid database configuration, missing variables: {', '.join(missing)}")

    ssl_query = f"?sslmode={DB_SSL_MODE}" if DB_SSL_MODE else ""
    return (
        f"postgresql://{DB_CONFIG['user']}:{DB_CONFIG['password']}"
        f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}{ssl_query}"
    )


connection_string = _build_connection_string()

if connection_string.startswith("sqlite"):
    # In-memory SQLite must share one connection across threads (TestClient).
    engine = create_engine(
        connection_string,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores FOREIGN KEY clauses unless enabled per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(
        connection_string,
        pool_pre_ping=True,
        connect_args={
            "options": f"-c timezone={APP_TIMEZONE}"
        }
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# FastAPI dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("[DB] Rolling back session after error")
        db.rollback()
        raise
    finally:
        db.close()
