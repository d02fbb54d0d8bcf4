from sqlalchemy import text

from .db_connection import engine, Base, SessionLocal
from app.config.settings import ADMIN_EMAIL, ADMIN_PASSWORD, APP_TIMEZONE
from app.utils.logger import logger


def import_models():
    """Registers every model on Base.metadata before create_all."""
    # ─── Auth ───────────────────────────────────────────────────────
    from app.api.auth.models import AdminUserModel  # noqa: F401
    # ─── Restaurants / catalog ──────────────────────────────────────
    from app.api.catalog.models import CategoryModel, MenuItemModel, AddonModel, AddonOptionModel  # noqa: F401
    from app.api.restaurants.models import RestaurantModel  # noqa: F401
    # ─── Events / party requests ────────────────────────────────────
    from app.api.events.models import EventModel, PartyRequestModel, UserProfileModel, NotificationModel  # noqa: F401
    from app.api.offers.models import SpecialOfferModel  # noqa: F401
    # ─── Orders / riders ────────────────────────────────────────────
    from app.api.riders.models import RiderModel  # noqa: F401
    from app.api.orders.models import OrderModel, OrderItemModel, OrderTrackingModel  # noqa: F401
    # ─── Files / content ────────────────────────────────────────────
    from app.api.files.models import FileModel  # noqa: F401
    from app.api.content.models import AppConfigModel, ContentModel  # noqa: F401
    logger.info("[DB] Models imported.")


def configure_timezone():
    if engine.dialect.name != "postgresql":
        return
    try:
        with engine.begin() as conn:
            conn.execute(text(f"SET timezone = '{APP_TIMEZONE}'"))
            current = conn.execute(text("SHOW timezone")).scalar()
            logger.info(f"[DB] Session timezone: {current}")
    except Exception as e:
        logger.warning(f"[DB] Could not set database timezone: {e}")


def create_tables():
    import_models()
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info(f"[DB] Tables ready: {len(Base.metadata.tables)}")


def create_bootstrap_admin():
    """Creates the ADMIN_EMAIL admin when both variables are set and it does not exist yet."""
    if not ADMIN_EMAIL or not ADMIN_PASSWORD:
        logger.info("[DB] ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping bootstrap admin.")
        return

    from app.api.auth.auth_repo import AuthRepository

    db = SessionLocal()
    try:
        repo = AuthRepository(db)
        if repo.get_user_by_email(ADMIN_EMAIL):
            return
        repo.create_user(ADMIN_EMAIL, ADMIN_PASSWORD, full_name="Administrator")
        db.commit()
        logger.info(f"[DB] Bootstrap admin created: {ADMIN_EMAIL}")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def initialize_database():
    logger.info("[DB] Initializing database...")

    logger.info("[DB] Step 1/3: timezone")
    configure_timezone()

    logger.info("[DB] Step 2/3: tables")
    create_tables()

    logger.info("[DB] Step 3/3: bootstrap admin")
    create_bootstrap_admin()

    logger.info("[DB] Database initialized.")
