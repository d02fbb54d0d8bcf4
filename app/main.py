from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import IntegrityError

from app.config.settings import CORS_ORIGINS, CORS_ALLOW_ALL, BASE_URL, ENABLE_DOCS
from app.core.exception_handlers import (
    validation_exception_handler,
    http_exception_handler,
    integrity_error_handler,
    general_exception_handler
)
from app.utils.logger import logger
from app.utils.prometheus_metrics import PrometheusMiddleware

# ───────────────────────────
# Routers (importing them registers every model on Base)
# ───────────────────────────
from app.api.auth import auth_controller
from app.api.restaurants.router.router import api_restaurants
from app.api.catalog.router.router import api_catalog
from app.api.events.router.router import api_events
from app.api.offers.router.router import api_offers
from app.api.orders.router.router import api_orders
from app.api.riders.router.router import api_riders
from app.api.files.router.router import api_files
from app.api.content.router.router import api_content
from app.api.cache.router.router import api_cache
from app.api.dashboard.router.router import api_dashboard
from app.api.monitoring.router import router as monitoring_router, router_public as monitoring_router_public

# ──────────────────────────
# FastAPI instance
# ──────────────────────────
app = FastAPI(
    title="Delivery Admin API",
    version="1.0.0",
    description="Back office for restaurants, menus, events, offers, orders and riders",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=([{"url": BASE_URL, "description": "Environment base URL"}] if BASE_URL else None),
    redirect_slashes=False
)

# ───────────────────────────
# Global exception handlers
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(IntegrityError, integrity_error_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares (last added runs first)
# ───────────────────────────
app.add_middleware(PrometheusMiddleware)

# CORS_ALLOW_ALL=true => any origin without credentials;
# otherwise CORS_ORIGINS (or "*" when empty), credentials only for explicit origins.
if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup / shutdown
# ───────────────────────────
@app.on_event("startup")
def startup():
    from app.database.init_db import initialize_database

    logger.info("Starting API and database...")
    initialize_database()
    logger.info("API started.")


@app.on_event("shutdown")
def shutdown():
    from app.utils.redis_client import reset_redis_client

    logger.info("Shutting down API...")
    reset_redis_client()


# ───────────────────────────
# Routes
# ───────────────────────────
@app.get("/")
def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}


app.include_router(monitoring_router_public)
app.include_router(monitoring_router)

app.include_router(auth_controller.router)
app.include_router(api_restaurants)
app.include_router(api_catalog)
app.include_router(api_events)
app.include_router(api_offers)
app.include_router(api_orders)
app.include_router(api_riders)
app.include_router(api_files)
app.include_router(api_content)
app.include_router(api_cache)
app.include_router(api_dashboard)


# ───────────────────────────
# OpenAPI: Bearer/JWT security in Swagger
# ───────────────────────────
PUBLIC_PATHS = {
    "/",
    "/health",
    "/api/auth/token",
    "/api/monitoring/metrics",
    "/api/i18n/language",
}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        servers=app.servers,
    )

    components = openapi_schema.get("components", {})
    security_schemes = components.get("securitySchemes", {})
    security_schemes.update({
        "bearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    })
    components["securitySchemes"] = security_schemes
    openapi_schema["components"] = components
    openapi_schema["security"] = [{"bearerAuth": []}]

    for path, methods in openapi_schema.get("paths", {}).items():
        if path in PUBLIC_PATHS:
            for method_obj in methods.values():
                method_obj["security"] = []

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
