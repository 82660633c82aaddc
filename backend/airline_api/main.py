import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from airline_api.api.router import api_router
from airline_api.core.config import settings
from airline_api.core.errors import register_exception_handlers
from airline_api.core.logging_config import setup_logging
from airline_api.core.users import UserRegistry
from airline_api.db.init_db import create_tables, seed_demo_data
from airline_api.db.session import engine

logger = logging.getLogger(__name__)

def _run_migrations_if_needed():
    """Apply Alembic migrations automatically in production if enabled.

    Controlled by AUTO_APPLY_MIGRATIONS (default on). Safe to run repeatedly.
    """
    if settings.env.lower() != "prod":
        return
    if not settings.auto_apply_migrations:
        return
    from alembic import command
    from alembic.config import Config
    alembic_ini = Path(__file__).resolve().parents[1] / "alembic.ini"
    if not alembic_ini.exists():
        logger.warning("[migrate] alembic.ini not found at %s, skipping auto-migrations", alembic_ini)
        return
    cfg = Config(str(alembic_ini))
    # Resolve script_location when launched from an arbitrary CWD
    script_location = Path(__file__).resolve().parents[1] / "alembic"
    if script_location.exists():
        cfg.set_main_option("script_location", str(script_location))
    logger.info("[migrate] Applying Alembic migrations -> head ...")
    try:
        command.upgrade(cfg, "head")
    except Exception:
        # Keep serving; migrations can be retried manually
        logger.exception("[migrate] Migration failed")
        return
    logger.info("[migrate] Migrations applied successfully")

def _check_database():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database check failed at startup: %s", e)
        return
    logger.info("Database reachable")

def create_app(user_registry: UserRegistry | None = None) -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.state.user_registry = user_registry or UserRegistry.from_settings(settings)

    origins = settings.cors_origins
    logger.info("[startup] Resolved CORS origins: %s", origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/", tags=["health"])
    def root():
        return {"message": "Airline API is running."}

    @app.on_event("startup")
    def startup():
        _run_migrations_if_needed()
        if settings.env.lower() in {"dev", "development"}:
            create_tables()
            seed_demo_data()
        _check_database()

    return app

app = create_app()
