from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import importlib.util
from airline_api.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url
if not SQLALCHEMY_DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable must be set")


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at the psycopg (v3) driver when psycopg2 is not installed.

    SQLAlchemy loads psycopg2 for 'postgresql://' by default; the project depends on
    psycopg[binary] only. Other URLs are returned untouched.
    """
    try:
        psycopg2_present = importlib.util.find_spec("psycopg2") is not None  # type: ignore
    except Exception:  # pragma: no cover
        psycopg2_present = False
    if psycopg2_present or not url.startswith(("postgres://", "postgresql://")) or "+psycopg" in url:
        return url
    # Normalize legacy prefix 'postgres://' -> 'postgresql://'
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url.replace("postgresql://", "postgresql+psycopg://", 1)


def build_engine(url: str):
    url = normalize_database_url(url)
    if url.startswith("sqlite"):
        # Local runs and tests: one shared connection, FKs switched on per connection
        eng = create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)

        @event.listens_for(eng, "connect")
        def _enable_sqlite_fks(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        return eng
    # Bounded pool; callers queue for up to pool_timeout seconds when it is exhausted
    return create_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )


engine = build_engine(SQLALCHEMY_DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
