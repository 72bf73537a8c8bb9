from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
import logging

from core.config import get_app_env, get_database_url
from models import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str | None = None, app_env: str | None = None) -> Engine:
    database_url = database_url or get_database_url()
    app_env = app_env or get_app_env()

    # Safe DB URL for logging
    url = make_url(database_url)

    if app_env == "development":
        engine = create_engine(database_url, echo=True)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
        logger.info(f"🔧 [DEV] Connecting to DB: {url.render_as_string(hide_password=True)}")
    else:
        engine = create_engine(database_url, echo=False)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logger.info(f"🚀 [PROD] Connecting to DB: {url.render_as_string(hide_password=True)}")

    return engine


def init_db(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(engine: Engine):
    """Yield a session; the session is closed and the engine's pool disposed on exit."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()
        logger.debug("Database connection released")
