from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import get_settings
import logging

logger = logging.getLogger(__name__)
settings = get_settings()

# SQLite connections are shared across the threadpool FastAPI runs sync routes in
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    connect_args=connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    """Create all tables registered on Base."""
    # Models must be imported so their tables are registered
    from app.models import work_entry  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
