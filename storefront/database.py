from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from storefront.config import settings
import logging

logger = logging.getLogger(__name__)

database_url = settings.DATABASE_URL

# Some hosts hand out postgres:// but SQLAlchemy needs postgresql://
if database_url.startswith("postgres://"):
    database_url = database_url.replace("postgres://", "postgresql://", 1)

# SQLite doesn't support pool_size and max_overflow
if database_url.startswith("sqlite"):
    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False}  # Needed for SQLite
    )
else:
    engine = create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=False
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create tables and verify the store answers a ping"""
    # Import models so they register on Base.metadata
    import storefront.models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database ready: %s", ", ".join(sorted(Base.metadata.tables.keys())))


def ping(db) -> bool:
    """Return True if the store answers a trivial query"""
    db.execute(text("SELECT 1"))
    return True
