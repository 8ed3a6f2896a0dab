from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from heartkemy.core.config import settings
from heartkemy.db.base import Base

_is_sqlite = settings.database_url.startswith("sqlite")

engine = create_engine(
    settings.database_url,
    pool_pre_ping=not _is_sqlite,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)

if _is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
        """SQLite ignores FOREIGN KEY constraints unless asked per connection."""
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI dependency: one session per request, always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables (development / seeding). Production uses Alembic."""
    import heartkemy.models  # noqa: F401  (registers models on Base.metadata)

    Base.metadata.create_all(bind=engine)
