"""PostgreSQL connection pool and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings

# SQLSTATE raised by PostgreSQL when statement_timeout cancels a query.
QUERY_CANCELED_PGCODE = "57014"


def _connect_args() -> dict[str, object]:
    args: dict[str, object] = {"connect_timeout": settings.DB_CONNECT_TIMEOUT_SEC}
    if settings.DB_STATEMENT_TIMEOUT_MS:
        args["options"] = f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
    return args


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_timeout=settings.DB_POOL_TIMEOUT_SEC,
    connect_args=_connect_args(),
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False


def is_timeout_error(exc: BaseException) -> bool:
    """True for pool checkout timeouts and statements cancelled by statement_timeout."""
    if isinstance(exc, PoolTimeoutError):
        return True
    if isinstance(exc, OperationalError):
        return getattr(exc.orig, "pgcode", None) == QUERY_CANCELED_PGCODE
    return False
