# storefront/database.py
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.config import get_settings

settings = get_settings()


def resolve_database_url(url: str, db_name: str | None = None) -> str:
    """
    Apply DB_NAME (if set) and driver-specific query options to the URL.

    - DB_NAME replaces the database part of the URL, so the same cluster URI
      can point at different databases per environment.
    - Postgres URLs get sslmode=require if it is not already present.
    """
    parsed = make_url(url)
    if db_name:
        parsed = parsed.set(database=db_name)

    if parsed.get_backend_name() == "postgresql" and "sslmode" not in parsed.query:
        parsed = parsed.update_query_dict({"sslmode": "require"})

    return parsed.render_as_string(hide_password=False)


def build_engine(url: str, echo: bool = False):
    """
    Create the SQLAlchemy engine for the store.

    Postgres (hosted pooler):
      - pool_size=1       : keep only 1 connection to the pooler
      - max_overflow=0    : do not open extra connections beyond the pool
      - pool_pre_ping=True: validate connections before using them

    SQLite:
      - check_same_thread=False, since FastAPI runs sync routes in a threadpool
    """
    backend = make_url(url).get_backend_name()

    if backend == "sqlite":
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=1,
        max_overflow=0,
    )


db_url = resolve_database_url(settings.DATABASE_URL, settings.DB_NAME)
engine = build_engine(db_url, echo=settings.DB_ECHO)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def database_name() -> str | None:
    """Name of the database the engine is bound to (for diagnostics)."""
    return engine.url.database


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Uncommitted work is rolled back when the session closes, so a request
    that fails mid-way leaves no partial writes behind.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
