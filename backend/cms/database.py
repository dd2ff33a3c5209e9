import os
from pathlib import Path
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cms.db")

_is_sqlite = DATABASE_URL.startswith("sqlite")
_connect_args = {"check_same_thread": False} if _is_sqlite else {}
_echo = os.getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes")

if _is_sqlite and ":memory:" not in DATABASE_URL:
    db_path = DATABASE_URL.replace("sqlite:///", "", 1)
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

engine: Engine = create_engine(
    DATABASE_URL,
    echo=_echo,
    connect_args=_connect_args,
)


def get_session() -> Generator[Session, None, None]:
    """Get database session"""
    with Session(engine) as session:
        yield session


def create_tables(bind: Engine) -> None:
    """Create all tables on the given engine"""
    # Import all models to ensure they're registered with SQLModel metadata
    from cms.models.filter_format import FilterFormat  # noqa: F401
    from cms.models.node import Node  # noqa: F401
    from cms.models.node_type import NodeType  # noqa: F401
    from cms.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(bind)


def install_defaults(session: Session) -> None:
    """Install the anonymous account and the default text formats"""
    from cms.filters import install_default_formats
    from cms.identity import ensure_anonymous_user

    ensure_anonymous_user(session)
    install_default_formats(session)


def init_db() -> None:
    """Initialize database - create all tables and default rows"""
    create_tables(engine)
    with Session(engine) as session:
        install_defaults(session)
