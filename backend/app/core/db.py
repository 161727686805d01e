from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from app.core.config import settings


def build_engine(database_url: str, **kwargs) -> Engine:
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args, **kwargs)


engine = build_engine(settings.DATABASE_URL)


def init_db(bind: Engine = engine) -> None:
    # Tables are registered on SQLModel.metadata when app.models is imported
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(bind)
