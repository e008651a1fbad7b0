from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

def build_engine(url: str, echo: bool = False):
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        # FastAPI runs sync handlers on a worker thread pool.
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)

engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

def init_db(bind=None) -> None:
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
