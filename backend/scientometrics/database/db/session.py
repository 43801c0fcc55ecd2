from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from scientometrics.config import Config


def _connect_args(database_url: str) -> dict:
    # FastAPI runs sync handlers in a threadpool
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    Config.database_url,
    pool_pre_ping=True,
    connect_args=_connect_args(Config.database_url),
)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    expire_on_commit=False,
)
