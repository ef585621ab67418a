from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from worker_service.config import get_settings


# Base class for our models
class Base(DeclarativeBase):
    pass


@lru_cache
def get_engine():
    settings = get_settings()
    url = settings.DATABASE_URL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return create_engine(url, echo=settings.DATABASE_ECHO)


def SessionLocal():
    return _session_factory()()


@lru_cache
def _session_factory():
    return sessionmaker(bind=get_engine())
