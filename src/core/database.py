from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..config import Settings, get_settings

Base = declarative_base()


def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    settings = settings or get_settings()

    if settings.database_url.startswith("sqlite"):
        return create_engine(
            settings.database_url,
            echo=settings.debug,
            connect_args={"check_same_thread": False}
        )

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=settings.debug
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(engine: Engine):
    # Import models to register them with Base
    from ..news.models import blog_post, rss_feed  # noqa: F401
    Base.metadata.create_all(bind=engine)
