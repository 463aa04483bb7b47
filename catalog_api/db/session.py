from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from catalog_api.core.config import settings

engine_options = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
if settings.IS_SQLITE:
    engine_options["connect_args"] = {"check_same_thread": False}
    # In-memory databases only live as long as their single connection
    if settings.SQLALCHEMY_DATABASE_URI in ("sqlite://", "sqlite:///:memory:"):
        engine_options["poolclass"] = StaticPool

engine = create_engine(settings.DATABASE_URL, **engine_options)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
