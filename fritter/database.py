from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .core.config import get_settings

settings = get_settings()

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite connections are shared across the request threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """Yields a session per request and closes it afterwards"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
