# shopcart/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shopcart.utils.settings import DATABASE_URL, DB_ISOLATION_LEVEL


def make_engine(url: str = DATABASE_URL, isolation_level: str | None = DB_ISOLATION_LEVEL, **kwargs):
    if isolation_level:
        kwargs["isolation_level"] = isolation_level
    return create_engine(url, pool_pre_ping=True, **kwargs)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False)

Base = declarative_base()


def init_db(bind=None):
    #import modeli zeby byly zarejestrowane w Base.metadata
    import shopcart.data.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
