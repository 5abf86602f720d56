import os

# przed importem shopcart - settings czytane sa przy imporcie
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["CELERY_ALWAYS_EAGER"] = "1"

from datetime import date, timedelta
from decimal import Decimal

import fakeredis
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shopcart.data.database import Base, init_db
from shopcart.data.models import DiscountCodeModel, ProductModel
from shopcart.services.session_store import SessionStore


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_fk(dbapi_conn, _):
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store():
    return SessionStore(client=fakeredis.FakeRedis(decode_responses=True))


@pytest.fixture
def cart_session(store):
    return store.session("sess-1")


@pytest.fixture
def products(db):
    """A: 10.00 x 10 szt., B: 5.00 x 5 szt., C: 3.33 x 1 szt."""
    rows = {
        "A": ProductModel(name="Product A", price=Decimal("10.00"), stock=10),
        "B": ProductModel(name="Product B", price=Decimal("5.00"), stock=5),
        "C": ProductModel(name="Product C", price=Decimal("3.33"), stock=1),
    }
    db.add_all(rows.values())
    db.commit()
    return {key: p.id for key, p in rows.items()}


@pytest.fixture
def discount_codes(db):
    today = date.today()
    db.add_all(
        [
            DiscountCodeModel(code="SAVE20", percentage=20, expires=today + timedelta(days=1)),
            DiscountCodeModel(code="TODAY15", percentage=15, expires=today),
            DiscountCodeModel(code="OLD50", percentage=50, expires=today - timedelta(days=3)),
        ]
    )
    db.commit()
    return today


@pytest.fixture
def stock_of(session_factory):
    """Stan produktu czytany swieza sesja, z pominieciem identity map testu."""

    def _stock(product_id: int) -> int:
        with session_factory() as s:
            return s.get(ProductModel, product_id).stock

    return _stock
