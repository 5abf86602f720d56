"""Tests for batched product lookups and the guarded stock decrement."""

import pytest
from sqlalchemy import event

from shopcart.repos.product_repo import ProductRepo


@pytest.fixture
def statements(engine):
    seen = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    yield seen
    event.remove(engine, "before_cursor_execute", _record)


class TestFetchOne:
    def test_existing_product(self, db, products):
        product = ProductRepo(db).fetch_one(products["A"])
        assert product.name == "Product A"

    def test_missing_product_returns_none(self, db, products):
        assert ProductRepo(db).fetch_one(9999) is None


class TestFetchMany:
    def test_empty_ids_issue_no_query(self, db, products, statements):
        assert ProductRepo(db).fetch_many([]) == {}
        assert statements == []

    def test_single_query_for_all_ids(self, db, products, statements):
        db.expunge_all()
        result = ProductRepo(db).fetch_many(products.values())

        assert set(result) == set(products.values())
        selects = [s for s in statements if s.lstrip().upper().startswith("SELECT")]
        assert len(selects) == 1

    def test_duplicates_and_missing_ids_are_tolerated(self, db, products):
        ids = [products["A"], products["A"], 9999]
        result = ProductRepo(db).fetch_many(ids)

        assert list(result) == [products["A"]]

    def test_refresh_rereads_rows(self, db, products, session_factory):
        repo = ProductRepo(db)
        cached = repo.fetch_many([products["B"]])[products["B"]]
        assert cached.stock == 5

        with session_factory() as other:
            other.get(type(cached), products["B"]).stock = 2
            other.commit()

        refreshed = repo.fetch_many([products["B"]], refresh=True)[products["B"]]
        assert refreshed.stock == 2


class TestDecrementStock:
    def test_decrements_when_enough_stock(self, db, products, stock_of):
        assert ProductRepo(db).decrement_stock(products["B"], 3) is True
        db.commit()
        assert stock_of(products["B"]) == 2

    def test_guard_rejects_overdraw(self, db, products, stock_of):
        assert ProductRepo(db).decrement_stock(products["B"], 6) is False
        db.commit()
        assert stock_of(products["B"]) == 5

    def test_exact_stock_can_be_consumed(self, db, products, stock_of):
        assert ProductRepo(db).decrement_stock(products["C"], 1) is True
        db.commit()
        assert stock_of(products["C"]) == 0
