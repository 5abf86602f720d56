"""Tests for the Redis-backed session state."""

from shopcart.domain.cart_state import CartState


class TestSessionStore:
    def test_missing_session_loads_empty_state(self, store):
        state = store.load("nobody")
        assert state.is_empty
        assert state.discount is None

    def test_state_survives_serialization(self, store):
        store.save("s-1", CartState(entries={3: 2, 1: 5}, discount=10))

        state = store.load("s-1")
        assert state.entries == {3: 2, 1: 5}
        assert state.items() == [(1, 5), (3, 2)]
        assert state.discount == 10

    def test_save_sets_ttl(self, store):
        store.save("s-1", CartState(entries={1: 1}))
        assert 0 < store.redis.ttl("session:s-1:cart") <= store.ttl

    def test_clear_removes_state(self, store):
        session = store.session("s-1")
        session.save(CartState(entries={1: 1}, discount=5))

        session.clear()

        assert store.redis.exists("session:s-1:cart") == 0
        assert session.load().is_empty


class TestCartState:
    def test_add_and_clear(self):
        state = CartState()
        state.add(4, 1)
        state.add(4, 2)
        state.discount = 25

        assert state.entries == {4: 3}

        state.clear()
        assert state.is_empty
        assert state.discount is None
