# shopcart/api/deps.py
from fastapi import Depends, Header

from shopcart.services.session_store import CartSession, SessionStore

_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    global _store
    if _store is None:
        _store = SessionStore()
    return _store


def get_cart_session(
    x_session_id: str = Header(..., min_length=1, max_length=128),
    store: SessionStore = Depends(get_session_store),
) -> CartSession:
    return store.session(x_session_id)
