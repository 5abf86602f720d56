import redis

from shopcart.domain.cart_state import CartState
from shopcart.utils.retry import redis_retry
from shopcart.utils.settings import REDIS_URL, SESSION_TTL_SECONDS
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class SessionStore:
    """
    Stan sesji w redisie, klucz per sesja:
    session:{id}:cart -> CartState jako JSON, wygasa po TTL
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None, ttl: int = SESSION_TTL_SECONDS):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl

    @staticmethod
    def _key(session_id: str) -> str:
        return f"session:{session_id}:cart"

    @redis_retry()
    def load(self, session_id: str) -> CartState:
        raw = self.redis.get(self._key(session_id))
        if raw is None:
            return CartState()
        return CartState.model_validate_json(raw)

    @redis_retry()
    def save(self, session_id: str, state: CartState) -> None:
        #kazdy zapis przedluza waznosc sesji
        self.redis.set(self._key(session_id), state.model_dump_json(), ex=self.ttl)

    @redis_retry()
    def clear(self, session_id: str) -> None:
        logger.info(f"Clearing cart state for session {session_id}")
        self.redis.delete(self._key(session_id))

    def session(self, session_id: str) -> "CartSession":
        return CartSession(session_id, self)


class CartSession:
    """Kontekst sesji przekazywany jawnie do kazdej operacji koszyka."""

    def __init__(self, session_id: str, store: SessionStore):
        self.session_id = session_id
        self.store = store

    def load(self) -> CartState:
        return self.store.load(self.session_id)

    def save(self, state: CartState) -> None:
        self.store.save(self.session_id, state)

    def clear(self) -> None:
        self.store.clear(self.session_id)
