# shopcart/repos/transaction.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shopcart.domain.errors import CartError
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

DB_ABORT_DETAIL = "Transakcja przerwana przez bazę danych"


class TransactionScope:
    """
    Jawna transakcja na czas krokow checkout.

    Kroki zglaszaja blad przez abort() zamiast rzucac wyjatek. Na wyjsciu
    z bloku with: commit jesli nikt nie przerwal, inaczej rollback.
    Niezaleznie od wyniku sesja zostaje bez otwartej transakcji.
    Bledy bazy przy begin/commit/rollback koncza sie jako TRANSACTION_ABORTED.
    """

    def __init__(self, db: Session):
        self.db = db
        self.error: CartError | None = None
        self.detail: str | None = None
        self.committed = False

    def __enter__(self) -> "TransactionScope":
        try:
            #konczymy transakcje otwarta przez wczesniejsze odczyty (autobegin)
            if self.db.in_transaction():
                self.db.rollback()
            self.db.begin()
        except SQLAlchemyError as e:
            logger.error(f"Could not begin transaction: {e}")
            self.abort(CartError.TRANSACTION_ABORTED, DB_ABORT_DETAIL)
        return self

    def abort(self, error: CartError, detail: str | None = None) -> None:
        if self.error is None:
            self.error = error
            self.detail = detail

    @property
    def aborted(self) -> bool:
        return self.error is not None

    def _rollback(self) -> None:
        try:
            self.db.rollback()
        except SQLAlchemyError as e:
            #polaczenie zerwane - baza i tak wycofa niezacommitowana transakcje
            logger.error(f"Rollback failed: {e}")
            self.abort(CartError.TRANSACTION_ABORTED, DB_ABORT_DETAIL)

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None and not self.aborted:
                try:
                    self.db.commit()
                    self.committed = True
                except SQLAlchemyError as e:
                    #zerwane polaczenie / timeout przy commit = pelny rollback
                    logger.error(f"Commit failed, rolling back: {e}")
                    self.abort(CartError.TRANSACTION_ABORTED, DB_ABORT_DETAIL)
                    self._rollback()
            else:
                logger.info(f"Rolling back transaction ({self.error.value if self.error else exc_type})")
                self._rollback()
        finally:
            if self.db.in_transaction():
                self._rollback()
        return False
