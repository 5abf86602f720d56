# shopcart/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from shopcart.data.database import get_db
from shopcart.domain.schemas import OrderOut
from shopcart.services.order_service import OrderService
from shopcart.utils.validators import MAX_INT

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int = Path(..., gt=0, le=MAX_INT),
    user_id: int = Query(..., gt=0, le=MAX_INT),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia razem z pozycjami.
    """
    svc = get_service(db)
    try:
        return svc.get_order(order_id, user_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
