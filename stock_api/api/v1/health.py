from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from stock_api.core.deps import get_db
from stock_api.models.stock import Stock

router = APIRouter()


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """
    Liveness check that also proves the stocks table is reachable.
    Store failures surface through the StoreError handler as a 500.
    """
    db.execute(select(Stock.id).limit(1))
    return {"status": "ok"}
