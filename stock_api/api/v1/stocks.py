"""
Stock API Endpoints
Anyone may read stocks; only the owner may change or delete one.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from stock_api.core.deps import get_current_user, get_db
from stock_api.core.guards import handle_404, remove_blank_fields, require_ownership
from stock_api.models.user import User
from stock_api.schemas.stock import (
    StockCreateRequest,
    StockEnvelope,
    StockListEnvelope,
    StockResponse,
    StockUpdateRequest,
)
from stock_api.services.stock_service import StockService

router = APIRouter()


@router.get("", response_model=StockListEnvelope)
def index_stocks(db: Session = Depends(get_db)):
    """
    Get all stocks.
    """
    stocks = StockService(db).list_stocks()
    return StockListEnvelope(stocks=[StockResponse.model_validate(stock) for stock in stocks])


@router.get("/{stock_id}", response_model=StockEnvelope)
def show_stock(stock_id: str, db: Session = Depends(get_db)):
    """
    Get a specific stock by id.
    """
    stock = handle_404(StockService(db).get_stock(stock_id), "Stock", stock_id)
    return StockEnvelope(stock=StockResponse.model_validate(stock))


@router.post("", response_model=StockEnvelope, status_code=status.HTTP_201_CREATED)
def create_stock(
    payload: StockCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Create a new stock owned by the current user.

    - **title**: Stock title
    - **text**: Note about the stock
    """
    stock = StockService(db).create_stock(
        title=payload.stock.title,
        text=payload.stock.text,
        owner_id=current_user.id,
    )
    return StockEnvelope(stock=StockResponse.model_validate(stock))


@router.patch("/{stock_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_stock(
    stock_id: str,
    payload: StockUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Update title and/or text of a stock the current user owns.
    Fields sent as empty strings are left unchanged.
    """
    body = payload.model_dump(exclude_unset=True)
    # the owner is fixed at creation
    body["stock"].pop("owner", None)
    changes = remove_blank_fields(body)["stock"]

    service = StockService(db)
    stock = handle_404(service.get_stock(stock_id), "Stock", stock_id)
    require_ownership(current_user, stock)

    service.update_stock(stock, changes)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{stock_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_stock(
    stock_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Delete a stock the current user owns.
    """
    service = StockService(db)
    stock = handle_404(service.get_stock(stock_id), "Stock", stock_id)
    require_ownership(current_user, stock)

    service.delete_stock(stock)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
