"""
Stock Service
Handles persistence for stock operations.
"""
import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from stock_api.core.errors import StoreError, ValidationError
from stock_api.models.stock import Stock

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "text")

# ids are stored as signed 64-bit integers
MAX_STOCK_ID = 2**63 - 1


def parse_stock_id(value: Any) -> Optional[int]:
    """
    Parse a stock id from a URL segment or an int.

    Only plain ASCII digit strings are accepted, so each stock has exactly
    one URL. Ids outside the storable range match nothing.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        key = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        key = int(value)
    else:
        return None
    if not 0 < key <= MAX_STOCK_ID:
        return None
    return key


class StockService:
    """Service for managing stock records."""

    def __init__(self, db: Session):
        self.db = db

    def get_stock(self, stock_id: Any) -> Optional[Stock]:
        """
        Get a stock by id.

        Args:
            stock_id: Stock id; anything that is not an integer matches nothing

        Returns:
            Stock object if found, None otherwise
        """
        key = parse_stock_id(stock_id)
        if key is None:
            return None
        try:
            return self.db.get(Stock, key)
        except SQLAlchemyError as exc:
            logger.error("failed to load stock %s", stock_id, exc_info=True)
            raise StoreError() from exc

    def list_stocks(self) -> List[Stock]:
        """List every stock, oldest first."""
        stmt = select(Stock).order_by(Stock.id)
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as exc:
            logger.error("failed to list stocks", exc_info=True)
            raise StoreError() from exc

    def create_stock(self, title: str, text: str, owner_id: int) -> Stock:
        """
        Create a new stock owned by `owner_id`.

        Raises:
            ValidationError: If the store rejects the record
            StoreError: On any other database failure
        """
        stock = Stock(title=title, text=text, owner_id=owner_id)
        self.db.add(stock)
        self._commit()
        self.db.refresh(stock)
        logger.info("stock %s created by user %s", stock.id, owner_id)
        return stock

    def update_stock(self, stock: Stock, changes: Mapping[str, Any]) -> Stock:
        """
        Apply a partial update. Only title and text are ever written;
        the owner of a stock never changes after creation.
        """
        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(stock, field, changes[field])
        self._commit()
        self.db.refresh(stock)
        return stock

    def delete_stock(self, stock: Stock) -> None:
        stock_id = stock.id
        self.db.delete(stock)
        self._commit()
        logger.info("stock %s deleted", stock_id)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("store rejected stock: %s", exc.orig)
            raise ValidationError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("failed to commit stock changes", exc_info=True)
            raise StoreError() from exc
