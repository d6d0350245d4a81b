"""
Stock Schemas for API Request/Response
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StockBase(BaseModel):
    """Base stock schema."""
    title: str = Field(..., min_length=1, max_length=255, description="Stock title (e.g., AAPL)")
    text: str = Field(..., min_length=1, description="Free-form note about the stock")


class StockCreate(StockBase):
    """Schema for creating a stock. Ownership always comes from the token."""
    owner: Any = Field(None, description="Ignored; set from the authenticated user")


class StockUpdate(BaseModel):
    """Schema for updating a stock. Empty strings mean "leave unchanged"."""
    title: Optional[str] = Field(None, max_length=255)
    text: Optional[str] = None
    owner: Any = Field(None, description="Ignored; ownership cannot be transferred")


class StockCreateRequest(BaseModel):
    stock: StockCreate


class StockUpdateRequest(BaseModel):
    stock: StockUpdate


class StockResponse(BaseModel):
    """Schema for a single stock, `owner` is the owner's user id."""
    id: int
    title: str
    text: str
    owner: int = Field(..., validation_alias="owner_id")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StockEnvelope(BaseModel):
    stock: StockResponse


class StockListEnvelope(BaseModel):
    stocks: List[StockResponse]
