from .stock import (
    StockCreate,
    StockUpdate,
    StockCreateRequest,
    StockUpdateRequest,
    StockResponse,
    StockEnvelope,
    StockListEnvelope,
)
from .auth import (
    CredentialsIn,
    PasswordsIn,
    UserOut,
    SignedInUserOut,
    UserEnvelope,
    SignedInUserEnvelope,
)

__all__ = [
    "StockCreate",
    "StockUpdate",
    "StockCreateRequest",
    "StockUpdateRequest",
    "StockResponse",
    "StockEnvelope",
    "StockListEnvelope",
    "CredentialsIn",
    "PasswordsIn",
    "UserOut",
    "SignedInUserOut",
    "UserEnvelope",
    "SignedInUserEnvelope",
]
