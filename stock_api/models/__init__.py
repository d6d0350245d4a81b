from .user import User
from .stock import Stock

__all__ = ["User", "Stock"]
