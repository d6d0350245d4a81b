from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stock_api.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    token: Mapped[str | None] = mapped_column(String(128), unique=True, index=True, nullable=True)

    stocks: Mapped[list["Stock"]] = relationship(back_populates="owner", cascade="all, delete-orphan")
