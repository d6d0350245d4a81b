from sqlalchemy.orm import Session

from stock_api import models  # noqa: F401
from stock_api.core.security import generate_token, hash_password
from stock_api.db.base import Base
from stock_api.db.session import SessionLocal, engine
from stock_api.models.stock import Stock
from stock_api.models.user import User

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo"

DEFAULT_STOCKS = [
    ("AAPL", "Apple Inc. - long term hold"),
    ("TSLA", "Tesla, Inc. - watch earnings"),
    ("AMZN", "Amazon.com, Inc. - buy the dip"),
    ("MSFT", "Microsoft Corp. - steady"),
]

def main() -> None:
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        user = db.query(User).filter(User.email == DEMO_EMAIL).first()
        if user is None:
            user = User(email=DEMO_EMAIL, password_hash=hash_password(DEMO_PASSWORD))
            db.add(user)
        user.token = generate_token()
        db.flush()

        for title, text in DEFAULT_STOCKS:
            existing = db.query(Stock).filter(Stock.owner_id == user.id, Stock.title == title).first()
            if existing:
                existing.text = text
            else:
                db.add(Stock(title=title, text=text, owner_id=user.id))

        db.commit()
        print(f"Seeded stocks for {DEMO_EMAIL}; token: {user.token}")
    finally:
        db.close()

if __name__ == "__main__":
    main()
