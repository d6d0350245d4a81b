import secrets

from passlib.context import CryptContext

from stock_api.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def generate_token() -> str:
    # opaque bearer token, stored on the user row
    return secrets.token_hex(settings.token_bytes)
