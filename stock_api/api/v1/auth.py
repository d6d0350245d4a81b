from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stock_api.core.deps import get_current_user, get_db
from stock_api.core.errors import BadCredentials, BadParams, ValidationError
from stock_api.core.security import generate_token, hash_password, verify_password
from stock_api.models.user import User
from stock_api.schemas.auth import (
    CredentialsIn,
    PasswordsIn,
    SignedInUserEnvelope,
    SignedInUserOut,
    UserEnvelope,
    UserOut,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


@router.post("/sign-up", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_up(payload: CredentialsIn, db: Session = Depends(get_db)):
    creds = payload.credentials
    if not creds.password or creds.password != creds.password_confirmation:
        raise ValidationError("Password and password confirmation must match")

    existing = find_user_by_email(db, creds.email)
    if existing:
        raise ValidationError("Email already exists")

    user = User(email=creds.email, password_hash=hash_password(creds.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # a concurrent sign-up took the email after the check above
        db.rollback()
        raise ValidationError("Email already exists") from exc
    db.refresh(user)
    logger.info("user %s signed up", user.id)
    return UserEnvelope(user=UserOut.model_validate(user))


@router.post("/sign-in", response_model=SignedInUserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_in(payload: CredentialsIn, db: Session = Depends(get_db)):
    creds = payload.credentials
    user = find_user_by_email(db, creds.email)
    if not user or not verify_password(creds.password, user.password_hash):
        raise BadCredentials()

    user.token = generate_token()
    db.commit()
    db.refresh(user)
    logger.info("user %s signed in", user.id)
    return SignedInUserEnvelope(user=SignedInUserOut.model_validate(user))


@router.patch("/change-password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def change_password(
    payload: PasswordsIn,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    passwords = payload.passwords
    if not verify_password(passwords.old, current_user.password_hash):
        raise BadParams("Old password is incorrect")
    if not passwords.new:
        raise BadParams("New password must not be empty")

    current_user.password_hash = hash_password(passwords.new)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/sign-out", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def sign_out(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    # invalidates the presented token
    current_user.token = generate_token()
    db.commit()
    logger.info("user %s signed out", current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
