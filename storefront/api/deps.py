# storefront/api/deps.py
from typing import Iterator

from fastapi import Cookie, Depends, Request, Response
from sqlalchemy.orm import Session

from storefront.data.database import Database
from storefront.data.models.cart import CartModel
from storefront.services.session_service import SessionResolver
from storefront.utils.settings import COOKIE_SECURE, SESSION_COOKIE_NAME, SESSION_TTL_SECONDS


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    db = database.SessionLocal()
    try:
        yield db
    finally:
        # uncommitted work is rolled back here
        db.close()


def set_persistent_cookie(response: Response, name: str, value: str) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
        secure=COOKIE_SECURE,
    )


def resolve_cart(
    response: Response,
    session_id: str | None = Cookie(None, alias=SESSION_COOKIE_NAME),
    db: Session = Depends(get_db),
) -> CartModel:
    cart, issued = SessionResolver(db).resolve(session_id)
    if issued:
        set_persistent_cookie(response, SESSION_COOKIE_NAME, issued)
    return cart
