# storefront/api/routers/auth.py
from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, set_persistent_cookie
from storefront.domain.errors import AuthenticationError, ConflictError, ValidationError
from storefront.domain.schemas import Credentials, OkOut, UserRead
from storefront.services.auth_service import AuthService
from storefront.utils.settings import AUTH_COOKIE_NAME, COOKIE_SECURE

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=201)
def register(payload: Credentials, db: Session = Depends(get_db)):
    service = AuthService(db)
    try:
        return service.register(payload.email, payload.password)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/login", response_model=UserRead)
def login(payload: Credentials, response: Response, db: Session = Depends(get_db)):
    service = AuthService(db)
    try:
        user, token, _ = service.login(payload.email, payload.password)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))

    set_persistent_cookie(response, AUTH_COOKIE_NAME, token)
    return user


@router.post("/logout", response_model=OkOut)
def logout(
    response: Response,
    auth_token: str | None = Cookie(None, alias=AUTH_COOKIE_NAME),
    db: Session = Depends(get_db),
):
    AuthService(db).logout(auth_token)
    response.delete_cookie(AUTH_COOKIE_NAME, httponly=True, samesite="lax", secure=COOKIE_SECURE)
    return {"ok": True}


@router.get("/me", response_model=UserRead)
def me(
    auth_token: str | None = Cookie(None, alias=AUTH_COOKIE_NAME),
    db: Session = Depends(get_db),
):
    try:
        return AuthService(db).current_user(auth_token)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))
