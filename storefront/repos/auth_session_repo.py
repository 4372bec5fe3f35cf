# storefront/repos/auth_session_repo.py
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.data.models.auth_session import AuthSessionModel


class AuthSessionRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_session(self, auth_session: AuthSessionModel) -> AuthSessionModel:
        self.db.add(auth_session)
        self.db.commit()
        self.db.refresh(auth_session)
        return auth_session

    def get_by_token(self, token: str) -> AuthSessionModel | None:
        return self.db.execute(
            select(AuthSessionModel).where(AuthSessionModel.token == token)
        ).scalar_one_or_none()

    def delete_by_token(self, token: str) -> int:
        result = self.db.execute(
            delete(AuthSessionModel).where(AuthSessionModel.token == token)
        )
        self.db.commit()
        return result.rowcount
