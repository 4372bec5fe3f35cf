# storefront/services/session_service.py
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import new_session_id

logger = get_logger(__name__)


class SessionResolver:
    """
    Maps a browser session id (cookie value) to exactly one cart.
    A missing id gets a fresh one, which the caller must send back as a cookie.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    def resolve(self, session_id: str | None) -> tuple[CartModel, str | None]:
        issued = None
        if not session_id:
            session_id = new_session_id()
            issued = session_id

        cart = self.repo.upsert_cart(session_id)
        self.repo.commit()

        if issued:
            logger.info(f"Issued new session, cart {cart.id}")

        return cart, issued
